# shakefizz/config.py

# FPS / 틱 주기
MOTION_HZ = 60                 # 모션 샘플 주기 (프레임당 1개)
GAME_TICK = 0.1                # 게임 타이머 틱 (초)

# 흔들기 -> 압력
MOTION_THRESHOLD = 0.5         # 이 이상(g 환산)이어야 흔든 걸로 인정
GAIN_CONSTANT = 0.1            # 샘플 하나가 올리는 압력 = 크기 * 이 값 * 모디파이어
MAX_PRESSURE = 100.0           # 압력 상한 (하드 클램프)
HEIGHT_SCALE = 0.5             # 예상 분출 높이(m) = 압력 * 이 값

# 출렁임 (점수와 무관, 연출용)
AGITATION_GAIN = 0.05
AGITATION_CAP = 1.5
AGITATION_DECAY = 0.95         # 안 흔들 때 샘플마다 곱해지는 값
AGITATION_EPSILON = 1e-4       # 이보다 작아지면 0으로

# 탭 입력: 기준 흔들기 임펄스의 절반만 먹힌다
REFERENCE_SHAKE_IMPULSE = 1.0
TAP_EFFICIENCY = 0.5
TAP_IMPULSE = REFERENCE_SHAKE_IMPULSE * TAP_EFFICIENCY

# 카운트다운 / 플레이 시간
COUNTDOWN_START = 3
COUNTDOWN_INTERVAL = 1.0       # 3 -> 2 -> 1 -> GO 간격
GO_HOLD_SECONDS = 0.5          # "GO" 보여주고 플레이로 넘어가기까지
PLAY_DURATION = 15.0
TIME_EPSILON = 1e-9            # 0.1초 누적 오차 흡수용

# 랭크 하한 (이상이면 해당 등급)
RANK_S = 20.0
RANK_A = 15.0
RANK_B = 10.0

# 스태미나(fizz) 지갑
MAX_FIZZ = 5

# 저장 키
KEY_BEST_SCORE = "best_score"
KEY_BEST_RANK = "best_rank"
KEY_BEST_DRINK = "best_drink_id"
KEY_BEST_TIMESTAMP = "best_timestamp"
KEY_FIZZ_REMAINING = "fizz_remaining"

# 마우스 드래그 -> g 환산 (데모 드라이버용)
PIXELS_PER_SECOND_PER_G = 900.0
