# shakefizz/motion.py
import pygame

from shakefizz.config import PIXELS_PER_SECOND_PER_G
from shakefizz.drinks import DRINKS


class ShakeInput:
    """
    pygame 이벤트 -> 흔들기 샘플 / 탭.
    가속도 센서 대신 마우스 드래그 속도를 g 로 환산한다.
    - 드래그 중 이동 거리 / dt -> 샘플 크기 (프레임당 1개)
    - 드래그 없이 놓은 클릭, 스페이스 -> 탭
    """
    TAP_KEYS = (pygame.K_SPACE,)

    def __init__(self, pixels_per_g: float = PIXELS_PER_SECOND_PER_G):
        self.pixels_per_g = pixels_per_g

        self.mouse_dragging = False
        self.prev_mouse_pos = None
        self.drag_distance = 0.0

    def update(self, events, dt: float):
        """
        한 프레임 분량의 이벤트를 먹고 (샘플 크기, 탭 수)를 돌려준다.
        """
        moved = 0.0
        taps = 0

        for e in events:
            if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                self.mouse_dragging = True
                self.prev_mouse_pos = pygame.Vector2(e.pos)
                self.drag_distance = 0.0

            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                # 거의 안 움직였으면 탭으로 본다
                if self.mouse_dragging and self.drag_distance < 4.0:
                    taps += 1
                self.mouse_dragging = False
                self.prev_mouse_pos = None

            elif e.type == pygame.MOUSEMOTION and self.mouse_dragging:
                pos = pygame.Vector2(e.pos)
                if self.prev_mouse_pos is not None:
                    step = pos.distance_to(self.prev_mouse_pos)
                    moved += step
                    self.drag_distance += step
                self.prev_mouse_pos = pos

            elif e.type == pygame.KEYDOWN and e.key in ShakeInput.TAP_KEYS:
                taps += 1

        return self.to_g(moved, dt), taps

    def to_g(self, pixels: float, dt: float) -> float:
        if dt <= 0.0:
            return 0.0
        return (pixels / dt) / self.pixels_per_g


def handle_key(game, key) -> bool:
    """
    키보드 -> 컨트롤러 조작. 처리했으면 True.
    1~4 음료 선택, Enter 진행, Y 경고 확인, F 끝내기, R 재도전, Esc 처음으로, G fizz 충전
    """
    drink_keys = (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4)
    if key in drink_keys:
        index = drink_keys.index(key)
        if index < len(DRINKS):
            return game.select_drink(DRINKS[index])
        return False
    if key == pygame.K_RETURN:
        return game.proceed_to_warning()
    if key == pygame.K_y:
        return game.acknowledge_warning()
    if key == pygame.K_f:
        return game.finish_session()
    if key == pygame.K_r:
        return game.retry_game()
    if key == pygame.K_ESCAPE:
        game.reset_game()
        return True
    if key == pygame.K_g:
        game.refill_fizz()
        return True
    return False
