# main.py
import logging

import pygame

from shakefizz.config import MOTION_HZ, MAX_PRESSURE
from shakefizz.drinks import DRINKS
from shakefizz.game import GameSessionController
from shakefizz.hud import SelectionHud
from shakefizz.motion import ShakeInput, handle_key
from shakefizz.storage import JsonFileStore

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

pygame.init()

SCREEN_WIDTH, SCREEN_HEIGHT = 480, 720
screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
pygame.display.set_caption("Shake Fizz")

clock = pygame.time.Clock()
font = pygame.font.Font(None, 32)
big_font = pygame.font.Font(None, 120)

# -------------------------------
# 엔진 / 입력 초기화
# -------------------------------
game = GameSessionController(store=JsonFileStore("shakefizz_save.json"))
shake_input = ShakeInput()
hud = SelectionHud(game)


def draw_lines(lines, top=24):
    y = top
    for line in lines:
        surf = font.render(line, True, (235, 235, 235))
        screen.blit(surf, (24, y))
        y += 36


def draw_pressure_bar():
    bar = pygame.Rect(SCREEN_WIDTH - 70, 120, 40, SCREEN_HEIGHT - 200)
    pygame.draw.rect(screen, (70, 70, 70), bar, 2)
    ratio = game.current_pressure / MAX_PRESSURE
    fill_h = int((bar.height - 4) * ratio)
    fill = pygame.Rect(bar.x + 2, bar.bottom - 2 - fill_h, bar.width - 4, fill_h)
    pygame.draw.rect(screen, (0, 255, 255), fill)


def screen_lines():
    state = game.game_state
    if state == GameSessionController.STATE_SELECTION:
        lines = [f"FIZZ {hud.fizz_remaining}/{game.wallet.max_fizz}   (G: refill)"]
        for i, drink in enumerate(DRINKS, start=1):
            mark = ">" if game.selected_drink is drink else " "
            lock = " [LOCKED]" if drink.is_locked else ""
            lines.append(f"{mark} {i}. {drink.display_name} fizz {drink.fizz_percent}%{lock}")
        best = hud.best
        lines.append(f"BEST {best.score:.2f}m {best.rank.value}")
        lines.append("ENTER: next")
        return lines
    if state == GameSessionController.STATE_SAFETY_ACKNOWLEDGE:
        return ["Hold the can tight.", "Y: I understand", "ESC: back"]
    if state == GameSessionController.STATE_PLAYING:
        return [
            f"TIME {game.time_remaining:4.1f}s",
            f"HEIGHT {game.projected_height:5.2f}m",
            f"AGITATION {game.agitation:.2f}",
            "drag to shake, SPACE/click to tap, F: pop",
        ]
    if state == GameSessionController.STATE_RESULT:
        s = game.current_session
        lines = [
            f"SCORE {s.score:.2f}m  RANK {s.rank.value}",
            f"SHAKES {s.total_impulse_units}  TIME {s.duration_played:.1f}s",
        ]
        if s.is_personal_best:
            lines.append("NEW BEST!")
        lines.append("R: retry   ESC: drinks")
        return lines
    return []


# -------------------------------
# 게임 루프 (모든 입력/틱은 여기 한 곳에서 순서대로)
# -------------------------------
running = True

while running:
    dt = clock.tick(MOTION_HZ) / 1000.0
    events = pygame.event.get()

    for e in events:
        if e.type == pygame.QUIT:
            running = False
        elif e.type == pygame.KEYDOWN:
            handle_key(game, e.key)

    # 1) 흔들기 / 탭
    magnitude, taps = shake_input.update(events, dt)
    game.add_motion_sample(magnitude)
    for _ in range(taps):
        game.tap()

    # 2) 타이머
    game.tick(dt)

    # 3) 렌더링
    screen.fill((12, 12, 24))
    draw_lines(screen_lines())
    if game.game_state == GameSessionController.STATE_COUNTDOWN:
        label = str(game.countdown_value) if game.countdown_value > 0 else "GO!"
        surf = big_font.render(label, True, (255, 0, 255))
        screen.blit(surf, surf.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)))
    if game.game_state in (GameSessionController.STATE_PLAYING,
                           GameSessionController.STATE_RESULT):
        draw_pressure_bar()

    pygame.display.flip()


pygame.quit()
