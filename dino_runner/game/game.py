# dino_runner/game/game.py
import sys, argparse
import pygame
from .config import (
    WIDTH, HEIGHT, FPS, CAPTION, BEST_SCORE_FILE, PRESETS, DEFAULT_PRESET, get_preset,
    COLOR_FG, COLOR_PANEL, COLOR_BUTTON, COLOR_BUTTON_FG,
)
from .controls import Buttons, command_for_event, apply_command
from .render import PygameSurface, SceneRenderer
from .session import GameSession, Hud
from .storage import JsonFileStore

DEBUG_TICK_LOGS = False


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Jump over the obstacles for as long as you can.")
    p.add_argument("--preset", choices=sorted(PRESETS), default=DEFAULT_PRESET,
                   help="Physics preset.")
    p.add_argument("--seed", type=int, default=None,
                   help="Obstacle seed. Omit for a random course each launch.")
    p.add_argument("--best-file", type=str, default=BEST_SCORE_FILE,
                   help="JSON file holding the best score.")
    return p.parse_args(argv)


def draw_hud(screen: pygame.Surface, hud: Hud, buttons: Buttons, font, big_font):
    score_txt = font.render(f"Score {hud.score_text}   Best {hud.best_text}", True, COLOR_FG)
    screen.blit(score_txt, (12, 12))

    pygame.draw.rect(screen, COLOR_BUTTON, buttons.reset_best, border_radius=6)
    reset_txt = font.render("Reset Best", True, COLOR_BUTTON_FG)
    screen.blit(reset_txt, (buttons.reset_best.centerx - reset_txt.get_width() // 2,
                            buttons.reset_best.centery - reset_txt.get_height() // 2))

    overlay = hud.overlay
    if not overlay.visible:
        return

    panel = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    panel.fill((*COLOR_PANEL, 190))
    screen.blit(panel, (0, 0))

    title = big_font.render(overlay.title, True, COLOR_FG)
    screen.blit(title, (WIDTH // 2 - title.get_width() // 2, HEIGHT // 2 - 80))
    msg = font.render(overlay.message, True, COLOR_FG)
    screen.blit(msg, (WIDTH // 2 - msg.get_width() // 2, HEIGHT // 2 - 30))

    pygame.draw.rect(screen, COLOR_BUTTON, buttons.start, border_radius=10)
    btn_txt = font.render(overlay.button, True, COLOR_BUTTON_FG)
    screen.blit(btn_txt, (buttons.start.centerx - btn_txt.get_width() // 2,
                          buttons.start.centery - btn_txt.get_height() // 2))


def run(argv=None):
    args = parse_args(argv)
    config = get_preset(args.preset)

    pygame.init()
    pygame.display.set_caption(CAPTION)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)
    big_font = pygame.font.SysFont("jetbrainsmono", 32, bold=True)

    scene = SceneRenderer(PygameSurface(screen))
    store = JsonFileStore(args.best_file)
    session = GameSession(config=config, store=store, seed=args.seed,
                          clock=pygame.time.get_ticks, renderer=scene)
    buttons = Buttons.default()

    print(f"Preset={args.preset}  seed={session.seed}  best={session.best.value}  file={store.path}")
    print(f"Physics: {config.to_dict()}")

    _print_timer = 0 if DEBUG_TICK_LOGS else None
    keep_going = True
    while keep_going:
        clock.tick(FPS)

        for event in pygame.event.get():
            was_running = session.running
            command = command_for_event(event, buttons, session.hud.overlay.visible)
            keep_going = apply_command(session, command)
            if not keep_going:
                break
            if session.running and not was_running:
                print(f"Round started  seed={session.seed}")

        if not keep_going:
            break

        if session.running:
            if not session.tick():
                print(f"Game over  score={int(session.score)}  best={session.best.value}  ticks={session.ticks}")
            elif _print_timer is not None:
                _print_timer -= 1
                if _print_timer <= 0:
                    _print_timer = FPS // 2  # twice per second
                    p = session.player
                    print(f"t={session.ticks} y={p.y:.1f} vy={p.vy:.2f} air={p.airborne} "
                          f"score={session.score:.1f} speed={session.speed:.2f} obstacles={len(session.obstacles)}")
        else:
            # frozen frame under the overlay
            scene.draw(session, 0.0)

        draw_hud(screen, session.hud, buttons, font, big_font)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    run()
