# main.py
from __future__ import annotations
import argparse
import dataclasses
import logging
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import CFG, Config, BG, GREEN, HEAD_COLOR, ORANGE, TEXT, HUD_HEIGHT
from .controls import heading_for_key, heading_for_swipe, is_pause_key, is_reset_key, is_start_key
from .engine import SnakeEngine
from .game import Phase
from .scheduler import Ticker
from .snapshot import Snapshot

logger = logging.getLogger(__name__)


# ---------- Draw ----------
def draw_cell(screen: pygame.Surface, cell_size: int, gx: int, gy: int,
              color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * cell_size, HUD_HEIGHT + gy * cell_size, cell_size - 2, cell_size - 2)
    pygame.draw.rect(screen, color, rect)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, cell_size: int) -> None:
    screen.fill(BG)
    # food
    if snap.food is not None:
        draw_cell(screen, cell_size, snap.food[0], snap.food[1], ORANGE)
    # snake, head last so it stays on top
    for x, y in snap.snake[1:]:
        draw_cell(screen, cell_size, x, y, GREEN)
    draw_cell(screen, cell_size, snap.head[0], snap.head[1], HEAD_COLOR)
    # score
    txt = font.render(f"Score: {snap.score}", True, TEXT)
    screen.blit(txt, (8, 6))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines) -> None:
    width, height = screen.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    top = height // 2 - 16 * (len(lines) - 1)
    for i, line in enumerate(lines):
        surf = font.render(line, True, (240, 240, 250))
        screen.blit(surf, surf.get_rect(center=(width // 2, top + 32 * i)))

def overlay_lines(snap: Snapshot):
    if snap.phase is Phase.READY:
        return ["Press Enter to start", "Arrows / WASD or drag to steer"]
    if snap.phase is Phase.PAUSED:
        return ["PAUSED", "Space to resume"]
    if snap.phase is Phase.OVER:
        title = "YOU WIN" if snap.won else "GAME OVER"
        return [title, f"Final score: {snap.score}", "Press R to restart"]
    return []

# ---------- Driver ----------
def handle_events(engine: SnakeEngine, drag_start: Optional[Tuple[int, int]]):
    """
    Process pending pygame events against the engine.
    Returns (keep_running, drag_start).
    """
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False, drag_start
        if event.type == pygame.KEYDOWN:
            name = pygame.key.name(event.key)
            if name == "escape":
                return False, drag_start
            if is_pause_key(name):
                engine.toggle_pause()
            elif is_start_key(name):
                engine.start()
            elif is_reset_key(name):
                engine.reset()
            else:
                heading = heading_for_key(name)
                if heading is not None:
                    engine.set_heading(heading)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            drag_start = event.pos
        elif event.type == pygame.MOUSEBUTTONUP and drag_start is not None:
            heading = heading_for_swipe(event.pos[0] - drag_start[0], event.pos[1] - drag_start[1])
            if heading is not None:
                engine.set_heading(heading)
            drag_start = None
    return True, drag_start

def sync_ticker(ticker: Ticker, phase: Phase, now_ms: int) -> None:
    """Only let the ticker run while the game does."""
    if phase is Phase.RUNNING:
        ticker.start(now_ms)
    else:
        ticker.stop()

def run(cfg: Config) -> int:
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    side = cfg.grid_extent * cfg.cell_size
    screen = pygame.display.set_mode((side, side + HUD_HEIGHT))
    pygame.display.set_caption("gridsnake")
    clock = pygame.time.Clock()

    engine = SnakeEngine(cfg)
    logger.info("Starting %dx%d game, %d ms per move", cfg.grid_extent, cfg.grid_extent, cfg.tick_ms)
    ticker = Ticker(cfg.tick_ms)
    drag_start = None
    running = True

    while running:
        # 1) input
        running, drag_start = handle_events(engine, drag_start)
        if not running:
            break

        # 2) update
        now = pygame.time.get_ticks()
        sync_ticker(ticker, engine.phase, now)
        for _ in range(ticker.due(now)):
            if engine.tick() is not Phase.RUNNING:
                break

        # 3) render
        snap = engine.snapshot()
        draw_game(screen, font, snap, cfg.cell_size)
        lines = overlay_lines(snap)
        if lines:
            draw_overlay(screen, font, lines)
        pygame.display.flip()
        clock.tick(60)  # high FPS; movement gated by the ticker

    pygame.quit()
    return engine.score

# ---------- CLI ----------
def build_config(args: argparse.Namespace, base: Config = CFG) -> Config:
    changes = {}
    if args.grid is not None:
        changes["grid_extent"] = args.grid
        changes["start"] = (args.grid // 2, args.grid // 2)
    if args.tick_ms is not None:
        changes["tick_ms"] = args.tick_ms
    if args.seed is not None:
        changes["seed"] = args.seed
    if args.cell_size is not None:
        changes["cell_size"] = args.cell_size
    if args.start_running:
        changes["start_running"] = True
    return dataclasses.replace(base, **changes).validate()

def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Play snake on a square grid.")
    parser.add_argument("--grid", type=int, default=None, help="cells per side (default 20)")
    parser.add_argument("--tick-ms", type=int, default=None, help="milliseconds per move (default 150)")
    parser.add_argument("--cell-size", type=int, default=None, help="pixels per cell (default 20)")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--start-running",
        action="store_true",
        help="start (and restart) straight into play instead of waiting for Enter",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser

def main(argv=None) -> None:
    args = make_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        cfg = build_config(args)
    except ValueError as exc:
        raise SystemExit(f"gridsnake: {exc}")

    score = run(cfg)
    print(f"Final score: {score}")

if __name__ == "__main__":
    main()
