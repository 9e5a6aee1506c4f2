from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional

import pygame

from futris.game import Command, GameConfig, Playfield
from futris.utils.logging import setup_logger
from .pacing import DropSchedule
from .renderer import Renderer

logger = logging.getLogger(__name__)


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_SPACE: Command.HARD_DROP,
}


def run(config: Optional[GameConfig] = None, schedule: Optional[DropSchedule] = None, cell_size: int = 28) -> None:
    config = config or GameConfig()
    schedule = schedule or DropSchedule()
    pygame.init()
    try:
        clock = pygame.time.Clock()
        board = Playfield(config)
        renderer = Renderer(cell_size=cell_size)
        screen = pygame.display.set_mode(renderer.window_size(config.width, config.height))
        pygame.display.set_caption("Futris")

        last_fall = pygame.time.get_ticks()
        reported = False

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and not board.in_progress:
                        board = Playfield(config)
                        last_fall = pygame.time.get_ticks()
                        reported = False
                        logger.info("new game")
                    else:
                        cmd = KEY_TO_COMMAND.get(event.key)
                        if cmd is not None:
                            board.apply_command(cmd)

            # Gravity
            now = pygame.time.get_ticks()
            if board.in_progress and now - last_fall >= schedule.interval_ms(board.lines_cleared_total):
                board.tick()
                last_fall = now

            renderer.draw(screen, board.get_state(), board.score)

            if not board.in_progress:
                if not reported:
                    logger.info("final score %d (%d lines)", board.score, board.lines_cleared_total)
                    reported = True
                font = pygame.font.SysFont(None, 30)
                text = font.render("Game Over - R to restart, ESC to quit", True, (255, 255, 255))
                rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
                screen.blit(text, rect)

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play Futris with the keyboard (pygame).")
    ap.add_argument("--width", type=int, default=10)
    ap.add_argument("--height", type=int, default=30)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--cell", type=int, default=24, help="cell size in pixels")
    ap.add_argument("--drop-ms", type=int, default=600, help="initial gravity interval")
    ap.add_argument("--log-level", type=str, default="info")
    ap.add_argument("--no-rich", action="store_true", help="disable Rich logging")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logger(name="futris", use_rich=not args.no_rich, level=args.log_level)
    try:
        config = GameConfig(width=args.width, height=args.height, random_seed=args.seed)
        schedule = DropSchedule(start_ms=args.drop_ms, min_ms=min(100, args.drop_ms))
    except ValueError as e:
        logger.error("%s", e)
        return 2
    run(config, schedule, cell_size=args.cell)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
