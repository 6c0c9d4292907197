#!/usr/bin/env python3
"""
Pixel Flow - Main Entry Point

A pixel grid sits inside a rail. Deploy colored shooters from four lanes;
each one orbits the grid and clears every exposed cell of its color until
its ammo runs out. Clear every cell before the lanes run dry.

Usage:
    pixel-flow [--seed N] [--size N] [--editor] [--solve-only]

Controls:
    1-4: Deploy the head of a lane
    R: Restart level
    E: Open editor (Enter or E again to play the edited grid)
    Editor: arrows move, Space paints, X erases, C clears,
            Tab cycles color, [ ] change brush size
    Escape: Quit
"""
import argparse
import logging
from typing import List, Optional

import pygame

from pixel_flow.config import Settings, get_settings
from pixel_flow.gameplay.game import Game
from pixel_flow.gameplay.level import create_flask_level
from pixel_flow.gameplay.solver import SolveResult, solve
from pixel_flow.ui.renderer import Renderer
from pixel_flow.ui.input_handler import InputHandler

logger = logging.getLogger(__name__)

FPS = 60


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pixel Flow - grid-rail puzzle")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the generated level (default: PIXEL_FLOW_LEVEL_SEED or random)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Grid cells per side (default: PIXEL_FLOW_GRID_SIZE or 11)",
    )
    parser.add_argument(
        "--editor",
        action="store_true",
        help="Start in the level editor",
    )
    parser.add_argument(
        "--solve-only",
        action="store_true",
        help="Print the solved shooter manifest and exit without opening a window",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: PIXEL_FLOW_LOG_LEVEL or INFO)",
    )
    return parser


def format_manifest(result: SolveResult, lane_count: int) -> List[str]:
    """One line per planned shooter, with the lane it is dealt into."""
    lines = []
    for i, entry in enumerate(result.manifest):
        lines.append(f"{i + 1:3d}. lane {i % lane_count + 1}  {entry.color.name:<7} x{entry.ammo}")
    status = "solved" if result.solved else f"STUCK ({result.remaining} cells left)"
    lines.append(f"{len(result.manifest)} shooters, {result.total_ammo} shots, {status}")
    return lines


def run_window(game: Game) -> None:
    """Open the pygame window and run until quit."""
    pygame.init()
    try:
        renderer = Renderer(game)
        renderer.init_display()
        input_handler = InputHandler(game, renderer)
        clock = pygame.time.Clock()

        should_quit = False
        while not should_quit:
            dt = clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    should_quit = True
                elif event.type == pygame.KEYDOWN:
                    should_quit = input_handler.handle_key(event.key) or should_quit

            game.update(dt)
            renderer.render()
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.seed is not None:
        overrides["level_seed"] = args.seed
    if args.size is not None:
        overrides["grid_size"] = args.size
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    settings = Settings(**{**get_settings().model_dump(), **overrides})

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    grid = create_flask_level(settings.grid_size, seed=settings.level_seed)

    if args.solve_only:
        result = solve(grid, max_iterations=settings.solver_max_iterations)
        for line in grid.to_strings():
            print(line)
        print()
        for line in format_manifest(result, settings.lane_count):
            print(line)
        return 0 if result.solved else 1

    game = Game(grid, settings=settings)
    if args.editor:
        game.enter_editor()

    logger.info("Starting game loop...")
    run_window(game)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
