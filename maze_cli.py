import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from connectivity import is_perfect, passage_count
from errors import StepLimitExceeded
from maze_gen import DEFAULT_STEP_LIMIT, generate_maze
from render import maze_to_string


@dataclass
class MazeConfig:
    width: int = 20
    height: int = 20
    levels: int = 1
    step_limit: int = DEFAULT_STEP_LIMIT
    seed: Optional[int] = None
    check: bool = False
    allow_partial: bool = False
    log_level: str = "WARNING"


def parse_args(argv: Optional[List[str]] = None) -> MazeConfig:
    parser = argparse.ArgumentParser(description="Generate a multi-level maze with Wilson's algorithm.")
    parser.add_argument("--width", type=int, default=MazeConfig.width)
    parser.add_argument("--height", type=int, default=MazeConfig.height)
    parser.add_argument("--levels", type=int, default=MazeConfig.levels)
    parser.add_argument("--step-limit", type=int, default=MazeConfig.step_limit)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--check", action="store_true", help="verify the maze is a spanning tree")
    parser.add_argument(
        "--allow-partial",
        action="store_true",
        help="print the partial maze and exit 0 when the step limit is hit",
    )
    parser.add_argument(
        "--log-level",
        default=MazeConfig.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    return MazeConfig(
        width=args.width,
        height=args.height,
        levels=args.levels,
        step_limit=args.step_limit,
        seed=args.seed,
        check=args.check,
        allow_partial=args.allow_partial,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_args(argv)
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    status = 0
    try:
        maze = generate_maze(cfg.width, cfg.height, cfg.levels, step_limit=cfg.step_limit, seed=cfg.seed)
    except StepLimitExceeded as exc:
        # already reported through the maze_gen logger
        maze = exc.maze
        if not cfg.allow_partial:
            status = 1

    print(maze_to_string(maze), end="")

    if cfg.check:
        ok = is_perfect(maze)
        print(f"cells={maze.cell_count} passages={passage_count(maze)} perfect={ok}")
        if not ok:
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
