from typing import List

from maze_gen import Maze

WALL = "#"
OPEN = " "


def _trapdoor(maze: Maze, x: int, y: int, z: int) -> str:
    down = z > 0 and not maze.is_wall((x, y, z), (x, y, z - 1))
    up = z < maze.levels - 1 and not maze.is_wall((x, y, z), (x, y, z + 1))
    if up and down:
        return "X"
    if up:
        return "/"
    if down:
        return "\\"
    return OPEN


def render_level(maze: Maze, z: int) -> List[str]:
    """
    ASCII plan of one level, north (y = height) at the top.

    Cells sit on odd columns of odd rows and show their trapdoors:
    '/' up, '\\' down, 'X' both ways. Everything else is wall or passage.
    """
    rows = []
    for y in range(maze.height, -1, -1):
        if y < maze.height:
            row = []
            for x in range(2 * maze.width + 1):
                if x % 2 == 1:
                    row.append(_trapdoor(maze, (x - 1) // 2, y, z))
                else:
                    x2 = x // 2
                    if 0 < x2 < maze.width and not maze.is_wall((x2, y, z), (x2 - 1, y, z)):
                        row.append(OPEN)
                    else:
                        row.append(WALL)
            rows.append("".join(row))
        row = []
        for x in range(2 * maze.width + 1):
            x2 = (x - 1) // 2
            if 0 < y < maze.height and x % 2 == 1 and not maze.is_wall((x2, y - 1, z), (x2, y, z)):
                row.append(OPEN)
            else:
                row.append(WALL)
        rows.append("".join(row))
    return rows


def render_lines(maze: Maze) -> List[str]:
    lines = []
    for z in range(maze.levels):
        lines.append(f"Level {z + 1}")
        lines.extend(render_level(maze, z))
    return lines


def maze_to_string(maze: Maze) -> str:
    return "\n".join(render_lines(maze)) + "\n"
