"""迷宫回溯算法实现。"""
from dataclasses import dataclass
from itertools import permutations
from typing import Dict, List, Optional, Sequence, Tuple

from ...base import Algorithm
from ...errors import InvalidInput
from ...utils import grid_shape

OPEN = 0
WALL = 1
PATH = 2
DEAD_END = 3

DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "down": (1, 0),
    "right": (0, 1),
    "up": (-1, 0),
    "left": (0, -1),
}
DEFAULT_ORDER: Tuple[str, ...] = ("down", "right", "up", "left")

Cell = Tuple[int, int]


@dataclass
class MazeResult:
    """一次探路的结果。

    属性:
        solved: 是否到达终点
        grid: 探路后的地图，2 为路线，3 为走过但走不通的格子
        directions: 本次使用的方向顺序
    """
    solved: bool
    grid: List[List[int]]
    directions: Tuple[str, ...]

    @property
    def steps(self) -> int:
        return sum(row.count(PATH) for row in self.grid)

    @property
    def dead_ends(self) -> int:
        return sum(row.count(DEAD_END) for row in self.grid)


class MazeSolver(Algorithm):
    """用递归回溯在二维网格中寻找从起点到终点的路线。

    0 表示通道，1 表示墙。小球按固定的方向顺序尝试前进：
        1. 终点已经被标记为路线时结束
        2. 当前格子是通道就标记为 2，依次向各个方向递归
        3. 所有方向都走不通时把格子改为 3，返回上一层

    网格外的位置按墙处理，传入的网格不会被修改。
    得到的路线取决于方向顺序，不一定最短；shortest_strategy
    会尝试全部 24 种顺序，返回步数最少的结果。

    递归深度最多为通道格子数，适合小规模地图。
    """

    def __init__(self, directions: Optional[Sequence[str]] = None) -> None:
        self.directions = self._check_directions(directions or DEFAULT_ORDER)

    @staticmethod
    def _check_directions(directions: Sequence[str]) -> Tuple[str, ...]:
        order = tuple(directions)
        if sorted(order) != sorted(DIRECTIONS):
            raise InvalidInput(
                f"directions must be a permutation of {sorted(DIRECTIONS)}, got {list(order)}"
            )
        return order

    def execute(self, grid: Sequence[Sequence[int]], start: Cell, end: Cell) -> MazeResult:
        """从 start 出发探路到 end。

        参数:
            grid: 矩形网格，只包含 0 和 1
            start: 起点 (行, 列)
            end: 终点 (行, 列)

        返回:
            MazeResult: 包含标记后的地图和是否到达终点
        """
        maze = self._copy_grid(grid)
        for name, cell in (("start", start), ("end", end)):
            if not self._inside(maze, cell):
                raise InvalidInput(f"{name} {cell} is outside the maze")
        solved = self._walk(maze, start, end)
        return MazeResult(solved=solved, grid=maze, directions=self.directions)

    def shortest_strategy(
        self, grid: Sequence[Sequence[int]], start: Cell, end: Cell
    ) -> MazeResult:
        """尝试所有方向顺序，返回到达终点且步数最少的结果。

        步数相同时取先尝试到的顺序；都走不通时返回默认顺序的结果。
        """
        best: Optional[MazeResult] = None
        for order in permutations(DEFAULT_ORDER):
            result = MazeSolver(order).execute(grid, start, end)
            if result.solved and (best is None or result.steps < best.steps):
                best = result
        return best or self.execute(grid, start, end)

    @staticmethod
    def _copy_grid(grid: Sequence[Sequence[int]]) -> List[List[int]]:
        try:
            grid_shape(grid)
        except ValueError as err:
            raise InvalidInput(str(err)) from err
        maze = [list(row) for row in grid]
        for r, row in enumerate(maze):
            for c, cell in enumerate(row):
                if cell not in (OPEN, WALL) or isinstance(cell, bool):
                    raise InvalidInput(f"cell ({r}, {c}) must be 0 or 1, got {cell!r}")
        return maze

    @staticmethod
    def _inside(maze: List[List[int]], cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < len(maze) and 0 <= col < len(maze[row])

    def _walk(self, maze: List[List[int]], cell: Cell, end: Cell) -> bool:
        if maze[end[0]][end[1]] == PATH:
            return True
        if not self._inside(maze, cell):
            return False
        row, col = cell
        if maze[row][col] != OPEN:
            return False

        maze[row][col] = PATH
        for name in self.directions:
            d_row, d_col = DIRECTIONS[name]
            if self._walk(maze, (row + d_row, col + d_col), end):
                return True
        maze[row][col] = DEAD_END
        return False
