"""算法的通用辅助函数。

本模块提供背包求解器、稀疏矩阵和迷宫共用的小工具，
包括二维表格的文本渲染和矩形网格检查。
"""
from typing import List, Sequence


def format_table(table: Sequence[Sequence[int]], width: int = 5) -> str:
    """将二维整数表格渲染为右对齐的多行文本。

    参数:
        table: 二维整数表格
        width: 每个单元格的最小宽度

    返回:
        str: 每行一条记录、单元格之间以空格分隔的文本

    示例:
        >>> print(format_table([[0, 0], [0, 500]]))
            0     0
            0   500
    """
    return "\n".join(
        " ".join(f"{cell:>{width}d}" for cell in row) for row in table
    )


def grid_shape(grid: Sequence[Sequence[int]]) -> List[int]:
    """返回矩形网格的 [行数, 列数]，参差不齐的网格抛出 ValueError。"""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    for index, row in enumerate(grid):
        if len(row) != cols:
            raise ValueError(
                f"row {index} has {len(row)} columns, expected {cols}"
            )
    return [rows, cols]
