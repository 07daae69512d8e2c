"""使用二维动态规划解决 0-1 背包问题。"""
import threading
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ...template import ItemAlgorithm
from ...utils import format_table


@dataclass(frozen=True)
class KnapsackTable:
    """二维表格求解的结果。

    属性:
        max_value: 最大价值，等于 table[n][capacity]
        table: (n+1) × (capacity+1) 的 DP 表格
    """

    max_value: int
    table: List[List[int]]

    @property
    def rows(self) -> int:
        return len(self.table)

    @property
    def columns(self) -> int:
        return len(self.table[0]) if self.table else 0

    def format(self, width: int = 5) -> str:
        """把填好的表格渲染为文本，便于诊断输出。"""
        return format_table(self.table, width)


class TableKnapsack(ItemAlgorithm):
    """求解 0-1 背包问题的最大价值，并保留完整的 DP 表格。

    给定一组物品，每个物品都有重量和价值，在限定的背包容量内，
    选择一组物品使得总价值最大且每个物品最多选择一次。

    使用二维 DP 表格，其中 table[i][j] 表示前 i 个物品在容量 j 下的最大价值：
        1. table[0][j] = 0（没有物品时价值为 0）
        2. weights[i-1] > j 时，table[i][j] = table[i-1][j]
        3. 否则 table[i][j] = max(table[i-1][j], values[i-1] + table[i-1][j - weights[i-1]])

    两个分支价值相同时取"不放入"，保证同样的输入总是得到同样的表格。

    容量 0 这一列与其他列一样按转移方程填充：零重量物品在任何容量下
    都会被放入，所以只有当所有重量都为正时第 0 列才全部为 0。
    """

    def execute(
        self,
        weights: Sequence[int],
        values: Sequence[int],
        capacity: int,
        cancel_event: Optional[threading.Event] = None,
    ) -> KnapsackTable:
        """返回背包能够获得的最大价值以及完整的 DP 表格。

        参数:
            weights: 物品的重量列表
            values: 物品的价值列表
            capacity: 背包的最大承重
            cancel_event: 可选的取消信号，在处理每个物品之前检查

        返回:
            KnapsackTable: 最大价值和 DP 表格

        异常:
            InvalidInput: 长度不一致、出现负数或非整数
            SolveCancelled: cancel_event 被设置

        时间复杂度: O(n * capacity)
        空间复杂度: O(n * capacity)

        示例:
            >>> TableKnapsack().execute([1, 2, 1], [500, 5000, 3000], 3).max_value
            8000
        """
        return super().execute(weights, values, capacity, cancel_event)

    def _execute_core(
        self,
        weights: Sequence[int],
        values: Sequence[int],
        capacity: int,
        cancel_event: Optional[threading.Event] = None,
    ) -> KnapsackTable:
        weights, values, capacity = self._as_python_ints(weights, values, capacity)
        n = len(weights)
        # 表格比物品数和容量各多出一行一列，第 0 行保持为 0
        table: List[List[int]] = [[0] * (capacity + 1) for _ in range(n + 1)]

        for i in range(1, n + 1):
            self._check_cancelled(cancel_event, i - 1)
            wt = weights[i - 1]
            val = values[i - 1]
            previous = table[i - 1]
            current = table[i]
            # 从容量 0 开始填充，零重量物品在容量 0 时也能放入
            for j in range(capacity + 1):
                if wt > j:
                    current[j] = previous[j]
                else:
                    include = val + previous[j - wt]
                    current[j] = include if include > previous[j] else previous[j]

        return KnapsackTable(max_value=table[n][capacity], table=table)


def solve_table(weights: Sequence[int], values: Sequence[int], capacity: int) -> KnapsackTable:
    """使用二维表格求解 0-1 背包问题。"""
    return TableKnapsack().execute(weights, values, capacity)
