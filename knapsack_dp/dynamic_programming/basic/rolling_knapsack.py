"""使用滚动数组（一维 DP）解决 0-1 背包问题。"""
import threading
from typing import List, Optional, Sequence

from ...template import ItemAlgorithm


class RollingKnapsack(ItemAlgorithm):
    """只用一个长度为 capacity + 1 的数组求解 0-1 背包问题。

    二维表格的第 i 行只依赖第 i-1 行，因此可以把表格压缩成一行，
    对每个物品从大到小遍历容量并原地覆盖：

        buffer[j] = max(buffer[j], values[i] + buffer[j - weights[i]])

    处理完第 i 个物品后，buffer[j] 等于二维表格中的 table[i+1][j]。

    容量必须倒序遍历：正序时 buffer[j - weights[i]] 可能已经被当前
    物品更新过，同一个物品就会被重复放入。
    """

    def execute(
        self,
        weights: Sequence[int],
        values: Sequence[int],
        capacity: int,
        cancel_event: Optional[threading.Event] = None,
    ) -> int:
        """返回背包能够获得的最大价值。

        参数:
            weights: 物品的重量列表
            values: 物品的价值列表
            capacity: 背包的最大承重
            cancel_event: 可选的取消信号，在处理每个物品之前检查

        返回:
            int: 最大价值，与 TableKnapsack 的 max_value 完全相同

        时间复杂度: O(n * capacity)
        空间复杂度: O(capacity)

        示例:
            >>> RollingKnapsack().execute([1, 2, 1], [500, 5000, 3000], 3)
            8000
        """
        return super().execute(weights, values, capacity, cancel_event)

    def _execute_core(
        self,
        weights: Sequence[int],
        values: Sequence[int],
        capacity: int,
        cancel_event: Optional[threading.Event] = None,
    ) -> int:
        weights, values, capacity = self._as_python_ints(weights, values, capacity)
        buffer: List[int] = [0] * (capacity + 1)

        for i, (wt, val) in enumerate(zip(weights, values)):
            self._check_cancelled(cancel_event, i)
            # 倒序遍历，容量小于 wt 的位置保持不变
            for j in range(capacity, wt - 1, -1):
                include = val + buffer[j - wt]
                if include > buffer[j]:
                    buffer[j] = include

        return buffer[capacity]


def solve_rolling(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """使用滚动数组求解 0-1 背包问题。"""
    return RollingKnapsack().execute(weights, values, capacity)
