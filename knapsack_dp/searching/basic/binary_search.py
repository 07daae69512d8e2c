"""递归二分搜索算法实现。"""
from typing import Any, Sequence

from ...base import Algorithm


class BinarySearch(Algorithm):
    """使用递归二分搜索在已排序序列中查找元素。

    每次把闭区间 [low, high] 对半分割：
        1. low > high 时区间为空，返回 -1
        2. 目标小于中间元素，向左递归
        3. 目标大于中间元素，向右递归
        4. 相等时返回中间下标

    递归深度为 O(log n)，不会触及 Python 的递归上限。
    存在重复元素时返回二分过程最先命中的那个下标，
    例如在 [1, 8, 10, 89, 100, 100, 123] 中查找 100 返回 5。
    """

    def execute(self, data: Sequence[Any], target: Any) -> int:
        """在已排序的数据中查找目标值的索引。

        参数:
            data: 已排序的数据（升序）
            target: 要查找的目标值

        返回:
            int: 目标值的索引，如果未找到则返回 -1

        时间复杂度: O(log n)
        空间复杂度: O(log n) - 递归调用栈

        示例:
            >>> BinarySearch().execute([1, 8, 10, 89, 100, 100, 123], 100)
            5
            >>> BinarySearch().execute([1, 3, 5], 4)
            -1
        """
        return self._search(data, 0, len(data) - 1, target)

    def _search(self, data: Sequence[Any], low: int, high: int, target: Any) -> int:
        if low > high:
            return -1
        mid = (low + high) // 2
        if target < data[mid]:
            return self._search(data, low, mid - 1, target)
        if target > data[mid]:
            return self._search(data, mid + 1, high, target)
        return mid
