"""斐波那契查找算法实现。"""
from typing import Any, List, Sequence

from ...base import Algorithm


def fibonacci_numbers(last_index: int) -> List[int]:
    """生成 1, 1, 2, 3, 5, ...，直到最后一项减一不小于 last_index。"""
    fib = [1, 1]
    while fib[-1] - 1 < last_index:
        fib.append(fib[-1] + fib[-2])
    return fib


class FibonacciSearch(Algorithm):
    """使用斐波那契分割点在已排序序列中查找元素。

    把序列看作长度为 F[k] 的区间（不足的部分用最后一个元素补齐），
    分割点取 mid = start + F[k-1] - 1，左侧剩下 F[k-1] 个元素，
    右侧剩下 F[k-2] 个元素：
        1. 目标小于 data[mid]，在左侧继续，k -= 1
        2. 目标大于 data[mid]，在右侧继续，k -= 2
        3. 相等时返回 mid；mid 落在补齐部分时返回最后一个真实下标

    补齐部分不实际复制，读取越界下标时直接取最后一个元素。
    存在重复元素时返回最先命中的下标，
    例如在 [1, 8, 10, 89, 100, 100, 123] 中查找 100 返回 4。
    """

    def execute(self, data: Sequence[Any], target: Any) -> int:
        """在已排序的数据中查找目标值的索引。

        参数:
            data: 已排序的数据（升序）
            target: 要查找的目标值

        返回:
            int: 目标值的索引，如果未找到则返回 -1

        时间复杂度: O(log n)
        空间复杂度: O(log n) - 斐波那契数列

        示例:
            >>> FibonacciSearch().execute([1, 8, 10, 89, 100, 100, 123], 100)
            4
        """
        last = len(data) - 1
        start, end = 0, last
        fib = fibonacci_numbers(last)
        k = 0
        while fib[k] - 1 < end:
            k += 1

        while start <= end:
            # k 为 0 或 1 时区间只剩一个元素
            mid = start + fib[k - 1] - 1 if k >= 1 else start
            value = data[min(mid, last)]
            if target < value:
                end = mid - 1
                k -= 1
            elif target > value:
                start = mid + 1
                k -= 2
            else:
                return min(mid, last)
        return -1
