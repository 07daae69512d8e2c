from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from knapsack_dp.base import Algorithm
from knapsack_dp.errors import InvalidInput


@dataclass(eq=False)
class Person:
    """环形链表中的一个人。

    属性:
        number: 编号，从 1 开始
        prev: 前一个人
        next: 后一个人
    """
    number: int
    prev: Optional[Person] = field(default=None, repr=False)
    next: Optional[Person] = field(default=None, repr=False)


class JosephusRing(Algorithm):
    """用双向循环链表模拟约瑟夫问题。

    编号为 1..count 的人围成一圈，从编号为 start 的人开始报数，
    数到 step 的人出列，下一个人重新从 1 开始报数，直到只剩一人。
    出列时把节点从链表中摘掉，前后两个节点直接相连。

    时间复杂度: O(count * step)
    空间复杂度: O(count)

    示例:
        >>> JosephusRing(5).execute(start=1, step=3)
        [3, 1, 5, 2, 4]
    """

    def __init__(self, count: int) -> None:
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidInput(f"count must be an integer >= 1, got {count!r}")
        self.count = count
        self.first = self._build()

    def _build(self) -> Person:
        first = Person(1)
        first.prev = first.next = first
        for number in range(2, self.count + 1):
            person = Person(number, prev=first.prev, next=first)
            first.prev.next = person
            first.prev = person
        return first

    def people(self) -> List[int]:
        """按顺时针方向返回圈中所有人的编号。"""
        numbers = [self.first.number]
        current = self.first.next
        while current is not self.first:
            numbers.append(current.number)
            current = current.next
        return numbers

    def execute(self, start: int = 1, step: int = 1) -> List[int]:
        """返回出列顺序，最后一个元素是留下的人。

        每次调用都在新建的圈上报数，self.first 所在的圈保持不变。

        参数:
            start: 第一个报数的人的编号，1 <= start <= count
            step: 报到几出列，必须 >= 1
        """
        for name, value in (("start", start), ("step", step)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInput(f"{name} must be an integer, got {value!r}")
        if not 1 <= start <= self.count:
            raise InvalidInput(f"start must be between 1 and {self.count}, got {start}")
        if step < 1:
            raise InvalidInput(f"step must be >= 1, got {step}")

        current = self._build()
        for _ in range(start - 1):
            current = current.next

        order: List[int] = []
        while current.next is not current:
            for _ in range(step - 1):
                current = current.next
            current.prev.next = current.next
            current.next.prev = current.prev
            order.append(current.number)
            current = current.next
        order.append(current.number)
        return order

    def survivor(self, start: int = 1, step: int = 1) -> int:
        """最后留下的人的编号。"""
        return self.execute(start, step)[-1]
