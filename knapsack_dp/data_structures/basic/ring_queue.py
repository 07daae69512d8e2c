from typing import Any, Iterator, List, Optional

from knapsack_dp.base import Algorithm
from knapsack_dp.errors import InvalidInput, QueueEmpty, QueueFull


class CircularQueue(Algorithm):
    """基于定长数组的循环（环形）先进先出队列。

    队头指针 front 指向第一个元素，队尾指针 rear 指向下一个可写入的位置，
    两者越过数组末尾时回到 0，存储空间可以反复使用。

    为了只凭两个指针区分"空"和"满"，数组始终空出一个位置：
        - front == rear 表示队列为空
        - (rear + 1) % max_size == front 表示队列已满
    因此实际可用容量是 max_size - 1。

    时间复杂度:
        - enqueue / dequeue / peek: O(1)
    空间复杂度: O(max_size)

    示例:
        >>> queue = CircularQueue(5)
        >>> for value in (1, 2, 3, 4):
        ...     queue.enqueue(value)
        >>> queue.is_full()
        True
    """

    def __init__(self, max_size: int) -> None:
        """初始化空队列。

        参数:
            max_size: 底层数组长度，必须不小于 2
        """
        if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size < 2:
            raise InvalidInput(f"max_size must be an integer >= 2, got {max_size!r}")
        self.max_size = max_size
        self.array: List[Optional[Any]] = [None] * max_size
        self.front = 0
        self.rear = 0

    @property
    def capacity(self) -> int:
        """可用容量，比 max_size 少一。"""
        return self.max_size - 1

    def enqueue(self, item: Any) -> None:
        """将元素加入队尾，队列已满时抛出 QueueFull。"""
        if self.is_full():
            raise QueueFull(f"queue is full ({self.capacity} items)")
        self.array[self.rear] = item
        self.rear = (self.rear + 1) % self.max_size

    def dequeue(self) -> Any:
        """从队头移除并返回元素，队列为空时抛出 QueueEmpty。"""
        if self.is_empty():
            raise QueueEmpty("queue is empty")
        item = self.array[self.front]
        self.array[self.front] = None
        self.front = (self.front + 1) % self.max_size
        return item

    def peek(self) -> Any:
        """查看队头元素但不移除。"""
        if self.is_empty():
            raise QueueEmpty("queue is empty")
        return self.array[self.front]

    def is_empty(self) -> bool:
        return self.front == self.rear

    def is_full(self) -> bool:
        return (self.rear + 1) % self.max_size == self.front

    def size(self) -> int:
        return (self.rear + self.max_size - self.front) % self.max_size

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        index = self.front
        for _ in range(self.size()):
            yield self.array[index]
            index = (index + 1) % self.max_size

    def __str__(self) -> str:
        return "[" + " ".join(str(item) for item in self) + "]"

    def execute(self, *args, **kwargs) -> List[Any]:
        """返回当前队列按出队顺序排列的快照。"""
        return list(self)
