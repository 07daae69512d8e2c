"""汉诺塔的分治解法。"""
from typing import List, NamedTuple

from ...errors import InvalidInput
from ...template import IntegerAlgorithm

# 2^20 - 1 步约一百万条记录
MAX_DISKS = 20


class Move(NamedTuple):
    """把编号为 disk 的圆盘从 source 柱移到 target 柱，1 号盘最小。"""
    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"disk {self.disk}: {self.source} -> {self.target}"


class TowerOfHanoi(IntegerAlgorithm):
    """计算把 disks 个圆盘从 source 柱移到 target 柱的全部步骤。

    把圆盘分成两份：最下面的大盘，以及它上面的 n-1 个盘。
        1. 先把上面 n-1 个盘借助 target 移到 spare
        2. 把最大的盘从 source 移到 target
        3. 再把 spare 上的 n-1 个盘借助 source 移到 target
    总步数为 2^n - 1，递归深度为 n。
    """

    def _validate_inputs(
        self, disks: int, source: str = "A", spare: str = "B", target: str = "C"
    ) -> None:
        self._require_non_negative("disks", disks)
        if disks > MAX_DISKS:
            raise InvalidInput(f"disks must be at most {MAX_DISKS}, got {disks}")
        if len({source, spare, target}) != 3:
            raise InvalidInput(f"peg names must be distinct, got {source!r}, {spare!r}, {target!r}")

    def _execute_core(
        self, disks: int, source: str = "A", spare: str = "B", target: str = "C"
    ) -> List[Move]:
        moves: List[Move] = []
        self._move(int(disks), source, spare, target, moves)
        return moves

    def _move(self, disks: int, source: str, spare: str, target: str, moves: List[Move]) -> None:
        if disks == 0:
            return
        self._move(disks - 1, source, target, spare, moves)
        moves.append(Move(disks, source, target))
        self._move(disks - 1, spare, source, target, moves)
