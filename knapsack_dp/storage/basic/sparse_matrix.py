"""稀疏矩阵的编码、解码与文件持久化。

当二维数组中绝大多数元素为 0 时，只记录非零元素可以节省存储空间。
编码结果是一组三元组：

    row  col  val
    5    5    0      <- 头部：行数、列数、0
    0    2    3
    1    3    6

持久化格式为每行一条记录、字段之间以制表符分隔的文本文件。
"""
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from ...base import Algorithm
from ...errors import InvalidInput, SparseFormatError
from ...utils import grid_shape

logger = logging.getLogger(__name__)

Triple = Tuple[int, int, int]
PathLike = Union[str, Path]

DEFAULT_SPARSE_PATH = "./sparse.data"


def to_sparse(grid: Sequence[Sequence[int]]) -> List[Triple]:
    """把稠密二维数组压缩为稀疏三元组，按行优先顺序输出非零元素。"""
    try:
        rows, cols = grid_shape(grid)
    except ValueError as err:
        raise InvalidInput(f"grid must be rectangular: {err}") from err

    triples: List[Triple] = [(rows, cols, 0)]
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if value != 0:
                triples.append((i, j, value))
    return triples


def to_dense(triples: Sequence[Sequence[int]]) -> List[List[int]]:
    """根据头部记录的尺寸还原稠密二维数组。"""
    if not triples:
        raise SparseFormatError("sparse matrix has no header record")
    for index, record in enumerate(triples):
        if len(record) != 3:
            raise SparseFormatError(
                f"record {index} has {len(record)} fields, expected 3"
            )
    rows, cols = triples[0][0], triples[0][1]
    if rows < 0 or cols < 0:
        raise SparseFormatError(f"invalid dimensions {rows}x{cols}")

    grid = [[0] * cols for _ in range(rows)]
    for row, col, value in triples[1:]:
        if not (0 <= row < rows and 0 <= col < cols):
            raise SparseFormatError(
                f"cell ({row}, {col}) outside {rows}x{cols} matrix"
            )
        grid[row][col] = value
    return grid


def save_sparse(triples: Sequence[Sequence[int]], path: PathLike = DEFAULT_SPARSE_PATH) -> Path:
    """把稀疏三元组写入文本文件并返回文件路径。"""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        for record in triples:
            handle.write("\t".join(str(field) for field in record) + "\n")
    logger.debug("Stored %d sparse records to %s", len(triples), target)
    return target


def load_sparse(path: PathLike = DEFAULT_SPARSE_PATH) -> List[Triple]:
    """从文本文件读取稀疏三元组。

    兼容行尾多余的制表符并忽略空行；不是三个整数的记录会抛出
    SparseFormatError。
    """
    source = Path(path)
    triples: List[Triple] = []
    with source.open("r", encoding="utf-8") as handle:
        for lineno, line in enumerate(handle, start=1):
            fields = [field for field in line.strip().split("\t") if field != ""]
            if not fields:
                continue
            if len(fields) != 3:
                raise SparseFormatError(
                    f"{source}:{lineno}: expected 3 fields, got {len(fields)}"
                )
            try:
                row, col, value = (int(field) for field in fields)
            except ValueError as err:
                raise SparseFormatError(f"{source}:{lineno}: {err}") from err
            triples.append((row, col, value))
    logger.debug("Loaded %d sparse records from %s", len(triples), source)
    return triples


class SparseMatrixCodec(Algorithm):
    """稀疏矩阵编解码器，文件路径在构造时显式传入。

    属性:
        path: 持久化文件路径
    """

    def __init__(self, path: Optional[PathLike] = None) -> None:
        self.path = Path(path or DEFAULT_SPARSE_PATH)

    def encode(self, grid: Sequence[Sequence[int]]) -> List[Triple]:
        return to_sparse(grid)

    def decode(self, triples: Sequence[Sequence[int]]) -> List[List[int]]:
        return to_dense(triples)

    def save(self, triples: Sequence[Sequence[int]]) -> Path:
        return save_sparse(triples, self.path)

    def load(self) -> List[List[int]]:
        """读取文件并直接还原为稠密数组。"""
        return to_dense(load_sparse(self.path))

    def execute(self, grid: Sequence[Sequence[int]]) -> List[Triple]:
        """编码并保存稠密数组，返回写入的三元组。"""
        triples = self.encode(grid)
        self.save(triples)
        return triples
