"""knapsack_dp 项目级异常。

所有自定义异常都继承 KnapsackError，调用方可以用一个 except 子句
捕获本包抛出的全部错误。输入校验失败使用 InvalidInput，它同时是
ValueError 的子类，因此与标准库的约定保持一致。
"""

from __future__ import annotations

import logging
from typing import Optional


class KnapsackError(Exception):
    """knapsack_dp 异常基类。"""


class InvalidInput(KnapsackError, ValueError):
    """输入违反前置条件（长度不一致、负数、非整数等）。"""


class SolveCancelled(KnapsackError):
    """求解过程中检测到取消信号。"""


class QueueFull(KnapsackError):
    """环形队列已满，无法入队。"""


class QueueEmpty(KnapsackError):
    """环形队列为空，无法出队。"""


class SparseFormatError(KnapsackError, ValueError):
    """稀疏矩阵记录格式错误。"""


def log_and_format_exception(
    exc: Exception, logger: Optional[logging.Logger] = None
) -> dict[str, str]:
    """记录异常日志并返回标准化的错误表示。

    参数:
        exc: 要处理的异常对象
        logger: 可选的日志记录器，未提供时使用模块记录器

    返回:
        dict[str, str]: 包含 ``error_type``（异常类名）和 ``message`` 的字典
    """
    log = logger or logging.getLogger(__name__)
    log.error("%s: %s", type(exc).__name__, exc, exc_info=exc)
    return {
        "error_type": type(exc).__name__,
        "message": str(exc),
    }
