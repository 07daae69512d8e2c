"""
算法基础模板模块

提供带输入校验、日志记录和执行统计的算法基类。
背包求解器都从这里派生。
"""

import logging
import numbers
import threading
import time
from abc import abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .base import Algorithm
from .errors import InvalidInput, SolveCancelled


class ProductionAlgorithm(Algorithm):
    """
    生产级算法基础类

    提供标准的输入校验、日志记录、性能统计等功能。
    execute 依次调用 _validate_inputs、_execute_core 和 _validate_output。
    """

    def __init__(self, enable_logging: bool = True, enable_metrics: bool = True):
        """
        初始化生产级算法

        Args:
            enable_logging: 是否启用日志记录
            enable_metrics: 是否启用性能指标收集
        """
        self.enable_logging = enable_logging
        self.enable_metrics = enable_metrics
        self.logger = logging.getLogger(self.__class__.__name__) if enable_logging else None
        self._execution_count = 0
        self._total_execution_time = 0.0
        self._lock = threading.Lock()

    def execute(self, *args, **kwargs) -> Any:
        """
        执行算法（带校验和监控）

        Args:
            *args: 位置参数
            **kwargs: 关键字参数

        Returns:
            算法执行结果

        Raises:
            InvalidInput: 输入参数违反前置条件，原样抛给调用方
            SolveCancelled: 执行过程中检测到取消信号
        """
        # 校验失败直接抛出，不做任何修正
        self._validate_inputs(*args, **kwargs)

        start_time = time.perf_counter()
        if self.logger:
            self.logger.debug("开始执行算法 %s", self.__class__.__name__)

        try:
            result = self._execute_core(*args, **kwargs)
            self._validate_output(result)
        except Exception as e:
            if self.logger:
                self.logger.warning(
                    "算法 %s 执行中止: %s, 耗时: %.4fs",
                    self.__class__.__name__,
                    e,
                    time.perf_counter() - start_time,
                )
            raise

        execution_time = time.perf_counter() - start_time
        if self.enable_metrics:
            self._update_metrics(execution_time)

        if self.logger:
            self.logger.debug("算法执行成功，耗时: %.4fs", execution_time)

        return result

    @abstractmethod
    def _execute_core(self, *args, **kwargs) -> Any:
        """
        核心算法逻辑实现

        子类必须实现此方法，调用时输入已经通过校验。
        """

    def _validate_inputs(self, *args, **kwargs) -> None:
        """
        输入参数验证

        子类可以重写此方法实现自定义验证逻辑

        Raises:
            InvalidInput: 输入参数无效
        """

    def _validate_output(self, result: Any) -> None:
        """输出结果验证，默认不做检查。"""

    def _update_metrics(self, execution_time: float) -> None:
        """更新性能指标"""
        with self._lock:
            self._execution_count += 1
            self._total_execution_time += execution_time

    def get_performance_stats(self) -> Dict[str, Any]:
        """
        获取性能统计信息

        Returns:
            性能统计字典
        """
        if self._execution_count == 0:
            return {"execution_count": 0}

        return {
            "execution_count": self._execution_count,
            "total_execution_time": self._total_execution_time,
            "average_execution_time": self._total_execution_time / self._execution_count,
            "algorithm_name": self.__class__.__name__,
        }


class IntegerAlgorithm(ProductionAlgorithm):
    """
    整数算法基础类

    为处理非负整数输入的算法提供共享的校验函数。
    接受任何 numbers.Integral（包括 numpy 整数），
    bool 虽然是 int 的子类，但在这里不被视为整数。
    """

    @staticmethod
    def _is_int(value: Any) -> bool:
        return isinstance(value, numbers.Integral) and not isinstance(value, bool)

    def _require_non_negative(self, name: str, value: Any) -> None:
        if not self._is_int(value):
            raise InvalidInput(f"{name} must be an integer, got {type(value).__name__}")
        if value < 0:
            raise InvalidInput(f"{name} must be non-negative, got {value}")

    def _require_non_negative_sequence(self, name: str, values: Sequence[Any]) -> None:
        if isinstance(values, (str, bytes)) or not hasattr(values, "__len__"):
            raise InvalidInput(f"{name} must be a sequence of integers")
        for index, value in enumerate(values):
            if not self._is_int(value):
                raise InvalidInput(
                    f"{name}[{index}] must be an integer, got {type(value).__name__}"
                )
            if value < 0:
                raise InvalidInput(f"{name}[{index}] must be non-negative, got {value}")


class ItemAlgorithm(IntegerAlgorithm):
    """
    0-1 背包求解器的公共基类

    负责 (weights, values, capacity) 三元组的校验，以及在逐个物品
    迭代之间检查协作式取消信号。
    """

    def _validate_inputs(
        self,
        weights: Sequence[int],
        values: Sequence[int],
        capacity: int,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self._require_non_negative_sequence("weights", weights)
        self._require_non_negative_sequence("values", values)
        if len(weights) != len(values):
            raise InvalidInput(
                "weights and values must have the same length "
                f"({len(weights)} != {len(values)})"
            )
        self._require_non_negative("capacity", capacity)

    def _validate_output(self, result: Any) -> None:
        value = result if isinstance(result, int) else result.max_value
        if value < 0:
            raise RuntimeError(f"negative optimum {value}")

    @staticmethod
    def _as_python_ints(
        weights: Sequence[int], values: Sequence[int], capacity: int
    ) -> Tuple[List[int], List[int], int]:
        # numpy 整数在这里转换为 int，结果与表格都只包含 Python int
        return [int(w) for w in weights], [int(v) for v in values], int(capacity)

    @staticmethod
    def _check_cancelled(cancel_event: Optional[threading.Event], item: int) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise SolveCancelled(f"solve cancelled before item {item}")
