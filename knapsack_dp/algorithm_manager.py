"""
算法管理器

提供统一的算法接口，支持算法注册、同步/并发执行、指标记录和错误处理。
每次执行都会创建新的算法实例，求解器之间不共享任何可变状态，
因此并发执行与顺序执行得到相同的结果。
"""

import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from .backtracking.basic.maze import MazeSolver
from .base import Algorithm
from .configuration import Settings
from .divide_and_conquer.basic.hanoi import TowerOfHanoi
from .dynamic_programming.basic.knapsack import TableKnapsack
from .dynamic_programming.basic.rolling_knapsack import RollingKnapsack
from .errors import log_and_format_exception
from .searching.basic.binary_search import BinarySearch
from .searching.basic.fibonacci_search import FibonacciSearch
from .storage.basic.sparse_matrix import DEFAULT_SPARSE_PATH, SparseMatrixCodec


class AlgorithmCategory(Enum):
    """算法分类枚举"""
    DYNAMIC_PROGRAMMING = "dynamic_programming"
    SEARCHING = "searching"
    STORAGE = "storage"
    BACKTRACKING = "backtracking"
    DIVIDE_AND_CONQUER = "divide_and_conquer"


@dataclass
class AlgorithmMetrics:
    """算法执行指标"""
    execution_time: float
    success: bool = True
    error_type: Optional[str] = None
    error_message: Optional[str] = None
    input_size: Optional[int] = None


@dataclass
class AlgorithmConfig:
    """算法配置"""
    timeout: Optional[float] = 30.0  # 批量执行时等待单个结果的超时时间（秒）
    enable_metrics: bool = True
    init_kwargs: Dict[str, Any] = field(default_factory=dict)  # 构造算法实例时的参数


class AlgorithmRegistry:
    """算法注册表"""

    def __init__(self, sparse_path: Optional[str] = None):
        self._algorithms: Dict[str, Type[Algorithm]] = {}
        self._categories: Dict[str, AlgorithmCategory] = {}
        self._configs: Dict[str, AlgorithmConfig] = {}
        self._register_default_algorithms(sparse_path or DEFAULT_SPARSE_PATH)

    def _register_default_algorithms(self, sparse_path: str) -> None:
        """注册默认算法"""
        self.register("knapsack_table", TableKnapsack, AlgorithmCategory.DYNAMIC_PROGRAMMING)
        self.register("knapsack_rolling", RollingKnapsack, AlgorithmCategory.DYNAMIC_PROGRAMMING)
        self.register("binary_search", BinarySearch, AlgorithmCategory.SEARCHING)
        self.register("fibonacci_search", FibonacciSearch, AlgorithmCategory.SEARCHING)
        self.register("maze", MazeSolver, AlgorithmCategory.BACKTRACKING)
        self.register("hanoi", TowerOfHanoi, AlgorithmCategory.DIVIDE_AND_CONQUER)
        self.register(
            "sparse_matrix",
            SparseMatrixCodec,
            AlgorithmCategory.STORAGE,
            AlgorithmConfig(init_kwargs={"path": sparse_path}),
        )

    def register(self, name: str, algorithm_class: Type[Algorithm],
                 category: AlgorithmCategory, config: Optional[AlgorithmConfig] = None) -> None:
        """
        注册算法

        Args:
            name: 算法名称
            algorithm_class: 算法类
            category: 算法分类
            config: 算法配置
        """
        if not isinstance(algorithm_class, type) or not issubclass(algorithm_class, Algorithm):
            raise ValueError(f"算法类 {algorithm_class} 必须继承自 Algorithm")

        self._algorithms[name] = algorithm_class
        self._categories[name] = category
        self._configs[name] = config or AlgorithmConfig()

    def get_algorithm(self, name: str) -> Type[Algorithm]:
        """获取算法类"""
        if name not in self._algorithms:
            raise KeyError(f"未找到算法: {name}")
        return self._algorithms[name]

    def get_category(self, name: str) -> Optional[AlgorithmCategory]:
        return self._categories.get(name)

    def get_config(self, name: str) -> AlgorithmConfig:
        return self._configs.get(name, AlgorithmConfig())

    def list_algorithms(self, category: Optional[AlgorithmCategory] = None) -> List[str]:
        """列出算法"""
        if category is None:
            return list(self._algorithms.keys())
        return [name for name, cat in self._categories.items() if cat == category]


class AlgorithmManager:
    """
    算法管理器

    同步执行走 execute_algorithm，并发执行通过线程池提交，
    batch_execute 按提交顺序返回结果，失败的任务以 None 占位。
    """

    def __init__(self, max_workers: int = 4, sparse_path: Optional[str] = None):
        self.logger = logging.getLogger(__name__)
        self.registry = AlgorithmRegistry(sparse_path)
        self.executor = ThreadPoolExecutor(max_workers=max_workers)
        self._metrics_history: Dict[str, List[AlgorithmMetrics]] = {}
        self._metrics_lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "AlgorithmManager":
        """按配置中的 manager.max_workers 和 sparse.path 创建管理器"""
        return cls(max_workers=settings.manager.max_workers, sparse_path=settings.sparse.path)

    def __enter__(self) -> "AlgorithmManager":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def execute_algorithm(self, algorithm_name: str, *args, **kwargs) -> Any:
        """
        执行算法

        Args:
            algorithm_name: 算法名称
            *args: 算法参数
            **kwargs: 算法关键字参数

        Returns:
            算法执行结果

        Raises:
            KeyError: 算法不存在
            InvalidInput: 输入违反前置条件
        """
        algorithm_class = self.registry.get_algorithm(algorithm_name)
        config = self.registry.get_config(algorithm_name)
        input_size = self._estimate_input_size(args, kwargs)

        start_time = time.perf_counter()
        try:
            algorithm = algorithm_class(**config.init_kwargs)
            result = algorithm.execute(*args, **kwargs)
        except Exception as e:
            error = log_and_format_exception(e, self.logger)
            if config.enable_metrics:
                self._record_metrics(algorithm_name, AlgorithmMetrics(
                    execution_time=time.perf_counter() - start_time,
                    success=False,
                    error_type=error["error_type"],
                    error_message=error["message"],
                    input_size=input_size,
                ))
            raise

        execution_time = time.perf_counter() - start_time
        if config.enable_metrics:
            self._record_metrics(algorithm_name, AlgorithmMetrics(
                execution_time=execution_time,
                input_size=input_size,
            ))
        self.logger.info("算法 %s 执行成功，耗时: %.4fs", algorithm_name, execution_time)
        return result

    def execute_algorithm_async(self, algorithm_name: str, *args, **kwargs) -> Future:
        """提交到线程池执行，返回 Future 对象"""
        return self.executor.submit(self.execute_algorithm, algorithm_name, *args, **kwargs)

    def batch_execute(self, tasks: List[Dict[str, Any]]) -> List[Any]:
        """
        批量并发执行算法

        Args:
            tasks: 任务列表，每个任务包含 algorithm、args 和可选的 kwargs

        Returns:
            与任务顺序一致的结果列表，失败的任务对应 None
        """
        futures = []
        for task in tasks:
            algorithm_name = task["algorithm"]
            future = self.execute_algorithm_async(
                algorithm_name, *task.get("args", []), **task.get("kwargs", {})
            )
            futures.append((algorithm_name, future))

        results = []
        for index, (algorithm_name, future) in enumerate(futures):
            timeout = self.registry.get_config(algorithm_name).timeout
            try:
                results.append(future.result(timeout=timeout))
            except Exception as e:
                self.logger.warning("批量任务 #%d (%s) 失败，结果记为 None", index, algorithm_name)
                log_and_format_exception(e, self.logger)
                results.append(None)
        return results

    def get_metrics(self, algorithm_name: str) -> List[AlgorithmMetrics]:
        """获取算法执行指标"""
        with self._metrics_lock:
            return list(self._metrics_history.get(algorithm_name, []))

    def get_performance_summary(self, algorithm_name: str) -> Dict[str, Any]:
        """
        获取算法性能摘要

        Args:
            algorithm_name: 算法名称

        Returns:
            性能摘要字典，没有执行记录时为空字典
        """
        metrics = self.get_metrics(algorithm_name)
        if not metrics:
            return {}

        successful_metrics = [m for m in metrics if m.success]
        if not successful_metrics:
            return {"total_executions": len(metrics), "success_rate": 0.0}

        execution_times = [m.execution_time for m in successful_metrics]

        return {
            "total_executions": len(metrics),
            "successful_executions": len(successful_metrics),
            "success_rate": len(successful_metrics) / len(metrics),
            "avg_execution_time": sum(execution_times) / len(execution_times),
            "min_execution_time": min(execution_times),
            "max_execution_time": max(execution_times),
            "total_execution_time": sum(execution_times),
        }

    def _estimate_input_size(self, args: tuple, kwargs: dict) -> Optional[int]:
        """以第一个序列参数的长度作为输入规模"""
        for value in list(args) + list(kwargs.values()):
            if isinstance(value, (list, tuple)):
                return len(value)
        return None

    def _record_metrics(self, algorithm_name: str, metrics: AlgorithmMetrics) -> None:
        """记录算法执行指标"""
        with self._metrics_lock:
            history = self._metrics_history.setdefault(algorithm_name, [])
            history.append(metrics)

            # 限制历史记录数量
            max_history = 1000
            if len(history) > max_history:
                del history[:-max_history]

    def shutdown(self) -> None:
        """关闭算法管理器"""
        self.executor.shutdown(wait=True)
