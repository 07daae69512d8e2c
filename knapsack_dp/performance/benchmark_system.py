"""
背包求解器性能基准测试

在相同的随机实例上对比二维表格求解器和滚动数组求解器的耗时，
并校验两者给出的最优值完全一致。
"""

import json
import statistics
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..dynamic_programming.basic.knapsack import solve_table
from ..dynamic_programming.basic.rolling_knapsack import solve_rolling
from ..logging_setup import get_logger

Instance = Tuple[List[int], List[int], int]


@dataclass
class BenchmarkConfig:
    """基准测试配置"""
    sizes: List[int]
    iterations: int = 3
    max_weight: int = 50
    max_value: int = 1000
    capacity_ratio: float = 0.5  # 容量占物品总重量的比例


@dataclass
class BenchmarkResult:
    """单个求解器在单个规模上的测试结果"""
    solver: str
    item_count: int
    capacity: int
    max_value: int
    timings: List[float] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def summary(self) -> Dict[str, float]:
        """获取耗时统计"""
        return {
            "mean": statistics.mean(self.timings),
            "median": statistics.median(self.timings),
            "std": statistics.stdev(self.timings) if len(self.timings) > 1 else 0.0,
            "min": min(self.timings),
            "max": max(self.timings),
        }


class InstanceGenerator:
    """随机背包实例生成器"""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def generate(self, item_count: int, max_weight: int = 50, max_value: int = 1000,
                 capacity_ratio: float = 0.5) -> Instance:
        """生成 item_count 个物品，重量在 [1, max_weight]，价值在 [0, max_value]"""
        weights = self.rng.integers(1, max_weight + 1, size=item_count)
        values = self.rng.integers(0, max_value + 1, size=item_count)
        capacity = int(weights.sum() * capacity_ratio)
        return [int(w) for w in weights], [int(v) for v in values], capacity


class SolverBenchmark:
    """
    求解器对比基准测试

    对每个规模生成一个实例，两个求解器各运行 iterations 次。
    两个求解器结果不一致时抛出 RuntimeError。
    """

    def __init__(self, seed: Optional[int] = None,
                 solvers: Optional[Dict[str, Callable[[List[int], List[int], int], int]]] = None):
        self.logger = get_logger(__name__)
        self.generator = InstanceGenerator(seed)
        self.solvers = solvers or {
            "table": lambda w, v, c: solve_table(w, v, c).max_value,
            "rolling": solve_rolling,
        }
        self.results: List[BenchmarkResult] = []

    def compare(self, config: BenchmarkConfig) -> List[BenchmarkResult]:
        """运行对比测试并返回本次产生的结果"""
        produced: List[BenchmarkResult] = []
        for size in config.sizes:
            weights, values, capacity = self.generator.generate(
                size, config.max_weight, config.max_value, config.capacity_ratio
            )
            self.logger.info("benchmark.instance", items=size, capacity=capacity)

            answers = {}
            for name, solver in self.solvers.items():
                result = self._measure(name, solver, weights, values, capacity, config.iterations)
                answers[name] = result.max_value
                produced.append(result)

            if len(set(answers.values())) > 1:
                raise RuntimeError(f"solvers disagree on {size} items: {answers}")

        self.results.extend(produced)
        return produced

    def _measure(self, name: str, solver: Callable, weights: Sequence[int],
                 values: Sequence[int], capacity: int, iterations: int) -> BenchmarkResult:
        result = BenchmarkResult(solver=name, item_count=len(weights),
                                 capacity=capacity, max_value=0)
        for _ in range(max(1, iterations)):
            start = time.perf_counter()
            result.max_value = solver(weights, values, capacity)
            result.timings.append(time.perf_counter() - start)
        self.logger.info("benchmark.measured", solver=name, items=len(weights),
                         mean=result.summary()["mean"])
        return result

    def save(self, path: Union[str, Path]) -> Path:
        """把所有结果写入 JSON 文件"""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        payload = [{**asdict(r), "summary": r.summary()} for r in self.results]
        with open(target, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        return target
