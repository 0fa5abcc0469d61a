"""
Utility functions for the lazy range benchmarks.

This module provides the deterministic seed generator, the benchmark registry
and runner, and helpers for measuring time and memory of single calls.
"""

import time
import gc
import logging
import tracemalloc
from typing import Any, Callable, Dict, List, Optional, Union

from models import BenchmarkParams, BenchmarkResult, BenchmarkRun, PerformanceSummary

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Registered benchmark entries, by name
BENCHMARKS: Dict[str, Callable[[], Any]] = {}

# Global performance tracking
_performance_metrics = {
    "operations": [],
    "total_time_ms": 0.0,
    "total_memory_mb": 0.0,
    "operation_count": 0
}

_LCG_MULTIPLIER = 1103515245
_LCG_INCREMENT = 12345
_LCG_MODULUS = 2 ** 31


class Randish:
    """
    Callable pseudo-random source: each call returns the next float in [0, 1).

    Deterministic for a given seed, which is what the benchmarks need; not
    suitable for anything that wants real randomness.
    """

    def __init__(self, seed: int = 0):
        self.seed = seed
        self._state = seed % _LCG_MODULUS

    def __call__(self) -> float:
        self._state = (self._state * _LCG_MULTIPLIER + _LCG_INCREMENT) % _LCG_MODULUS
        return self._state / _LCG_MODULUS

    def fork(self) -> "Randish":
        """A new generator starting over from this one's seed."""
        return Randish(self.seed)


def randish(seed: int = 0) -> Randish:
    return Randish(seed)


def bench(func: Optional[Callable[[], Any]] = None, *, name: Optional[str] = None):
    """
    Register a zero-argument benchmark entry.

    Usable bare (``@bench``) or with a name (``@bench(name="x")``).
    """
    def register(fn: Callable[[], Any]) -> Callable[[], Any]:
        key = name or fn.__name__
        if key in BENCHMARKS:
            raise ValueError(f"Benchmark already registered: {key}")
        BENCHMARKS[key] = fn
        logger.debug(f"Registered benchmark: {key}")
        return fn

    if func is not None:
        return register(func)
    return register


def _load_builtin_benchmarks():
    import benchmarks  # noqa: F401  (registers its entries on import)


def run_benchmark(entry: Union[str, Callable[[], Any]],
                  params: Optional[BenchmarkParams] = None) -> BenchmarkResult:
    """
    Call a benchmark entry repeatedly until the time budget or max_runs is used up.

    At least one timed run always happens. If a run raises, the error is logged
    and re-raised.
    """
    params = params or BenchmarkParams()
    if isinstance(entry, str):
        _load_builtin_benchmarks()
        if entry not in BENCHMARKS:
            raise KeyError(f"Unknown benchmark: {entry}")
        name, func = entry, BENCHMARKS[entry]
    else:
        name, func = getattr(entry, "__name__", repr(entry)), entry

    logger.info(f"Running benchmark {name} for up to {params.duration_seconds}s")

    runs: List[BenchmarkRun] = []
    result = None
    try:
        for _ in range(params.warmup_runs):
            func()

        start = time.perf_counter()
        while True:
            before = time.perf_counter()
            result = func()
            after = time.perf_counter()
            runs.append(BenchmarkRun(index=len(runs), elapsed_ms=(after - before) * 1000))

            if params.max_runs is not None and len(runs) >= params.max_runs:
                break
            if after - start >= params.duration_seconds:
                break
    except Exception as e:
        logger.error(f"Benchmark {name} failed after {len(runs)} runs: {e}")
        raise

    outcome = BenchmarkResult(
        name=name,
        success=True,
        runs=runs,
        result_size=len(result) if hasattr(result, "__len__") else None
    )
    logger.info(f"Benchmark {name}: {len(runs)} runs, mean {outcome.mean_ms:.2f}ms")
    return outcome


def run_all_benchmarks(params: Optional[BenchmarkParams] = None) -> List[BenchmarkResult]:
    """Run every registered benchmark (or the ones params.names selects), in name order"""
    params = params or BenchmarkParams()
    _load_builtin_benchmarks()

    selected = sorted(set(params.get_names_list())) or sorted(BENCHMARKS)
    unknown = [n for n in selected if n not in BENCHMARKS]
    if unknown:
        raise KeyError(f"Unknown benchmarks: {unknown}")

    results = []
    for name in selected:
        try:
            results.append(run_benchmark(name, params))
        except Exception as e:
            results.append(BenchmarkResult(name=name, success=False, error=str(e)))
    return results


def measure_performance(operation_name: str, func, *args, **kwargs) -> Dict[str, Any]:
    """Measure performance of a function call with memory tracking"""

    # Start memory tracking
    tracemalloc.start()
    gc.collect()

    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)

        execution_time_ms = (time.perf_counter() - start_time) * 1000
        current, peak = tracemalloc.get_traced_memory()
        memory_mb = peak / 1024 / 1024

        performance_info = {
            "operation": operation_name,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": memory_mb,
            "success": True,
            "result_size": len(result) if hasattr(result, "__len__") else None,
            "timestamp": time.time()
        }
        _record(performance_info)
        return performance_info

    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        current, peak = tracemalloc.get_traced_memory()
        memory_mb = peak / 1024 / 1024

        _record({
            "operation": operation_name,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": memory_mb,
            "success": False,
            "error": str(e),
            "timestamp": time.time()
        })
        raise

    finally:
        tracemalloc.stop()


def _record(performance_info: Dict[str, Any]):
    _performance_metrics["operations"].append(performance_info)
    _performance_metrics["total_time_ms"] += performance_info["execution_time_ms"]
    _performance_metrics["total_memory_mb"] += performance_info["memory_usage_mb"]
    _performance_metrics["operation_count"] += 1


def get_performance_summary() -> PerformanceSummary:
    """Get summary of all performance metrics"""
    count = _performance_metrics["operation_count"]
    if count == 0:
        return PerformanceSummary()

    return PerformanceSummary(
        total_operations=count,
        total_time_ms=_performance_metrics["total_time_ms"],
        total_memory_mb=_performance_metrics["total_memory_mb"],
        avg_time_ms=_performance_metrics["total_time_ms"] / count,
        avg_memory_mb=_performance_metrics["total_memory_mb"] / count
    )


def clear_performance_metrics():
    """Clear all performance metrics"""
    global _performance_metrics
    _performance_metrics = {
        "operations": [],
        "total_time_ms": 0.0,
        "total_memory_mb": 0.0,
        "operation_count": 0
    }
