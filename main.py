import math
from time import perf_counter

from lazy import Range
from models import BenchmarkParams
from sorting import ascending, is_sorted, quick_sort
from utils import randish, run_all_benchmarks


def expensive_transform(x):
    # Print so laziness is visible
    print(f"  computing floor(5000 * {x:.4f}) ...")
    return math.floor(5_000 * x)


print("\n--- Demo: laziness (no work until iterated) ---")
pipeline = (
    Range.from_factory(lambda: randish(7))   # endless, restartable source
    .map(expensive_transform)
    .limit(5)
)
print(f"Constructed {pipeline!r}. Nothing computed yet.")

print("\nMaterializing (should compute exactly 5 items):")
t0 = perf_counter()
out = pipeline.materialize()
t1 = perf_counter()
print(f"Result: {out}")
print(f"Time: {(t1 - t0) * 1000:.2f}ms\n")

print("--- Demo: restartable (second pass gives the same values) ---")
print(f"Same again: {pipeline.materialize() == out}\n")

print("--- Demo: comparator sort ---")
ordered = quick_sort(out, ascending)
print(f"Sorted: {ordered} (sorted={is_sorted(ordered, ascending)})\n")

print("--- Benchmarks (per-run wall time, 1s budget each) ---")
for result in run_all_benchmarks(BenchmarkParams(duration_seconds=1.0)):
    print(f"\n{result.name}:")
    if result.success:
        print(result.format_line())
    else:
        print(f"  failed: {result.error}")
