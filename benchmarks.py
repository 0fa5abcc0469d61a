"""Built-in benchmark entries. Each one is a zero-argument callable returning its result."""

import math

from lazy import Range
from sorting import ascending, quick_sort
from utils import bench, randish


@bench
def quick_sort_5000():
    nums = (
        Range.from_(randish())
        .map(lambda x: math.floor(5_000 * x))
        .limit(5_000)
        .materialize()
    )
    return quick_sort(nums, ascending)
