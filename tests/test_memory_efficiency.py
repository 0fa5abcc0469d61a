import gc
import tracemalloc

from lazy import Range
from utils import randish


class TestMemoryEfficiency:
    """Test that memory scales with output size, not upstream size"""

    def test_endless_source_small_output(self):
        """Test that skipping deep into an endless source keeps memory flat"""
        gc.collect()
        tracemalloc.start()
        baseline = tracemalloc.get_traced_memory()[0]

        result = (
            Range.from_(randish(11))
            .map(lambda x: [x] * 100)   # sizeable per-item payload
            .skip(50_000)
            .limit(5)
            .to_list()
        )

        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        memory_used = peak - baseline
        assert len(result) == 5, f"Expected 5 results, got {len(result)}"
        # 50k skipped payloads would be ~40MB if they were kept around
        assert memory_used < 5_000_000, f"Used too much memory: {memory_used} bytes"

    def test_materialized_size_matches_limit(self):
        """Test that materialize holds exactly the limited output"""
        result = Range.from_(randish(2)).limit(5000).materialize()
        assert len(result) == 5000
