"""
Pydantic Models

Configuration and result models for the benchmark harness.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class BenchmarkParams(BaseModel):
    """Parameters for a benchmark session"""
    duration_seconds: float = Field(
        1.0,
        description="Time budget per benchmark; runs repeat until it is spent",
        gt=0.0,
        le=60.0
    )
    max_runs: Optional[int] = Field(
        None,
        description="Stop after this many timed runs even if time is left",
        ge=1
    )
    warmup_runs: int = Field(
        0,
        description="Untimed runs before measuring",
        ge=0,
        le=100
    )
    names: Optional[str] = Field(
        None,
        description="Comma-separated benchmark names to run (default: all)",
        examples=["quick_sort_5000"]
    )

    @field_validator('names')
    @classmethod
    def validate_names(cls, v):
        """Reject a filter that names nothing"""
        if v is not None:
            names = [n.strip() for n in v.split(",") if n.strip()]
            if not names:
                raise ValueError("names cannot be empty")
        return v

    def get_names_list(self) -> List[str]:
        """Get the benchmark name filter as a list"""
        if not self.names:
            return []
        return [n.strip() for n in self.names.split(",") if n.strip()]


class BenchmarkRun(BaseModel):
    """One timed call of a benchmark entry."""
    index: int = Field(..., ge=0, description="Zero-based run number")
    elapsed_ms: float = Field(..., ge=0.0, description="Wall time of the call in milliseconds")


class BenchmarkResult(BaseModel):
    """Timings for one benchmark entry."""
    name: str = Field(..., description="Registered benchmark name")
    success: bool = Field(..., description="Whether every run completed")
    runs: List[BenchmarkRun] = Field(default_factory=list, description="Timed runs in order")
    result_size: Optional[int] = Field(None, description="len() of the last returned value, if any")
    error: Optional[str] = Field(None, description="Error message when a run failed")

    @property
    def run_times_ms(self) -> List[float]:
        return [r.elapsed_ms for r in self.runs]

    @property
    def min_ms(self) -> float:
        return min(self.run_times_ms, default=0.0)

    @property
    def max_ms(self) -> float:
        return max(self.run_times_ms, default=0.0)

    @property
    def mean_ms(self) -> float:
        times = self.run_times_ms
        return sum(times) / len(times) if times else 0.0

    def format_line(self) -> str:
        """Per-run timings on one line, e.g. '  12ms  11ms  11ms'."""
        return "".join(f"  {int(ms)}ms" for ms in self.run_times_ms)


class PerformanceSummary(BaseModel):
    """Aggregate of measure_performance() calls."""
    total_operations: int = Field(0, ge=0)
    total_time_ms: float = Field(0.0, ge=0.0)
    total_memory_mb: float = Field(0.0, ge=0.0)
    avg_time_ms: float = Field(0.0, ge=0.0)
    avg_memory_mb: float = Field(0.0, ge=0.0)
