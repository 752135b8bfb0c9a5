"""Performance profiler for pipeline stages."""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import psutil


@dataclass
class StageMetrics:
    """Performance metrics for one pipeline stage."""
    stage_name: str
    duration: float
    input_size: int
    memory_start_mb: float
    memory_end_mb: float

    @property
    def memory_delta_mb(self) -> float:
        return self.memory_end_mb - self.memory_start_mb


class PerformanceProfiler:
    """
    Records duration and resident memory of each pipeline stage.

    When disabled, ``profile_stage`` is a no-op so callers can wrap stages
    unconditionally.
    """

    def __init__(self, enabled: bool = False, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            enabled: Whether stages are measured
            logger: Optional logger instance
        """
        self.enabled = enabled
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[StageMetrics] = []
        self._process = psutil.Process() if enabled else None

    @contextmanager
    def profile_stage(self, stage_name: str, input_size: int = 0):
        """
        Context manager for profiling one stage.

        Args:
            stage_name: Name of the stage being profiled
            input_size: Size of the stage input, in bytes or nodes
        """
        if not self.enabled:
            yield self
            return

        start_memory = self._memory_mb()
        start_time = time.perf_counter()
        self.logger.debug(f"Started profiling: {stage_name}")
        try:
            yield self
        finally:
            metrics = StageMetrics(
                stage_name=stage_name,
                duration=time.perf_counter() - start_time,
                input_size=input_size,
                memory_start_mb=start_memory,
                memory_end_mb=self._memory_mb(),
            )
            self.metrics_history.append(metrics)
            self.logger.debug(f"Stage {stage_name} took {metrics.duration * 1000:.2f}ms")

    def stage_timings(self) -> Dict[str, float]:
        """Duration in seconds of the latest run of each stage."""
        return {m.stage_name: m.duration for m in self.metrics_history}

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all recorded stages.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics_history:
            return {"total_stages": 0}

        return {
            "total_stages": len(self.metrics_history),
            "total_duration": sum(m.duration for m in self.metrics_history),
            "memory_peak_mb": max(m.memory_end_mb for m in self.metrics_history),
            "stages": [
                {
                    "name": m.stage_name,
                    "duration": m.duration,
                    "input_size": m.input_size,
                    "memory_delta_mb": m.memory_delta_mb,
                }
                for m in self.metrics_history
            ],
        }

    def format_summary(self) -> List[str]:
        """Human-readable summary lines."""
        summary = self.get_performance_summary()
        if not summary["total_stages"]:
            return ["No stages profiled"]

        lines = [f"Performance Summary ({summary['total_duration'] * 1000:.2f}ms total, "
                 f"peak memory {summary['memory_peak_mb']:.1f} MB):"]
        for stage in summary["stages"]:
            lines.append(f"  {stage['name']}: {stage['duration'] * 1000:.2f}ms, "
                         f"input {stage['input_size']}, "
                         f"memory {stage['memory_delta_mb']:+.1f} MB")
        return lines

    def reset(self) -> None:
        self.metrics_history = []

    def _memory_mb(self) -> float:
        return self._process.memory_info().rss / 1024 / 1024
