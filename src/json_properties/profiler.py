"""Performance profiler for conversion runs."""

import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass


@dataclass
class PerformanceMetrics:
    """Performance metrics for a conversion run."""
    operation_name: str
    duration: float
    input_size: int
    output_lines: int
    memory_start_mb: float
    memory_peak_mb: float
    memory_end_mb: float
    throughput_mbps: float


class PerformanceProfiler:
    """
    Profiler recording duration, memory and throughput of conversions.

    Memory is sampled from the current process RSS via psutil.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: float = 0
        self.peak_memory: float = 0
        self.input_size: int = 0

    def start_profiling(self, operation_name: str, input_size: int = 0) -> None:
        """
        Start profiling an operation.

        Args:
            operation_name: Name of the operation
            input_size: Size of input data in bytes
        """
        self.current_operation = operation_name
        self.start_time = time.perf_counter()
        self.input_size = input_size
        self.start_memory = self._current_memory_mb()
        self.peak_memory = self.start_memory

        self.logger.debug(f"Started profiling: {operation_name}")

    def sample_performance(self) -> None:
        """Sample current memory usage."""
        if not self.current_operation:
            return

        self.peak_memory = max(self.peak_memory, self._current_memory_mb())

    def stop_profiling(self, output_lines: int = 0) -> PerformanceMetrics:
        """
        Stop profiling and return metrics.

        Args:
            output_lines: Number of property lines written

        Returns:
            PerformanceMetrics object with collected data
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        duration = time.perf_counter() - self.start_time
        end_memory = self._current_memory_mb()
        self.peak_memory = max(self.peak_memory, end_memory)
        throughput = (self.input_size / 1024 / 1024) / duration if duration > 0 else 0  # MB/s

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            duration=duration,
            input_size=self.input_size,
            output_lines=output_lines,
            memory_start_mb=self.start_memory,
            memory_peak_mb=self.peak_memory,
            memory_end_mb=end_memory,
            throughput_mbps=throughput
        )

        self.metrics_history.append(metrics)

        self.logger.debug(f"Performance Summary - {self.current_operation}:")
        self.logger.debug(f"  Duration: {duration:.3f}s")
        self.logger.debug(f"  Throughput: {throughput:.2f} MB/s")
        self.logger.debug(f"  Memory Peak: {self.peak_memory:.1f} MB")
        self.logger.debug(f"  Lines Written: {output_lines}")

        self._reset()
        return metrics

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all recorded metrics.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        count = len(self.metrics_history)
        return {
            "total_operations": count,
            "total_duration": sum(m.duration for m in self.metrics_history),
            "total_input_mb": sum(m.input_size for m in self.metrics_history) / 1024 / 1024,
            "total_output_lines": sum(m.output_lines for m in self.metrics_history),
            "average_memory_peak_mb": sum(m.memory_peak_mb for m in self.metrics_history) / count
        }

    def _current_memory_mb(self) -> float:
        try:
            return psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.warning(f"Performance sampling failed: {e}")
            return self.peak_memory

    def _reset(self) -> None:
        self.current_operation = None
        self.start_time = None
        self.input_size = 0
