"""Performance profiling utilities.

This module provides tools for measuring the wall-clock cost of a
transcription run relative to the length of the audio.
"""

import time
from dataclasses import dataclass


@dataclass
class PerformanceStats:
    """Performance statistics for transcription.

    Attributes:
        audio_duration: Total audio duration in seconds
        processing_time: Wall-clock processing time in seconds
        rtf: Real-time factor (processing_time / audio_duration)
        throughput: Audio seconds processed per wall-clock second
        num_segments: Number of segments produced
    """
    audio_duration: float
    processing_time: float
    rtf: float
    throughput: float
    num_segments: int

    def __str__(self) -> str:
        return (
            f"Performance: {self.audio_duration:.1f}s audio in {self.processing_time:.2f}s "
            f"(RTF: {self.rtf:.3f}, throughput: {self.throughput:.1f}x, "
            f"segments: {self.num_segments})"
        )


class PerformanceProfiler:
    """Profiles transcription performance.

    Example:
        >>> profiler = PerformanceProfiler()
        >>> start_time = profiler.start()
        >>> result = engine.transcribe(samples, config)
        >>> elapsed = write_report(path, result, start_time)
        >>> stats = profiler.calculate_stats(10.0, elapsed, result.segment_count())
        >>> print(stats)
    """

    def __init__(self):
        self.start_time = None

    def start(self) -> float:
        """Record the start of the timed region and return it."""
        self.start_time = time.perf_counter()
        return self.start_time

    @staticmethod
    def calculate_stats(
        audio_duration: float,
        processing_time: float,
        num_segments: int,
    ) -> PerformanceStats:
        """Calculate performance statistics.

        Args:
            audio_duration: Total audio duration in seconds
            processing_time: Wall-clock processing time in seconds
            num_segments: Number of segments produced

        Returns:
            PerformanceStats object with calculated metrics
        """
        rtf = processing_time / audio_duration if audio_duration > 0 else 0.0
        throughput = audio_duration / processing_time if processing_time > 0 else 0.0

        return PerformanceStats(
            audio_duration=audio_duration,
            processing_time=processing_time,
            rtf=rtf,
            throughput=throughput,
            num_segments=num_segments,
        )
