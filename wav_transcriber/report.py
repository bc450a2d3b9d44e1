"""Transcript report writing."""

import logging
import time

from .data_models import TICKS_PER_SECOND
from .engine import TranscriptionResult

logger = logging.getLogger(__name__)

REPORT_HEADER = "Transcription results:"


def format_segment_line(start: float, end: float, text: str) -> str:
    """Format one segment as ``[start.2fs-end.2fs] text``."""
    return f"[{start:.2f}s-{end:.2f}s] {text.strip()}"


def format_processing_time(elapsed: float) -> str:
    return f"Processing time: {elapsed:.2f} sec"


def write_report(path: str, result: TranscriptionResult, start_time: float) -> float:
    """Write the transcript and processing time to ``path``.

    Any existing file at ``path`` is overwritten. The processing time is the
    ``time.perf_counter()`` delta from ``start_time`` to the moment the last
    segment has been written.

    Args:
        path: Output file path
        result: Transcription result to report
        start_time: ``time.perf_counter()`` value taken before inference

    Returns:
        The elapsed time written to the report, in seconds

    Raises:
        OSError: If the file cannot be created or written
    """
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{REPORT_HEADER}\n")

        num_segments = result.segment_count()
        for i in range(num_segments):
            text = result.segment_text(i)
            start = result.segment_start_tick(i) / TICKS_PER_SECOND
            end = result.segment_end_tick(i) / TICKS_PER_SECOND

            f.write(format_segment_line(start, end, text) + "\n")

        elapsed = time.perf_counter() - start_time
        f.write(f"\n{format_processing_time(elapsed)}\n")

    logger.debug(f"Wrote {num_segments} segment(s) to {path}")

    return elapsed
