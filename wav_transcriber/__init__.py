"""wav-transcriber: timestamped transcripts of WAV files with whisper.cpp.

This module reads a mono 16 kHz WAV file, runs a whisper.cpp model over it
with fixed beam-search settings, and writes the segments with their start
and end times to a text file.

Example:
    >>> from wav_transcriber import transcribe_file
    >>> info = transcribe_file(
    ...     "models/ggml-large-v3.bin", "audio_en.wav", "transcription_en.txt"
    ... )
    >>> print(f"{info.num_segments} segments, {info.processing_time:.2f}s")
"""

from .audio import load_audio, normalize_pcm16
from .data_models import DecodingConfig, Segment, TranscriptionInfo
from .engine import (
    InferenceEngine,
    TranscriptionResult,
    WhisperCppEngine,
    build_decoding_config,
)
from .pipeline import transcribe_file
from .preconditions import check_inputs
from .profiler import PerformanceProfiler, PerformanceStats
from .report import format_processing_time, format_segment_line, write_report

__version__ = "0.1.0"

__all__ = [
    "DecodingConfig",
    "InferenceEngine",
    "PerformanceProfiler",
    "PerformanceStats",
    "Segment",
    "TranscriptionInfo",
    "TranscriptionResult",
    "WhisperCppEngine",
    "build_decoding_config",
    "check_inputs",
    "format_processing_time",
    "format_segment_line",
    "load_audio",
    "normalize_pcm16",
    "transcribe_file",
    "write_report",
]
