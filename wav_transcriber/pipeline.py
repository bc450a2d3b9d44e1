"""Main transcription pipeline for wav-transcriber.

This module runs the four blocking phases of a transcription (load model,
load audio, transcribe, save) after checking that the inputs exist.
"""

import logging
from typing import Callable

from .audio import load_audio
from .data_models import SAMPLE_RATE, TranscriptionInfo
from .engine import InferenceEngine, WhisperCppEngine, build_decoding_config
from .preconditions import check_inputs
from .profiler import PerformanceProfiler
from .report import write_report

logger = logging.getLogger(__name__)

EngineFactory = Callable[..., InferenceEngine]


def transcribe_file(
    model_path: str,
    audio_path: str,
    output_path: str,
    engine_factory: EngineFactory = WhisperCppEngine,
) -> TranscriptionInfo:
    """Transcribe a WAV file and write the report.

    Example:
        >>> info = transcribe_file(
        ...     "models/ggml-large-v3.bin", "audio_en.wav", "transcription_en.txt"
        ... )
        >>> print(f"{info.num_segments} segments in {info.processing_time:.2f}s")

    Args:
        model_path: Path to the ggml model file
        audio_path: Path to a mono 16 kHz 16-bit PCM WAV file
        output_path: Path of the report to (over)write
        engine_factory: Called as ``engine_factory(model_path)`` to load
            the model (default: WhisperCppEngine)

    Returns:
        TranscriptionInfo for the run

    Raises:
        FileNotFoundError: If the model or audio file is missing
        ValueError: If the audio format is unsupported or cannot be decoded
        RuntimeError: If the model cannot be loaded or inference fails
        OSError: If the report cannot be written
    """
    check_inputs(model_path, audio_path)

    logger.info("[1/4] Loading model...")
    engine = engine_factory(model_path)

    try:
        logger.info("[2/4] Analyzing audio...")
        audio = load_audio(audio_path)
        audio_duration = len(audio) / SAMPLE_RATE

        config = build_decoding_config()

        logger.info("[3/4] Transcribing...")
        profiler = PerformanceProfiler()
        start_time = profiler.start()
        result = engine.transcribe(audio, config)
    finally:
        engine.close()

    logger.info("[4/4] Saving...")
    processing_time = write_report(output_path, result, start_time)

    stats = profiler.calculate_stats(
        audio_duration=audio_duration,
        processing_time=processing_time,
        num_segments=result.segment_count(),
    )
    logger.debug(str(stats))

    logger.info(f"Done! Results saved to {output_path}")

    return TranscriptionInfo(
        duration=audio_duration,
        num_segments=result.segment_count(),
        processing_time=processing_time,
        output_path=output_path,
    )
