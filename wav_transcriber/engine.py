"""Speech-recognition engine interface.

This module keeps the inference engine behind a narrow interface: an engine
loads its model on construction and runs one blocking transcription over a
whole sample buffer. Results are read back through index-based accessors,
so the pipeline never depends on how an engine stores its segments.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterator, List, Sequence, Tuple

import numpy as np
import _pywhispercpp as pw

from .data_models import TICKS_PER_SECOND, DecodingConfig, Segment

logger = logging.getLogger(__name__)

# whisper_sampling_strategy members
_SAMPLING_STRATEGIES = {
    "greedy": "WHISPER_SAMPLING_GREEDY",
    "beam_search": "WHISPER_SAMPLING_BEAM_SEARCH",
}


def build_decoding_config() -> DecodingConfig:
    """Return the fixed decoding configuration used for every run.

    Beam search with width 5 and patience 1.5, English forced, no
    translation, blank and non-speech suppression on, timestamps on.
    """
    return DecodingConfig(
        strategy="beam_search",
        beam_size=5,
        patience=1.5,
        language="en",
        translate=False,
        suppress_blank=True,
        suppress_non_speech=True,
        token_timestamps=True,
    )


class TranscriptionResult:
    """Read-only view over the segments produced by one inference call.

    Segment times are kept in the engine's native centisecond ticks.

    Args:
        raw_segments: (start_tick, end_tick, text) tuples in engine order
    """

    def __init__(self, raw_segments: Sequence[Tuple[int, int, str]]):
        self._segments = tuple(raw_segments)

    def segment_count(self) -> int:
        return len(self._segments)

    def segment_text(self, index: int) -> str:
        return self._segment(index)[2]

    def segment_start_tick(self, index: int) -> int:
        return self._segment(index)[0]

    def segment_end_tick(self, index: int) -> int:
        return self._segment(index)[1]

    def segments(self) -> Iterator[Segment]:
        """Yield segments with times converted to seconds."""
        for i in range(self.segment_count()):
            yield Segment(
                id=i,
                start=self.segment_start_tick(i) / TICKS_PER_SECOND,
                end=self.segment_end_tick(i) / TICKS_PER_SECOND,
                text=self.segment_text(i),
            )

    def _segment(self, index: int) -> Tuple[int, int, str]:
        if not 0 <= index < len(self._segments):
            raise IndexError(
                f"segment index {index} out of range [0, {len(self._segments)})"
            )
        return self._segments[index]


class InferenceEngine(ABC):
    """Interface for speech-recognition engines.

    Implementations load their model in ``__init__`` and raise
    ``RuntimeError`` if loading fails.
    """

    @abstractmethod
    def transcribe(
        self,
        samples: np.ndarray,
        config: DecodingConfig,
    ) -> TranscriptionResult:
        """Run one blocking transcription over the full buffer.

        Args:
            samples: Normalized float32 samples, mono 16 kHz
            config: Decoding parameters

        Returns:
            TranscriptionResult with the segments in order

        Raises:
            RuntimeError: If the engine fails
        """

    def close(self) -> None:
        """Release engine resources. The default does nothing."""


class WhisperCppEngine(InferenceEngine):
    """whisper.cpp engine driven through the pywhispercpp bindings.

    The return codes of the native calls are checked, so a model that fails
    to load or an inference call that fails raises ``RuntimeError`` instead
    of producing an empty result.

    Example:
        >>> engine = WhisperCppEngine("models/ggml-large-v3.bin")
        >>> result = engine.transcribe(samples, build_decoding_config())
        >>> for segment in result.segments():
        ...     print(f"[{segment.start:.2f}s-{segment.end:.2f}s] {segment.text}")

    Attributes:
        model_path: Path of the loaded ggml model
    """

    def __init__(self, model_path: str):
        """Load a ggml model.

        Args:
            model_path: Path to the ggml model file

        Raises:
            RuntimeError: If the model cannot be loaded
        """
        self.model_path = model_path

        logger.debug(f"Loading whisper.cpp model '{model_path}'")

        try:
            self._ctx = pw.whisper_init_from_file_with_params(
                model_path, pw.whisper_context_default_params()
            )
        except Exception as e:
            raise RuntimeError(
                f"Error loading model '{model_path}': {str(e)}"
            ) from e

        if self._ctx is None:
            raise RuntimeError(
                f"Error loading model '{model_path}': whisper.cpp returned no context"
            )

    def transcribe(
        self,
        samples: np.ndarray,
        config: DecodingConfig,
    ) -> TranscriptionResult:
        if self._ctx is None:
            raise RuntimeError("engine has been closed")
        if samples.ndim != 1:
            raise ValueError(
                f"samples must be 1-dimensional, got shape {samples.shape}"
            )

        params = self._build_params(config)

        # whisper_full reads the buffer in place
        audio = np.ascontiguousarray(samples, dtype=np.float32)
        logger.debug(f"Running whisper.cpp on {audio.size} samples")

        try:
            status = pw.whisper_full(self._ctx, params, audio, audio.size)
        except Exception as e:
            raise RuntimeError(
                f"Error during transcription: {str(e)}"
            ) from e

        if status != 0:
            raise RuntimeError(
                f"Error during transcription: whisper_full returned {status}"
            )

        raw: List[Tuple[int, int, str]] = []
        for i in range(pw.whisper_full_n_segments(self._ctx)):
            raw.append((
                int(pw.whisper_full_get_segment_t0(self._ctx, i)),
                int(pw.whisper_full_get_segment_t1(self._ctx, i)),
                pw.whisper_full_get_segment_text(self._ctx, i),
            ))
        return TranscriptionResult(raw)

    def close(self) -> None:
        """Free the native context. Safe to call more than once."""
        if self._ctx is not None:
            pw.whisper_free(self._ctx)
            self._ctx = None

    def _build_params(self, config: DecodingConfig):
        strategy = getattr(pw.whisper_sampling_strategy, _SAMPLING_STRATEGIES[config.strategy])
        params = pw.whisper_full_default_params(strategy)
        for name, value in config.to_engine_params().items():
            setattr(params, name, value)
        params.print_progress = False
        params.print_realtime = False
        return params
