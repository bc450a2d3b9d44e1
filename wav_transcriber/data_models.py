"""Core data models for wav-transcriber.

This module defines the data structures used throughout the wav-transcriber
pipeline for representing decoding parameters, transcription segments, and
transcription metadata.
"""

from dataclasses import dataclass
from typing import Any, Dict

SAMPLE_RATE = 16000
CHANNELS = 1
PCM_SCALE = 32768.0
TICKS_PER_SECOND = 100.0

SAMPLING_STRATEGIES = ("greedy", "beam_search")


@dataclass
class Segment:
    """Represents a transcribed segment with timing information.

    Attributes:
        id: Index of the segment in the transcription result
        start: Start time in seconds
        end: End time in seconds
        text: Transcribed text content
    """
    id: int
    start: float
    end: float
    text: str


@dataclass(frozen=True)
class DecodingConfig:
    """Fixed decoding parameters for a single inference call.

    Attributes:
        strategy: Sampling strategy ("greedy" or "beam_search")
        beam_size: Number of hypotheses kept by beam search
        patience: Beam search patience factor
        language: Forced language code
        translate: Translate to English instead of transcribing
        suppress_blank: Suppress blank outputs at the start of sampling
        suppress_non_speech: Suppress non-speech tokens
        token_timestamps: Compute token-level timestamps
    """
    strategy: str = "beam_search"
    beam_size: int = 5
    patience: float = 1.5
    language: str = "en"
    translate: bool = False
    suppress_blank: bool = True
    suppress_non_speech: bool = True
    token_timestamps: bool = True

    def __post_init__(self):
        if self.strategy not in SAMPLING_STRATEGIES:
            raise ValueError(
                f"strategy must be 'greedy' or 'beam_search', got '{self.strategy}'"
            )

        if not isinstance(self.beam_size, int) or isinstance(self.beam_size, bool):
            raise TypeError(
                f"beam_size must be int, got {type(self.beam_size).__name__}"
            )
        if self.beam_size < 1:
            raise ValueError(
                f"beam_size must be positive integer, got {self.beam_size}"
            )

        if not isinstance(self.patience, (int, float)) or isinstance(self.patience, bool):
            raise TypeError(
                f"patience must be numeric, got {type(self.patience).__name__}"
            )
        if self.patience <= 0:
            raise ValueError(
                f"patience must be positive, got {self.patience}"
            )

        if not isinstance(self.language, str):
            raise TypeError(
                f"language must be str, got {type(self.language).__name__}"
            )
        if not self.language:
            raise ValueError("language cannot be empty string")

    def to_engine_params(self) -> Dict[str, Any]:
        """Map the config onto whisper.cpp full-params names."""
        return {
            "beam_search": {"beam_size": self.beam_size, "patience": self.patience},
            "language": self.language,
            "translate": self.translate,
            "suppress_blank": self.suppress_blank,
            "suppress_nst": self.suppress_non_speech,
            "token_timestamps": self.token_timestamps,
        }


@dataclass
class TranscriptionInfo:
    """Metadata about the transcription process.

    Attributes:
        duration: Total audio duration in seconds
        num_segments: Number of segments returned by the engine
        processing_time: Wall-clock time from inference start to report end
        output_path: Path of the written report
    """
    duration: float
    num_segments: int
    processing_time: float
    output_path: str
