"""Shared fixtures for wav-transcriber tests."""

from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
import pytest
import soundfile as sf

from wav_transcriber.engine import InferenceEngine, TranscriptionResult


def write_wav(
    path: Path,
    samples: np.ndarray,
    sample_rate: int = 16000,
    subtype: str = "PCM_16",
) -> Path:
    """Write int16 samples (1D mono or 2D frames x channels) to a WAV file."""
    sf.write(str(path), samples, sample_rate, subtype=subtype)
    return path


def generate_test_audio(duration=1.0, sr=16000):
    """Generate a synthetic int16 tone."""
    t = np.linspace(0, duration, int(sr * duration), endpoint=False)
    audio = 0.5 * np.sin(2 * np.pi * 440 * t)
    return (audio * 32767).astype(np.int16)


class FakeEngine(InferenceEngine):
    """Engine that returns canned segments and records its calls."""

    def __init__(
        self,
        model_path: str,
        segments: Optional[List[Tuple[int, int, str]]] = None,
        error: Optional[Exception] = None,
    ):
        self.model_path = model_path
        self.closed = False
        self.segments = segments if segments is not None else []
        self.error = error
        self.calls = []

    def transcribe(self, samples, config):
        self.calls.append((samples, config))
        if self.error is not None:
            raise self.error
        return TranscriptionResult(self.segments)

    def close(self):
        self.closed = True


class FakeEngineFactory:
    """Callable engine factory that remembers the engines it built."""

    def __init__(self, segments=None, error=None):
        self.segments = segments
        self.error = error
        self.engines = []

    def __call__(self, model_path):
        engine = FakeEngine(model_path, self.segments, self.error)
        self.engines.append(engine)
        return engine


@pytest.fixture
def model_file(tmp_path):
    path = tmp_path / "models" / "ggml-large-v3.bin"
    path.parent.mkdir()
    path.write_bytes(b"ggml")
    return path


@pytest.fixture
def mono_wav(tmp_path):
    return write_wav(tmp_path / "audio_en.wav", generate_test_audio())


@pytest.fixture
def sample_segments():
    return [
        (0, 150, " Hello there. "),
        (150, 320, " How are you?"),
    ]
