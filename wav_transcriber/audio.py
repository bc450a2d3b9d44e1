"""WAV loading and normalization.

This module reads 16-bit PCM WAV files, checks that they are mono 16 kHz,
and converts them to float32 samples in [-1.0, 1.0).
"""

import logging

import numpy as np
import soundfile as sf

from .data_models import CHANNELS, PCM_SCALE, SAMPLE_RATE

logger = logging.getLogger(__name__)

PCM_SUBTYPE = "PCM_16"


def conversion_hint(path: str) -> str:
    """Return the ffmpeg command that produces a usable WAV at ``path``."""
    return f"ffmpeg -i input.mp3 -ar {SAMPLE_RATE} -ac {CHANNELS} -c:a pcm_s16le {path}"


def normalize_pcm16(samples: np.ndarray) -> np.ndarray:
    """Convert signed 16-bit samples to float32 by dividing by 32768.

    Args:
        samples: Integer samples as numpy array (1D, int16)

    Returns:
        float32 array of the same length and order
    """
    if samples.dtype != np.int16:
        raise TypeError(
            f"samples must be int16, got {samples.dtype}"
        )
    return samples.astype(np.float32) / np.float32(PCM_SCALE)


def load_audio(path: str) -> np.ndarray:
    """Load a mono 16 kHz 16-bit PCM WAV file.

    Args:
        path: Path to the WAV file

    Returns:
        Read-only float32 array of normalized samples

    Raises:
        ValueError: If the file cannot be decoded, is not 16-bit PCM, or is
            not mono 16 kHz
    """
    try:
        info = sf.info(path)
    except RuntimeError as e:
        raise ValueError(
            f"Error reading WAV file '{path}': {str(e)}"
        ) from e

    if info.channels != CHANNELS or info.samplerate != SAMPLE_RATE:
        raise ValueError(
            f"Audio must be mono 16kHz, got {info.channels} channel(s) at "
            f"{info.samplerate}Hz. Convert with:\n{conversion_hint(path)}"
        )

    if info.subtype != PCM_SUBTYPE:
        raise ValueError(
            f"Audio must be 16-bit PCM, got '{info.subtype}'. Convert with:\n"
            f"{conversion_hint(path)}"
        )

    try:
        samples, _ = sf.read(path, dtype="int16", always_2d=False)
    except RuntimeError as e:
        raise ValueError(
            f"Error decoding samples from '{path}': {str(e)}"
        ) from e

    audio = normalize_pcm16(samples)
    audio.flags.writeable = False

    logger.debug(
        f"Loaded {len(audio)} samples ({len(audio) / SAMPLE_RATE:.2f}s) from {path}"
    )

    return audio
