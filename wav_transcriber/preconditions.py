"""Existence checks for the model and audio inputs."""

import logging
import os

logger = logging.getLogger(__name__)

MODEL_DOWNLOAD_URL = "https://huggingface.co/ggerganov/whisper.cpp/resolve/main"


def check_inputs(model_path: str, audio_path: str) -> None:
    """Confirm that both input files exist.

    The model is checked first, so a missing model is reported before the
    audio file is looked at.

    Args:
        model_path: Path to the ggml model file
        audio_path: Path to the WAV file

    Raises:
        FileNotFoundError: If either file is missing
    """
    if not os.path.exists(model_path):
        model_name = os.path.basename(model_path)
        raise FileNotFoundError(
            f"Model {model_path} not found! Download it with:\n"
            f"wget {MODEL_DOWNLOAD_URL}/{model_name} -O {model_path}"
        )

    if not os.path.exists(audio_path):
        raise FileNotFoundError(f"Audio file {audio_path} not found!")

    logger.debug(f"Inputs present: model={model_path}, audio={audio_path}")
