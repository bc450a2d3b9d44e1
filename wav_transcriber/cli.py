"""Command-line entry point.

Paths are fixed: the model is read from ``models/ggml-large-v3.bin``, the
audio from ``audio_en.wav``, and the transcript is written to
``transcription_en.txt`` in the working directory.
"""

import argparse
import logging
import sys

from .pipeline import transcribe_file

MODEL_PATH = "models/ggml-large-v3.bin"
AUDIO_PATH = "audio_en.wav"
OUTPUT_PATH = "transcription_en.txt"

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    # Only the progress lines reach the console unless --verbose is given
    logging.getLogger("pywhispercpp").setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            f"Transcribe {AUDIO_PATH} with the whisper.cpp model {MODEL_PATH} "
            f"and write timestamped segments to {OUTPUT_PATH}."
        )
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output",
    )
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        transcribe_file(MODEL_PATH, AUDIO_PATH, OUTPUT_PATH)
    except (FileNotFoundError, ValueError, RuntimeError, OSError) as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
