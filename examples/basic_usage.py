"""Basic usage example for wav-transcriber.

This example demonstrates:
1. Loading and checking a WAV file
2. Running the engine directly and reading segments
3. Running the whole pipeline
"""

from wav_transcriber import (
    PerformanceProfiler,
    WhisperCppEngine,
    build_decoding_config,
    load_audio,
    transcribe_file,
)

MODEL_PATH = "models/ggml-large-v3.bin"
AUDIO_PATH = "audio_en.wav"

# =============================================================================
# Example 1: Engine only
# =============================================================================
print("=" * 70)
print("Example 1: Engine only")
print("=" * 70)

try:
    audio = load_audio(AUDIO_PATH)
    print(f"Audio duration: {len(audio) / 16000:.2f}s")

    engine = WhisperCppEngine(MODEL_PATH)
    try:
        result = engine.transcribe(audio, build_decoding_config())
    finally:
        engine.close()

    for segment in result.segments():
        print(f"[{segment.start:6.2f}s - {segment.end:6.2f}s] {segment.text.strip()}")

except (ValueError, RuntimeError) as e:
    print(f"Error during transcription: {e}")

# =============================================================================
# Example 2: Full pipeline
# =============================================================================
print("\n" + "=" * 70)
print("Example 2: Full pipeline")
print("=" * 70)

try:
    info = transcribe_file(MODEL_PATH, AUDIO_PATH, "transcription_en.txt")
    print(f"{info.num_segments} segment(s) written to {info.output_path}")
    stats = PerformanceProfiler.calculate_stats(
        audio_duration=info.duration,
        processing_time=info.processing_time,
        num_segments=info.num_segments,
    )
    print(stats)

except FileNotFoundError as e:
    print(e)
