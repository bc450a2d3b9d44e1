"""Tests for wav-transcriber data models."""

import dataclasses

import pytest

from wav_transcriber.data_models import DecodingConfig, Segment, TranscriptionInfo


class TestDecodingConfig:
    """Test DecodingConfig validation and parameter mapping."""

    def test_is_frozen(self):
        config = DecodingConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.beam_size = 10

    def test_invalid_strategy(self):
        with pytest.raises(ValueError, match="strategy must be 'greedy' or 'beam_search'"):
            DecodingConfig(strategy="random")

    def test_invalid_beam_size_type(self):
        with pytest.raises(TypeError, match="beam_size must be int"):
            DecodingConfig(beam_size=5.0)

        with pytest.raises(TypeError, match="beam_size must be int"):
            DecodingConfig(beam_size=True)

    def test_invalid_beam_size_value(self):
        with pytest.raises(ValueError, match="beam_size must be positive integer"):
            DecodingConfig(beam_size=0)

    def test_invalid_patience_type(self):
        with pytest.raises(TypeError, match="patience must be numeric"):
            DecodingConfig(patience="1.5")

    def test_invalid_patience_value(self):
        with pytest.raises(ValueError, match="patience must be positive"):
            DecodingConfig(patience=0)

    def test_invalid_language(self):
        with pytest.raises(TypeError, match="language must be str"):
            DecodingConfig(language=None)

        with pytest.raises(ValueError, match="language cannot be empty string"):
            DecodingConfig(language="")

    def test_to_engine_params(self):
        params = DecodingConfig(beam_size=3, patience=2.0, translate=True).to_engine_params()

        assert params["beam_search"] == {"beam_size": 3, "patience": 2.0}
        assert params["translate"] is True
        assert params["suppress_nst"] is True
        assert set(params) == {
            "beam_search",
            "language",
            "translate",
            "suppress_blank",
            "suppress_nst",
            "token_timestamps",
        }


def test_segment_fields():
    segment = Segment(id=0, start=1.25, end=2.5, text="hello")

    assert segment.end >= segment.start
    assert segment.text == "hello"


def test_transcription_info_fields():
    info = TranscriptionInfo(
        duration=3.0,
        num_segments=2,
        processing_time=0.5,
        output_path="out.txt",
    )

    assert info.num_segments == 2
    assert info.output_path == "out.txt"
