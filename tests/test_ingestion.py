"""Tests for ingestion and merging of subtitle uploads."""
import asyncio

import pytest

from core.session import SubtitleTrackSet
from core.subtitle_formats import ASSParser, SRTParser
from processors.ingestion import SubtitleIngestor
from utils.constants import LanguageVerdict, SubtitleFormat
from tests.conftest import (
    BILINGUAL_ASS, BILINGUAL_SRT, CHINESE_SRT, ENGLISH_SRT, ENGLISH_SRT_TAKE_TWO
)

SRT = SubtitleFormat.SRT


def ingest(ingestor, *contents):
    track_set = None
    for content in contents:
        track_set = ingestor.ingest_text(content, SRT, track_set)
    return track_set


# =============================================================================
# Fresh uploads
# =============================================================================

class TestFreshUpload:

    def test_english_only(self, ingestor):
        result = ingest(ingestor, ENGLISH_SRT)

        assert result.detected_language is LanguageVerdict.ENGLISH
        assert result.missing_language is LanguageVerdict.CHINESE
        assert result.english == tuple(SRTParser.parse_text(ENGLISH_SRT))
        assert result.chinese == ()
        assert result.raw == result.english
        assert not result.is_complete

    def test_chinese_only(self, ingestor):
        result = ingest(ingestor, CHINESE_SRT)

        assert result.detected_language is LanguageVerdict.CHINESE
        assert result.missing_language is LanguageVerdict.ENGLISH
        assert len(result.chinese) == 3
        assert result.english == ()

    def test_bilingual_fills_both_tracks(self, ingestor):
        result = ingest(ingestor, BILINGUAL_SRT)

        assert result.detected_language is LanguageVerdict.BILINGUAL
        assert result.missing_language is None
        assert [cue.text for cue in result.chinese] == ["你要去哪里？", "去车站。", "等等我！"]
        assert [cue.text for cue in result.english] == ["Where are you going?", "To the station.", "Wait for me!"]
        assert len(result.raw) == 3

    def test_bilingual_ass(self, ingestor):
        result = ingestor.ingest_text(BILINGUAL_ASS, SubtitleFormat.ASS)

        assert result.missing_language is None
        assert [cue.text for cue in result.english] == ["Where are you going?", "To the station, I think."]

    def test_unknown_with_only_one_track_filled(self, ingestor):
        content = "1\n00:00:01,000 --> 00:00:02,000\n123\n\n2\n00:00:03,000 --> 00:00:04,000\n...\n"

        result = ingest(ingestor, content)

        assert result.detected_language is LanguageVerdict.UNKNOWN
        assert result.chinese == ()
        assert len(result.english) == 2
        assert result.missing_language is LanguageVerdict.CHINESE

    def test_unknown_with_both_tracks_filled(self, ingestor):
        content = (
            "1\n00:00:01,000 --> 00:00:02,000\n你好\n\n"
            "2\n00:00:03,000 --> 00:00:04,000\nHello\n\n"
            "3\n00:00:05,000 --> 00:00:06,000\n123\n\n"
            "4\n00:00:07,000 --> 00:00:08,000\n...\n"
        )

        result = ingest(ingestor, content)

        assert result.detected_language is LanguageVerdict.UNKNOWN
        assert len(result.chinese) == 1
        assert len(result.english) == 3
        assert result.missing_language is None

    def test_empty_file(self, ingestor):
        result = ingest(ingestor, "")

        assert result.detected_language is LanguageVerdict.UNKNOWN
        assert result.raw == ()
        assert result.missing_language is LanguageVerdict.CHINESE

    def test_complete_set_is_replaced_by_next_upload(self, ingestor):
        result = ingest(ingestor, BILINGUAL_SRT, ENGLISH_SRT_TAKE_TWO)

        assert result.missing_language is LanguageVerdict.CHINESE
        assert result.chinese == ()
        assert len(result.english) == 2
        assert len(result.raw) == 2

    def test_repeated_fresh_ingestion_is_stable(self, ingestor):
        runs = [ingestor.ingest_text(BILINGUAL_SRT, SRT) for _ in range(3)]

        for run in runs[1:]:
            assert run.chinese == runs[0].chinese
            assert run.english == runs[0].english


# =============================================================================
# Partial sets
# =============================================================================

class TestPartialMerge:

    def test_english_then_chinese(self, ingestor):
        first = ingest(ingestor, ENGLISH_SRT)

        result = ingestor.ingest_text(CHINESE_SRT, SRT, first)

        assert result.missing_language is None
        assert result.detected_language is LanguageVerdict.BILINGUAL
        assert result.english == first.english
        assert result.chinese == tuple(SRTParser.parse_text(CHINESE_SRT))
        assert result.raw == first.raw + result.chinese

    def test_previous_set_is_left_untouched(self, ingestor):
        first = ingest(ingestor, ENGLISH_SRT)
        snapshot = SubtitleTrackSet(**first.__dict__)

        ingestor.ingest_text(CHINESE_SRT, SRT, first)

        assert first == snapshot

    def test_english_then_english_replaces(self, ingestor):
        result = ingest(ingestor, ENGLISH_SRT, ENGLISH_SRT_TAKE_TWO)

        second = tuple(SRTParser.parse_text(ENGLISH_SRT_TAKE_TWO))
        assert result.english == second
        assert result.raw == second
        assert result.chinese == ()
        assert result.missing_language is LanguageVerdict.CHINESE
        assert result.detected_language is LanguageVerdict.ENGLISH

    def test_chinese_then_chinese_replaces(self, ingestor):
        replacement = "1\n00:00:09,000 --> 00:00:10,000\n新的字幕\n"

        result = ingest(ingestor, CHINESE_SRT, replacement)

        assert [cue.text for cue in result.chinese] == ["新的字幕"]
        assert result.missing_language is LanguageVerdict.ENGLISH

    def test_chinese_then_bilingual_takes_english_half(self, ingestor):
        first = ingest(ingestor, CHINESE_SRT)

        result = ingestor.ingest_text(BILINGUAL_ASS, SubtitleFormat.ASS, first)

        assert result.chinese == first.chinese
        assert [cue.text for cue in result.english] == ["Where are you going?", "To the station, I think."]
        assert result.missing_language is None
        assert result.detected_language is LanguageVerdict.BILINGUAL
        assert result.raw == first.raw + tuple(ASSParser.parse_text(BILINGUAL_ASS))

    def test_english_then_bilingual_takes_chinese_half(self, ingestor):
        first = ingest(ingestor, ENGLISH_SRT_TAKE_TWO)

        result = ingestor.ingest_text(BILINGUAL_SRT, SRT, first)

        assert result.english == first.english
        assert [cue.text for cue in result.chinese] == ["你要去哪里？", "去车站。", "等等我！"]

    def test_unknown_upload_replaces_present_language(self, ingestor):
        first = ingest(ingestor, ENGLISH_SRT)
        numbers = "1\n00:00:01,000 --> 00:00:02,000\n42\n"

        result = ingestor.ingest_text(numbers, SRT, first)

        assert [cue.text for cue in result.english] == ["42"]
        assert result.missing_language is LanguageVerdict.CHINESE

    def test_completed_merge_then_fresh_cycle(self, ingestor):
        result = ingest(ingestor, ENGLISH_SRT, CHINESE_SRT, CHINESE_SRT)

        assert result.missing_language is LanguageVerdict.ENGLISH
        assert len(result.raw) == 3


# =============================================================================
# File entry points
# =============================================================================

class TestFileIngestion:

    def test_ingest_file(self, ingestor, write_subtitle):
        path = write_subtitle("movie.en.srt", ENGLISH_SRT)

        result = ingestor.ingest_file(path)

        assert len(result.english) == 3

    def test_ingest_file_with_bom(self, ingestor, write_subtitle):
        path = write_subtitle("movie.zh.srt", CHINESE_SRT, encoding="utf-8-sig")

        result = ingestor.ingest_file(path)

        assert result.chinese[0].id == 1
        assert result.missing_language is LanguageVerdict.ENGLISH

    def test_ingest_files_in_order(self, ingestor, write_subtitle):
        paths = [
            write_subtitle("movie.en.srt", ENGLISH_SRT),
            write_subtitle("movie.zh.srt", CHINESE_SRT),
        ]

        result = ingestor.ingest_files(paths)

        assert result.missing_language is None
        assert len(result.raw) == 6

    def test_ingest_files_empty(self, ingestor):
        assert ingestor.ingest_files([]) is None

    def test_ingest_file_async(self, ingestor, write_subtitle):
        path = write_subtitle("movie.ass", BILINGUAL_ASS)

        result = asyncio.run(ingestor.ingest_file_async(path))

        assert result.detected_language is LanguageVerdict.BILINGUAL
        assert len(result.chinese) == 2

    def test_missing_file_raises_ioerror(self, ingestor, tmp_path):
        with pytest.raises(IOError):
            ingestor.ingest_file(tmp_path / "nope.srt")

    def test_unsupported_extension(self, ingestor, write_subtitle):
        path = write_subtitle("movie.vtt", "WEBVTT\n")

        with pytest.raises(ValueError):
            ingestor.ingest_file(path)


class TestInjectedDetector:

    def test_custom_detector_drives_merge(self):
        class AlwaysChinese:
            def classify(self, cues):
                return LanguageVerdict.CHINESE

        ingestor = SubtitleIngestor(detector=AlwaysChinese())

        result = ingestor.ingest_text(ENGLISH_SRT, SRT)

        assert len(result.chinese) == 3
        assert result.missing_language is LanguageVerdict.ENGLISH
