"""
Subtitle ingestion processor.

This module turns uploaded subtitle files into a SubtitleTrackSet. Each
upload is parsed, classified and, where needed, split into Chinese and
English tracks. When the previous set is still missing a language, the
new file is merged into it instead of replacing it.

Upload order matters: callers must finish one ingestion before starting
the next one against the same track set.
"""

import asyncio
from pathlib import Path
from typing import Iterable, List, Optional
from core.encoding_detection import EncodingDetector
from core.language_detection import LanguageDetector
from core.session import SubtitleTrackSet
from core.subtitle_formats import Cue, SubtitleFormatFactory
from processors.splitter import BilingualSplitter
from utils.constants import LanguageVerdict, SubtitleFormat
from utils.logging_config import get_logger

logger = get_logger(__name__)


class SubtitleIngestor:
    """Parses, classifies and merges subtitle uploads."""

    def __init__(self, detector: Optional[LanguageDetector] = None,
                 splitter: Optional[BilingualSplitter] = None):
        """
        Initialize the ingestor.

        Args:
            detector: Language classifier; swap in a stricter one without
                touching the merge rules
            splitter: Bilingual separator
        """
        self.detector = detector or LanguageDetector()
        self.splitter = splitter or BilingualSplitter(self.detector)

    def ingest_file(self, file_path: Path,
                    previous: Optional[SubtitleTrackSet] = None) -> SubtitleTrackSet:
        """
        Read and ingest one subtitle file.

        Raises:
            ValueError: If the extension is not .srt or .ass
            IOError: If file cannot be read
        """
        format_type = SubtitleFormat.from_extension(file_path.suffix)
        content, _ = EncodingDetector.read_file_with_encoding(file_path)
        logger.info(f"Ingesting subtitle file: {file_path.name}")
        return self.ingest_text(content, format_type, previous)

    async def ingest_file_async(self, file_path: Path,
                                previous: Optional[SubtitleTrackSet] = None) -> SubtitleTrackSet:
        """Like ``ingest_file`` but reads the file in a worker thread."""
        format_type = SubtitleFormat.from_extension(file_path.suffix)
        content, _ = await asyncio.to_thread(EncodingDetector.read_file_with_encoding, file_path)
        logger.info(f"Ingesting subtitle file: {file_path.name}")
        return self.ingest_text(content, format_type, previous)

    def ingest_files(self, file_paths: Iterable[Path],
                     previous: Optional[SubtitleTrackSet] = None) -> Optional[SubtitleTrackSet]:
        """Fold several files in upload order."""
        track_set = previous
        for file_path in file_paths:
            track_set = self.ingest_file(file_path, track_set)
        return track_set

    def ingest_text(self, content: str, format_type: SubtitleFormat,
                    previous: Optional[SubtitleTrackSet] = None) -> SubtitleTrackSet:
        """
        Ingest subtitle text against the previous track set.

        Args:
            content: Subtitle file text
            format_type: SRT or ASS
            previous: Track set built by earlier uploads, if any

        Returns:
            New track set; ``previous`` is left untouched
        """
        cues = SubtitleFormatFactory.parse_text(content, format_type)
        verdict = self.detector.classify(cues)
        logger.info(f"Detected language: {verdict.value} ({len(cues)} cues)")

        if previous is None or previous.missing_language is None:
            result = self._fresh(cues, verdict)
        else:
            result = self._fold_into(previous, cues, verdict)

        logger.info(f"Track set now {result.summary()}")
        return result

    def _fresh(self, cues: List[Cue], verdict: LanguageVerdict) -> SubtitleTrackSet:
        """Build a track set from this upload alone."""
        raw = tuple(cues)

        if verdict is LanguageVerdict.BILINGUAL:
            chinese, english = self.splitter.separate(cues)
            return SubtitleTrackSet(raw=raw, chinese=tuple(chinese), english=tuple(english),
                                    detected_language=verdict, missing_language=None)

        if verdict in (LanguageVerdict.CHINESE, LanguageVerdict.ENGLISH):
            return self._single_language(raw, verdict)

        # Unknown layout: split anyway and report whatever came out empty
        chinese, english = self.splitter.separate(cues)
        if not chinese:
            missing = LanguageVerdict.CHINESE
        elif not english:
            missing = LanguageVerdict.ENGLISH
        else:
            missing = None
        return SubtitleTrackSet(raw=raw, chinese=tuple(chinese), english=tuple(english),
                                detected_language=verdict, missing_language=missing)

    def _fold_into(self, previous: SubtitleTrackSet, cues: List[Cue],
                   verdict: LanguageVerdict) -> SubtitleTrackSet:
        """Combine an upload with a set that is missing one language."""
        target = previous.missing_language

        if verdict is target or verdict is LanguageVerdict.BILINGUAL:
            if verdict is LanguageVerdict.BILINGUAL:
                chinese, english = self.splitter.separate(cues)
                new_track = chinese if target is LanguageVerdict.CHINESE else english
            else:
                new_track = cues

            logger.info(f"Merging {len(new_track)} {target.value} cues into existing set")
            tracks = {
                LanguageVerdict.CHINESE: previous.chinese,
                LanguageVerdict.ENGLISH: previous.english,
            }
            tracks[target] = tuple(new_track)
            return SubtitleTrackSet(
                raw=previous.raw + tuple(cues),
                chinese=tracks[LanguageVerdict.CHINESE],
                english=tracks[LanguageVerdict.ENGLISH],
                detected_language=LanguageVerdict.BILINGUAL,
                missing_language=None
            )

        # Same language as before (or unknown): the upload replaces everything
        present = target.opposite()
        logger.info(f"Replacing existing {present.value} track; {target.value} still missing")
        return self._single_language(tuple(cues), present)

    @staticmethod
    def _single_language(cues, language: LanguageVerdict) -> SubtitleTrackSet:
        return SubtitleTrackSet(
            raw=cues,
            chinese=cues if language is LanguageVerdict.CHINESE else (),
            english=cues if language is LanguageVerdict.ENGLISH else (),
            detected_language=language,
            missing_language=language.opposite()
        )
