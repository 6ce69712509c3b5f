"""
Bilingual subtitle splitting processor.

This module splits cues that stack a Chinese line over an English line into
two parallel single-language tracks.
"""

from typing import List, Optional, Sequence, Tuple
from core.subtitle_formats import Cue
from core.language_detection import LanguageDetector
from utils.constants import LanguageVerdict
from utils.logging_config import get_logger

logger = get_logger(__name__)


class BilingualSplitter:
    """Splits bilingual cue sequences into Chinese and English tracks."""

    def __init__(self, detector: Optional[LanguageDetector] = None):
        """
        Initialize the bilingual splitter.

        Args:
            detector: Language detector used by ``is_bilingual``
        """
        self.detector = detector or LanguageDetector()

    def separate(self, cues: Sequence[Cue]) -> Tuple[List[Cue], List[Cue]]:
        """
        Split cues into (chinese, english) tracks.

        A cue with two or more lines yields one cue in each track: line 0 goes
        to Chinese and line 1 to English, both keeping the source id and timing.
        A single-line cue goes whole to Chinese if it has any Chinese
        character, otherwise to English.

        The tracks stay index-aligned only while every source cue is dual-line.

        Args:
            cues: Cues to split

        Returns:
            Tuple of (chinese_cues, english_cues)
        """
        chinese: List[Cue] = []
        english: List[Cue] = []

        for cue in cues:
            lines = cue.lines()
            if len(lines) >= 2:
                chinese.append(cue.with_text(lines[0]))
                english.append(cue.with_text(lines[1]))
            elif LanguageDetector.contains_chinese(cue.text):
                chinese.append(cue)
            else:
                english.append(cue)

        logger.debug(f"Split result: {len(chinese)} Chinese cues, {len(english)} English cues")
        return chinese, english

    def extract_single_language(self, cues: Sequence[Cue],
                                language: LanguageVerdict) -> List[Cue]:
        """
        Pick one language out of every cue.

        Multi-line cues keep line 0 for Chinese or line 1 for English.
        Single-line cues are returned unchanged whatever their script, so the
        output always has one cue per input cue.

        Args:
            cues: Cues to read
            language: CHINESE or ENGLISH

        Returns:
            One cue per input cue

        Raises:
            ValueError: If language is not a single language
        """
        if language not in (LanguageVerdict.CHINESE, LanguageVerdict.ENGLISH):
            raise ValueError(f"Cannot extract language: {language}")

        line_index = 0 if language is LanguageVerdict.CHINESE else 1
        result = []
        for cue in cues:
            lines = cue.lines()
            result.append(cue.with_text(lines[line_index]) if len(lines) >= 2 else cue)
        return result

    def is_bilingual(self, cues: Sequence[Cue]) -> bool:
        """Check whether the detector sees these cues as bilingual."""
        return self.detector.classify(cues) is LanguageVerdict.BILINGUAL
