"""
Language detection for subtitle cue sequences.

This module decides whether a parsed subtitle file is Chinese, English,
bilingual (Chinese line stacked over English line in each cue), or unknown.

The decision is a heuristic: per-cue tallies are turned into ratios and
checked against fixed cutoffs in a fixed order. Downstream merge behavior
depends on the verdict, so the order and cutoffs must not drift.
"""

import re
from dataclasses import dataclass
from typing import Sequence
from utils.constants import (
    LanguageVerdict, CJK_PATTERN, LATIN_PATTERN,
    BILINGUAL_RATIO_THRESHOLD, DOMINANT_RATIO_THRESHOLD, MIXED_RATIO_THRESHOLD
)
from utils.logging_config import get_logger
from core.subtitle_formats import Cue

logger = get_logger(__name__)

_CJK_RE = re.compile(CJK_PATTERN)
_LATIN_RE = re.compile(LATIN_PATTERN)


@dataclass(frozen=True)
class LanguageStats:
    """Per-category cue counts behind a verdict."""
    total: int = 0
    chinese_only: int = 0
    english_only: int = 0
    bilingual: int = 0

    def _ratio(self, count: int) -> float:
        return count / self.total if self.total else 0.0

    @property
    def chinese_ratio(self) -> float:
        return self._ratio(self.chinese_only)

    @property
    def english_ratio(self) -> float:
        return self._ratio(self.english_only)

    @property
    def bilingual_ratio(self) -> float:
        return self._ratio(self.bilingual)


class LanguageDetector:
    """Classifies cue sequences by language layout."""

    @staticmethod
    def contains_chinese(text: str) -> bool:
        """Check for any CJK Unified Ideograph."""
        return bool(_CJK_RE.search(text))

    @staticmethod
    def contains_latin(text: str) -> bool:
        """Check for any ASCII letter."""
        return bool(_LATIN_RE.search(text))

    @staticmethod
    def is_dual_line_cue(cue: Cue) -> bool:
        """
        Check for the stacked layout: a Chinese first line over a second line
        that has Latin letters and no Chinese.
        """
        lines = cue.lines()
        if len(lines) < 2:
            return False
        first, second = lines[0], lines[1]
        return (LanguageDetector.contains_chinese(first)
                and LanguageDetector.contains_latin(second)
                and not LanguageDetector.contains_chinese(second))

    def analyze(self, cues: Sequence[Cue]) -> LanguageStats:
        """
        Tally cues by language.

        A dual-line cue counts only as bilingual. Other cues count by the
        scripts present anywhere in their text; cues with neither script
        are not counted.

        Args:
            cues: Parsed cues

        Returns:
            LanguageStats with counts over ``len(cues)``
        """
        chinese_only = english_only = bilingual = 0

        for cue in cues:
            if self.is_dual_line_cue(cue):
                bilingual += 1
                continue

            has_chinese = self.contains_chinese(cue.text)
            has_latin = self.contains_latin(cue.text)

            if has_chinese and not has_latin:
                chinese_only += 1
            elif has_latin and not has_chinese:
                english_only += 1
            elif has_chinese and has_latin:
                bilingual += 1

        return LanguageStats(
            total=len(cues),
            chinese_only=chinese_only,
            english_only=english_only,
            bilingual=bilingual
        )

    def classify(self, cues: Sequence[Cue]) -> LanguageVerdict:
        """
        Decide the language layout of a cue sequence.

        Args:
            cues: Parsed cues

        Returns:
            LanguageVerdict; UNKNOWN for an empty sequence

        Example:
            >>> LanguageDetector().classify([Cue(1, 0.0, 1.0, "你好\\nHello")])
            <LanguageVerdict.BILINGUAL: 'bilingual'>
        """
        if not cues:
            return LanguageVerdict.UNKNOWN

        stats = self.analyze(cues)
        verdict = self.verdict_from_stats(stats)

        logger.debug(
            f"Language stats: total={stats.total} chinese={stats.chinese_only} "
            f"english={stats.english_only} bilingual={stats.bilingual} "
            f"(ratios {stats.chinese_ratio:.2f}/{stats.english_ratio:.2f}/"
            f"{stats.bilingual_ratio:.2f}) -> {verdict.value}"
        )
        return verdict

    @staticmethod
    def verdict_from_stats(stats: LanguageStats) -> LanguageVerdict:
        """Apply the ratio cutoffs; the first matching rule wins."""
        if stats.total == 0:
            return LanguageVerdict.UNKNOWN

        chinese_ratio = stats.chinese_ratio
        english_ratio = stats.english_ratio

        if stats.bilingual_ratio > BILINGUAL_RATIO_THRESHOLD:
            return LanguageVerdict.BILINGUAL
        if chinese_ratio > DOMINANT_RATIO_THRESHOLD:
            return LanguageVerdict.CHINESE
        if english_ratio > DOMINANT_RATIO_THRESHOLD:
            return LanguageVerdict.ENGLISH
        if chinese_ratio > MIXED_RATIO_THRESHOLD and english_ratio > MIXED_RATIO_THRESHOLD:
            return LanguageVerdict.BILINGUAL
        if chinese_ratio > english_ratio:
            return LanguageVerdict.CHINESE
        if english_ratio > chinese_ratio:
            return LanguageVerdict.ENGLISH
        return LanguageVerdict.UNKNOWN
