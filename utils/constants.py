"""
Shared constants and configurations for the subtitle study application.

This module contains all the constants used across different modules including:
- Supported file formats and extensions
- Language verdicts and classifier thresholds
- Encoding detection priorities
- Default logging configuration values
"""

from enum import Enum
from typing import List, Set

# ============================================================================
# FILE FORMAT CONSTANTS
# ============================================================================

class SubtitleFormat(Enum):
    """Supported subtitle formats."""
    SRT = "srt"
    ASS = "ass"

    @classmethod
    def from_extension(cls, ext: str) -> 'SubtitleFormat':
        """
        Get format from file extension.

        Args:
            ext: File extension (with or without dot)

        Returns:
            SubtitleFormat enum value

        Raises:
            ValueError: If extension is not supported
        """
        ext = ext.lower().lstrip('.')
        for format_type in cls:
            if format_type.value == ext:
                return format_type
        raise ValueError(f"Unsupported subtitle format: {ext}")


# Video files accepted by the player
VIDEO_EXTENSIONS: Set[str] = {'.mkv', '.mp4', '.webm', '.avi'}

# MIME prefix that also marks a file as video
VIDEO_MIME_PREFIX: str = 'video/'

# Subtitle files accepted by the ingestion engine
SUBTITLE_EXTENSIONS: Set[str] = {'.srt', '.ass'}

# ============================================================================
# LANGUAGE DETECTION CONSTANTS
# ============================================================================

class LanguageVerdict(str, Enum):
    """Language layout of a parsed cue sequence."""
    CHINESE = "chinese"
    ENGLISH = "english"
    BILINGUAL = "bilingual"
    UNKNOWN = "unknown"

    def opposite(self) -> 'LanguageVerdict':
        """
        Get the other single language.

        Raises:
            ValueError: If the verdict is not a single language
        """
        if self is LanguageVerdict.CHINESE:
            return LanguageVerdict.ENGLISH
        if self is LanguageVerdict.ENGLISH:
            return LanguageVerdict.CHINESE
        raise ValueError(f"No opposite language for verdict: {self.value}")


# Classifier cutoffs, checked in this order
BILINGUAL_RATIO_THRESHOLD: float = 0.5
DOMINANT_RATIO_THRESHOLD: float = 0.7
MIXED_RATIO_THRESHOLD: float = 0.3

# CJK Unified Ideographs
CJK_PATTERN: str = r'[\u4e00-\u9fff]'
LATIN_PATTERN: str = r'[a-zA-Z]'

# ============================================================================
# ENCODING DETECTION CONSTANTS
# ============================================================================

# Subtitle file encoding detection order (most likely first)
ENCODING_PRIORITY: List[str] = [
    'utf-8-sig', 'utf-8', 'utf-16', 'gb18030', 'big5', 'cp1252', 'latin-1'
]

# Chinese encodings tried before the generic fallbacks
CHINESE_ENCODINGS: List[str] = [
    'gb18030',    # Superset of GB2312 and GBK
    'gbk',
    'big5',
    'big5-hkscs',
]

# UTF-8 BOM marker
UTF8_BOM: bytes = b"\xef\xbb\xbf"

# ============================================================================
# DEFAULT CONFIGURATION VALUES
# ============================================================================

# Default log format
DEFAULT_LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'

# Application metadata
APP_NAME: str = "Bilingual Subtitle Study"
APP_VERSION: str = "1.0.0"
APP_DESCRIPTION: str = """
Load a video with Chinese/English subtitles and study it sentence by sentence:
- SRT and ASS subtitle parsing
- Chinese / English / bilingual language detection
- Splitting dual-line bilingual cues into separate tracks
- Merging a second upload into a half-complete bilingual set
"""
