"""
Utility modules.

This package contains shared utility functions and configurations:
- File kind dispatch and file I/O helpers
- Logging configuration
- Shared constants and configurations
"""

from .file_operations import FileHandler, FileKind
from .logging_config import setup_logging, get_logger
from .constants import (
    SubtitleFormat,
    LanguageVerdict,
    VIDEO_EXTENSIONS,
    VIDEO_MIME_PREFIX,
    SUBTITLE_EXTENSIONS,
    BILINGUAL_RATIO_THRESHOLD,
    DOMINANT_RATIO_THRESHOLD,
    MIXED_RATIO_THRESHOLD,
    CJK_PATTERN,
    LATIN_PATTERN,
    ENCODING_PRIORITY,
    CHINESE_ENCODINGS,
    UTF8_BOM,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_DATE_FORMAT,
    APP_NAME,
    APP_VERSION,
    APP_DESCRIPTION,
)

__all__ = [
    'FileHandler',
    'FileKind',
    'setup_logging',
    'get_logger',
    'SubtitleFormat',
    'LanguageVerdict',
    'VIDEO_EXTENSIONS',
    'VIDEO_MIME_PREFIX',
    'SUBTITLE_EXTENSIONS',
    'BILINGUAL_RATIO_THRESHOLD',
    'DOMINANT_RATIO_THRESHOLD',
    'MIXED_RATIO_THRESHOLD',
    'CJK_PATTERN',
    'LATIN_PATTERN',
    'ENCODING_PRIORITY',
    'CHINESE_ENCODINGS',
    'UTF8_BOM',
    'DEFAULT_LOG_FORMAT',
    'DEFAULT_LOG_DATE_FORMAT',
    'APP_NAME',
    'APP_VERSION',
    'APP_DESCRIPTION',
]
