"""
Encoding detection utilities for subtitle files.

Subtitle files from the wild come in UTF-8 (with or without BOM), UTF-16,
or legacy Chinese code pages. This module turns their bytes into text.
"""

from pathlib import Path
from typing import Optional, Tuple

from charset_normalizer import from_bytes

from utils.constants import ENCODING_PRIORITY, CHINESE_ENCODINGS, UTF8_BOM
from utils.logging_config import get_logger

logger = get_logger(__name__)


class EncodingDetector:
    """Handles encoding detection for subtitle files with Chinese support."""

    @staticmethod
    def detect_encoding(data: bytes) -> Optional[str]:
        """
        Detect the encoding of raw subtitle bytes.

        Args:
            data: File contents

        Returns:
            Detected encoding name or None if detection failed
        """
        if data.startswith(UTF8_BOM):
            return 'utf-8-sig'

        # Valid UTF-8 is taken at face value before any statistical guessing
        try:
            data.decode('utf-8')
            return 'utf-8'
        except UnicodeDecodeError:
            pass

        detected = EncodingDetector._auto_detect_encoding(data)
        if detected:
            return detected.lower()

        logger.debug("Auto-detection failed, trying manual detection")
        return EncodingDetector._manual_detect_encoding(data)

    @staticmethod
    def _auto_detect_encoding(data: bytes) -> Optional[str]:
        """Use charset-normalizer to guess the encoding."""
        result = from_bytes(data).best()
        if result is None:
            return None
        return result.encoding

    @staticmethod
    def _manual_detect_encoding(data: bytes) -> Optional[str]:
        """
        Try Chinese code pages, then the remaining priority list.

        A Chinese code page is only accepted if the decoded text actually
        contains Chinese characters.
        """
        for encoding in CHINESE_ENCODINGS:
            try:
                text = data.decode(encoding)
            except (UnicodeDecodeError, LookupError):
                continue
            if EncodingDetector._has_chinese_characters(text):
                return encoding

        for encoding in ENCODING_PRIORITY:
            if encoding in CHINESE_ENCODINGS:
                continue
            try:
                data.decode(encoding)
                return encoding
            except UnicodeDecodeError:
                continue

        return None

    @staticmethod
    def _has_chinese_characters(text: str) -> bool:
        return any('\u4e00' <= char <= '\u9fff' for char in text)

    @staticmethod
    def decode(data: bytes) -> Tuple[str, str]:
        """
        Decode subtitle bytes to text.

        Args:
            data: File contents

        Returns:
            Tuple of (text, encoding_used)
        """
        encoding = EncodingDetector.detect_encoding(data)
        if not encoding:
            logger.warning("Failed to detect encoding, using UTF-8 with error replacement")
            return data.decode('utf-8', errors='replace'), 'utf-8'

        try:
            text = data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.warning(f"Decoding as {encoding} failed ({e}), using UTF-8 with error replacement")
            return data.decode('utf-8', errors='replace'), 'utf-8'

        # Some detected codecs keep the BOM as the first character
        return text.lstrip('\ufeff'), encoding

    @staticmethod
    def read_file_with_encoding(file_path: Path) -> Tuple[str, str]:
        """
        Read a file with automatic encoding detection and proper BOM handling.

        Args:
            file_path: Path to the file to read

        Returns:
            Tuple of (file_content, encoding_used)

        Raises:
            IOError: If the file cannot be read

        Example:
            >>> content, encoding = EncodingDetector.read_file_with_encoding(Path("movie.zh.srt"))
        """
        try:
            data = file_path.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read {file_path}: {e}")
            raise IOError(f"Cannot read file {file_path}: {e}")

        content, encoding = EncodingDetector.decode(data)
        logger.debug(f"Read {file_path.name} with encoding: {encoding}")
        return content, encoding
