"""
File operations for the subtitle study application.

This module provides:
- Dispatching uploaded files to video or subtitle handling
- Subtitle discovery in directories
- Safe writing of exported subtitle files
"""

import mimetypes
from enum import Enum
from pathlib import Path
from typing import List, Optional
from .constants import SUBTITLE_EXTENSIONS, VIDEO_EXTENSIONS, VIDEO_MIME_PREFIX
from .logging_config import get_logger

logger = get_logger(__name__)


class FileKind(Enum):
    """What an uploaded file is used for."""
    VIDEO = "video"
    SUBTITLE = "subtitle"
    UNKNOWN = "unknown"


class FileHandler:
    """Handles file operations with proper error handling and logging."""

    @staticmethod
    def guess_mime_type(file_path: Path) -> str:
        """Guess a MIME type from the file name, empty string if unknown."""
        mime_type, _ = mimetypes.guess_type(file_path.name)
        return mime_type or ''

    @staticmethod
    def is_video_file(file_name: str, mime_type: Optional[str] = None) -> bool:
        """
        Check whether a file is a playable video.

        Args:
            file_name: File name or path
            mime_type: Declared MIME type, if any

        Returns:
            True for a known video extension or a ``video/`` MIME type
        """
        if Path(file_name).suffix.lower() in VIDEO_EXTENSIONS:
            return True
        return bool(mime_type) and mime_type.startswith(VIDEO_MIME_PREFIX)

    @staticmethod
    def is_subtitle_file(file_name: str) -> bool:
        """Check whether a file has a supported subtitle extension (case-insensitive)."""
        return Path(file_name).suffix.lower() in SUBTITLE_EXTENSIONS

    @staticmethod
    def classify_file(file_name: str, mime_type: Optional[str] = None) -> FileKind:
        """
        Decide how an uploaded file should be handled.

        Video wins over subtitle when both would match.

        Example:
            >>> FileHandler.classify_file("lesson.MKV")
            <FileKind.VIDEO: 'video'>
        """
        if FileHandler.is_video_file(file_name, mime_type):
            return FileKind.VIDEO
        if FileHandler.is_subtitle_file(file_name):
            return FileKind.SUBTITLE
        return FileKind.UNKNOWN

    @staticmethod
    def find_subtitle_files(directory: Path, recursive: bool = False) -> List[Path]:
        """
        Find all subtitle files in a directory.

        Args:
            directory: Directory to search
            recursive: Whether to search recursively

        Returns:
            Sorted list of subtitle file paths
        """
        if not directory.exists() or not directory.is_dir():
            logger.warning(f"Directory not found or not a directory: {directory}")
            return []

        pattern_func = directory.rglob if recursive else directory.glob
        subtitle_files = [
            path for path in pattern_func('*')
            if path.is_file() and FileHandler.is_subtitle_file(path.name)
        ]
        subtitle_files.sort()

        logger.debug(f"Found {len(subtitle_files)} subtitle files in {directory}")
        return subtitle_files

    @staticmethod
    def safe_write(file_path: Path, content: str, encoding: str = 'utf-8') -> None:
        """
        Write content to a file, creating parent directories.

        Args:
            file_path: Path to write to
            content: Content to write
            encoding: File encoding to use

        Raises:
            IOError: If write operation fails
        """
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'w', encoding=encoding, newline='\n') as f:
                f.write(content)
            logger.debug(f"Successfully wrote file: {file_path}")
        except OSError as e:
            logger.error(f"Failed to write file {file_path}: {e}")
            raise IOError(f"Write operation failed: {e}")
