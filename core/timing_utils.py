"""
Time conversion utilities for subtitle processing.

This module provides functions for:
- Converting SRT and ASS timestamps to seconds
- Formatting seconds back to SRT timestamps for export
- Human readable time strings for logs and CLI output

Timestamp parsing never raises: text that does not look like a timestamp
converts to 0 seconds.
"""

import math
import re
from utils.logging_config import get_logger

logger = get_logger(__name__)

SRT_TIME_PATTERN = re.compile(r'(\d{2}):(\d{2}):(\d{2}),(\d{3})')
ASS_TIME_PATTERN = re.compile(r'(\d+):(\d{2}):(\d{2})\.(\d{2})')


class TimeConverter:
    """Handles time format conversions for subtitles."""

    @staticmethod
    def srt_time_to_seconds(time_str: str) -> float:
        """
        Convert an SRT timestamp (``HH:MM:SS,mmm``) to seconds.

        Args:
            time_str: SRT timestamp text

        Returns:
            Time in seconds, or 0.0 if the text is not a timestamp

        Example:
            >>> TimeConverter.srt_time_to_seconds("01:23:45,678")
            5025.678
        """
        match = SRT_TIME_PATTERN.search(time_str.strip())
        if not match:
            logger.debug(f"Unparseable SRT timestamp: {time_str!r}")
            return 0.0

        hours, minutes, seconds, milliseconds = (int(part) for part in match.groups())
        return hours * 3600 + minutes * 60 + seconds + milliseconds / 1000

    @staticmethod
    def ass_time_to_seconds(time_str: str) -> float:
        """
        Convert an ASS timestamp (``H:MM:SS.cc``) to seconds.

        The hour field may have any number of digits.

        Args:
            time_str: ASS timestamp text

        Returns:
            Time in seconds, or 0.0 if the text is not a timestamp
        """
        match = ASS_TIME_PATTERN.search(time_str.strip())
        if not match:
            logger.debug(f"Unparseable ASS timestamp: {time_str!r}")
            return 0.0

        hours, minutes, seconds, centiseconds = (int(part) for part in match.groups())
        return hours * 3600 + minutes * 60 + seconds + centiseconds / 100

    @staticmethod
    def seconds_to_srt_time(seconds: float) -> str:
        """
        Convert seconds to an SRT timestamp.

        The sub-second part is truncated, not rounded, so a value never
        formats to a later timestamp than it represents.

        Args:
            seconds: Time in seconds

        Returns:
            Timestamp text, ``HH:MM:SS,mmm``

        Example:
            >>> TimeConverter.seconds_to_srt_time(3661.5)
            '01:01:01,500'
        """
        if seconds < 0:
            seconds = 0

        hours = math.floor(seconds / 3600)
        minutes = math.floor((seconds % 3600) / 60)
        secs = math.floor(seconds % 60)
        milliseconds = math.floor((seconds % 1) * 1000)

        return f"{hours:02d}:{minutes:02d}:{secs:02d},{milliseconds:03d}"

    @staticmethod
    def seconds_to_readable(seconds: float) -> str:
        """
        Convert seconds to readable format (HH:MM:SS.mmm).

        Example:
            >>> TimeConverter.seconds_to_readable(3825.5)
            '01:03:45.500'
        """
        return TimeConverter.seconds_to_srt_time(seconds).replace(',', '.')

    @staticmethod
    def format_duration(seconds: float) -> str:
        """
        Format duration in seconds to human-readable string.

        Args:
            seconds: Duration in seconds

        Returns:
            Human-readable duration string

        Example:
            >>> TimeConverter.format_duration(3825.5)
            '1h 3m 45.5s'
        """
        if seconds < 60:
            return f"{seconds:.1f}s"
        elif seconds < 3600:
            minutes = int(seconds // 60)
            remaining_seconds = seconds % 60
            return f"{minutes}m {remaining_seconds:.1f}s"
        else:
            hours = int(seconds // 3600)
            remaining_seconds = seconds % 3600
            minutes = int(remaining_seconds // 60)
            remaining_seconds = remaining_seconds % 60
            return f"{hours}h {minutes}m {remaining_seconds:.1f}s"
