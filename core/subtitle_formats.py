"""
Subtitle format handlers and data structures.

This module provides:
- The normalized timed cue shared by every component
- Parsers for SRT and ASS subtitle text
- SRT writing for exporting a track

Parsers follow a "skip the malformed unit, keep going" policy: a bad block
or dialogue line is dropped and parsing continues with the next one.
"""

import math
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Sequence, Union
from utils.constants import SubtitleFormat
from utils.file_operations import FileHandler
from utils.logging_config import get_logger
from core.encoding_detection import EncodingDetector
from core.timing_utils import TimeConverter

logger = get_logger(__name__)

CueId = Union[int, float]


@dataclass(frozen=True)
class Cue:
    """One timed subtitle entry."""
    id: CueId          # NaN when an SRT block carries a non-numeric index
    start_time: float  # Start time in seconds
    end_time: float    # End time in seconds
    text: str          # Dialogue, may hold two stacked lines

    def duration(self) -> float:
        """Get the duration of this cue in seconds."""
        return self.end_time - self.start_time

    def contains(self, seconds: float) -> bool:
        """Check whether a playback time falls inside this cue (both ends inclusive)."""
        return self.start_time <= seconds <= self.end_time

    def lines(self) -> List[str]:
        """Split the text into its display lines."""
        return re.split(r'\r?\n', self.text)

    def with_text(self, text: str) -> 'Cue':
        """Copy of this cue with the same id and timing but different text."""
        return replace(self, text=text)

    def format_time_range(self) -> str:
        start_str = TimeConverter.seconds_to_srt_time(self.start_time)
        end_str = TimeConverter.seconds_to_srt_time(self.end_time)
        return f"{start_str} --> {end_str}"


class SRTParser:
    """Parser for SRT subtitle format."""

    @staticmethod
    def parse_text(content: str) -> List[Cue]:
        """
        Parse SRT text into cues.

        Blocks are separated by blank lines. A block needs an index line, a
        timing line and at least one text line; anything shorter is skipped.

        Args:
            content: Full SRT file text

        Returns:
            Cues in file order
        """
        cues = []
        blocks = re.split(r'\r?\n\r?\n', content.strip())

        for block_idx, block in enumerate(blocks):
            lines = re.split(r'\r?\n', block)
            if len(lines) < 3:
                logger.debug(f"Skipping short block {block_idx}: {block!r}")
                continue

            try:
                cue_id: CueId = int(lines[0].strip())
            except ValueError:
                # Tolerated: the cue is kept with an invalid id
                logger.debug(f"Non-numeric index in block {block_idx}: {lines[0]!r}")
                cue_id = math.nan

            time_parts = lines[1].split(' --> ')
            if len(time_parts) != 2:
                logger.debug(f"Invalid timing line in block {block_idx}: {lines[1]!r}")
                continue

            cues.append(Cue(
                id=cue_id,
                start_time=TimeConverter.srt_time_to_seconds(time_parts[0]),
                end_time=TimeConverter.srt_time_to_seconds(time_parts[1]),
                text='\n'.join(lines[2:])
            ))

        logger.info(f"Parsed {len(cues)} cues from SRT text")
        return cues

    @staticmethod
    def to_text(cues: Sequence[Cue]) -> str:
        """
        Render cues as SRT text, renumbering them from 1.

        Args:
            cues: Cues to render

        Returns:
            SRT file content
        """
        blocks = []
        for index, cue in enumerate(cues, start=1):
            blocks.append(f"{index}\n{cue.format_time_range()}\n{cue.text}\n")
        return '\n'.join(blocks)

    @staticmethod
    def write(cues: Sequence[Cue], output_path: Path) -> None:
        """
        Write cues to an SRT file.

        Raises:
            IOError: If file cannot be written
        """
        FileHandler.safe_write(output_path, SRTParser.to_text(cues))
        logger.info(f"Created SRT file: {output_path}")


class ASSParser:
    """Parser for ASS/SSA subtitle format."""

    OVERRIDE_PATTERN = re.compile(r'\{\\[^}]*\}')

    @staticmethod
    def parse_text(content: str) -> List[Cue]:
        """
        Parse the ``[Events]`` section of ASS text into cues.

        The ``Format:`` line decides where Start, End and Text sit in each
        ``Dialogue:`` line. Text is the last field and may itself contain
        commas, so everything from its index onward is rejoined.

        Args:
            content: Full ASS file text

        Returns:
            Cues with ids assigned from 1
        """
        cues = []
        format_fields: List[str] = []
        in_events = False
        next_id = 1

        for line in re.split(r'\r?\n', content):
            if line.strip() == '[Events]':
                in_events = True
                continue

            if not in_events:
                continue

            if line.startswith('Format:'):
                format_fields = [field.strip() for field in line[len('Format:'):].split(',')]
                continue

            if not line.startswith('Dialogue:') or not format_fields:
                continue

            cue = ASSParser._parse_dialogue_line(line, format_fields, next_id)
            if cue:
                cues.append(cue)
                next_id += 1

        logger.info(f"Parsed {len(cues)} cues from ASS text")
        return cues

    @staticmethod
    def _parse_dialogue_line(line: str, format_fields: List[str], cue_id: int):
        """
        Parse one dialogue line.

        Returns:
            Cue, or None if the line does not fit the format or has no text
        """
        parts = line[len('Dialogue:'):].split(',')

        try:
            start_idx = format_fields.index('Start')
            end_idx = format_fields.index('End')
            text_idx = format_fields.index('Text')
        except ValueError:
            logger.debug(f"Format line lacks Start/End/Text: {format_fields}")
            return None

        if len(parts) < max(start_idx, end_idx, text_idx) + 1:
            logger.debug(f"Dialogue line has too few fields: {line!r}")
            return None

        text = ASSParser.clean_text(','.join(parts[text_idx:]))
        if not text:
            return None

        return Cue(
            id=cue_id,
            start_time=TimeConverter.ass_time_to_seconds(parts[start_idx]),
            end_time=TimeConverter.ass_time_to_seconds(parts[end_idx]),
            text=text
        )

    @staticmethod
    def clean_text(text: str) -> str:
        """
        Strip ``{\\...}`` style overrides and turn ``\\N`` into a line break.

        Example:
            >>> ASSParser.clean_text("{\\i1}你好{\\i0}\\NHello")
            '你好\\nHello'
        """
        text = ASSParser.OVERRIDE_PATTERN.sub('', text.strip())
        return text.replace('\\N', '\n').strip()


class SubtitleFormatFactory:
    """Factory class for subtitle parsers and writers."""

    _parsers = {
        SubtitleFormat.SRT: SRTParser,
        SubtitleFormat.ASS: ASSParser,
    }

    @classmethod
    def get_parser(cls, format_type: SubtitleFormat):
        """
        Get the parser for a format.

        Raises:
            ValueError: If format is not supported
        """
        if format_type not in cls._parsers:
            raise ValueError(f"Unsupported subtitle format: {format_type}")
        return cls._parsers[format_type]

    @classmethod
    def parse_text(cls, content: str, format_type: SubtitleFormat) -> List[Cue]:
        """Parse subtitle text of a known format."""
        return cls.get_parser(format_type).parse_text(content)

    @classmethod
    def parse_file(cls, file_path: Path) -> List[Cue]:
        """
        Parse a subtitle file, picking the parser from its extension.

        Raises:
            ValueError: If the extension is not a supported subtitle format
            IOError: If file cannot be read
        """
        format_type = SubtitleFormat.from_extension(file_path.suffix)
        content, _ = EncodingDetector.read_file_with_encoding(file_path)
        return cls.parse_text(content, format_type)

    @classmethod
    def write_srt(cls, cues: Sequence[Cue], output_path: Path) -> None:
        """Export cues as an SRT file."""
        SRTParser.write(cues, output_path)

    @classmethod
    def to_srt_text(cls, cues: Sequence[Cue]) -> str:
        """Render cues as SRT text, renumbered from 1."""
        return SRTParser.to_text(cues)
