"""
Command-line interface for the Bilingual Subtitle Study tool.

Subcommands run the ingestion engine over subtitle files given in upload
order, so the same merge rules apply as in an interactive session.
"""

import argparse
import logging
import math
from pathlib import Path
from typing import List, Optional
from core.playback import find_active_cues
from core.session import SessionStore, SubtitleTrackSet
from core.subtitle_formats import Cue, SubtitleFormatFactory
from core.timing_utils import TimeConverter
from processors.ingestion import SubtitleIngestor
from utils.constants import APP_NAME, APP_VERSION, APP_DESCRIPTION
from utils.logging_config import setup_logging

logger = None  # Will be initialized in setup_cli_logging


def setup_cli_logging(verbose: bool = False, debug: bool = False,
                      use_colors: bool = True) -> logging.Logger:
    """Set up logging for CLI operations."""
    global logger

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = setup_logging(level=level, use_colors=use_colors)
    return logger


class CLIHandler:
    """Handles command-line interface operations."""

    def __init__(self, ingestor: Optional[SubtitleIngestor] = None):
        self.ingestor = ingestor or SubtitleIngestor()

    def create_parser(self) -> argparse.ArgumentParser:
        """
        Create the main argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog='subtitle-study',
            description=APP_DESCRIPTION,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Show how two uploads combine
  subtitle-study inspect movie.en.srt movie.zh.ass

  # Subtitles on screen at 1:02
  subtitle-study lookup movie.bilingual.srt --time 62

  # Export the Chinese half of a bilingual file
  subtitle-study export movie.bilingual.srt --track chinese -o movie.zh.srt
            """
        )

        parser.add_argument('--version', action='version', version=f'{APP_NAME} {APP_VERSION}')
        parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
        parser.add_argument('-d', '--debug', action='store_true', help='Enable debug output')
        parser.add_argument('--no-colors', action='store_true', help='Disable colored output')

        subparsers = parser.add_subparsers(dest='command', help='Available commands')
        self._add_inspect_parser(subparsers)
        self._add_lookup_parser(subparsers)
        self._add_export_parser(subparsers)

        return parser

    def _add_inspect_parser(self, subparsers):
        inspect_parser = subparsers.add_parser(
            'inspect',
            help='Ingest subtitle files and report the resulting tracks',
            description='Ingest subtitle files in upload order and summarize the track set'
        )
        inspect_parser.add_argument('files', type=Path, nargs='+', help='Subtitle files (.srt/.ass), in upload order')

    def _add_lookup_parser(self, subparsers):
        lookup_parser = subparsers.add_parser(
            'lookup',
            help='Show the active cues at a playback time',
            description='Ingest subtitle files and print the Chinese and English cues active at a time'
        )
        lookup_parser.add_argument('files', type=Path, nargs='+', help='Subtitle files (.srt/.ass), in upload order')
        lookup_parser.add_argument('-t', '--time', type=float, required=True, help='Playback time in seconds')

    def _add_export_parser(self, subparsers):
        export_parser = subparsers.add_parser(
            'export',
            help='Write one track as an SRT file',
            description='Ingest subtitle files and export a single track as SRT'
        )
        export_parser.add_argument('files', type=Path, nargs='+', help='Subtitle files (.srt/.ass), in upload order')
        export_parser.add_argument('--track', choices=['chinese', 'english', 'raw'], default='chinese',
                                   help='Track to export (default: chinese)')
        export_parser.add_argument('-o', '--output', type=Path, required=True, help='Output SRT path')

    def handle_command(self, args: argparse.Namespace) -> int:
        """
        Handle the parsed command.

        Args:
            args: Parsed command-line arguments

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        setup_cli_logging(args.verbose, args.debug, use_colors=not args.no_colors)

        if not args.command:
            logger.error("No command given; see --help")
            return 1

        try:
            track_set = self._ingest(args.files)
            if track_set is None:
                return 1

            if args.command == 'inspect':
                return self._handle_inspect(track_set)
            elif args.command == 'lookup':
                return self._handle_lookup(track_set, args.time)
            elif args.command == 'export':
                return self._handle_export(track_set, args.track, args.output)
            else:
                logger.error(f"Unknown command: {args.command}")
                return 1
        except (IOError, ValueError) as e:
            logger.error(f"Error: {e}")
            return 1

    def _ingest(self, files: List[Path]) -> Optional[SubtitleTrackSet]:
        store = SessionStore()
        for file_path in files:
            if not file_path.exists():
                logger.error(f"File not found: {file_path}")
                return None
            store.upload(file_path, self.ingestor)

        if store.state.subtitles is None:
            logger.error("No subtitle files given")
        return store.state.subtitles

    def _handle_inspect(self, track_set: SubtitleTrackSet) -> int:
        missing = track_set.missing_language.value if track_set.missing_language else 'none'
        print(f"Detected language: {track_set.detected_language.value}")
        print(f"Raw cues:          {len(track_set.raw)}")
        print(f"Chinese cues:      {len(track_set.chinese)}")
        print(f"English cues:      {len(track_set.english)}")
        print(f"Missing language:  {missing}")
        if track_set.raw:
            end = max(cue.end_time for cue in track_set.raw)
            print(f"Span:              {TimeConverter.format_duration(end)}")
        return 0

    def _handle_lookup(self, track_set: SubtitleTrackSet, seconds: float) -> int:
        active = find_active_cues(track_set, seconds)
        print(f"[{TimeConverter.seconds_to_readable(seconds)}]")
        print(f"Chinese: {self._describe(active.chinese)}")
        print(f"English: {self._describe(active.english)}")
        return 0

    def _handle_export(self, track_set: SubtitleTrackSet, track: str, output: Path) -> int:
        cues = track_set.raw if track == 'raw' else getattr(track_set, track)
        if not cues:
            logger.error(f"The {track} track is empty, nothing to export")
            return 1
        SubtitleFormatFactory.write_srt(cues, output)
        print(f"Wrote {len(cues)} cues to {output}")
        return 0

    @staticmethod
    def _describe(cue: Optional[Cue]) -> str:
        if cue is None:
            return '-'
        cue_id = '?' if isinstance(cue.id, float) and math.isnan(cue.id) else cue.id
        text = cue.text.replace('\n', ' / ')
        return f"#{cue_id} {cue.format_time_range()} {text}"
