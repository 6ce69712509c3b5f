#!/usr/bin/env python3
"""
Bilingual Subtitle Study - Main Application Entry Point
=======================================================

Command-line front end for the subtitle ingestion engine:
- SRT and ASS parsing
- Chinese / English / bilingual detection
- Splitting and merging uploads into Chinese and English tracks

Usage:
    python subtitle_study.py inspect movie.en.srt movie.zh.srt
    python subtitle_study.py lookup movie.bilingual.ass --time 62.5
    python subtitle_study.py export movie.bilingual.srt --track english -o movie.en.srt

    # Help
    python subtitle_study.py --help
    python subtitle_study.py <command> --help
"""

import sys
from pathlib import Path

# Add the current directory to Python path for imports
sys.path.insert(0, str(Path(__file__).parent))

from utils.constants import APP_NAME, APP_VERSION
from ui.cli import CLIHandler


def main() -> int:
    """
    Main application entry point.

    Returns:
        Process exit code
    """
    cli_handler = CLIHandler()
    parser = cli_handler.create_parser()

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return 1

    try:
        return cli_handler.handle_command(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130


def print_system_info():
    """Print system and application information."""
    import platform

    print(f"{APP_NAME} v{APP_VERSION}")
    print(f"Python {platform.python_version()}")
    print(f"Platform: {platform.system()} {platform.release()}")
    print()


if __name__ == '__main__':
    if '--debug' in sys.argv:
        print_system_info()

    sys.exit(main())
