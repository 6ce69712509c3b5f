"""Shared pytest fixtures for subtitle study tests."""
from pathlib import Path
from typing import Callable

import pytest

from processors.ingestion import SubtitleIngestor


# ============================================================================
# Sample subtitle texts
# ============================================================================

ENGLISH_SRT = """1
00:00:01,000 --> 00:00:02,500
Where are you going?

2
00:00:03,000 --> 00:00:04,200
To the station.

3
00:00:05,000 --> 00:00:06,000
Wait for me!
"""

ENGLISH_SRT_TAKE_TWO = """1
00:00:01,100 --> 00:00:02,600
Where are you off to?

2
00:00:03,100 --> 00:00:04,300
The train station.
"""

CHINESE_SRT = """1
00:00:01,000 --> 00:00:02,500
你要去哪里？

2
00:00:03,000 --> 00:00:04,200
去车站。

3
00:00:05,000 --> 00:00:06,000
等等我！
"""

BILINGUAL_SRT = """1
00:00:01,000 --> 00:00:02,500
你要去哪里？
Where are you going?

2
00:00:03,000 --> 00:00:04,200
去车站。
To the station.

3
00:00:05,000 --> 00:00:06,000
等等我！
Wait for me!
"""

BILINGUAL_ASS = r"""[Script Info]
Title: Sample
ScriptType: v4.00+

[V4+ Styles]
Format: Name, Fontname, Fontsize
Style: Default,Arial,48

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:01.00,0:00:02.50,Default,,0,0,0,,{\b1}你要去哪里？{\b0}\NWhere are you going?
Dialogue: 0,0:00:03.00,0:00:04.20,Default,,0,0,0,,去车站。\NTo the station, I think.
"""


@pytest.fixture
def ingestor() -> SubtitleIngestor:
    return SubtitleIngestor()


@pytest.fixture
def write_subtitle(tmp_path) -> Callable[[str, str], Path]:
    """Write subtitle text to a file under tmp_path and return its path."""
    def _write(name: str, content: str, encoding: str = 'utf-8') -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return path
    return _write
