"""
Subtitle processing modules.

This package contains the processors that act on parsed cues:
- Bilingual splitting into Chinese and English tracks
- Ingestion and merging of uploads across a session
"""

from .splitter import BilingualSplitter
from .ingestion import SubtitleIngestor

__all__ = [
    'BilingualSplitter',
    'SubtitleIngestor',
]
