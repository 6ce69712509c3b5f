"""
Core subtitle processing modules.

This package contains the fundamental components for subtitle processing:
- The normalized cue model and SRT/ASS parsers
- Encoding and language detection utilities
- Timestamp conversion
- Session state and playback-time queries
"""

from .subtitle_formats import Cue, SRTParser, ASSParser, SubtitleFormatFactory
from .encoding_detection import EncodingDetector
from .language_detection import LanguageDetector, LanguageStats
from .timing_utils import TimeConverter
from .session import (
    MediaReference, SubtitleTrackSet, SessionState, SessionStore,
    LoadVideo, LoadSubtitles, Reset, reduce
)
from .playback import (
    ActiveCues, SentenceStopper, find_active_cue, find_active_cues,
    find_replay_cue, sentence_stop_transition
)

__all__ = [
    'Cue',
    'SRTParser',
    'ASSParser',
    'SubtitleFormatFactory',
    'EncodingDetector',
    'LanguageDetector',
    'LanguageStats',
    'TimeConverter',
    'MediaReference',
    'SubtitleTrackSet',
    'SessionState',
    'SessionStore',
    'LoadVideo',
    'LoadSubtitles',
    'Reset',
    'reduce',
    'ActiveCues',
    'SentenceStopper',
    'find_active_cue',
    'find_active_cues',
    'find_replay_cue',
    'sentence_stop_transition',
]
