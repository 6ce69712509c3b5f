"""
Session state for a study session.

The session holds the loaded video reference and the accumulated subtitle
tracks. State is an immutable value; the only way to change it is to
dispatch an action to the ``SessionStore``, which replaces the value and
notifies subscribers. Components get a read reference (``store.state``) and
the update channel (``store.dispatch``), never a mutable handle.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union
from utils.constants import LanguageVerdict
from utils.file_operations import FileHandler, FileKind
from utils.logging_config import get_logger
from core.subtitle_formats import Cue

logger = get_logger(__name__)


@dataclass(frozen=True)
class MediaReference:
    """Handle to the loaded video: name, playable locator and MIME type."""
    name: str
    locator: str
    mime_type: str = ''

    @classmethod
    def from_path(cls, file_path: Path, mime_type: Optional[str] = None) -> 'MediaReference':
        return cls(
            name=file_path.name,
            locator=str(file_path),
            mime_type=mime_type or FileHandler.guess_mime_type(file_path)
        )


@dataclass(frozen=True)
class SubtitleTrackSet:
    """Accumulated subtitle output: raw cues plus one track per language."""
    raw: Tuple[Cue, ...] = ()
    chinese: Tuple[Cue, ...] = ()
    english: Tuple[Cue, ...] = ()
    detected_language: LanguageVerdict = LanguageVerdict.UNKNOWN
    missing_language: Optional[LanguageVerdict] = None

    @property
    def is_complete(self) -> bool:
        """True once both languages are represented."""
        return self.missing_language is None

    def track(self, language: LanguageVerdict) -> Tuple[Cue, ...]:
        """
        Get the track for a single language.

        Raises:
            ValueError: If language is not CHINESE or ENGLISH
        """
        if language is LanguageVerdict.CHINESE:
            return self.chinese
        if language is LanguageVerdict.ENGLISH:
            return self.english
        raise ValueError(f"No track for language: {language}")

    def summary(self) -> str:
        missing = self.missing_language.value if self.missing_language else 'none'
        return (f"{self.detected_language.value}: {len(self.chinese)} Chinese, "
                f"{len(self.english)} English, {len(self.raw)} raw cues "
                f"(missing: {missing})")


@dataclass(frozen=True)
class SessionState:
    """Everything handed to the playback and display collaborators."""
    video: Optional[MediaReference] = None
    subtitles: Optional[SubtitleTrackSet] = None


# Actions

@dataclass(frozen=True)
class LoadVideo:
    media: MediaReference


@dataclass(frozen=True)
class LoadSubtitles:
    track_set: SubtitleTrackSet


@dataclass(frozen=True)
class Reset:
    pass


Action = Union[LoadVideo, LoadSubtitles, Reset]
Listener = Callable[[SessionState], None]


def reduce(state: SessionState, action: Action) -> SessionState:
    """
    Compute the next session state.

    Loading subtitles never touches the video reference and loading a video
    never touches the subtitles.

    Raises:
        ValueError: For an unknown action
    """
    if isinstance(action, LoadVideo):
        return replace(state, video=action.media)
    if isinstance(action, LoadSubtitles):
        return replace(state, subtitles=action.track_set)
    if isinstance(action, Reset):
        return SessionState()
    raise ValueError(f"Unknown session action: {action!r}")


@dataclass
class SessionStore:
    """Owns the current SessionState and is its single update channel."""
    state: SessionState = field(default_factory=SessionState)
    _listeners: List[Listener] = field(default_factory=list, repr=False)

    def dispatch(self, action: Action) -> SessionState:
        """Apply an action, notify listeners, and return the new state."""
        self.state = reduce(self.state, action)
        logger.debug(f"Dispatched {type(action).__name__}")
        for listener in list(self._listeners):
            listener(self.state)
        return self.state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with every new state.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def upload(self, file_path: Path, ingestor, mime_type: Optional[str] = None) -> SessionState:
        """
        Route an uploaded file by kind.

        Videos replace the video reference. Subtitles are ingested against the
        current track set. Other files are ignored with a warning.

        Args:
            file_path: Uploaded file
            ingestor: Object with ``ingest_file(path, previous)``
            mime_type: Declared MIME type, if any

        Returns:
            The (possibly unchanged) state

        Raises:
            IOError: If a subtitle file cannot be read
        """
        kind = FileHandler.classify_file(file_path.name, mime_type)

        if kind is FileKind.VIDEO:
            logger.info(f"Loaded video: {file_path.name}")
            return self.dispatch(LoadVideo(MediaReference.from_path(file_path, mime_type)))

        if kind is FileKind.SUBTITLE:
            track_set = ingestor.ingest_file(file_path, self.state.subtitles)
            return self.dispatch(LoadSubtitles(track_set))

        logger.warning(f"Ignoring unsupported file: {file_path.name}")
        return self.state
