"""
Playback-time queries over subtitle tracks.

The player asks, on every clock tick, which cue is active at time T in each
track. This module answers that and drives the "stop at sentence end"
behavior, which pauses playback as soon as the active cue changes.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
from core.session import SubtitleTrackSet
from core.subtitle_formats import Cue, CueId


@dataclass(frozen=True)
class ActiveCues:
    """Cues shown at one instant, looked up independently per track."""
    chinese: Optional[Cue] = None
    english: Optional[Cue] = None


def find_active_cue(track: Sequence[Cue], seconds: float) -> Optional[Cue]:
    """Return the first cue whose [start, end] interval contains ``seconds``."""
    for cue in track:
        if cue.contains(seconds):
            return cue
    return None


def find_active_cues(track_set: Optional[SubtitleTrackSet], seconds: float) -> ActiveCues:
    if track_set is None:
        return ActiveCues()
    return ActiveCues(
        chinese=find_active_cue(track_set.chinese, seconds),
        english=find_active_cue(track_set.english, seconds)
    )


def find_replay_cue(track: Sequence[Cue], seconds: float) -> Optional[Cue]:
    """
    Pick the sentence to replay.

    The active cue if there is one, otherwise the cue that finished most
    recently (latest end time), otherwise None.
    """
    active = find_active_cue(track, seconds)
    if active is not None:
        return active

    finished = [cue for cue in track if cue.end_time < seconds]
    if not finished:
        return None
    return max(finished, key=lambda cue: cue.end_time)


def sentence_stop_transition(previous_cue_id: Optional[CueId],
                             current_cue_id: Optional[CueId],
                             armed: bool) -> Tuple[bool, bool]:
    """
    Step the stop-at-sentence-end state machine.

    Args:
        previous_cue_id: Id of the cue active on the previous tick (None in a gap)
        current_cue_id: Id of the cue active now (None in a gap)
        armed: Whether a stop is pending

    Returns:
        Tuple of (new_armed, should_stop). Leaving a cue, including into a
        gap, stops playback and disarms. Entering a cue from a gap does not.
        NaN ids never compare equal.
    """
    if not armed or previous_cue_id is None:
        return armed, False
    if previous_cue_id == current_cue_id:
        return True, False
    return False, True


class SentenceStopper:
    """Holds the armed flag and last seen cue between clock ticks."""

    def __init__(self):
        self.armed = False
        self.last_cue: Optional[Cue] = None

    def arm(self, current_cue: Optional[Cue]) -> None:
        """Arm on the cue playing now; called when playback starts with the feature on."""
        self.armed = True
        self.last_cue = current_cue

    def disarm(self) -> None:
        self.armed = False

    def tick(self, current_cue: Optional[Cue]) -> bool:
        """
        Feed the cue active on this tick.

        Returns:
            True if playback should stop now
        """
        previous = self.last_cue
        self.last_cue = current_cue

        # Same cue object: still inside it, whatever its id
        if self.armed and previous is not None and current_cue is previous:
            return False

        self.armed, should_stop = sentence_stop_transition(
            previous.id if previous else None,
            current_cue.id if current_cue else None,
            self.armed
        )
        return should_stop
