"""
Frame sequencer for the animated keyboard diagram.

A small state machine driven by explicit tick calls: it holds the frames
of the selected shortcut and steps through them at a fixed rate.
"""

import logging

from .config import FRAME_DURATION
from .notation import Frame, Sequence

logger = logging.getLogger('LazyKeys.Sequencer')


class FrameSequencer:
    """
    Steps through a shortcut's frames over time.

    Idle while there are no frames; otherwise displaying frame
    ``frame_index``, which advances by one (wrapping) each time the
    accumulated tick time reaches ``frame_duration``.
    """

    def __init__(self, frame_duration: float = FRAME_DURATION):
        self.frame_duration = frame_duration
        self.frames: Sequence = ()
        self.frame_index = 0
        self.elapsed = 0.0

    @property
    def is_idle(self) -> bool:
        return not self.frames

    @property
    def current_frame(self) -> Frame:
        """Keys of the frame on display; empty while idle."""
        if self.is_idle:
            return ()
        return self.frames[self.frame_index]

    def on_selection_changed(self, frames: Sequence):
        """Restart on a new sequence from its first frame."""
        self.frames = tuple(frames)
        self.frame_index = 0
        self.elapsed = 0.0
        logger.debug("Sequencer reset with %d frames", len(self.frames))

    def on_tick(self, delta: float) -> bool:
        """
        Advance the clock by delta seconds.

        At most one frame is advanced per call, however large delta is.

        Returns:
            True if the displayed frame changed
        """
        self.elapsed += delta
        if self.frames and self.elapsed >= self.frame_duration:
            self.frame_index = (self.frame_index + 1) % len(self.frames)
            self.elapsed = 0.0
            return True
        return False

    def clear(self):
        """Drop the current sequence and go idle."""
        self.on_selection_changed(())

    def snapshot(self) -> dict:
        return {
            'frames': len(self.frames),
            'frame_index': self.frame_index,
            'elapsed': self.elapsed,
        }

