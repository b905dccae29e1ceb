"""
Exceptions raised by the track model. Missing required values raise TypeError
and out-of-range values raise ValueError; these cover the rest.
"""


class InvalidTrackError(Exception):
    """Raised when adding a section would connect a junction to two different
    sections on the same branch. The track is left unchanged."""

    def __init__(self, message: str, section=None, conflicting_section=None):
        super().__init__(message)
        self.section = section
        self.conflicting_section = conflicting_section


class TrackFormatError(ValueError):
    """Raised when text or a message cannot be converted into track objects."""
