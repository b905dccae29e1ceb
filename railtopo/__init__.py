"""
Static topology of a railway track: junctions, the sections connecting them,
and locations on the track.
"""

from .enums import Branch
from .junction import Junction
from .endpoint import JunctionEndpoint
from .section import Section
from .location import Location
from .track import Track
from .exceptions import InvalidTrackError, TrackFormatError

__all__ = [
    "Branch",
    "Junction",
    "JunctionEndpoint",
    "Section",
    "Location",
    "Track",
    "InvalidTrackError",
    "TrackFormatError",
]
