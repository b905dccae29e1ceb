
from enum import Enum

"""
These are the enumerated types used by the track model. The member names
are the canonical text names used when rendering and parsing a track, and
they match the names of the Protobuf enum in railtopo.proto.
"""

class Branch(Enum): # the kind of connection between a junction and a section
    FACING = 0
    NORMAL = 1
    REVERSE = 2

    def __str__(self):
        return self.name
