import logging
from railtopo.endpoint import JunctionEndpoint
from railtopo.junction import Junction
from railtopo.section import Section

LOGGER = logging.getLogger(__name__)


class Location:
    """A point on the railway track.

    A location is described by a section it lies on, an endpoint of that
    section, and its offset (in meters) from that endpoint along the section.

    The same point can be described in several ways:

    - A location with offset ``0`` is at the junction of its endpoint. It lies
      on every section connected to that junction, and it is the same point
      whichever section or branch it was described from.
    - A location that is not at a junction can be measured from either end of
      its section. Given a section of length 10 with endpoints (j1, FACING) and
      (j2, REVERSE), "3 from j1 along FACING" and "7 from j2 along REVERSE" are
      the same point.

    For this reason equality of locations compares the points they describe,
    not the values they were constructed with. See :meth:`equivalent_to`.

    Attributes
    ----------
    section : Section
        The section the location was constructed with. A location at a junction
        lies on other sections as well.
    endpoint : JunctionEndpoint
        The endpoint of ``section`` the offset is measured from.
    offset : int
        The distance from ``endpoint`` along ``section``. Always at least ``0`` and
        strictly less than the section length.
    """

    def __init__(self, section: Section, endpoint: JunctionEndpoint, offset: int):
        """Initializes a Location instance.

        :param section: A section that the location lies on.
        :param endpoint: An endpoint of the given section.
        :param offset: The distance of the location from ``endpoint`` along ``section``.
        :raises TypeError: If section or endpoint is None.
        :raises ValueError: If the offset is not an integer, is negative or is not less than the section length,
            or if endpoint is not an endpoint of section.
        """
        if section is None or endpoint is None:
            raise TypeError("The section and endpoint of a location cannot be None.")
        if not isinstance(offset, int) or isinstance(offset, bool):
            raise ValueError(f"The offset of a location must be an integer, not {offset!r}.")
        if offset < 0 or offset >= section.length:
            raise ValueError(
                f"The offset must be at least 0 and less than the section length ({section.length}), not {offset}."
            )
        if endpoint not in section.endpoints():
            raise ValueError(f"{endpoint} is not an endpoint of section {section}.")
        self._section = section
        self._endpoint = endpoint
        self._offset = offset

    @property
    def section(self) -> Section:
        return self._section

    @property
    def endpoint(self) -> JunctionEndpoint:
        return self._endpoint

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def junction(self) -> Junction:
        """The junction that the offset is measured from."""
        return self._endpoint.junction

    def at_junction(self) -> bool:
        """Checks if the location is at a junction, i.e. has an offset of zero.

        :return: True if the location is at a junction; False otherwise.
        """
        return self._offset == 0

    def on_section(self, candidate: Section) -> bool:
        """Checks if the location lies on the given section.

        A location lies on a section if the section is equal to the one it was
        constructed with, or if the location is at a junction that is one of the
        ends of the section.

        :param candidate: The section to check.
        :return: True if the location lies on the section; False otherwise.
        """
        if self._section == candidate:
            return True
        if self.at_junction():
            return self.junction in candidate.junctions()
        return False

    def equivalent_to(self, other: "Location") -> bool:
        """Checks if two locations describe the same point on the track.

        Two locations are equivalent if either:

        1. both are at a junction, and the junctions are equal (the branches may differ);
        2. their endpoints are equal and their offsets are equal; or
        3. their sections are equal, their endpoints differ, and their offsets
           add up to the length of the section.

        :param other: The location to compare with.
        :return: True if the locations are equivalent; False otherwise.
        """
        if self.at_junction() and other.at_junction():
            return self.junction == other.junction
        if self._endpoint == other._endpoint:
            return self._offset == other._offset
        return (
            self._section == other._section
            and self._offset + other._offset == self._section.length
        )

    def other_end(self) -> "Location":
        """Returns this location described from the opposite end of its section.

        A location at a junction is returned unchanged, since the far end of the
        section is a different point.

        :return: An equivalent location measured from the other endpoint.
        """
        if self.at_junction():
            return self
        return Location(
            self._section,
            self._section.other_endpoint(self._endpoint),
            self._section.length - self._offset,
        )

    def check_invariant(self) -> bool:
        """Checks that the location is internally consistent. Intended for testing.

        :return: True if the class invariant holds.
        """
        return (
            self._section is not None
            and self._endpoint is not None
            and 0 <= self._offset < self._section.length
            and self._endpoint in self._section.endpoints()
        )

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Location):
            return NotImplemented
        return self.equivalent_to(other)

    def __hash__(self):
        if self.at_junction():
            return hash(self.junction)
        # Equal off-junction locations need not share a section or an
        # endpoint, so they all share one hash.
        return hash(Location)

    def __str__(self):
        if self.at_junction():
            return str(self.junction)
        return f"Distance {self._offset} from {self.junction} along the {self._endpoint.branch.name} branch"

    def __repr__(self):
        return f"Location({self._section!r}, {self._endpoint!r}, {self._offset})"
