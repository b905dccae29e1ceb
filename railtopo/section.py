from railtopo.endpoint import JunctionEndpoint
from railtopo.junction import Junction
import logging

LOGGER = logging.getLogger(__name__)


class Section:
    """Represents a section of track between two endpoints.

    A section has a positive length (in meters) and two distinct endpoints. The
    endpoints may be at the same junction, on different branches, in which case
    the section forms a loop from the junction back to itself.

    A section is identified by its length and its two endpoints, in either order:
    ``Section(9, a, b) == Section(9, b, a)``.

    Attributes
    ----------
    length : int
        The length of the section in meters.
    endpoint_a : JunctionEndpoint
        The first endpoint the section was constructed with.
    endpoint_b : JunctionEndpoint
        The second endpoint the section was constructed with.
    """

    def __init__(self, length: int, endpoint_a: JunctionEndpoint, endpoint_b: JunctionEndpoint):
        """Initializes a Section instance.

        :param length: A positive integer representing the length of the section in meters.
        :param endpoint_a: One endpoint of the section.
        :param endpoint_b: The other endpoint of the section.
        :raises TypeError: If either endpoint is None.
        :raises ValueError: If the length is not a positive integer or the endpoints are equal.
        """
        if endpoint_a is None or endpoint_b is None:
            raise TypeError("The endpoints of a section cannot be None.")
        if not isinstance(length, int) or isinstance(length, bool):
            raise ValueError(f"The length of a section must be an integer, not {length!r}.")
        if length <= 0:
            raise ValueError(f"The length of a section must be positive, not {length}.")
        if endpoint_a == endpoint_b:
            raise ValueError(f"The endpoints of a section must be distinct, both are {endpoint_a}.")
        self._length = length
        self._endpoint_a = endpoint_a
        self._endpoint_b = endpoint_b
        self._endpoints = frozenset((endpoint_a, endpoint_b))
        self._junctions = frozenset((endpoint_a.junction, endpoint_b.junction))

    @property
    def length(self) -> int:
        return self._length

    @property
    def endpoint_a(self) -> JunctionEndpoint:
        return self._endpoint_a

    @property
    def endpoint_b(self) -> JunctionEndpoint:
        return self._endpoint_b

    def endpoints(self) -> "frozenset[JunctionEndpoint]":
        """Returns the two endpoints of the section."""
        return self._endpoints

    def junctions(self) -> "frozenset[Junction]":
        """Returns the junctions at the ends of the section. A loop has only one."""
        return self._junctions

    def is_loop(self) -> bool:
        return len(self._junctions) == 1

    def other_endpoint(self, endpoint: JunctionEndpoint) -> JunctionEndpoint:
        """Returns the endpoint at the opposite end of the section to the given one.

        :param endpoint: An endpoint of this section.
        :return: The other endpoint of this section.
        :raises ValueError: If the given endpoint is not an endpoint of this section.
        """
        if endpoint == self._endpoint_a:
            return self._endpoint_b
        if endpoint == self._endpoint_b:
            return self._endpoint_a
        raise ValueError(f"{endpoint} is not an endpoint of section {self}.")

    def check_invariant(self) -> bool:
        """Checks that the section is internally consistent. Intended for testing.

        :return: True if the class invariant holds.
        """
        if self._endpoint_a is None or self._endpoint_b is None:
            return False
        return (
            self._length > 0
            and self._endpoint_a != self._endpoint_b
            and self._endpoints == {self._endpoint_a, self._endpoint_b}
        )

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Section):
            return NotImplemented
        return self._length == other._length and self._endpoints == other._endpoints

    def __hash__(self):
        # frozenset hashing is independent of the order the endpoints were given in
        return hash((self._length, self._endpoints))

    def __str__(self):
        return f"{self._length} {self._endpoint_a} {self._endpoint_b}"

    def __repr__(self):
        return f"Section({self._length}, {self._endpoint_a!r}, {self._endpoint_b!r})"
