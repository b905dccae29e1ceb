from railtopo.enums import Branch
from railtopo.junction import Junction


class JunctionEndpoint:
    """Identifies a junction together with one of its branches.

    A section of track is connected to the rest of the track at two endpoints.

    Attributes
    ----------
    junction : Junction
        The junction of this pair.
    branch : Branch
        The branch of the junction that the section is connected on.
    """

    def __init__(self, junction: Junction, branch: Branch):
        """Initializes an endpoint from a junction and one of its branches.

        :param junction: The junction of the pair.
        :param branch: The branch of the pair.
        :raises TypeError: If either parameter is None.
        """
        if junction is None or branch is None:
            raise TypeError("The junction and branch of an endpoint cannot be None.")
        self._junction = junction
        self._branch = branch

    @property
    def junction(self) -> Junction:
        return self._junction

    @property
    def branch(self) -> Branch:
        return self._branch

    def check_invariant(self) -> bool:
        return self._junction is not None and self._branch is not None

    def __eq__(self, other):
        if not isinstance(other, JunctionEndpoint):
            return NotImplemented
        return self._junction == other._junction and self._branch == other._branch

    def __hash__(self):
        return hash((self._junction, self._branch))

    def __str__(self):
        return f"({self._junction}, {self._branch.name})"

    def __repr__(self):
        return f"JunctionEndpoint({self._junction!r}, Branch.{self._branch.name})"
