import logging

LOGGER = logging.getLogger(__name__)

class Junction:
    """Represents a railway junction where sections of track start or end.

    In a particular track, a junction has between one and three branches that
    connect it to sections, and at most one branch of each type.

    Attributes
    ----------
    name : str
        The identifier of the junction. Two junctions are the same junction if and only if their names are equal.
    """
    def __init__(self, name: str):
        """Initializes a Junction instance with a given name.

        :param name: The name of the junction. May be empty, but not None.
        :raises TypeError: If name is None or not a string.
        """
        if name is None:
            raise TypeError("The junction name cannot be None.")
        if not isinstance(name, str):
            raise TypeError(f"The junction name must be a string, not {type(name).__name__}.")
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def check_invariant(self) -> bool:
        """Checks that the junction is internally consistent. Intended for testing.

        :return: True if the class invariant holds.
        """
        return self._name is not None

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Junction):
            return NotImplemented
        return self._name == other._name

    def __hash__(self):
        return hash(self._name)

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"Junction({self._name!r})"
