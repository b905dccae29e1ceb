from railtopo.enums import Branch
from railtopo.endpoint import JunctionEndpoint
from railtopo.exceptions import InvalidTrackError
from railtopo.junction import Junction
from railtopo.section import Section
import logging
import os
import threading

LOGGER = logging.getLogger(__name__)


class Track:
    """Represents the layout of a railway track as a collection of sections.

    A junction is on the track if and only if it is at an endpoint of one of the
    track's sections. Each junction is connected to at most one section per
    branch, so no endpoint is shared by two different sections. This is checked
    every time a section is added.

    All access to the sections goes through ``lock``, so a track can be shared
    between threads.

    Attributes
    ----------
    sections : set
        The sections of the track.
    endpoints : dict
        Maps every endpoint of every section to the section it belongs to.
    lock : threading.Lock
        Serializes mutation and reads of ``sections`` and ``endpoints``.
    """

    def __init__(self, sections=None):
        """Initializes the Track with an optional list of sections.

        :param sections: An optional iterable of sections, added in order with :meth:`add_section`. Defaults to None.
        :raises InvalidTrackError: If the given sections conflict with each other.
        """
        self.sections = set()
        self.endpoints = {}
        self.lock = threading.Lock()

        if sections:
            for section in sections:
                self.add_section(section)

    @classmethod
    def from_config(cls, config: dict) -> "Track":
        """Builds a track from a configuration dictionary.

        example config = {"sections": [(10, ("A", "NORMAL"), ("B", "FACING"))]}

        :param config: A dictionary with a "sections" list. Each entry is a tuple of the section length and its two endpoints, each given as a tuple of junction name and branch name.
        :return: A new Track containing the configured sections.
        """
        sections = []
        for length, (name_a, branch_a), (name_b, branch_b) in config.get("sections", []):
            sections.append(Section(
                length,
                JunctionEndpoint(Junction(name_a), Branch[branch_a]),
                JunctionEndpoint(Junction(name_b), Branch[branch_b]),
            ))
        return cls(sections)

    def add_section(self, section: Section):
        """Adds a section to the track, unless doing so would make the track invalid.

        If the track already contains an equal section the track is not modified.

        :param section: The section to be added to the track.
        :raises TypeError: If section is None.
        :raises InvalidTrackError: If the track does not contain an equal section, but one of the endpoints of the given section is already an endpoint of another section in the track. The track is not modified.
        """
        if section is None:
            raise TypeError("Cannot add a None section to the track.")

        with self.lock:
            if section in self.sections:
                LOGGER.debug(f"Track already contains section {section}, not adding it again")
                return

            for endpoint in section.endpoints():
                existing = self.endpoints.get(endpoint)
                if existing is not None:
                    LOGGER.debug(f"Rejected section {section}: {endpoint} is used by {existing}")
                    raise InvalidTrackError(
                        f"Cannot add section {section}: junction {endpoint.junction} is already connected to section {existing} on its {endpoint.branch.name} branch.",
                        section=section,
                        conflicting_section=existing,
                    )

            self.sections.add(section)
            for endpoint in section.endpoints():
                self.endpoints[endpoint] = section
            LOGGER.debug(f"Added section {section}")

    def remove_section(self, section: Section):
        """Removes a section equal to the given one from the track, if there is one.

        :param section: The section to be removed from the track.
        """
        with self.lock:
            if section not in self.sections:
                return
            self.sections.discard(section)
            for endpoint in section.endpoints():
                del self.endpoints[endpoint]
            LOGGER.debug(f"Removed section {section}")

    def contains(self, section: Section) -> bool:
        """Checks if the track contains a section equal to the given one.

        :param section: The section whose presence in the track is to be checked.
        :return: True if the track contains an equal section; False otherwise.
        """
        with self.lock:
            return section in self.sections

    def junctions(self) -> "set[Junction]":
        """Returns the set of all junctions connected to at least one section of the track."""
        with self.lock:
            return {junction for section in self.sections for junction in section.junctions()}

    def section_at(self, junction: Junction, branch: Branch):
        """Returns the section connected to the given junction on the given branch.

        :param junction: The junction of the section's endpoint. Compared by name.
        :param branch: The branch of the junction.
        :return: The connected section, or None if there is none.
        """
        with self.lock:
            return self.endpoints.get(JunctionEndpoint(junction, branch))

    def check_invariant(self) -> bool:
        """Checks that the track is internally consistent. Intended for testing.

        :return: True if no endpoint is shared by two sections and the endpoint index matches the sections.
        """
        with self.lock:
            seen = {}
            for section in self.sections:
                for endpoint in section.endpoints():
                    if endpoint in seen:
                        return False
                    seen[endpoint] = section
            return seen == self.endpoints

    def __contains__(self, section):
        return self.contains(section)

    def __iter__(self):
        with self.lock:
            snapshot = list(self.sections)
        return (section for section in snapshot)

    def __len__(self):
        with self.lock:
            return len(self.sections)

    def __str__(self):
        return os.linesep.join(str(section) for section in self)

    def __repr__(self):
        return f"Track({list(self)!r})"
