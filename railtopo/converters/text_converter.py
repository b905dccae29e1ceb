import logging
import re

from railtopo.converters.enum_converter import EnumConverter
from railtopo.endpoint import JunctionEndpoint
from railtopo.exceptions import TrackFormatError
from railtopo.junction import Junction
from railtopo.section import Section
from railtopo.track import Track

LOGGER = logging.getLogger(__name__)

# "<length> (<junction>, <BRANCH>) (<junction>, <BRANCH>)"
_ENDPOINT = r"\(([^,()]*),\s*(\w+)\s*\)"
_SECTION_RE = re.compile(rf"^\s*(-?\d+)\s+{_ENDPOINT}\s*{_ENDPOINT}\s*$")


class TextConverter:
    """Converts between track objects and their text rendering.

    A track is written one section per line, in the form produced by
    ``str(section)``, e.g. ``9 (j1, FACING) (j2, NORMAL)``. Blank lines and
    lines starting with ``#`` are ignored when reading. Junction names are
    read verbatim, including any leading or trailing spaces inside the
    parentheses, so every rendered section reads back as an equal one.
    """

    @staticmethod
    def convert_str_to_endpoint(junction_name: str, branch_name: str) -> JunctionEndpoint:
        return JunctionEndpoint(Junction(junction_name), EnumConverter.branch_str_to_enum(branch_name))

    @staticmethod
    def convert_str_to_section(line: str) -> Section:
        """Parses a single section line.

        :param line: Text of the form ``<length> (<junction>, <BRANCH>) (<junction>, <BRANCH>)``.
        :return: The parsed section.
        :raises TrackFormatError: If the text is not a section line.
        :raises ValueError: If the section is not valid, e.g. its length is not positive.
        """
        match = _SECTION_RE.match(line)
        if match is None:
            raise TrackFormatError(f"Malformed section {line.strip()!r}")
        length, name_a, branch_a, name_b, branch_b = match.groups()
        return Section(
            int(length),
            TextConverter.convert_str_to_endpoint(name_a, branch_a),
            TextConverter.convert_str_to_endpoint(name_b, branch_b),
        )

    @staticmethod
    def convert_str_to_track(text: str) -> Track:
        """Parses a whole track, one section per line.

        :param text: The track description.
        :return: A new Track containing the parsed sections.
        :raises TrackFormatError: If a line is malformed. The message includes the line number.
        :raises InvalidTrackError: If two sections share an endpoint.
        """
        track = Track()
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip() or line.lstrip().startswith("#"):
                continue
            try:
                section = TextConverter.convert_str_to_section(line)
            except TrackFormatError as e:
                raise TrackFormatError(f"Line {line_number}: {e}") from e
            except ValueError as e:
                raise ValueError(f"Line {line_number}: {e}") from e
            LOGGER.debug(f"Line {line_number}: parsed section {section}")
            track.add_section(section)
        return track

    @staticmethod
    def convert_track_to_str(track: Track) -> str:
        return str(track)
