import argparse
import logging
import sys

from google.protobuf.message import DecodeError

from railtopo import proto
from railtopo.converters.enum_converter import EnumConverter
from railtopo.converters.text_converter import TextConverter
from railtopo.converters.track_converter import TrackConverter
from railtopo.endpoint import JunctionEndpoint
from railtopo.exceptions import InvalidTrackError, TrackFormatError
from railtopo.junction import Junction
from railtopo.location import Location
from railtopo.track import Track
from railtopo.utils import initial_config, setup_logging

LOGGER = logging.getLogger("Validator")


def load_track(args) -> Track:
    if args.pbIn is not None:
        with open(args.pbIn, "rb") as f:
            track_pb = proto.Track()
            track_pb.ParseFromString(f.read())
        LOGGER.debug(f"Read {len(track_pb.sections)} sections from {args.pbIn}")
        return TrackConverter.convert_track_pb_to_obj(track_pb)

    if args.trackFile is None:
        LOGGER.debug("No track file provided, will use the sample configuration")
        return Track.from_config(initial_config)

    if args.trackFile == "-":
        return TextConverter.convert_str_to_track(sys.stdin.read())
    with open(args.trackFile) as f:
        return TextConverter.convert_str_to_track(f.read())


def locate(track: Track, junction_name: str, branch_name: str, offset: int) -> Location:
    """Finds the location ``offset`` meters from a junction along one of its branches.

    :raises ValueError: If the junction has no section on that branch, or the offset does not fit on it.
    """
    junction = Junction(junction_name)
    branch = EnumConverter.branch_str_to_enum(branch_name)
    section = track.section_at(junction, branch)
    if section is None:
        raise ValueError(f"There is no section on the {branch.name} branch of junction {junction}")
    return Location(section, JunctionEndpoint(junction, branch), offset)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate a railway track layout")

    parser.add_argument("trackFile", nargs="?", type=str, help="Text track description, one section per line ('-' for stdin)")
    parser.add_argument("-pbIn", type=str, help="Read the track from a serialized protobuf Track message")
    parser.add_argument("-pbOut", type=str, help="Write the track as a serialized protobuf Track message")
    parser.add_argument("-locate", nargs=3, metavar=("JUNCTION", "BRANCH", "OFFSET"), help="Describe the location OFFSET meters from JUNCTION along BRANCH")
    parser.add_argument("-verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    LOGGER.debugv(f"Arguments {args}")

    try:
        track = load_track(args)
    except (OSError, DecodeError, TrackFormatError, InvalidTrackError, ValueError, TypeError) as e:
        LOGGER.error(f"Invalid track: {e}")
        return 1

    LOGGER.info(f"Track is valid: {len(track)} sections, {len(track.junctions())} junctions")
    print(track)

    if args.locate is not None:
        junction_name, branch_name, offset = args.locate
        try:
            location = locate(track, junction_name, branch_name, int(offset))
        except (TrackFormatError, ValueError) as e:
            LOGGER.error(f"Cannot locate point: {e}")
            return 1
        print(location)
        if not location.at_junction():
            print(location.other_end())

    if args.pbOut is not None:
        try:
            with open(args.pbOut, "wb") as f:
                f.write(TrackConverter.convert_track_obj_to_pb(track).SerializeToString())
        except (OSError, ValueError) as e:
            LOGGER.error(f"Cannot write track to {args.pbOut}: {e}")
            return 1
        LOGGER.info(f"Wrote track to {args.pbOut}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
