from railtopo import proto
from railtopo.converters.enum_converter import EnumConverter
from railtopo.endpoint import JunctionEndpoint
from railtopo.junction import Junction
from railtopo.section import Section
from railtopo.track import Track


class TrackConverter:

    # SECTION: Serialization
    @staticmethod
    def convert_endpoint_obj_to_pb(endpoint: JunctionEndpoint, endpoint_pb):
        endpoint_pb.junction_id = endpoint.junction.name
        endpoint_pb.branch = EnumConverter.branch_enum_to_pb(endpoint.branch)

    @staticmethod
    def convert_section_obj_to_pb(section: Section, section_pb=None) -> proto.Section:
        if section_pb is None:
            section_pb = proto.Section()
        section_pb.length = section.length
        TrackConverter.convert_endpoint_obj_to_pb(section.endpoint_a, section_pb.endpoint_a)
        TrackConverter.convert_endpoint_obj_to_pb(section.endpoint_b, section_pb.endpoint_b)
        return section_pb

    @staticmethod
    def convert_track_obj_to_pb(track: Track) -> proto.Track:
        track_pb = proto.Track()
        for section in track:
            TrackConverter.convert_section_obj_to_pb(section, track_pb.sections.add())
        return track_pb

    # SECTION: Deserialization
    # Objects are built through their constructors, so invalid messages raise
    # the same errors as invalid arguments would.
    @staticmethod
    def convert_endpoint_pb_to_obj(endpoint_pb) -> JunctionEndpoint:
        return JunctionEndpoint(
            Junction(endpoint_pb.junction_id),
            EnumConverter.branch_pb_to_enum(endpoint_pb.branch),
        )

    @staticmethod
    def convert_section_pb_to_obj(section_pb: proto.Section) -> Section:
        return Section(
            section_pb.length,
            TrackConverter.convert_endpoint_pb_to_obj(section_pb.endpoint_a),
            TrackConverter.convert_endpoint_pb_to_obj(section_pb.endpoint_b),
        )

    @staticmethod
    def convert_track_pb_to_obj(track_pb: proto.Track) -> Track:
        return Track(TrackConverter.convert_section_pb_to_obj(section_pb) for section_pb in track_pb.sections)
