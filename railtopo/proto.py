"""
Protobuf messages for exchanging track layouts. The schema is

    syntax = "proto3";
    package railtopo;

    enum Branch { FACING = 0; NORMAL = 1; REVERSE = 2; }
    message JunctionEndpoint { string junction_id = 1; Branch branch = 2; }
    message Section { int64 length = 1; JunctionEndpoint endpoint_a = 2; JunctionEndpoint endpoint_b = 3; }
    message Track { repeated Section sections = 1; }

and it is registered in its own descriptor pool when this module is imported.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.internal import enum_type_wrapper

_PACKAGE = "railtopo"
_FIELD = descriptor_pb2.FieldDescriptorProto


def _add_field(message, name, number, field_type, type_name=None, label=_FIELD.LABEL_OPTIONAL):
    field = message.field.add()
    field.name = name
    field.number = number
    field.type = field_type
    field.label = label
    if type_name:
        field.type_name = f".{_PACKAGE}.{type_name}"


def _build_file():
    file_proto = descriptor_pb2.FileDescriptorProto()
    file_proto.name = "railtopo/track.proto"
    file_proto.package = _PACKAGE
    file_proto.syntax = "proto3"

    branch = file_proto.enum_type.add()
    branch.name = "Branch"
    for number, name in enumerate(("FACING", "NORMAL", "REVERSE")):
        value = branch.value.add()
        value.name = name
        value.number = number

    endpoint = file_proto.message_type.add()
    endpoint.name = "JunctionEndpoint"
    _add_field(endpoint, "junction_id", 1, _FIELD.TYPE_STRING)
    _add_field(endpoint, "branch", 2, _FIELD.TYPE_ENUM, "Branch")

    section = file_proto.message_type.add()
    section.name = "Section"
    _add_field(section, "length", 1, _FIELD.TYPE_INT64)
    _add_field(section, "endpoint_a", 2, _FIELD.TYPE_MESSAGE, "JunctionEndpoint")
    _add_field(section, "endpoint_b", 3, _FIELD.TYPE_MESSAGE, "JunctionEndpoint")

    track = file_proto.message_type.add()
    track.name = "Track"
    _add_field(track, "sections", 1, _FIELD.TYPE_MESSAGE, "Section", _FIELD.LABEL_REPEATED)

    return file_proto


POOL = descriptor_pool.DescriptorPool()
POOL.AddSerializedFile(_build_file().SerializeToString())

Branch = enum_type_wrapper.EnumTypeWrapper(POOL.FindEnumTypeByName(f"{_PACKAGE}.Branch"))
JunctionEndpoint = message_factory.GetMessageClass(POOL.FindMessageTypeByName(f"{_PACKAGE}.JunctionEndpoint"))
Section = message_factory.GetMessageClass(POOL.FindMessageTypeByName(f"{_PACKAGE}.Section"))
Track = message_factory.GetMessageClass(POOL.FindMessageTypeByName(f"{_PACKAGE}.Track"))
