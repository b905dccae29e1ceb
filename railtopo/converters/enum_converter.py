from railtopo import proto
from railtopo.enums import Branch
from railtopo.exceptions import TrackFormatError


class EnumConverter:
    @staticmethod
    def branch_enum_to_pb(branch: Branch) -> int:
        return {
            Branch.FACING: proto.Branch.Value("FACING"),
            Branch.NORMAL: proto.Branch.Value("NORMAL"),
            Branch.REVERSE: proto.Branch.Value("REVERSE"),
        }[branch]

    @staticmethod
    def branch_pb_to_enum(branch: int) -> Branch:
        try:
            return {
                proto.Branch.Value("FACING"): Branch.FACING,
                proto.Branch.Value("NORMAL"): Branch.NORMAL,
                proto.Branch.Value("REVERSE"): Branch.REVERSE,
            }[branch]
        except KeyError:
            raise TrackFormatError(f"Unknown branch number {branch}") from None

    @staticmethod
    def branch_str_to_enum(name: str) -> Branch:
        # names are case-sensitive, exactly as Branch renders them
        try:
            return Branch[name]
        except KeyError:
            raise TrackFormatError(f"Unknown branch name {name!r}, expected one of {', '.join(b.name for b in Branch)}") from None

    @staticmethod
    def branch_enum_to_str(branch: Branch) -> str:
        return branch.name
