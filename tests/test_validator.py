import logging

import pytest

from railtopo import proto
from railtopo.converters.track_converter import TrackConverter
from railtopo.validator import main
from railtopo.utils import initial_config

TRACK_TEXT = "9 (j1, FACING) (j2, NORMAL)\n4 (j2, FACING) (j3, REVERSE)\n"


@pytest.fixture(autouse=True)
def restore_root_logger():
    level = logging.root.level
    handlers = list(logging.root.handlers)
    yield
    logging.root.setLevel(level)
    logging.root.handlers[:] = handlers


@pytest.fixture
def track_file(tmp_path):
    path = tmp_path / "track.txt"
    path.write_text(TRACK_TEXT)
    return path


def test_valid_track_is_printed(track_file, capsys):
    assert main([str(track_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert "9 (j1, FACING) (j2, NORMAL)" in lines or "9 (j2, NORMAL) (j1, FACING)" in lines


def test_sample_track_is_used_without_input(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.strip()
    assert len(out.splitlines()) == len(initial_config["sections"])


def test_locate(track_file, capsys):
    assert main([str(track_file), "-locate", "j1", "FACING", "3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "Distance 3 from j1 along the FACING branch" in out
    assert "Distance 6 from j2 along the NORMAL branch" in out


def test_locate_at_junction(track_file, capsys):
    assert main([str(track_file), "-locate", "j2", "FACING", "0"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "j2"


@pytest.mark.parametrize("locate", [["j1", "REVERSE", "3"], ["j1", "FACING", "9"], ["j1", "UP", "1"], ["j1", "FACING", "x"]])
def test_locate_failures(track_file, locate):
    assert main([str(track_file), "-locate", *locate]) == 1


def test_conflicting_track_fails(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1 (A, NORMAL) (B, NORMAL)\n1 (A, NORMAL) (C, FACING)\n")
    assert main([str(path)]) == 1


def test_malformed_track_fails(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1 (A, NORMAL)\n")
    assert main([str(path)]) == 1


def test_missing_file_fails(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1


def test_pb_out_and_in(track_file, tmp_path, capsys):
    pb_path = tmp_path / "track.pb"
    assert main([str(track_file), "-pbOut", str(pb_path)]) == 0

    track_pb = proto.Track()
    track_pb.ParseFromString(pb_path.read_bytes())
    assert len(TrackConverter.convert_track_pb_to_obj(track_pb)) == 2

    capsys.readouterr()
    assert main(["-pbIn", str(pb_path)]) == 0
    assert len(capsys.readouterr().out.strip().splitlines()) == 2


def test_pb_out_with_long_section(tmp_path):
    path = tmp_path / "long.txt"
    path.write_text("3000000000 (A, NORMAL) (B, FACING)\n")
    pb_path = tmp_path / "long.pb"
    assert main([str(path), "-pbOut", str(pb_path)]) == 0

    track_pb = proto.Track()
    track_pb.ParseFromString(pb_path.read_bytes())
    assert track_pb.sections[0].length == 3000000000


def test_pb_out_to_unwritable_path_fails(track_file, tmp_path):
    assert main([str(track_file), "-pbOut", str(tmp_path / "missing" / "track.pb")]) == 1


def test_pb_out_with_out_of_range_length_fails(tmp_path):
    path = tmp_path / "huge.txt"
    path.write_text("99999999999999999999 (A, NORMAL) (B, FACING)\n")
    assert main([str(path), "-pbOut", str(tmp_path / "huge.pb")]) == 1
