import pytest

from railtopo.endpoint import JunctionEndpoint
from railtopo.enums import Branch
from railtopo.junction import Junction


def test_junction_name_and_string():
    junction = Junction("j1")
    assert junction.name == "j1"
    assert str(junction) == "j1"
    assert junction.check_invariant()


def test_junction_equality_is_by_name():
    assert Junction("A") == Junction("A")
    assert hash(Junction("A")) == hash(Junction("A"))
    assert Junction("A") != Junction("a")
    assert Junction("A") != Junction("B")
    assert Junction("A") != "A"


def test_empty_junction_name_is_allowed():
    assert Junction("") == Junction("")


def test_none_junction_name_is_rejected():
    with pytest.raises(TypeError):
        Junction(None)


@pytest.mark.parametrize("name", [5, b"A", ["A"]])
def test_non_string_junction_name_is_rejected(name):
    with pytest.raises(TypeError):
        Junction(name)


def test_junction_name_is_read_only():
    junction = Junction("A")
    with pytest.raises(AttributeError):
        junction.name = "B"


def test_branch_names():
    assert [branch.name for branch in Branch] == ["FACING", "NORMAL", "REVERSE"]
    assert str(Branch.REVERSE) == "REVERSE"


def test_endpoint_string():
    assert str(JunctionEndpoint(Junction("j1"), Branch.FACING)) == "(j1, FACING)"


def test_endpoint_equality_is_structural():
    endpoint = JunctionEndpoint(Junction("A"), Branch.NORMAL)
    assert endpoint == JunctionEndpoint(Junction("A"), Branch.NORMAL)
    assert hash(endpoint) == hash(JunctionEndpoint(Junction("A"), Branch.NORMAL))
    assert endpoint != JunctionEndpoint(Junction("A"), Branch.FACING)
    assert endpoint != JunctionEndpoint(Junction("B"), Branch.NORMAL)
    assert endpoint.check_invariant()


@pytest.mark.parametrize("junction, branch", [(None, Branch.FACING), (Junction("A"), None), (None, None)])
def test_endpoint_rejects_none(junction, branch):
    with pytest.raises(TypeError):
        JunctionEndpoint(junction, branch)
