import pytest

from skim.errors import SkimUnboundSymbol
from skim.types.environment import Environment
from skim.types.values import Integer


@pytest.fixture
def chain():
    root = Environment()
    root.define("x", Integer(1))
    child = root.extend(["y"], [Integer(2)])
    return root, child


def test_lookup_walks_outward(chain):
    root, child = chain
    assert child.lookup("x") == Integer(1)
    assert child.lookup("y") == Integer(2)
    with pytest.raises(SkimUnboundSymbol):
        root.lookup("y")


def test_find_returns_owning_frame(chain):
    root, child = chain
    assert child.find("x") is root
    assert child.find("y") is child
    assert child.find("z") is None


def test_get_returns_none_when_absent(chain):
    _, child = chain
    assert child.get("z") is None
    assert child.get("x") == Integer(1)


def test_set_updates_nearest_binding(chain):
    root, child = chain
    child.set("x", Integer(3))
    assert root.lookup("x") == Integer(3)
    assert "x" not in child.vars


def test_set_unbound_raises(chain):
    _, child = chain
    with pytest.raises(SkimUnboundSymbol):
        child.set("z", Integer(0))


def test_define_shadows_in_current_frame(chain):
    root, child = chain
    child.define("x", Integer(9))
    assert child.lookup("x") == Integer(9)
    assert root.lookup("x") == Integer(1)


def test_extend_leaves_parent_untouched(chain):
    root, _ = chain
    grandchild = root.extend(["a", "b"], [Integer(5), Integer(6)])
    assert grandchild.outer is root
    assert "a" not in root
    assert "a" in grandchild
    assert root.vars == {"x": Integer(1)}


def test_str_and_repr(chain):
    root, child = chain
    assert str(root) == "{x: 1}"
    assert str(child) == "{y: 2} -> ..."
    assert repr(child) == "<Environment chain: {y: 2} -> {x: 1}>"


def test_assign_rebinds_nearest_existing_binding(chain):
    root, child = chain
    child.assign("x", Integer(7))
    assert root.lookup("x") == Integer(7)
    assert "x" not in child.vars


def test_assign_binds_unknown_name_in_current_frame(chain):
    root, child = chain
    child.assign("z", Integer(0))
    assert child.vars["z"] == Integer(0)
    assert "z" not in root
