import pytest

from zmkstudio.keymap import BehaviorBinding, Keymap, Layer, binding_at


@pytest.fixture
def keymap():
    base = Layer(
        id=10,
        name="Base",
        bindings=[BehaviorBinding(1, 0x00070004, 0), BehaviorBinding(2, 3, 0x00070005)],
    )
    nav = Layer(id=20, name="Nav", bindings=[BehaviorBinding(5)])
    return Keymap(layers=[base, nav])


def test_layer_lookup_by_id(keymap):
    layer = keymap.layer(20)
    assert layer is not None
    assert layer.name == "Nav"


def test_layer_lookup_missing(keymap):
    assert keymap.layer(99) is None


def test_layer_lookup_returns_first_match():
    first = Layer(id=1, name="first")
    second = Layer(id=1, name="second")
    assert Keymap(layers=[first, second]).layer(1) is first


def test_binding_at_returns_binding(keymap):
    assert binding_at(keymap, 10, 1) == BehaviorBinding(2, 3, 0x00070005)
    assert binding_at(keymap, 20, 0) == BehaviorBinding(5, 0, 0)


def test_binding_at_finds_by_id_not_index(keymap):
    assert binding_at(keymap, 0, 0) is None
    assert binding_at(keymap, 10, 0) == keymap.layers[0].bindings[0]


def test_binding_at_position_out_of_range(keymap):
    assert binding_at(keymap, 20, 1) is None


def test_binding_at_negative_position(keymap):
    assert binding_at(keymap, 10, -1) is None


def test_binding_at_empty_keymap():
    assert binding_at(Keymap(), 0, 0) is None


def test_binding_defaults_to_zero_params():
    binding = BehaviorBinding(7)
    assert (binding.param1, binding.param2) == (0, 0)


def test_binding_accepts_limits():
    binding = BehaviorBinding(-(2**31), 0xFFFFFFFF, 0)
    assert binding.behavior_id == -(2**31)
    assert binding.param1 == 0xFFFFFFFF


@pytest.mark.parametrize(
    "kwargs",
    [
        {"behavior_id": 2**31},
        {"behavior_id": -(2**31) - 1},
        {"behavior_id": 0, "param1": -1},
        {"behavior_id": 0, "param2": 2**32},
    ],
)
def test_binding_rejects_out_of_range(kwargs):
    with pytest.raises(ValueError):
        BehaviorBinding(**kwargs)


def test_binding_equality_and_hash():
    a = BehaviorBinding(3, 4, 5)
    b = BehaviorBinding(3, 4, 5)
    assert a == b
    assert len({a, b}) == 1


def test_layers_do_not_share_default_bindings():
    first = Layer(id=1)
    second = Layer(id=2)
    first.bindings.append(BehaviorBinding(1))
    assert second.bindings == []