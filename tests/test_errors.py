import pytest

from zmkstudio.errors import (
    BehaviorIdOutOfRange,
    ClientError,
    InvalidLayerOrPosition,
    MissingBehaviorRole,
    MissingResponseType,
    MissingSubsystem,
    NoResponse,
    UnexpectedRequestId,
    UnexpectedSubsystem,
    UnknownEnumValue,
)


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (NoResponse(), "Device returned no response"),
        (MissingResponseType(), "Response was missing type"),
        (MissingSubsystem(), "Request response was missing subsystem"),
    ],
)
def test_fixed_messages(error, message):
    assert str(error) == message


def test_unexpected_subsystem():
    error = UnexpectedSubsystem("keymap")
    assert error.expected == "keymap"
    assert str(error) == "Unexpected subsystem in response; expected keymap"


def test_unexpected_request_id():
    error = UnexpectedRequestId(expected=3, actual=5)
    assert (error.expected, error.actual) == (3, 5)
    assert str(error) == "Unexpected request ID in response: expected 3, got 5"


def test_unknown_enum_value():
    error = UnknownEnumValue(field="core.get_lock_state", value=42)
    assert error.field == "core.get_lock_state"
    assert error.value == 42
    assert str(error).endswith("core.get_lock_state: 42")


def test_invalid_layer_or_position():
    error = InvalidLayerOrPosition(layer_id=1, key_position=-1)
    assert str(error) == "Invalid layer/position: layer_id=1, key_position=-1"


def test_missing_behavior_role():
    error = MissingBehaviorRole("Key Press")
    assert error.role == "Key Press"
    assert str(error) == "Missing required behavior role in firmware: Key Press"


def test_behavior_id_out_of_range():
    error = BehaviorIdOutOfRange(4294967295)
    assert error.behavior_id == 4294967295
    assert str(error) == "Behavior ID is out of i32 range: 4294967295"


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (MissingSubsystem(), "Request response was missing subsystem"),
        (UnexpectedSubsystem("core"), "Unexpected subsystem in response; expected core"),
        (
            InvalidLayerOrPosition(layer_id=2, key_position=7),
            "Invalid layer/position: layer_id=2, key_position=7",
        ),
        (MissingBehaviorRole("Mod-Tap"), "Missing required behavior role in firmware: Mod-Tap"),
    ],
)
def test_all_are_client_errors(error, message):
    with pytest.raises(ClientError) as info:
        raise error
    assert info.value is error
    assert str(info.value) == message