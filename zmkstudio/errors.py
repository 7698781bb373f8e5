"""Errors raised by client operations."""

from __future__ import annotations


class ClientError(Exception):
    """Base class for errors from client operations."""


class NoResponse(ClientError):
    """The device answered that it has no response."""

    def __init__(self) -> None:
        super().__init__("Device returned no response")


class MissingResponseType(ClientError):
    """A response did not carry the expected type."""

    def __init__(self) -> None:
        super().__init__("Response was missing type")


class MissingSubsystem(ClientError):
    """A request response did not name a subsystem."""

    def __init__(self) -> None:
        super().__init__("Request response was missing subsystem")


class UnexpectedSubsystem(ClientError):
    """A response came from a different subsystem than the request."""

    def __init__(self, expected: str) -> None:
        self.expected = expected
        super().__init__(f"Unexpected subsystem in response; expected {expected}")


class UnexpectedRequestId(ClientError):
    """A response answered a different request than the one sent."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Unexpected request ID in response: expected {expected}, got {actual}"
        )


class UnknownEnumValue(ClientError):
    """A response held an enum value this client does not know."""

    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Unknown enum value for {field}: {value}")


class InvalidLayerOrPosition(ClientError):
    """No binding exists at the given layer and key position."""

    def __init__(self, layer_id: int, key_position: int) -> None:
        self.layer_id = layer_id
        self.key_position = key_position
        super().__init__(
            f"Invalid layer/position: layer_id={layer_id}, key_position={key_position}"
        )


class MissingBehaviorRole(ClientError):
    """The firmware offers no behavior for a required role."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"Missing required behavior role in firmware: {role}")


class BehaviorIdOutOfRange(ClientError):
    """A behavior id does not fit a signed 32-bit integer."""

    def __init__(self, behavior_id: int) -> None:
        self.behavior_id = behavior_id
        super().__init__(f"Behavior ID is out of i32 range: {behavior_id}")