"""Keymap data as reported by the device: layers of behavior bindings."""

from __future__ import annotations

from dataclasses import dataclass, field

_U32_MAX = 0xFFFFFFFF
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass(frozen=True)
class BehaviorBinding:
    """A raw binding: a behavior id with its two parameters."""

    behavior_id: int
    param1: int = 0
    param2: int = 0

    def __post_init__(self) -> None:
        if not _I32_MIN <= self.behavior_id <= _I32_MAX:
            raise ValueError(
                f"behavior_id must be a signed 32-bit integer, got {self.behavior_id}"
            )
        for name in ("param1", "param2"):
            value = getattr(self, name)
            if not 0 <= value <= _U32_MAX:
                raise ValueError(
                    f"{name} must be an unsigned 32-bit integer, got {value}"
                )


@dataclass
class Layer:
    """One keymap layer: its id, name and bindings in key-position order."""

    id: int
    name: str = ""
    bindings: list[BehaviorBinding] = field(default_factory=list)


@dataclass
class Keymap:
    """The layers of a keymap in their current order."""

    layers: list[Layer] = field(default_factory=list)

    def layer(self, layer_id: int) -> Layer | None:
        """Return the first layer with the given id, or None."""
        return next((layer for layer in self.layers if layer.id == layer_id), None)


def binding_at(keymap: Keymap, layer_id: int, key_position: int) -> BehaviorBinding | None:
    """Return the binding at a layer id and key position, or None if there is none."""
    if key_position < 0:
        return None
    layer = keymap.layer(layer_id)
    if layer is None or key_position >= len(layer.bindings):
        return None
    return layer.bindings[key_position]