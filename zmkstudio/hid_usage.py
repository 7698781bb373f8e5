"""Decoded ZMK HID usage values: usage page, usage id and modifiers."""

from __future__ import annotations

from dataclasses import dataclass

from .keycode import Keycode

HID_USAGE_KEYBOARD = 0x07

MOD_LCTL = 0x01
MOD_LSFT = 0x02
MOD_LALT = 0x04
MOD_LGUI = 0x08
MOD_RCTL = 0x10
MOD_RSFT = 0x20
MOD_RALT = 0x40
MOD_RGUI = 0x80

_MODIFIER_LABELS = (
    (MOD_LCTL, "LCTL"),
    (MOD_LSFT, "LSFT"),
    (MOD_LALT, "LALT"),
    (MOD_LGUI, "LGUI"),
    (MOD_RCTL, "RCTL"),
    (MOD_RSFT, "RSFT"),
    (MOD_RALT, "RALT"),
    (MOD_RGUI, "RGUI"),
)


def _check_range(field: str, value: int, limit: int) -> None:
    if not 0 <= value <= limit:
        raise ValueError(f"{field} must be between 0 and {limit:#x}, got {value}")


@dataclass(frozen=True)
class HidUsage:
    """A lossless HID usage value as encoded by ZMK.

    The encoded form keeps modifiers in bits 31..24, the usage page in
    bits 23..16 and the usage id in bits 15..0.
    """

    page: int
    id: int
    modifiers: int = 0

    def __post_init__(self) -> None:
        _check_range("page", self.page, 0xFFFF)
        _check_range("id", self.id, 0xFFFF)
        _check_range("modifiers", self.modifiers, 0xFF)

    @classmethod
    def from_encoded(cls, encoded: int) -> HidUsage:
        """Decode from ZMK's encoded usage; a page of 0 means the keyboard page."""
        _check_range("encoded usage", encoded, 0xFFFFFFFF)
        page = (encoded >> 16) & 0xFF
        if page == 0:
            page = HID_USAGE_KEYBOARD
        return cls(page=page, id=encoded & 0xFFFF, modifiers=(encoded >> 24) & 0xFF)

    @classmethod
    def from_parts(cls, page: int, id: int, modifiers: int) -> HidUsage:  # noqa: A002
        """Build a usage from its page, id and modifier bits."""
        return cls(page=page, id=id, modifiers=modifiers)

    def to_hid_usage(self) -> int:
        """Return the encoded usage value."""
        return (self.modifiers << 24) | (self.page << 16) | self.id

    def base(self) -> HidUsage:
        """Return the same usage without modifiers."""
        return HidUsage(page=self.page, id=self.id, modifiers=0)

    def known_keycode(self) -> Keycode | None:
        """Return the keycode matching this exact usage, if there is one."""
        return Keycode.from_hid_usage(self.to_hid_usage())

    def known_base_keycode(self) -> Keycode | None:
        """Return the keycode matching this usage without modifiers, if any."""
        return Keycode.from_hid_usage(self.base().to_hid_usage())

    def modifier_labels(self) -> list[str]:
        """Return the names of the set modifier bits, left side first."""
        return [label for bit, label in _MODIFIER_LABELS if self.modifiers & bit]

    def __str__(self) -> str:
        keycode = self.known_keycode()
        if keycode is not None:
            return keycode.to_name()
        return (
            f"0x{self.modifiers:02X}{self.page:02X}"
            f"{(self.id >> 8) & 0xFF:02X}{self.id & 0xFF:02X}"
        )