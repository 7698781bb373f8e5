"""Keycodes, HID usages, framing, keymap data, errors and a serial transport for ZMK Studio."""

__version__ = "0.2.0"