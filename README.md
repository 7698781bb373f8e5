# zmkstudio

Python building blocks for talking to a ZMK keyboard over the ZMK Studio RPC protocol.

The package gives you:

- `zmkstudio.keycode.Keycode` – an `IntEnum` of ZMK keycodes valued by their encoded HID
  usage, with lookup by value (`Keycode.from_hid_usage`) and by canonical name or alias
  (`Keycode.from_name`, case-sensitive).
- `zmkstudio.hid_usage.HidUsage` – a lossless decoded HID usage (page, id and modifier bits),
  plus the `HID_USAGE_KEYBOARD` and `MOD_*` constants.
- `zmkstudio.framing` – the byte-stuffed frame format (`encode_frame`, `FrameDecoder`).
- `zmkstudio.serial_transport.SerialTransport` – a serial-port byte stream built on pyserial.
- `zmkstudio.keymap` – `BehaviorBinding`, `Layer`, `Keymap` and `binding_at`.
- `zmkstudio.errors` – the `ClientError` family of exceptions.

## Installation

```
pip install zmkstudio
```

## Keycodes and HID usages

```python
from zmkstudio.keycode import Keycode
from zmkstudio.hid_usage import HidUsage

Keycode.from_name("LSHFT")          # Keycode.LSHIFT
Keycode.from_name("nope")           # None
Keycode.A.to_hid_usage()            # 0x00070004
Keycode.from_hid_usage(0x00070004)  # Keycode.A

usage = HidUsage.from_encoded(0x02070004)
usage.modifier_labels()             # ["LSFT"]
usage.known_keycode()               # None
usage.known_base_keycode()          # Keycode.A
str(usage)                          # "0x02070004"
```

An encoded usage with a page of 0 decodes to the keyboard page (`0x07`). `str()` of a usage
that matches a keycode exactly gives the keycode's canonical name. Out-of-range page, id or
modifier values raise `ValueError`.

## Framing

```python
from zmkstudio.framing import FrameDecoder, encode_frame

wire = encode_frame(b"\x01\x02\x03")   # b"\xab\x01\x02\x03\xad"
decoder = FrameDecoder()
decoder.push(wire)                     # [b"\x01\x02\x03"]
```

`FrameDecoder.push` accepts bytes in any chunks and returns every frame they complete.
Malformed input raises `ExpectedStartOfFrame` or `UnexpectedStartOfFrameMidFrame`, both
subclasses of `FramingError` (itself a `ValueError`); the partial frame is dropped and the
decoder starts over.

## Keymap data

```python
from zmkstudio.keymap import BehaviorBinding, Keymap, Layer, binding_at

keymap = Keymap(layers=[Layer(id=0, name="Base", bindings=[BehaviorBinding(1, 0x00070004)])])
keymap.layer(0)                 # Layer(id=0, ...)
binding_at(keymap, 0, 0)        # BehaviorBinding(behavior_id=1, param1=458756, param2=0)
binding_at(keymap, 0, 5)        # None
```

`BehaviorBinding` checks that `behavior_id` fits a signed 32-bit integer and that both
parameters fit an unsigned 32-bit integer, raising `ValueError` otherwise.

## Serial transport

```python
from zmkstudio.framing import encode_frame
from zmkstudio.serial_transport import SerialTransport

with SerialTransport.open("/dev/ttyACM0") as port:
    port.write(encode_frame(b"\x01"))
    data = port.read(256)
```

`SerialTransport.open(path, baud_rate=12500, timeout=0.5)` accepts a device name or a
pyserial URL such as `loop://`. `read` raises `TimeoutError` when no data arrives within
the timeout. Failure to open the port raises `SerialTransportError`, an `OSError`.

## Errors

`zmkstudio.errors` defines `ClientError` and its subclasses `NoResponse`,
`MissingResponseType`, `MissingSubsystem`, `UnexpectedSubsystem`, `UnexpectedRequestId`,
`UnknownEnumValue`, `InvalidLayerOrPosition`, `MissingBehaviorRole` and
`BehaviorIdOutOfRange`. Each carries its details as attributes and a readable message.

## What this package does not do

There is no client here that sends requests to a keyboard and reads its replies: the package
does not encode or decode the RPC messages carried inside frames, so device info, lock state,
keymap retrieval and key changes are not available from it. It also does not turn raw
bindings into typed behaviors such as key presses or layer taps; bindings are kept as behavior
ids with two parameters. There is no Bluetooth transport and no command-line tool.