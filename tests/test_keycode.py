import pytest

from zmkstudio.keycode import Keycode


def test_a_has_keyboard_usage_value():
    assert Keycode.A.to_hid_usage() == 0x00070004
    assert Keycode.from_name("A") is Keycode.A


def test_from_hid_usage_known_value():
    assert Keycode.from_hid_usage(0x00070004) is Keycode.A
    assert Keycode.from_hid_usage(0x00010081) is Keycode.SYS_PWR


def test_from_hid_usage_unknown_value_is_none():
    assert Keycode.from_hid_usage(0) is None
    assert Keycode.from_hid_usage(0x00070064) is None


@pytest.mark.parametrize(
    "alias, canonical",
    [
        ("LSHFT", "LSHIFT"),
        ("LSFT", "LSHIFT"),
        ("N1", "NUM_1"),
        ("RET", "ENTER"),
        ("BKSP", "BSPC"),
        ("LGUI", "LEFT_META"),
        ("M_VOLU", "C_VOL_UP"),
        ("GUI", "K_APPLICATION"),
        ("INT2", "INTERNATIONAL_2"),
    ],
)
def test_aliases_resolve_to_canonical(alias, canonical):
    keycode = Keycode.from_name(alias)
    assert keycode is not None
    assert keycode.to_name() == canonical


def test_aliases_share_usage_value():
    assert Keycode.from_name("BKSP") == Keycode.from_name("BSPC")
    assert Keycode.from_name("N1").to_hid_usage() == 0x0007001E
    assert Keycode.from_name("NUM_1").to_hid_usage() == 0x0007001E


def test_variant_names_with_explicit_names_are_not_accepted():
    assert Keycode.from_name("SYSTEM_POWER") is None
    assert Keycode.from_name("RETURN") is None
    assert Keycode.from_name("INTERNATIONAL_1") is None


def test_from_name_is_case_sensitive():
    assert Keycode.from_name("a") is None
    assert Keycode.from_name("lshft") is None


def test_from_name_unknown_is_none():
    assert Keycode.from_name("") is None
    assert Keycode.from_name("NOT_A_KEY") is None


def test_name_round_trip_for_every_keycode():
    for keycode in Keycode:
        assert Keycode.from_name(keycode.to_name()) is keycode


def test_usage_round_trip_for_every_keycode():
    for keycode in Keycode:
        assert Keycode.from_hid_usage(keycode.to_hid_usage()) is keycode


def test_usage_values_are_unique():
    by_value = {}
    for keycode in Keycode:
        found = Keycode.from_hid_usage(keycode.to_hid_usage())
        assert found is keycode
        by_value[found.to_hid_usage()] = found
    assert len(by_value) == len(list(Keycode))


def test_shifted_symbols_carry_modifier_bits():
    assert Keycode.EXCL.to_hid_usage() == 0x0207001E
    assert Keycode.EXCL.to_hid_usage() & 0x00FFFFFF == Keycode.NUM_1.to_hid_usage()


def test_keycode_compares_as_int():
    assert Keycode.from_name("C_PWR") == 0x000C0030
    assert int(Keycode.from_name("PIPE2")) == 0x02070064
    assert Keycode.from_hid_usage(0x000C0030) == Keycode.from_name("C_POWER") or (
        Keycode.from_hid_usage(0x000C0030).to_name() == "C_PWR"
    )