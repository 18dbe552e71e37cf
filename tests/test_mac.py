import pytest

from wfmon.mac import MAC48, HardwareAddr, wildcard


def addr(text):
    return HardwareAddr().with_addr(text)


@pytest.mark.parametrize("text", ["00-03-93", "0003.93", "000393"])
def test_separators_are_ignored(text):
    assert addr(text) == addr("00:03:93")


def test_prefix_spans_written_digits():
    assert addr("00:03:93").prefix == 24
    assert addr("00:55:DA:00:00:00").prefix == MAC48


def test_suffix_does_not_change_address():
    assert addr("00:55:DA:00:00:00/28") == addr("00:55:DA:00:00:00")


def test_too_long_address_is_rejected():
    base = HardwareAddr()
    assert base.with_addr("00:11:22:33:44:55:66") is base


def test_invalid_hex_is_rejected():
    base = HardwareAddr()
    assert base.with_addr("zz:11:22") is base
    assert base.with_addr("") is base


def test_with_prefix_empty_mask_keeps_address():
    a = addr("00:03:93")
    assert a.with_prefix("") is a


def test_with_prefix_numeric_keeps_prefix():
    a = addr("00:03:93")
    b = a.with_prefix("/28")
    assert b.prefix == a.prefix
    assert b.addr == a.addr


def test_with_prefix_non_numeric_clears_prefix():
    assert addr("00:03:93").with_prefix("/ab").prefix == 0


def test_with_prefix_on_unset_address_starts_from_zero():
    assert HardwareAddr().with_prefix("/24").addr == 0


def test_align_drops_extra_low_bits():
    wide = HardwareAddr(addr=0xFFFF, prefix=8).with_prefix("/8")
    assert 0 < wide.addr < 0xFFFF
    assert wide.prefix == 8


def test_parent_steps_one_nibble_up():
    a = addr("00:03:93")
    p = a.parent()
    assert p.prefix == a.prefix - 4
    assert p.addr == a.addr >> 4


def test_parent_of_unset_is_none():
    assert HardwareAddr().parent() is None


def test_wildcard_bounds():
    assert wildcard(MAC48) == 0
    assert wildcard(0) == MAC48


def test_wildcard_key():
    assert addr("00:00:01").wildcard_key() == "24.1"


def test_wildcard_key_distinguishes_addresses():
    assert addr("00:00:01").wildcard_key() != addr("00:00:02").wildcard_key()
    assert addr("00:00:01").wildcard_key().startswith(f"{wildcard(24)}.")


def test_str():
    assert str(HardwareAddr(addr=0x0102, prefix=16)) == "1:2/16"


def test_str_of_unset_raises():
    with pytest.raises(ValueError):
        str(HardwareAddr())