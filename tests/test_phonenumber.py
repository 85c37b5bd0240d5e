import os
import random

import pytest

import consts
import phonenumber
from codecexception import InvalidEncodingError, InvalidPhoneNumberError

ROUND_TRIPS = 100000

def test_shift_base9():
    s = "012345678"
    assert phonenumber.shift_base9(s) == "012346789"
    assert phonenumber.unshift_base9(phonenumber.shift_base9(s)) == s

def test_unshift_drops_fives():
    assert phonenumber.unshift_base9("5") == ""
    assert phonenumber.unshift_base9("55605595") == "508"

def test_shift_involution():
    rnd = random.Random(810)
    for i in range(1000):
        s = ''.join(rnd.choice("012345678") for _ in range(rnd.randrange(40)))
        shifted = phonenumber.shift_base9(s)
        assert '5' not in shifted
        assert phonenumber.unshift_base9(shifted) == s

def test_round_trip_with_noise():
    for i in range(ROUND_TRIPS):
        b = os.urandom(consts.KEY_SIZE)
        s = phonenumber.encode(b, consts.CHAT_NUMBER_LENGTH)
        assert s[0] in "2346"
        # Ignored prefix and an interior filler digit.
        s = "015789" + s[:12] + "5" + s[12:]
        assert phonenumber.decode(s, consts.KEY_SIZE) == b

def test_zero_key():
    e = phonenumber.encode(consts.NULL_KEY, consts.CHAT_NUMBER_LENGTH)
    assert e == "2" + "0" * 81
    assert phonenumber.decode(e, consts.KEY_SIZE) == consts.NULL_KEY
    assert phonenumber.decode("015789" + e[:12] + "5" + e[12:],\
        consts.KEY_SIZE) == consts.NULL_KEY

def test_fillers_anywhere():
    rnd = random.Random(5)
    for i in range(500):
        b = os.urandom(consts.KEY_SIZE)
        s = list(phonenumber.encode(b, consts.CHAT_NUMBER_LENGTH))
        for j in range(rnd.randrange(1, 10)):
            s.insert(rnd.randrange(1, len(s) + 1), '5')
        prefix = ''.join(rnd.choice("015789") for _ in range(rnd.randrange(8)))
        assert phonenumber.decode(prefix + ''.join(s), consts.KEY_SIZE) == b

def test_small_values():
    assert phonenumber.encode(b"\x41", 3) == "304"
    assert phonenumber.decode("304", 1) == b"\x41"

    assert phonenumber.encode(b"\x0f", 1) == "277"
    assert phonenumber.decode("277", 1) == b"\x0f"
    assert phonenumber.decode("5552577", 1) == b"\x0f"

    assert phonenumber.encode(b"\xff", 2) == "6310"
    assert phonenumber.decode("6310", 1) == b"\xff"

    assert phonenumber.encode(b"\x00\x01", 4) == "2001"
    assert phonenumber.decode("2001", 2) == b"\x00\x01"

def test_length():
    for i in range(100):
        b = os.urandom(consts.KEY_SIZE)
        natural = len(phonenumber.encode(b, 0))
        for length in (0, 1, 50, consts.CHAT_NUMBER_LENGTH, 100):
            assert len(phonenumber.encode(b, length)) == max(length, natural)
        assert len(phonenumber.encode(b, consts.CHAT_NUMBER_LENGTH))\
            == consts.CHAT_NUMBER_LENGTH

def test_head_digit():
    for first in range(256):
        b = bytes([first]) + os.urandom(31)
        assert phonenumber.encode(b, consts.CHAT_NUMBER_LENGTH)[0]\
            == "2346"[first >> 6]

def test_encode_does_not_modify_input():
    b = bytearray(b"\xff\xee\xdd")
    phonenumber.encode(b, 10)
    assert b == bytearray(b"\xff\xee\xdd")

def test_deterministic():
    b = os.urandom(consts.KEY_SIZE)
    assert phonenumber.encode(b, consts.CHAT_NUMBER_LENGTH)\
        == phonenumber.encode(b, consts.CHAT_NUMBER_LENGTH)

@pytest.mark.parametrize("s", ["", "0175", "015789", "2", "25", "2555",\
    "x2000", "52a", "2-1", "2 1", "3_0"])
def test_invalid_strings(s):
    with pytest.raises(InvalidPhoneNumberError):
        phonenumber.decode(s, 1)

def test_value_too_large():
    with pytest.raises(InvalidEncodingError):
        phonenumber.decode("2" + "8" * 10, 1)

def test_invalid_target_size():
    with pytest.raises(InvalidPhoneNumberError):
        phonenumber.decode("20", 0)
