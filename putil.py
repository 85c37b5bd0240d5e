# Copyright (C) 2003-2007  Robey Pointer <robeypointer@gmail.com>.
# Copyright (C) 2014-2015  Sam Maloney.
# License: LGPL.
#
# This file is based upon parts from paramiko (r85d5e95f9280aa236602b77e9f5bd0aa4d3c8fcd).

"""
Big unsigned integer plumbing shared by the numeric codecs.

Everything that turns a byte buffer into a number, a number into digits and
back goes through here so the codecs never touch the integer representation
directly.
"""

RADIX_DIGITS = "0123456789"

def inflate_long(s):
    "Turns a big-endian byte string into an unsigned long-int."

    assert type(s) in (bytes, bytearray), type(s)

    return int.from_bytes(s, "big")

def fill_bytes(n, size):
    """Turns an unsigned long-int into a big-endian byte string of exactly
    size bytes, left padded with zero bytes. Raises OverflowError if n does
    not fit."""

    assert n >= 0, n

    return n.to_bytes(size, "big")

def int_to_radix(n, radix):
    "Renders an unsigned long-int as a string of digits in radix (2-10)."

    assert 2 <= radix <= len(RADIX_DIGITS), radix
    assert n >= 0, n

    if not n:
        return RADIX_DIGITS[0]

    res = []
    while n > 0:
        n, r = divmod(n, radix)
        res.append(RADIX_DIGITS[r])

    return ''.join(reversed(res))

def radix_to_int(s, radix):
    """Parses a string of digits in radix (2-10) into an unsigned long-int.

    Unlike int(s, radix), signs, whitespace and underscores are rejected. An
    empty string is an error as well. Raises ValueError."""

    assert 2 <= radix <= len(RADIX_DIGITS), radix

    if not s:
        raise ValueError("Empty base{} digit string.".format(radix))

    n = 0
    for c in s:
        digit = RADIX_DIGITS.find(c, 0, radix)
        if digit == -1:
            raise ValueError(\
                "Character {!r} is not a valid base{} digit.".format(c, radix))
        n = n * radix + digit

    return n
