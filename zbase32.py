# Copyright (c) 2014-2015  Sam Maloney.
# License: Public Domain.
#
# This file is based upon mbase32.py, using the z-base-32 alphabet with '2'
# in place of 'i'.

"""Human-friendly base32 (modified z-base-32 alphabet, no padding)."""

from codecexception import InvalidBase32Error

charset = "ybndrfg8ejkmcpqxot1uw2sza345h769"

def encode(val):
    result = []

    if not val:
        return ""

    assert type(val) in (bytes, bytearray), type(val)

    r = 0
    rbits = 0

    for char in val:
        r = (r << 8) | char
        rbits += 8

        while rbits >= 5:
            rbits -= 5
            idx = r >> rbits
            r &= (1 << rbits) - 1

            result.append(charset[idx])

    if rbits:
        result.append(charset[r << (5 - rbits)])

    return ''.join(result)

def decode(val):
    "Decodes val; trailing bits that don't make up a whole byte are dropped."

    result = bytearray()

    if not val:
        return bytes(result)

    a = 0
    abits = 0

    for char in val:
        idx = charset.find(char)
        if idx == -1:
            raise InvalidBase32Error(\
                "Character {!r} is not a valid base32 character.".format(char))

        a = (a << 5) | idx
        abits += 5

        if abits >= 8:
            abits -= 8
            result.append(a >> abits)
            a &= (1 << abits) - 1

    return bytes(result)
