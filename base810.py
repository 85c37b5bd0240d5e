# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""
Base810 encoding.

A human-friendly encoding that looks like a phone number but usually isn't a
dialable one, because it never starts with 0 or 1. The buffer is treated as a
big-endian number. The most significant 3 bits are encoded with a shifted
octal digit (2-9 instead of 0-7) and the remaining bits are encoded in base10,
left padded with '0's to the requested length.

Earlier versions only produced this format for 32 byte keys at a width of 79
(consts.KEY_SIZE, consts.NUMBER_LENGTH). target_length and target_size are
honored for any size; the 32 byte, width 79 case encodes identically.
"""

import llog

import logging

from codecexception import InvalidBase810Error
import putil

log = logging.getLogger(__name__)

base8_table = "23456789"
base8_table_reverse = {c: i for i, c in enumerate(base8_table)}

def encode(b, target_length):
    """Encodes b into a string of target_length digits, padding with '0's
    after the head digit. The tail is never truncated, so the result is
    longer than target_length if the number needs more digits."""

    assert type(b) in (bytes, bytearray), type(b)
    assert len(b), "Cannot encode an empty buffer."

    _b = bytearray(b)
    head = base8_table[_b[0] >> 5]
    _b[0] = (_b[0] << 3) & 0xff

    tail = putil.int_to_radix(putil.inflate_long(_b), 10)

    padding = max(target_length - 1 - len(tail), 0)

    if log.isEnabledFor(logging.DEBUG):
        log.debug("head=[{}], tail_len=[{}], padding=[{}]."\
            .format(head, len(tail), padding))

    return head + '0' * padding + tail

def decode(s, target_size):
    """Decodes a Base810 string into a buffer of target_size bytes. If the
    string doesn't contain enough data to fill target_size, the result has
    leading zeros."""

    assert type(s) is str, type(s)

    if not s:
        raise InvalidBase810Error("Empty Base810 string.")

    head = base8_table_reverse.get(s[0])
    if head is None:
        raise InvalidBase810Error(\
            "Invalid Base810 head character [{}].".format(s[0]))

    try:
        tail = putil.fill_bytes(putil.radix_to_int(s[1:], 10), target_size)
    except (ValueError, OverflowError) as e:
        raise InvalidBase810Error("Invalid Base810 string: {}".format(e))

    if not tail:
        raise InvalidBase810Error(\
            "Invalid target_size [{}].".format(target_size))

    tail = bytearray(tail)
    tail[0] = head << 5 | tail[0] >> 3

    return bytes(tail)
