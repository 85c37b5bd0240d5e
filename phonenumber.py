# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""
PhoneNumber encoding.

Like Base810, the result looks like a phone number that doesn't start with 0
or 1. The most significant 2 bits are encoded with a modified base4 digit
(2, 3, 4 or 6 instead of 0-3) and the remaining bits are encoded in base9,
omitting the digit 5, left padded with '0's to the requested length.

Any number of '5's may be inserted anywhere in an encoded string; decode
ignores them. This can be used to visually differentiate the beginning of two
otherwise very similar numbers, for example:

 2222222222222222222222222222222222222222222222222222222222222222222222222222222
 2222222222222222222222222222222222222222222222222222222222222222222222222222223

The second number can be written as the equivalent:

 522222222222252222222222222222222222222222222222222222222222222222222222222222223
"""

import llog

import logging

from codecexception import InvalidPhoneNumberError
import putil

log = logging.getLogger(__name__)

base4_table = "2346"
base4_table_reverse = {c: i for i, c in enumerate(base4_table)}

# Leading characters that can never start a PhoneNumber.
ignored_prefix_chars = "015789"

FILLER_DIGIT = '5'

def encode(b, target_length):
    """Encodes b into a string of at least target_length digits, padding with
    '0's after the head digit. If the encoding needs more than target_length
    digits, target_length is raised to fit it."""

    assert type(b) in (bytes, bytearray), type(b)
    assert len(b), "Cannot encode an empty buffer."

    _b = bytearray(b)
    head = base4_table[_b[0] >> 6]
    _b[0] = (_b[0] << 2) & 0xff

    tail = shift_base9(putil.int_to_radix(putil.inflate_long(_b), 9))

    target_length = max(target_length, len(tail) + 1)
    padding = target_length - 1 - len(tail)

    if log.isEnabledFor(logging.DEBUG):
        log.debug("head=[{}], tail_len=[{}], padding=[{}]."\
            .format(head, len(tail), padding))

    return head + '0' * padding + tail

def decode(s, target_size):
    """Decodes a PhoneNumber string into a buffer of target_size bytes. If
    the string doesn't contain enough data to fill target_size, the result has
    leading zeros.

    Any leading characters other than 2, 3, 4 or 6 that are in
    ignored_prefix_chars are skipped, and every subsequent '5' is ignored."""

    assert type(s) is str, type(s)

    s = s.lstrip(ignored_prefix_chars)

    if not s:
        raise InvalidPhoneNumberError("No PhoneNumber head digit found.")

    head = base4_table_reverse.get(s[0])
    if head is None:
        raise InvalidPhoneNumberError(\
            "Invalid PhoneNumber head character [{}].".format(s[0]))

    try:
        tail = putil.fill_bytes(\
            putil.radix_to_int(unshift_base9(s[1:]), 9), target_size)
    except (ValueError, OverflowError) as e:
        raise InvalidPhoneNumberError(\
            "Invalid PhoneNumber string: {}".format(e))

    if not tail:
        raise InvalidPhoneNumberError(\
            "Invalid target_size [{}].".format(target_size))

    tail = bytearray(tail)
    tail[0] = head << 6 | tail[0] >> 2

    return bytes(tail)

def shift_base9(s):
    "Maps base9 digits onto 0-9 without 5; 5 through 8 become 6 through 9."

    result = []

    for c in s:
        if c < FILLER_DIGIT:
            result.append(c)
        else:
            result.append(chr(ord(c) + 1))

    return ''.join(result)

def unshift_base9(s):
    "Reverses shift_base9, dropping any '5's."

    result = []

    for c in s:
        if c < FILLER_DIGIT:
            result.append(c)
        elif c == FILLER_DIGIT:
            continue
        else:
            result.append(chr(ord(c) - 1))

    return ''.join(result)
