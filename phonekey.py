#!/usr/bin/python3
# Copyright (c) 2014-2016  Sam Maloney.
# License: GPL v2.

import llog

import argparse
import logging
import sys

import base810
import consts
import phonenumber
import zbase32

log = logging.getLogger(__name__)

CODECS = ("number", "chatnumber", "base32")

def main(argv=None):
    parser = argparse.ArgumentParser(\
        description="Encode a key (hex) as a phone number like string, or"\
            " decode one back into hex.")
    parser.add_argument(\
        "-l", dest="logconf",\
        help="Specify alternate logging.ini [IF SPECIFIED, THIS MUST BE THE"\
            " FIRST PARAMETER!].")
    parser.add_argument(\
        "--codec", choices=CODECS, default="chatnumber",\
        help="The encoding to use (default: chatnumber).")
    parser.add_argument(\
        "--decode", action="store_true",\
        help="Decode the value instead of encoding it.")
    parser.add_argument(\
        "--length", type=int,\
        help="Target length of an encoded number (default: {} for number,"\
            " {} for chatnumber).".format(\
                consts.NUMBER_LENGTH, consts.CHAT_NUMBER_LENGTH))
    parser.add_argument(\
        "--size", type=int, default=consts.KEY_SIZE,\
        help="Size in bytes of a decoded key (default: {})."\
            .format(consts.KEY_SIZE))
    parser.add_argument(\
        "-i",\
        help="Read the value from the specified file instead of stdin.")

    parser.add_argument("value", type=str, nargs="?")

    args = parser.parse_args(argv)

    try:
        result = __process(args)
    except (ValueError, OSError) as e:
        # Includes InvalidEncodingError and unreadable -i files.
        log.error("Invalid value: {}".format(e))
        return 1

    print(result)

    return 0

def __process(args):
    if args.value is not None:
        value = args.value
    elif args.i:
        with open(args.i, "r") as f:
            value = f.read()
    else:
        value = sys.stdin.read()

    value = value.strip()

    if log.isEnabledFor(logging.INFO):
        log.info("{} [{}] using codec [{}]."\
            .format("Decoding" if args.decode else "Encoding", value,\
                args.codec))

    if args.decode:
        return _decode(args, value).hex()

    data = bytes.fromhex(value)
    if not data:
        raise ValueError("Nothing to encode.")

    return _encode(args, data)

def _encode(args, data):
    if args.codec == "number":
        length = args.length if args.length is not None\
            else consts.NUMBER_LENGTH
        return base810.encode(data, length)
    elif args.codec == "chatnumber":
        length = args.length if args.length is not None\
            else consts.CHAT_NUMBER_LENGTH
        return phonenumber.encode(data, length)
    else:
        return zbase32.encode(data)

def _decode(args, value):
    if args.codec == "number":
        return base810.decode(value, args.size)
    elif args.codec == "chatnumber":
        return phonenumber.decode(value, args.size)
    else:
        return zbase32.decode(value)

if __name__ == "__main__":
    sys.exit(main())
