# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import llog

import logging

import base810
import consts
import enc
import phonenumber
import zbase32

log = logging.getLogger(__name__)

class PublicKey(object):
    """
    A 32 byte Curve25519 (x25519) public key, with its human readable forms:
    base32 (str()), number() and chat_number().
    """

    def __init__(self, key):
        assert type(key) in (bytes, bytearray), type(key)

        self.key = bytes(key)

    @classmethod
    def from_string(cls, id_str):
        return cls(zbase32.decode(id_str))

    @classmethod
    def from_number(cls, number):
        return cls(base810.decode(number, consts.KEY_SIZE))

    @classmethod
    def from_chat_number(cls, chat_number):
        "Parses a PhoneNumber encoded key; ignored prefixes and '5's are OK."
        return cls(phonenumber.decode(chat_number, consts.KEY_SIZE))

    def number(self):
        return base810.encode(self.key, consts.NUMBER_LENGTH)

    def short_number(self):
        return self.number()[:consts.SHORT_NUMBER_LENGTH]

    def chat_number(self):
        return phonenumber.encode(self.key, consts.CHAT_NUMBER_LENGTH)

    def verify(self, data, signature):
        """Verifies signature on data using the Ed25519 version of this key.

        The signer carries the sign bit of its Edwards key in the top bit of
        the last signature byte; it is moved back into the converted key. The
        passed signature is not modified."""

        if len(signature) != consts.SIGNATURE_SIZE:
            log.warning("Invalid signature size [{}].".format(len(signature)))
            return False
        if len(self.key) != consts.KEY_SIZE:
            log.warning("Invalid key size [{}].".format(len(self.key)))
            return False

        ed_key = bytearray(enc.montgomery_to_edwards(self.key))
        sig = bytearray(signature)

        ed_key[31] |= sig[63] & 0x80
        sig[63] &= 0x7f

        return enc.verify_ed25519(ed_key, data, sig)

    def __bytes__(self):
        return self.key

    def __eq__(self, other):
        return type(other) is PublicKey and self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __str__(self):
        return zbase32.encode(self.key)

    def __repr__(self):
        return "PublicKey({})".format(str(self))
