# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import llog

import logging

from Crypto.PublicKey import ECC
from Crypto.Signature import eddsa

log = logging.getLogger(__name__)

# Curve25519 field prime.
P25519 = (1 << 255) - 19

def _fe_invert(z):
    # Fermat; 0 maps to 0.
    return pow(z, P25519 - 2, P25519)

def montgomery_to_edwards(u_key):
    '''
    Convert a Curve25519 public key (the little-endian Montgomery
    x-coordinate) into the Ed25519 public key with the same y-coordinate:
        ed_y = (mont_x - 1) / (mont_x + 1)
    mont_x = -1 is converted to ed_y = 0. The sign bit of the result is clear.
    '''

    assert len(u_key) == 32, len(u_key)

    key = bytearray(u_key)
    key[31] &= 0x7f

    u = int.from_bytes(key, "little") % P25519
    y = (u - 1) * _fe_invert(u + 1) % P25519

    return y.to_bytes(32, "little")

def edwards_to_montgomery(ed_key):
    '''
    Convert an Ed25519 public key into its Curve25519 public key:
        mont_x = (1 + ed_y) / (1 - ed_y)
    The sign bit of ed_key is dropped.
    '''

    assert len(ed_key) == 32, len(ed_key)

    key = bytearray(ed_key)
    key[31] &= 0x7f

    y = int.from_bytes(key, "little") % P25519
    u = (1 + y) * _fe_invert(1 - y) % P25519

    return u.to_bytes(32, "little")

def ed25519_public_key_bytes(ecc_key):
    "RFC 8032 encoding of an Ed25519 ECC key's public point."

    point = ecc_key.pointQ
    y = int(point.y)
    x = int(point.x)

    return (y | (x & 1) << 255).to_bytes(32, "little")

def generate_ed25519():
    return ECC.generate(curve="Ed25519")

def import_ed25519_private_key(seed):
    "Loads an Ed25519 signing key from its 32 byte RFC 8032 seed."

    assert len(seed) == 32, len(seed)

    return eddsa.import_private_key(bytes(seed))

def sign_ed25519(ecc_key, data):
    return eddsa.new(ecc_key, "rfc8032").sign(data)

def verify_ed25519(ed_key, data, signature):
    "Returns True if signature is a valid RFC 8032 signature of data."

    try:
        key = eddsa.import_public_key(bytes(ed_key))
        eddsa.new(key, "rfc8032").verify(bytes(data), bytes(signature))
    except ValueError:
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Ed25519 signature verification failed.")
        return False

    return True
