# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

# Curve25519 public key.
KEY_SIZE = 32
SIGNATURE_SIZE = 64

# Digits, including the head digit.
NUMBER_LENGTH = 79
CHAT_NUMBER_LENGTH = 82
SHORT_NUMBER_LENGTH = 12

NULL_KEY = bytes([0x00] * KEY_SIZE)
