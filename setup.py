# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from setuptools import setup

modules = [\
    "base810",
    "codecexception",
    "consts",
    "enc",
    "identity",
    "llog",
    "phonekey",
    "phonenumber",
    "putil",
    "zbase32"\
]

setup(
    name = 'phonekey',
    version = '0.1.0',
    description = "Phone number like encodings of Curve25519 public keys.",
    license = "GPLv2",
    python_requires = ">=3.7",
    py_modules = modules,
    install_requires = [
        "pycryptodome>=3.15",
    ],
    extras_require = {
        "test": ["pytest>=7"],
    },
    entry_points = {
        "console_scripts": ["phonekey = phonekey:main"],
    },
)
