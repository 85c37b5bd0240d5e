# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

class InvalidEncodingError(ValueError):
    """Raised when an encoded key string cannot be decoded, such as a bad
    head character or a digit payload that does not parse in the expected
    radix."""
    pass

class InvalidBase810Error(InvalidEncodingError):
    pass

class InvalidPhoneNumberError(InvalidEncodingError):
    pass

class InvalidBase32Error(InvalidEncodingError):
    pass
