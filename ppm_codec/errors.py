"""
PPM Decode Errors

Every failure raised while decoding a P6 file is a subclass of PPMError.
PPMError derives from ValueError, so callers that only care about "bad
input" can keep catching ValueError.
"""


class PPMError(ValueError):
    """Base class for all PPM decode failures."""

    kind = "ppm_error"


class EmptyInputError(PPMError):
    """The input holds zero bytes."""

    kind = "empty_input"


class MagicMismatchError(PPMError):
    """The first byte is not 'P'."""

    kind = "magic_mismatch"


class UnsupportedFormatError(PPMError):
    """The second byte is not '6', so this is not a binary PPM."""

    kind = "unsupported_format"


class MalformedHeaderError(PPMError):
    """A separator or digit was expected and something else was found."""

    kind = "malformed_header"


class UnsupportedMaxValueError(PPMError):
    """The max-value token is not 255."""

    kind = "unsupported_max_value"


class UnexpectedEofError(PPMError):
    """The input ended while a header digit or a color channel was expected."""

    kind = "unexpected_eof"
