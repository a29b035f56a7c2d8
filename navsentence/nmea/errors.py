"""Errors raised while decoding a single NMEA sentence.

Every decoder either returns a complete record or raises exactly one of the
exceptions below. All of them derive from ``NMEAParseError`` so callers that
only care about "did this sentence decode" can catch the base class:

    InvalidFormatError          structural violation (no ',' or wrong '*' count)
    UnsupportedIdentifierError  leading token is not known for the decoder
    InsufficientFieldsError     fewer fields than the sentence kind requires
    ChecksumMismatchError       XOR checksum differs from the declared one
    InvalidFieldError           a required field failed conversion
"""

__all__ = [
    "ChecksumMismatchError",
    "InsufficientFieldsError",
    "InvalidFieldError",
    "InvalidFormatError",
    "NMEAParseError",
    "UnsupportedIdentifierError",
]


class NMEAParseError(Exception):
    """Base class for all sentence decoding failures."""


class InvalidFormatError(NMEAParseError):
    def __init__(self) -> None:
        super().__init__("The NMEA sentence format is invalid.")


class UnsupportedIdentifierError(NMEAParseError):
    """The text before the first ',' is not a known identifier.

    Attributes:
        identifier: The offending identifier text, including the leading '$'.
    """

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Unsupported sentence identifier: {identifier}.")


class InsufficientFieldsError(NMEAParseError):
    """The sentence has fewer comma-separated fields than required.

    Attributes:
        expected: Minimum number of fields for the sentence kind.
        actual: Number of fields found, including the identifier field.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected at least {expected} fields but got {actual}.")


class ChecksumMismatchError(NMEAParseError):
    """The declared checksum does not match the computed one.

    Attributes:
        expected: Checksum text as declared after '*'.
        computed: Two-digit uppercase hex of the computed XOR checksum.
    """

    def __init__(self, expected: str, computed: str) -> None:
        self.expected = expected
        self.computed = computed
        super().__init__(
            f"Checksum mismatch: expected {expected} but computed {computed}."
        )


class InvalidFieldError(NMEAParseError):
    """A required field could not be converted to its typed value.

    Attributes:
        field_name: Semantic name of the field (e.g. ``"hdop"``).
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Could not parse field '{field_name}'.")
