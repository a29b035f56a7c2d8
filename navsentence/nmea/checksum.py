"""NMEA checksum splitting and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F
    ^                         checksum content                        ^^
    start                                                          checksum (0x7F = 127)

Throughout this module "payload" means everything before the '*', including
the leading '$'. This matches what ``split_sentence`` returns, so the pieces
can be chained directly:

    payload, declared = split_sentence(sentence)
    validate_checksum(payload, declared)
"""

from navsentence.nmea.errors import ChecksumMismatchError, InvalidFormatError

__all__ = [
    "compute_checksum",
    "format_checksum",
    "split_sentence",
    "validate_checksum",
]

_CHECKSUM_SEPARATOR = "*"


def split_sentence(sentence: str) -> tuple[str, str]:
    """Split an NMEA sentence into its payload and declared checksum.

    NMEA sentences follow the format: $<content>*<checksum>
    Trailing whitespace and line terminators are removed from the checksum
    side only; the payload is returned untouched.

    Args:
        sentence: Raw NMEA sentence string (e.g., "$GNGGA,...*7F\\r\\n")

    Returns:
        A tuple of (payload, checksum_text).

    Raises:
        InvalidFormatError: If the sentence does not contain exactly one '*'.

    Example:
        >>> split_sentence("$GNGGA,123519*7F\\r\\n")
        ('$GNGGA,123519', '7F')
    """
    parts = sentence.split(_CHECKSUM_SEPARATOR)
    if len(parts) != 2:
        raise InvalidFormatError()

    payload, raw_checksum = parts
    return payload, raw_checksum.strip()


def compute_checksum(payload: str) -> int:
    """Calculate the XOR checksum of a sentence payload.

    The NMEA checksum algorithm XORs every byte of the content. The leading
    '$' is not part of the content and is skipped.

    Args:
        payload: The sentence text before '*', with its leading '$'.

    Returns:
        Integer checksum value (0-255)

    Example:
        For payload "$GNGGA", the calculation is:
        ord('G') ^ ord('N') ^ ord('G') ^ ord('G') ^ ord('A')
    """
    content = payload[1:] if payload.startswith("$") else payload

    result = 0
    for byte in content.encode("utf-8"):
        result ^= byte
    return result


def format_checksum(value: int) -> str:
    """Render a checksum the way it appears on the wire: two uppercase hex digits."""
    return f"{value:02X}"


def validate_checksum(payload: str, expected: str) -> None:
    """Verify that a payload matches its declared checksum.

    The comparison is case-sensitive against the uppercase rendering, so a
    sentence declaring ``*1b`` is rejected even though it is numerically
    equal to ``1B``.

    Args:
        payload: The sentence text before '*', with its leading '$'.
        expected: The checksum text declared after '*'.

    Raises:
        ChecksumMismatchError: If the computed checksum differs. The error
            carries both the declared and the computed value.
    """
    computed = format_checksum(compute_checksum(payload))
    if computed != expected:
        raise ChecksumMismatchError(expected=expected, computed=computed)
