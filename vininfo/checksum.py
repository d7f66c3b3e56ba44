from __future__ import annotations

from .errors import TooLong, TooShort

VIN_LENGTH = 17
CHECK_DIGIT_IX = 8

# index % 10 is the transliterated digit; '.' marks letters VINs never use
TRANSLITERATION = "0123456789.ABCDEFGH..JKLMN.P.R..STUVWXYZ"

# weights are spelled in the check alphabet, 'X' standing for ten
CHECK_ALPHABET = "0123456789X"
WEIGHTS = "8765432X098765432"


def transliterate(char: str) -> int:
    """
    Maps a VIN character to its checksum digit.

    Characters outside the transliteration alphabet (I, O, Q, lowercase,
    punctuation) count as zero rather than being rejected.
    """
    ix = TRANSLITERATION.find(char) if char != "." else -1
    return ix % 10 if ix >= 0 else 0


def weight(pos: int) -> int:
    return CHECK_ALPHABET.index(WEIGHTS[pos])


def calculated_checksum(normalized: str) -> str:
    """
    Computes the ISO 3779 check character for a normalized 17-char VIN.

    Args:
        normalized: uppercased, hyphen-free VIN

    Returns:
        the expected character at position 9: a digit, or 'X' for ten

    Raises:
        TooShort, TooLong: if the VIN is not exactly 17 characters
    """
    if len(normalized) < VIN_LENGTH:
        raise TooShort(normalized, VIN_LENGTH)
    if len(normalized) > VIN_LENGTH:
        raise TooLong(normalized, VIN_LENGTH)

    total = sum(
        transliterate(c) * weight(pos) for pos, c in enumerate(normalized)
    )
    return CHECK_ALPHABET[total % 11]
