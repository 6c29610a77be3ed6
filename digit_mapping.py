# --- digit_mapping.py ---

from types import MappingProxyType

# Limits from the original number-encoding parameters
MAX_PHONE_NUMBER_LENGTH = 50
MAX_WORD_LENGTH = 50
MAX_DICTIONARY_SIZE = 75000

# Deepest digit string the recursive search may be asked to handle
MAX_SEARCH_DEPTH = 200

# Number encoding table:
#   a v | f m x | b l t | d k u | c j w | e n | g o r | h p | i q | s y z
#    0  |   1   |   2   |   3   |   4   |  5  |   6   |  7  |  8  |   9
DIGIT_TO_LETTERS = MappingProxyType({
    0: frozenset("AV"),
    1: frozenset("FMX"),
    2: frozenset("BLT"),
    3: frozenset("DKU"),
    4: frozenset("CJW"),
    5: frozenset("EN"),
    6: frozenset("GOR"),
    7: frozenset("HP"),
    8: frozenset("IQ"),
    9: frozenset("SYZ"),
})

LETTER_TO_DIGIT = MappingProxyType({
    **dict.fromkeys(list("AV"), "0"),
    **dict.fromkeys(list("FMX"), "1"),
    **dict.fromkeys(list("BLT"), "2"),
    **dict.fromkeys(list("DKU"), "3"),
    **dict.fromkeys(list("CJW"), "4"),
    **dict.fromkeys(list("EN"), "5"),
    **dict.fromkeys(list("GOR"), "6"),
    **dict.fromkeys(list("HP"), "7"),
    **dict.fromkeys(list("IQ"), "8"),
    **dict.fromkeys(list("SYZ"), "9"),
})

DIGITS = "0123456789"


def letters_for(digit):
    """Return the uppercase letters encoded by ``digit`` (int 0-9 or one-char str)."""
    if isinstance(digit, str):
        if len(digit) != 1 or digit not in DIGITS:
            raise ValueError(f"Not a digit: {digit!r}")
        digit = int(digit)
    if isinstance(digit, bool) or not isinstance(digit, int) or digit not in DIGIT_TO_LETTERS:
        raise ValueError(f"Not a digit: {digit!r}")
    return DIGIT_TO_LETTERS[digit]


def digit_for(letter):
    try:
        return LETTER_TO_DIGIT[letter.upper()]
    except (KeyError, AttributeError):
        raise ValueError(f"Not a letter: {letter!r}") from None


def is_ascii_letter(ch):
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def word_to_digits(word):
    """
    Translate a dictionary word into its digit string. Only A-Z letters
    (either case) count; dashes, quotes and anything else are skipped.
    """
    return "".join(LETTER_TO_DIGIT[ch.upper()] for ch in word if is_ascii_letter(ch))


def ascii_digits(number):
    """Keep only the characters 0-9 of ``number``."""
    return "".join(ch for ch in number if ch in DIGITS)


def letters_and_digits_count(text):
    """Count the A-Z/a-z/0-9 characters of an encoding, ignoring spaces and punctuation."""
    return sum(1 for ch in text if ch in DIGITS or is_ascii_letter(ch))
