import time
from typing import Dict, Iterator, List, Tuple

from digit_mapping import MAX_PHONE_NUMBER_LENGTH, MAX_SEARCH_DEPTH, ascii_digits, letters_and_digits_count
from lookup_cache import lookup_has_prefix
from models import EncodedNumber
from utils import vlog


class InvalidNumberError(ValueError):
    """Raised when ``encode`` gets something that is not a usable phone number."""


def _fits(candidate, expected):
    return letters_and_digits_count(candidate) == expected


class _PartitionSearch:
    """
    Partition of one digit string into words and free digits.

    Both the enumeration and the lookahead probe are keyed by start index into
    the shared digit buffer and memoised, since the probe re-runs the
    enumeration on the same suffixes many times over.
    """

    def __init__(self, lookup, digits: str):
        self.lookup = lookup
        self.digits = digits
        self._suffixes: Dict[Tuple[int, bool], Tuple[str, ...]] = {}
        self._word_paths: Dict[int, bool] = {}

    def suffixes(self, start: int, previous_was_free: bool) -> Tuple[str, ...]:
        key = (start, previous_was_free)
        found = self._suffixes.get(key)
        if found is None:
            found = tuple(self._partition(start, previous_was_free))
            self._suffixes[key] = found
        return found

    def exists_word_path(self, start: int) -> bool:
        found = self._word_paths.get(start)
        if found is None:
            found = self._probe(start)
            self._word_paths[start] = found
        return found

    def _partition(self, start: int, previous_was_free: bool) -> Iterator[str]:
        """Yield every encoding of ``digits[start:]`` that covers it exactly."""
        digits = self.digits
        last = len(digits) - 1
        expected = len(digits) - start
        for end in range(start, len(digits)):
            segment = digits[start:end + 1]
            words = self.lookup.words_for(segment)
            is_single_digit = end == start
            if end < last:
                if words:
                    rest = self.suffixes(end + 1, False)
                    for word in words:
                        if rest:
                            for suffix in rest:
                                candidate = f"{word} {suffix}"
                                if _fits(candidate, expected):
                                    yield candidate
                        elif is_single_digit and _fits(word, expected):
                            yield word
                elif is_single_digit and not previous_was_free and not self.exists_word_path(start):
                    for suffix in self.suffixes(end + 1, True):
                        candidate = f"{segment} {suffix}"
                        if _fits(candidate, expected):
                            yield candidate
            elif words:
                for word in words:
                    if _fits(word, expected):
                        yield word
            elif is_single_digit and not previous_was_free:
                yield segment

            # No longer segment can match once no word starts with this one
            if not lookup_has_prefix(self.lookup, segment):
                break

    def _probe(self, start: int) -> bool:
        """True if some word placed at ``start`` still lets the rest be encoded."""
        digits = self.digits
        last = len(digits) - 1
        for end in range(last, start - 1, -1):
            if self.lookup.words_for(digits[start:end + 1]):
                if end == last or self.suffixes(end + 1, False):
                    return True
        return False


class PhoneNumberEncoder:
    """
    Encode phone numbers as sequences of dictionary words.

    Encodings are built word by word from left to right. A single digit of
    the number may stand for itself only if no dictionary word can be placed
    at that position (with the rest still encodable) and the digit before it
    was not itself left as a digit.

    ``lookup`` is any object with ``words_for(digits)`` returning the literal
    dictionary words that spell ``digits``; ``has_prefix(digits)`` is used to
    cut the search short when available.
    """

    def __init__(self, lookup, max_length: int = MAX_PHONE_NUMBER_LENGTH):
        # Recursion depth grows with the digit count
        if not 1 <= max_length <= MAX_SEARCH_DEPTH:
            raise ValueError(f"max_length must be between 1 and {MAX_SEARCH_DEPTH}, got {max_length}")
        self.lookup = lookup
        self.max_length = max_length

    def encode(self, number: str) -> List[EncodedNumber]:
        """Return every encoding of ``number``; an empty list if there is none."""
        return list(self.iter_encodings(number))

    def iter_encodings(self, number: str) -> Iterator[EncodedNumber]:
        if not isinstance(number, str):
            raise InvalidNumberError(f"Phone number must be a string, got {type(number).__name__}")
        digits = ascii_digits(number)
        if not digits:
            vlog(f"'{number}' has no digits, nothing to encode")
            return iter(())
        if len(digits) > self.max_length:
            raise InvalidNumberError(
                f"Phone number '{number}' has {len(digits)} digits (max {self.max_length})"
            )
        t0 = time.time()
        encodings = dict.fromkeys(_PartitionSearch(self.lookup, digits).suffixes(0, False))
        vlog(f"{number}: {len(encodings)} encoding(s)", t0)
        return (EncodedNumber(number, encoding) for encoding in encodings)


def encode(number: str, lookup, max_length: int = MAX_PHONE_NUMBER_LENGTH) -> List[EncodedNumber]:
    return PhoneNumberEncoder(lookup, max_length).encode(number)
