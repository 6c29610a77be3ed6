# models.py
from dataclasses import dataclass


@dataclass(frozen=True)
class EncodedNumber:
    """
    One accepted encoding of a phone number.
    - number:   The phone number exactly as given, e.g. '059-4-5-3336'
    - encoding: Space separated words and free digits, e.g. 'any w ed d"ug'
    """
    number: str
    encoding: str

    def __str__(self):
        return f"{self.number}: {self.encoding}"
