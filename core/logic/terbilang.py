"""
Indonesian Number Words (Terbilang).

Renders numbers as Indonesian words for the legal text of the certificate,
e.g. the land area "1234,56 m²" becomes
"seribu dua ratus tiga puluh empat koma lima puluh enam".

Rules:
    - 0 is "nol"; negatives are prefixed with "minus"
    - 10 "sepuluh", 11 "sebelas", 12-19 "<n> belas"
    - 100 "seratus", 1000 "seribu"; higher groups juta, miliar, triliun
    - Only the first two fraction digits are spoken, as one two-digit
      number ("koma lima puluh enam"); a zero two-digit fraction adds nothing

Exports:
    number_to_indonesian_words: Render a number as words
"""

import math
from typing import Union

from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CODEC, "Terbilang")

Number = Union[int, float]

_ONES = (
    '', 'satu', 'dua', 'tiga', 'empat',
    'lima', 'enam', 'tujuh', 'delapan', 'sembilan',
)

_TENS = (
    '', 'sepuluh', 'dua puluh', 'tiga puluh', 'empat puluh',
    'lima puluh', 'enam puluh', 'tujuh puluh', 'delapan puluh', 'sembilan puluh',
)

_HUNDREDS = (
    '', 'seratus', 'dua ratus', 'tiga ratus', 'empat ratus',
    'lima ratus', 'enam ratus', 'tujuh ratus', 'delapan ratus', 'sembilan ratus',
)

# (group size, word) from largest to smallest above thousands
_LARGE_GROUPS = (
    (10 ** 12, 'triliun'),
    (10 ** 9, 'miliar'),
    (10 ** 6, 'juta'),
)


def _join(head: str, tail: str) -> str:
    return f"{head} {tail}" if tail else head


def _below_thousand(num: int) -> str:
    if num == 0:
        return ''
    if num < 10:
        return _ONES[num]
    if num == 10:
        return _TENS[1]
    if num == 11:
        return 'sebelas'
    if num < 20:
        return f"{_ONES[num - 10]} belas"
    if num < 100:
        return _join(_TENS[num // 10], _ONES[num % 10])
    return _join(_HUNDREDS[num // 100], _below_thousand(num % 100))


def _below_million(num: int) -> str:
    if num < 1000:
        return _below_thousand(num)
    thousands, remainder = divmod(num, 1000)
    head = 'seribu' if thousands == 1 else f"{_below_thousand(thousands)} ribu"
    return _join(head, _below_thousand(remainder))


def _integer_words(num: int) -> str:
    for size, word in _LARGE_GROUPS:
        if num >= size:
            quotient, remainder = divmod(num, size)
            return _join(f"{_integer_words(quotient)} {word}", _integer_words(remainder))
    return _below_million(num)


def _fraction_digits(num: float) -> str:
    text = repr(float(num))
    if 'e' in text or 'E' in text:
        text = f"{num:f}"
    if '.' not in text:
        return ''
    return text.split('.', 1)[1]


def number_to_indonesian_words(num: Number) -> str:
    """
    Render a number as Indonesian words.

    Args:
        num: Integer or float

    Returns:
        Words, e.g. 1234 -> "seribu dua ratus tiga puluh empat";
        "" for NaN or infinity

    Example:
        >>> number_to_indonesian_words(50000)
        'lima puluh ribu'
        >>> number_to_indonesian_words(0.5)
        'nol koma lima puluh'
    """
    if isinstance(num, float) and not math.isfinite(num):
        logger.warning(f"Cannot render non-finite number as words: {num!r}")
        return ''
    if num == 0:
        return 'nol'
    if num < 0:
        return f"minus {number_to_indonesian_words(-num)}"

    integer_part = int(math.floor(num))
    result = _integer_words(integer_part) if integer_part else 'nol'

    if num - integer_part > 0:
        digits = _fraction_digits(num)
        fraction = int(digits.ljust(2, '0')[:2]) if digits else 0
        if fraction > 0:
            result = f"{result} koma {_below_thousand(fraction)}"

    return result.strip()
