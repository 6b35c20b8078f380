'''
Character-class tables.
A table has one entry per byte value: 0 if the byte is invalid, the byte itself if it may appear unescaped,
and the percent marker if the byte starts an escape.
'''
from enum import Enum
from typing import Iterable, Tuple

PERCENT: int = ord('%')

ALPHA: bytes = b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
DIGIT: bytes = b'0123456789'
UNRESERVED: bytes = ALPHA + DIGIT + b'-._~'
SUB_DELIMS: bytes = b"!$&'()*+,;="
PCHAR: bytes = UNRESERVED + SUB_DELIMS + b':@'

CharMap = Tuple[int, ...]

class CharClass(Enum):
    INVALID = 'invalid'
    LITERAL = 'literal'
    PERCENT = 'percent'

def char_map(allowed: Iterable[int]) -> CharMap:
    allowed = frozenset(allowed)
    if any(b >= 0x80 for b in allowed):
        raise ValueError('only ASCII bytes may appear unescaped')
    return tuple(b if b in allowed else 0 for b in range(0x100))

def classify(table: CharMap, byte: int) -> CharClass:
    entry = table[byte]
    if entry == 0:
        return CharClass.INVALID
    if entry == PERCENT:
        return CharClass.PERCENT
    return CharClass.LITERAL

def allows_literal(table: CharMap, byte: int) -> bool:
    entry = table[byte]
    return entry != 0 and entry != PERCENT

UNRESERVED_CHAR_MAP: CharMap = char_map(UNRESERVED)

def is_unreserved(byte: int) -> bool:
    return UNRESERVED_CHAR_MAP[byte] != 0
