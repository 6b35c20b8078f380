from collections.abc import Iterable, Sequence
from typing import Optional, Tuple

HEX_DIGITS: bytes = b'0123456789ABCDEF'
LOWER_HEX_DIGITS: bytes = b'abcdef'

class MalformedEscape(ValueError):
    '''A percent marker not followed by two hexadecimal digits.'''

def hex_digit_value(c: Optional[int]) -> int:
    if c is None:
        raise MalformedEscape('percent encoding truncated')
    if c in LOWER_HEX_DIGITS:
        c -= 0x20
    i = HEX_DIGITS.find(c)
    if i < 0:
        raise MalformedEscape(f'not a hexadecimal digit: {bytes([c])!r}')
    return i

def decode_triplet(c1: Optional[int], c0: Optional[int]) -> Tuple[int, bool]:
    """
    Decode the two bytes following a percent marker.
    Either byte is None if the input ended before it.
    Returns the decoded byte and whether both hex digits were uppercase.
    Decimal digits count as uppercase.
    """
    value = 0x10 * hex_digit_value(c1) + hex_digit_value(c0)
    uppercase = c1 not in LOWER_HEX_DIGITS and c0 not in LOWER_HEX_DIGITS
    return (value, uppercase)

def byte_at(xs: Sequence[int], i: int) -> Optional[int]:
    return xs[i] if i < len(xs) else None

class PercentCode:
    '''Percent coding operating on bytes.'''

    def __init__(self, *, special: int = ord('%'), reserved: Iterable[int] = []):
        self.special = special
        self.to_encode = frozenset([special] + list(reserved))

    def decode_iterable(self, xs: Sequence[int], strict: bool = True) -> Iterable[int]:
        """
        Decode every escape to the byte it represents.
        If strict is unset, a special byte not starting a valid escape passes through as is.
        """
        i = 0
        while i < len(xs):
            b = xs[i]
            if b == self.special:
                try:
                    (value, _) = decode_triplet(byte_at(xs, i + 1), byte_at(xs, i + 2))
                except MalformedEscape:
                    if strict:
                        raise
                else:
                    yield value
                    i += 3
                    continue
            yield b
            i += 1

    def encode_iterable(self, it: Iterable[int]) -> Iterable[int]:
        for x in it:
            if x in self.to_encode:
                yield self.special
                yield from f'{x:02X}'.encode()
            else:
                yield x

    def decode(self, xs: Sequence[int], strict: bool = True) -> bytes:
        return bytes(self.decode_iterable(xs, strict))

    def encode(self, xs: Iterable[int]) -> bytes:
        return bytes(self.encode_iterable(xs))
