'''
Percent-encodable URI components.

A component value keeps its content verbatim: validation never decodes or case-folds it.
Percent-encoding only matters for comparison: values are equal if their decoded byte streams are equal,
and equal component values hash alike.
Text and bytes operands are decoded too, so a value can equal a str or bytes object whose hash differs.
'''
import logging
from typing import Iterable, Union

from uricomponent.char_map import CharClass, CharMap, PERCENT, allows_literal, classify, is_unreserved
from uricomponent.general import iter_equal, iter_map_if
from uricomponent.percent_code import MalformedEscape, PercentCode, byte_at, decode_triplet

logger: logging.Logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

# Decodes escapes only, for comparison and decoded views.
escape_code = PercentCode()

# Errors.

class InvalidComponent(ValueError):
    '''A byte sequence that is not a valid component.'''

    description = 'invalid {component}'

    def __init__(self, component: str, value: bytes, position: int):
        super().__init__(component, value, position)
        self.component = component
        self.value = value
        self.position = position

    def __str__(self) -> str:
        return f'{self.description.format(component = self.component)} at position {self.position}'

class InvalidCharacter(InvalidComponent):
    '''A byte outside the allowed set appeared outside any percent-encoding.'''

    description = 'invalid {component} character'

class InvalidPercentEncoding(InvalidComponent):
    '''A percent marker was not followed by two hexadecimal digits.'''

    description = 'invalid {component} percent encoding'

# Byte-level helpers.

def byte_view(value: Union[str, BytesLike]) -> BytesLike:
    """Return the bytes of a text or bytes-like value, copying only text and non-contiguous views."""
    if isinstance(value, str):
        return value.encode('utf8')
    if isinstance(value, memoryview):
        # Only contiguous views can be cast to a flat byte view.
        return value.cast('B') if value.c_contiguous else value.tobytes()
    if isinstance(value, (bytes, bytearray)):
        return value
    raise TypeError(f'expected str or bytes-like object, not {type(value).__name__}')

def ascii_lower(b: int) -> int:
    return b + 0x20 if 0x41 <= b <= 0x5a else b

def normalize_bytes(data: BytesLike) -> bytes:
    """
    Canonicalize validated content.
    Every escape gets uppercase hex digits; escapes of unreserved bytes are replaced by the byte itself.
    """
    out = bytearray()
    i = 0
    while i < len(data):
        b = data[i]
        if b == PERCENT:
            (value, _) = decode_triplet(data[i + 1], data[i + 2])
            if is_unreserved(value):
                out.append(value)
            else:
                out.append(PERCENT)
                out.extend(bytes(data[i + 1:i + 3]).upper())
            i += 3
        else:
            out.append(b)
            i += 1
    return bytes(out)

# Component values.

class Component:
    """
    Base class for components governed by a character-class table plus percent-encoding.
    Subclasses set:
    * name: used in error messages.
    * table: the character-class table (see uricomponent.char_map).
    * case_sensitive: whether letters outside escapes are compared case-sensitively.
    """

    name: str = 'component'
    table: CharMap
    case_sensitive: bool = True

    def __init__(self, value: Union[str, BytesLike]):
        data = byte_view(value)
        self._normalized: bool = self.scan(data)
        self._value: BytesLike = bytes(data)

    @classmethod
    def borrow(cls, buffer: BytesLike) -> 'Component':
        """
        Validate a bytes-like buffer and keep a read-only view of it instead of a copy.
        The caller must not modify the buffer while the value is alive.
        """
        view = memoryview(buffer).cast('B').toreadonly()
        self = cls.__new__(cls)
        self._normalized = cls.scan(view)
        self._value = view
        return self

    @classmethod
    def encode(cls, data: Union[str, BytesLike]) -> 'Component':
        """Build a normalized value from unencoded data by escaping every byte not allowed literally."""
        code = PercentCode(reserved = (b for b in range(0x100) if not allows_literal(cls.table, b)))
        return cls(code.encode(byte_view(data)))

    @classmethod
    def scan(cls, data: BytesLike) -> bool:
        """
        Validate content in a single pass.
        Returns whether it is already normalized.
        Raises an InvalidComponent subclass for the first offending byte.
        """
        normalized = True
        i = 0
        while i < len(data):
            char_class = classify(cls.table, data[i])
            if char_class is CharClass.INVALID:
                logger.debug(f'Rejecting {cls.name} {bytes(data)!r}: invalid byte at position {i}.')
                raise InvalidCharacter(cls.name, bytes(data), i)
            if char_class is CharClass.PERCENT:
                try:
                    (value, uppercase) = decode_triplet(byte_at(data, i + 1), byte_at(data, i + 2))
                except MalformedEscape as e:
                    logger.debug(f'Rejecting {cls.name} {bytes(data)!r}: {e} at position {i}.')
                    raise InvalidPercentEncoding(cls.name, bytes(data), i) from e
                if not uppercase or is_unreserved(value):
                    normalized = False
                i += 3
            else:
                i += 1
        return normalized

    # Views.

    def as_str(self) -> str:
        return str(self._value, 'utf8')

    def as_bytes(self) -> bytes:
        return bytes(self._value)

    def decoded(self) -> bytes:
        """The content with every escape decoded."""
        return escape_code.decode(self._value)

    def is_borrowed(self) -> bool:
        return isinstance(self._value, memoryview)

    def is_normalized(self) -> bool:
        return self._normalized

    def into_owned(self) -> 'Component':
        """Return an equivalent value holding its own copy of the content."""
        owned = type(self).__new__(type(self))
        owned._value = bytes(self._value)
        owned._normalized = self._normalized
        return owned

    # Normalization.

    def normalize(self) -> None:
        """
        Rewrite the content into canonical form in place.
        A borrowed buffer is never written to: the value switches to an owned copy.
        """
        if self._normalized:
            return
        value = normalize_bytes(self._value)
        logger.debug(f'Normalized {self.name} {bytes(self._value)!r} to {value!r}.')
        self._value = value
        self._normalized = True

    def normalized(self) -> 'Component':
        """Return a normalized copy, leaving this value unchanged."""
        copy = self.into_owned()
        copy.normalize()
        return copy

    # Comparison.

    def _stream(self, data: BytesLike, strict: bool = True) -> Iterable[int]:
        return iter_map_if(not self.case_sensitive, ascii_lower, escape_code.decode_iterable(data, strict))

    def __eq__(self, other) -> bool:
        if isinstance(other, Component):
            if type(other) is not type(self):
                return NotImplemented
            (data, strict) = (other._value, True)
        elif isinstance(other, (str, bytes, bytearray, memoryview)):
            # Not validated: a stray percent marker compares as a literal byte.
            (data, strict) = (byte_view(other), False)
        else:
            return NotImplemented
        return iter_equal(self._stream(self._value), self._stream(data, strict))

    def __hash__(self) -> int:
        return hash(bytes(self._stream(self._value)))

    # Conversions.

    def __str__(self) -> str:
        return self.as_str()

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __len__(self) -> int:
        return len(self._value)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.as_str()!r})'
