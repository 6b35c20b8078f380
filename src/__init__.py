from uricomponent.component import (
    Component,
    InvalidCharacter,
    InvalidComponent,
    InvalidPercentEncoding,
)
from uricomponent.fragment import Fragment, validate
from uricomponent.percent_code import MalformedEscape, PercentCode, decode_triplet

__all__ = [
    "Component",
    "Fragment",
    "InvalidCharacter",
    "InvalidComponent",
    "InvalidPercentEncoding",
    "MalformedEscape",
    "PercentCode",
    "decode_triplet",
    "validate",
]
