'''
The fragment component.
See RFC 3986, section 3.5: https://tools.ietf.org/html/rfc3986#section-3.5
'''
from typing import Union

from uricomponent.char_map import CharMap, PCHAR, char_map
from uricomponent.component import BytesLike, Component

# fragment = *( pchar / "/" / "?" ), plus the percent marker.
FRAGMENT_CHAR_MAP: CharMap = char_map(PCHAR + b'/?%')

class Fragment(Component):
    """
    The fragment component.
    Fragments are case-sensitive, but percent-encoding plays no role in equality:
    "fragment" and "fr%61gment" are the same fragment.
    The original content is always preserved as is; only normalize() rewrites it.
    """

    name = 'fragment'
    table = FRAGMENT_CHAR_MAP

def validate(value: Union[str, BytesLike]) -> Fragment:
    """Validate a candidate fragment, raising an InvalidComponent subclass if it is not one."""
    return Fragment(value)
