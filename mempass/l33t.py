# l33t
# (character class oracle)
#

from types import MappingProxyType

L33T_TABLE = MappingProxyType({
    'a': '4',
    'e': '3',
    'i': '1',
    'o': '0',
    's': '5',
    't': '7',
})


def is_leetable(c: str) -> bool:
    """Check if `c` is a lowercase letter with a leet substitute."""
    return c.islower() and c in L33T_TABLE


def to_leet(c: str) -> str:
    return L33T_TABLE.get(c, c)


def to_upper(c: str) -> str:
    """Uppercase a single code point.

    Characters whose uppercase form is not a single code point
    (e.g. German sharp s) are returned unchanged.

    """
    u = c.upper()
    return u if len(u) == 1 else c
