# passphrase
# (harden user passphrase)
#

import re
import string
import logging
from collections import namedtuple
from random import SystemRandom

from .l33t import is_leetable, to_leet, to_upper

log = logging.getLogger(__name__)

random = SystemRandom()

#: Minimal count of each character class is length * QUOTA_RATIO (at least 1)
QUOTA_RATIO = 1 / 8
SPECIAL_CHAR = '-'

CharCounts = namedtuple('CharCounts', 'length upper digits special lower_positions')

_re_hyphens = re.compile(r'-+')


def normalize(text: str) -> str:
    """Replace spaces with hyphens, then squeeze repeated hyphens."""
    return _re_hyphens.sub('-', text.replace(' ', '-'))


def count_chars(text: str) -> CharCounts:
    """Classify each char of `text` into one class and count them.

    Positions of lowercase letters are recorded, not just counted.
    Any numeric char (including fractions and roman numerals) is a digit.

    """
    upper = digits = special = 0
    lower_positions = []
    for i, c in enumerate(text):
        if c.isnumeric():
            digits += 1
        elif c.islower():
            lower_positions.append(i)
        elif c.isupper():
            upper += 1
        elif not c.isalpha():
            special += 1
    return CharCounts(len(text), upper, digits, special, lower_positions)


def quota(length: int) -> int:
    return max(1, int(length * QUOTA_RATIO))


def inject(chars: list, count: int, positions: list, rewrite, alphabet: str, rng) -> int:
    """Inject `count` chars of a class into `chars` (in place).

    First phase rewrites existing chars: a random position is taken
    from `positions` (each at most once) and its char is replaced by
    `rewrite(char)`. When `positions` run out, second phase appends
    random chars from `alphabet`.

    Returns number of appended chars.

    """
    positions = list(positions)
    while count > 0 and positions:
        pos = positions.pop(rng.randrange(len(positions)))
        new = rewrite(chars[pos])
        if new == chars[pos]:
            continue
        chars[pos] = new
        count -= 1
    for _ in range(count):
        chars.append(rng.choice(alphabet))
    return max(count, 0)


def find_leetable(chars) -> list:
    return [i for i, c in enumerate(chars) if is_leetable(c)]


def harden(text: str, rng=None) -> str:
    """Harden passphrase `text` by adding uppercase, digits and specials.

    Each of these classes must be present at least `quota(len)` times.
    Missing uppercase letters are made by uppercasing random lowercase
    letters, missing digits by leet substitution of random letters.
    Only when there are no letters left to convert, random uppercase
    letters or digits are appended. Missing special chars are always
    appended (as hyphens).

    """
    if rng is None:
        rng = random
    text = normalize(text)
    counts = count_chars(text)
    minimum = quota(counts.length)
    add_upper = minimum - counts.upper
    add_digits = minimum - counts.digits
    add_special = minimum - counts.special
    log.debug("Passphrase length %d, quota %d, missing: %d upper, %d digits, %d special",
              counts.length, minimum, max(add_upper, 0), max(add_digits, 0), max(add_special, 0))

    chars = list(text)
    appended = inject(chars, add_upper, counts.lower_positions, to_upper,
                      string.ascii_uppercase, rng)
    # Uppercased letters are no longer leetable, look for candidates again
    appended += inject(chars, add_digits, find_leetable(chars), to_leet,
                       string.digits, rng)
    if add_special > 0:
        chars.extend(SPECIAL_CHAR * add_special)
        appended += add_special
    log.debug("Appended %d chars to passphrase", appended)
    return ''.join(chars)
