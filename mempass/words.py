# words
# (word sources: bundled word list or pronounceable random words)
#

import functools
import logging
from collections import defaultdict
from pathlib import Path

from .errors import SourceError
from .options import MAX_WORD_LENGTH

log = logging.getLogger(__name__)

WORDLIST_PATH = Path(__file__).with_name('words.txt')

CONSONANTS = 'bcdfghjklmnprstvwz'
VOWELS = 'aeiou'


def filter_wordlist(lines) -> tuple:
    """Strip lines, keep only lowercase alphabetic words."""
    words = (ln.strip() for ln in lines)
    return tuple(w for w in words if w.isalpha() and w.islower())


@functools.lru_cache(maxsize=None)
def load_wordlist(path=None) -> tuple:
    """Load and return a word list (bundled one by default)."""
    path = Path(path).expanduser() if path else WORDLIST_PATH
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Error reading word list {str(path)!r}: {e}") from e
    words = filter_wordlist(lines)
    log.debug("Loaded %d words from %r", len(words), str(path))
    return words


def bucket_words(words, min_length: int, max_length: int) -> dict:
    """Group `words` by length, drop those out of bounds.

    Zero `max_length` means no maximum.

    """
    buckets = defaultdict(list)
    for word in words:
        n = len(word)
        if n < min_length or (max_length > 0 and n > max_length):
            continue
        buckets[n].append(word)
    return dict(buckets)


def dict_words(count: int, min_length: int, max_length: int, rng, path=None) -> list:
    """Choose `count` random words from word list.

    First a length is chosen uniformly among the lengths present,
    then a word of that length. The same word may be chosen repeatedly.

    """
    buckets = bucket_words(load_wordlist(path), min_length, max_length)
    if not buckets:
        raise SourceError(f"No word in word list has length between "
                          f"{min_length} and {max_length or 'unlimited'}")
    lengths = sorted(buckets)
    words = []
    for _ in range(count):
        bucket = buckets[rng.choice(lengths)]
        words.append(rng.choice(bucket))
    return words


def random_word(length: int, rng) -> str:
    """Generate pronounceable pseudo-word, alternating consonants and vowels."""
    first = rng.randrange(2)
    return ''.join(rng.choice(CONSONANTS if (i + first) % 2 == 0 else VOWELS)
                   for i in range(length))


def random_words(count: int, min_length: int, max_length: int, rng) -> list:
    lo = max(min_length, 1)
    hi = max_length or MAX_WORD_LENGTH
    return [random_word(rng.randint(lo, hi), rng) for _ in range(count)]
