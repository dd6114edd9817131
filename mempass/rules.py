# rules
# (per-word transformation pipeline)
#

import string
import logging

from . import options as o
from .errors import OptionsError
from .l33t import to_leet, to_upper

log = logging.getLogger(__name__)


class CapRule:

    """Capitalization rule.

    A rule is an index predicate over code points of a word.
    The selected code points are uppercased, the others are kept.

    """

    name = None

    def select(self, idx: int, length: int, word_index: int, rng) -> bool:
        raise NotImplementedError

    def apply(self, word: str, word_index: int, rng) -> str:
        length = len(word)
        return ''.join(to_upper(c) if self.select(i, length, word_index, rng) else c
                       for i, c in enumerate(word))

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class CapNone(CapRule):
    name = o.CAP_NONE

    def select(self, idx, length, word_index, rng):
        return False

    def apply(self, word, word_index, rng):
        return word


class CapAll(CapRule):
    name = o.CAP_ALL

    def select(self, idx, length, word_index, rng):
        return True


class CapAlternate(CapRule):
    name = o.CAP_ALTERNATE

    def select(self, idx, length, word_index, rng):
        return idx % 2 == 0


class CapWordAlternate(CapRule):

    """Even words are uppercased completely, odd ones are untouched."""

    name = o.CAP_WORD_ALTERNATE

    def select(self, idx, length, word_index, rng):
        return word_index % 2 == 0


class CapFirstLetter(CapRule):
    name = o.CAP_FIRST_LETTER

    def select(self, idx, length, word_index, rng):
        return idx == 0


class CapLastLetter(CapRule):
    name = o.CAP_LAST_LETTER

    def select(self, idx, length, word_index, rng):
        return idx == length - 1


class CapAllButFirstLetter(CapRule):
    name = o.CAP_ALL_BUT_FIRST_LETTER

    def select(self, idx, length, word_index, rng):
        return idx != 0


class CapAllButLastLetter(CapRule):
    name = o.CAP_ALL_BUT_LAST_LETTER

    def select(self, idx, length, word_index, rng):
        return idx != length - 1


class CapRandom(CapRule):

    """Each code point is uppercased with probability `ratio`."""

    name = o.CAP_RANDOM

    def __init__(self, ratio: float):
        self.ratio = ratio

    def __repr__(self):
        return f"{self.__class__.__name__}(ratio={self.ratio!r})"

    def select(self, idx, length, word_index, rng):
        return rng.random() < self.ratio


CAP_RULE_CLASSES = {cls.name: cls for cls in (
    CapNone, CapAll, CapAlternate, CapWordAlternate,
    CapFirstLetter, CapLastLetter,
    CapAllButFirstLetter, CapAllButLastLetter,
)}


def cap_rule(name: str, ratio: float = None) -> CapRule:
    """Build capitalization rule from its configured `name`."""
    if name == o.CAP_RANDOM:
        return CapRandom(ratio)
    try:
        return CAP_RULE_CLASSES[name]()
    except KeyError:
        raise OptionsError(f"unknown `cap_rule`: {name!r}") from None


def padding(count: int, pool: str, char: str, rng) -> str:
    """Return `count` times `char`, or `count` random chars from `pool`."""
    if char:
        return char * count
    return ''.join(rng.choice(pool) for _ in range(count))


def add_padding(word: str, before: int, after: int, pool: str, char: str, rng) -> str:
    return padding(before, pool, char, rng) + word + padding(after, pool, char, rng)


def add_digits(word: str, before: int, after: int, rng) -> str:
    return add_padding(word, before, after, string.digits, None, rng)


def add_symbols(word: str, before: int, after: int, pool: str, char: str, rng) -> str:
    return add_padding(word, before, after, pool, char, rng)


def l33tify(word: str, ratio: float, rng) -> str:
    """Substitute each code point by its leet digit with probability `ratio`.

    Uppercase letters and characters outside of the leet table are kept.

    """
    return ''.join(to_leet(c) if rng.random() < ratio else c for c in word)


class Pipeline:

    """Ordered word transformation stages built from checked options.

    The order of stages is significant: capitalization, digits, symbols
    and leet substitution last, so that leet sees the padded word and
    letters uppercased earlier are not substituted.

    """

    def __init__(self, opt: o.Options):
        self._stages = []
        if opt.cap_rule != o.CAP_NONE:
            rule = cap_rule(opt.cap_rule, opt.cap_ratio)
            self._stages.append(('capitalize', rule.apply))
        if opt.digits_before > 0 or opt.digits_after > 0:
            self._stages.append(('digits', lambda w, i, rng: add_digits(
                w, opt.digits_before, opt.digits_after, rng)))
        if opt.symbols_before > 0 or opt.symbols_after > 0:
            self._stages.append(('symbols', lambda w, i, rng: add_symbols(
                w, opt.symbols_before, opt.symbols_after,
                opt.symbol_pool, opt.symbol, rng)))
        if opt.l33t_ratio > 0:
            self._stages.append(('l33t', lambda w, i, rng: l33tify(
                w, opt.l33t_ratio, rng)))
        log.debug("Pipeline stages: %s", ', '.join(self.stage_names) or '(none)')

    @property
    def stage_names(self):
        return [name for name, _ in self._stages]

    def transform(self, word: str, word_index: int, rng) -> str:
        for _, stage in self._stages:
            word = stage(word, word_index, rng)
        return word


def transform_words(words, opt: o.Options, rng) -> list:
    """Transform each of `words`, return new list."""
    pipeline = Pipeline(opt)
    return [pipeline.transform(word, i, rng) for i, word in enumerate(words)]
