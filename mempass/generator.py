# generator
# (memorable password generator)
#

import logging
from random import SystemRandom

from . import options as o
from .options import Options, check_options
from .rules import transform_words, padding
from .words import dict_words, random_words
from .entropy import entropy
from .passphrase import harden

log = logging.getLogger(__name__)

random = SystemRandom()


class Generator:

    """Generate human memorable passwords.

    Words from the word source are transformed by the rule pipeline,
    joined by separator and padded to required length.

    The options are checked (and their defaults filled in)
    on each call to `generate`.

    `rng` is a source of randomness compatible with `random.Random`.
    Pass seeded `random.Random` instance for reproducible results.

    """

    def __init__(self, opt: Options = None, rng=None):
        self._opt = opt if opt is not None else Options()
        self._rng = rng if rng is not None else random

    @property
    def options(self):
        return self._opt

    def generate(self) -> tuple:
        """Generate password according to options.

        :returns: (password, entropy) tuple, entropy is 0.0 unless
                  `calculate_entropy` option is set
        :raises OptionsError: invalid options
        :raises SourceError: word list cannot be used

        """
        opt = check_options(self._opt)
        if opt.from_passphrase:
            pwd = harden(opt.passphrase, self._rng)
        else:
            pwd = self.assemble(self.transformed_words())
        ent = entropy(pwd, opt) if opt.calculate_entropy else 0.0
        return pwd, ent

    def source_words(self) -> list:
        opt = self._opt
        if opt.use_rand:
            return random_words(opt.word_count, opt.min_word_length,
                                opt.max_word_length, self._rng)
        return dict_words(opt.word_count, opt.min_word_length,
                          opt.max_word_length, self._rng, opt.wordlist)

    def transformed_words(self) -> list:
        return transform_words(self.source_words(), self._opt, self._rng)

    def separator(self) -> str:
        """Separator for this password, random one is drawn only once."""
        opt = self._opt
        if opt.sep_rule == o.RULE_FIXED:
            return opt.separator
        if opt.sep_rule == o.RULE_RANDOM:
            return self._rng.choice(opt.separator_pool)
        return ''

    def assemble(self, words: list) -> str:
        """Join `words` by separator and add padding at the end."""
        opt = self._opt
        sep = self.separator()
        size = sum(len(word) for word in words)
        if sep:
            size += len(words) - 1
        padding_size = 0
        if opt.pad_length > size:
            padding_size = opt.pad_length - size
        log.debug("Password size %d + padding %d", size, padding_size)
        pwd = sep.join(words)
        if padding_size:
            pwd += padding(padding_size, opt.symbol_pool, opt.pad_symbol, self._rng)
        return pwd


def generate(opt: Options = None, rng=None) -> tuple:
    """Generate password, return (password, entropy)."""
    return Generator(opt, rng).generate()
