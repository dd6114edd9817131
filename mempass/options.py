# options
# (generator configuration and its validation)
#

import configparser
import logging
from pathlib import Path

from .errors import OptionsError

log = logging.getLogger(__name__)

MAX_WORD_LENGTH = 28
DEFAULT_POOL = '@&!-_^$*%,.;:/=+'

CAP_NONE = 'none'
CAP_ALL = 'all'
CAP_ALTERNATE = 'alternate'
CAP_WORD_ALTERNATE = 'word_alternate'
CAP_FIRST_LETTER = 'first_letter'
CAP_LAST_LETTER = 'last_letter'
CAP_ALL_BUT_FIRST_LETTER = 'all_but_first_letter'
CAP_ALL_BUT_LAST_LETTER = 'all_but_last_letter'
CAP_RANDOM = 'random'
CAP_RULES = (CAP_NONE, CAP_ALL, CAP_ALTERNATE, CAP_WORD_ALTERNATE,
             CAP_FIRST_LETTER, CAP_LAST_LETTER,
             CAP_ALL_BUT_FIRST_LETTER, CAP_ALL_BUT_LAST_LETTER, CAP_RANDOM)

RULE_NONE = 'none'
RULE_FIXED = 'fixed'
RULE_RANDOM = 'random'

SYMBOL_RULES = (RULE_FIXED, RULE_RANDOM)
SEP_RULES = (RULE_NONE, RULE_FIXED, RULE_RANDOM)
PAD_RULES = (RULE_FIXED, RULE_RANDOM)

INT_FIELDS = ('word_count', 'min_word_length', 'max_word_length',
              'digits_before', 'digits_after',
              'symbols_before', 'symbols_after', 'pad_length')
FLOAT_FIELDS = ('cap_ratio', 'l33t_ratio')
BOOL_FIELDS = ('use_rand', 'from_passphrase', 'calculate_entropy')
STR_FIELDS = ('cap_rule', 'symbol_rule', 'symbol', 'symbol_pool',
              'sep_rule', 'separator', 'separator_pool',
              'pad_rule', 'pad_symbol', 'passphrase', 'wordlist')
FIELDS = INT_FIELDS + FLOAT_FIELDS + BOOL_FIELDS + STR_FIELDS


class Options:

    """Password generator configuration.

    Every field defaults to None, meaning "unset". `check_options`
    fills the defaults in and verifies the values are consistent.

    * word_count: number of words (default 3)
    * min_word_length, max_word_length: word length filter, 0 = no limit
      (default 6 and 8)
    * digits_before, digits_after: digits added around each word
    * symbols_before, symbols_after: symbols added around each word
    * symbol_rule: 'fixed' (repeat `symbol`) or 'random' (from `symbol_pool`)
    * cap_rule: capitalization rule name, `cap_ratio` for 'random'
    * sep_rule: 'none', 'fixed' (`separator`) or 'random' (`separator_pool`)
    * pad_rule: 'fixed' (`pad_symbol`) or 'random' (from `symbol_pool`),
      used only when `pad_length` is set
    * l33t_ratio: probability of leet substitution of each character
    * use_rand: generate pseudo-words instead of dictionary words
    * from_passphrase: harden `passphrase` instead of generating words
    * calculate_entropy: compute the entropy estimate
    * wordlist: path to a custom word list file

    """

    def __init__(self, **kwargs):
        for name in FIELDS:
            setattr(self, name, kwargs.pop(name, None))
        if kwargs:
            raise OptionsError("unknown option(s): " + ', '.join(sorted(kwargs)))

    def __repr__(self):
        a = ('{}={!r}'.format(name, '***' if name == 'passphrase' else getattr(self, name))
             for name in FIELDS if getattr(self, name) is not None)
        return "{}({})".format(self.__class__.__name__, ', '.join(a))

    def update(self, **kwargs):
        """Override fields which are not None in `kwargs`."""
        for name, value in kwargs.items():
            if name not in FIELDS:
                raise OptionsError(f"unknown option: {name}")
            if value is not None:
                setattr(self, name, value)
        return self

    @classmethod
    def from_config(cls, config_file, **overrides):
        """Load options from [mempass] section of INI `config_file`.

        Missing file is not an error, the defaults are used.
        Values in `overrides` take precedence over the file.

        """
        opt = cls()
        config_file = Path(config_file).expanduser()
        log.debug("Loading config %r", str(config_file))
        config = configparser.ConfigParser(interpolation=None)
        try:
            config.read(config_file, encoding='utf-8')
            for section in config.sections():
                if section != 'mempass':
                    print(f"WARNING: unknown section {section!r} in config {str(config_file)!r}")
                    continue
                section = config[section]
                for key in section:
                    if key in INT_FIELDS:
                        value = section.getint(key)
                    elif key in FLOAT_FIELDS:
                        value = section.getfloat(key)
                    elif key in BOOL_FIELDS:
                        value = section.getboolean(key)
                    elif key in STR_FIELDS:
                        value = section[key]
                    else:
                        print(f"WARNING: unknown key [{section.name!r}] {key!r} in config {str(config_file)!r}")
                        continue
                    setattr(opt, key, value)
        except (configparser.Error, ValueError) as e:
            raise OptionsError(f"Invalid config {str(config_file)!r}: {e}") from e
        return opt.update(**overrides)


def _check_char(value, name):
    if len(value) != 1:
        raise OptionsError(f"`{name}` must be a single character, got {value!r}")


def _check_count(opt, name):
    if getattr(opt, name) is None:
        setattr(opt, name, 0)
    if getattr(opt, name) < 0:
        raise OptionsError(f"`{name}` cannot be negative")


def check_options(opt: Options) -> Options:
    """Fill defaults into `opt` and check its consistency.

    Raises OptionsError on the first problem found.
    Returns the same `opt` for convenience.

    """
    if opt.word_count is None:
        opt.word_count = 3
    if opt.min_word_length is None:
        opt.min_word_length = 6
    if opt.max_word_length is None:
        opt.max_word_length = 8
    if not opt.separator_pool:
        opt.separator_pool = DEFAULT_POOL
    if not opt.symbol_pool:
        opt.symbol_pool = DEFAULT_POOL
    for name in ('digits_before', 'digits_after',
                 'symbols_before', 'symbols_after', 'pad_length'):
        _check_count(opt, name)
    opt.use_rand = bool(opt.use_rand)
    opt.from_passphrase = bool(opt.from_passphrase)
    opt.calculate_entropy = bool(opt.calculate_entropy)

    if opt.word_count < 1:
        raise OptionsError("`word_count` must be at least 1")

    if not 0 <= opt.min_word_length <= MAX_WORD_LENGTH \
            or not 0 <= opt.max_word_length <= MAX_WORD_LENGTH:
        raise OptionsError("`min_word_length` and `max_word_length` must be "
                           f"between 0 and {MAX_WORD_LENGTH}")

    if opt.min_word_length > 0 and opt.max_word_length > 0 \
            and opt.min_word_length > opt.max_word_length:
        raise OptionsError("`min_word_length` cannot be greater than `max_word_length`")

    # Capitalization
    if opt.cap_rule is None:
        opt.cap_rule = CAP_NONE
    if opt.cap_rule == CAP_RANDOM:
        if opt.cap_ratio is None:
            opt.cap_ratio = .2
        if not 0 < opt.cap_ratio < 1:
            raise OptionsError("`cap_ratio` must be between 0 and 1 excluded")
    if opt.cap_rule not in CAP_RULES:
        raise OptionsError(f"unknown `cap_rule`: {opt.cap_rule!r}")

    # Symbols, separator and final padding
    if opt.symbol_rule is None:
        opt.symbol_rule = RULE_RANDOM
    if opt.sep_rule is None:
        opt.sep_rule = RULE_FIXED
    if opt.pad_rule is None:
        opt.pad_rule = RULE_RANDOM
    if opt.symbol_rule not in SYMBOL_RULES:
        raise OptionsError(f"unknown `symbol_rule`: {opt.symbol_rule!r}")
    if opt.sep_rule not in SEP_RULES:
        raise OptionsError(f"unknown `sep_rule`: {opt.sep_rule!r}")
    if opt.pad_rule not in PAD_RULES:
        raise OptionsError(f"unknown `pad_rule`: {opt.pad_rule!r}")
    if opt.symbol_rule == RULE_FIXED:
        _check_char(opt.symbol or '/', 'symbol')
    if opt.sep_rule == RULE_FIXED:
        _check_char(opt.separator or '-', 'separator')
    if opt.pad_rule == RULE_FIXED:
        _check_char(opt.pad_symbol or '.', 'pad_symbol')

    if opt.l33t_ratio is None:
        opt.l33t_ratio = 0.0
    if not 0 <= opt.l33t_ratio <= 1:
        raise OptionsError("`l33t_ratio` must be between 0 and 1 included")

    # All checks passed, fixed chars are used only by 'fixed' rules
    opt.symbol = (opt.symbol or '/') if opt.symbol_rule == RULE_FIXED else None
    opt.separator = (opt.separator or '-') if opt.sep_rule == RULE_FIXED else None
    opt.pad_symbol = (opt.pad_symbol or '.') if opt.pad_rule == RULE_FIXED else None

    if opt.from_passphrase and opt.passphrase is None:
        opt.passphrase = ''

    log.debug("Checked %r", opt)
    return opt
