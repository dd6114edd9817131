# entropy
# (password entropy estimate)
#

import math
import string

from . import options as o


def merge_symbols(dest: str, src: str) -> str:
    """Append chars from `src` which are not yet in `dest`."""
    seen = set(dest)
    result = [dest]
    for c in src:
        if c not in seen:
            seen.add(c)
            result.append(c)
    return ''.join(result)


def used_symbols(opt: o.Options) -> str:
    """Distinct symbols which may appear in password generated with `opt`."""
    symbols = ''
    if opt.symbols_before > 0 or opt.symbols_after > 0:
        if opt.symbol_rule == o.RULE_FIXED:
            symbols = merge_symbols(symbols, opt.symbol)
        else:
            symbols = merge_symbols(symbols, opt.symbol_pool)
    if opt.sep_rule == o.RULE_FIXED:
        symbols = merge_symbols(symbols, opt.separator)
    elif opt.sep_rule == o.RULE_RANDOM:
        symbols = merge_symbols(symbols, opt.separator_pool)
    if opt.pad_length > 0:
        if opt.pad_rule == o.RULE_FIXED:
            symbols = merge_symbols(symbols, opt.pad_symbol)
        else:
            symbols = merge_symbols(symbols, opt.symbol_pool)
    return symbols


def char_range(opt: o.Options) -> int:
    """Estimated size of alphabet the password characters are drawn from."""
    size = len(string.ascii_lowercase)
    if opt.cap_rule != o.CAP_NONE:
        size *= 2
    if opt.digits_before > 0 or opt.digits_after > 0 or opt.l33t_ratio > 0:
        size += 10
    return size + len(used_symbols(opt))


def entropy(password: str, opt: o.Options) -> float:
    """Estimate entropy of `password` in bits.

    Every character is treated as independently drawn from an alphabet
    of `char_range` size, so this is log2(range ** length).

    """
    return len(password) * math.log2(char_range(opt))
