import sys
import logging
import argparse
from pathlib import Path

from prompt_toolkit import prompt as prompt_input
from prompt_toolkit.formatted_text import FormattedText
from blessed import Terminal
import pyperclip

from . import options as o
from .errors import MempassError
from .generator import Generator
from .entropy import entropy

DATA_DIR = Path('~/.mempass')
DEFAULT_CONFIG = DATA_DIR / 'mempass.conf'

#: Entropy (bits) considered strong / acceptable for coloring the output
STRONG_ENTROPY = 80
FAIR_ENTROPY = 50


def copy_to_clipboard(text):
    """Wraps copy-to-clipboard function to allow overriding."""
    pyperclip.copy(text)


def input_passphrase(prompt):
    """Wraps password prompt to allow overriding."""
    return prompt_input(FormattedText([('bold', prompt)]), is_password=True)


def format_entropy(bits: float) -> str:
    term = Terminal()
    text = f"{bits:.1f} bits"
    if bits >= STRONG_ENTROPY:
        return term.bright_green(text)
    if bits >= FAIR_ENTROPY:
        return term.yellow(text)
    return term.bright_red(text)


def print_password(pwd, bits):
    print(pwd, format_entropy(bits), sep='   ')


def run_gen(config_file, count, copy, **kwargs):
    opt = o.Options.from_config(config_file, **kwargs)
    opt.calculate_entropy = True
    gen = Generator(opt)
    pwd = None
    for _ in range(count):
        pwd, bits = gen.generate()
        print_password(pwd, bits)
    if copy and pwd is not None:
        copy_to_clipboard(pwd)
        print("(Copied to clipboard.)")


def run_harden(config_file, passphrase, copy):
    if passphrase is None:
        passphrase = input_passphrase("Passphrase: ")
    opt = o.Options.from_config(config_file, from_passphrase=True,
                                passphrase=passphrase, calculate_entropy=True)
    pwd, bits = Generator(opt).generate()
    print_password(pwd, bits)
    if copy:
        copy_to_clipboard(pwd)
        print("(Copied to clipboard.)")


def run_entropy(config_file, password, **kwargs):
    opt = o.check_options(o.Options.from_config(config_file, **kwargs))
    print(format_entropy(entropy(password, opt)))


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="mempass",
                                 description="Memorable password generator",
                                 formatter_class=argparse.RawTextHelpFormatter)
    ap.add_argument('-v', '--verbose', action='store_true',
                    help="print debug messages")

    # Sub-commands
    sp = ap.add_subparsers()
    ap_gen = sp.add_parser("gen", aliases=['g'],
                           help="generate passwords from words (default)")
    ap_gen.set_defaults(func=run_gen)
    ap_harden = sp.add_parser("harden", aliases=['h'],
                              help="harden a passphrase by adding uppercase, "
                                   "digits and special characters")
    ap_harden.set_defaults(func=run_harden)
    ap_entropy = sp.add_parser("entropy", aliases=['e'],
                               help="estimate entropy of a password "
                                    "generated with given options")
    ap_entropy.set_defaults(func=run_entropy)

    for subparser in (ap_gen, ap_harden, ap_entropy):
        subparser.add_argument('-c', '--config', dest='config_file',
                               default=DEFAULT_CONFIG,
                               help="config file (default: %(default)s)")
    for subparser in (ap_gen, ap_harden):
        subparser.add_argument('--copy', action='store_true',
                               help="copy the (last) password to clipboard")

    ap_gen.add_argument('-n', dest='count', type=int, default=1,
                        help="number of passwords to generate (default: %(default)s)")
    ap_harden.add_argument('passphrase', nargs='?',
                           help="the passphrase (default: ask for it)")
    ap_entropy.add_argument('password', help="the password to evaluate")

    for subparser in (ap_gen, ap_entropy):
        subparser.add_argument('-w', '--words', dest='word_count', type=int,
                               help="number of words (default: 3)")
        subparser.add_argument('--min', dest='min_word_length', type=int,
                               help="minimal word length, 0 = no minimum (default: 6)")
        subparser.add_argument('--max', dest='max_word_length', type=int,
                               help="maximal word length, 0 = no maximum (default: 8)")
        subparser.add_argument('-r', '--rand', dest='use_rand',
                               action='store_const', const=True,
                               help="use random pseudo-words instead of dictionary")
        subparser.add_argument('--no-rand', dest='use_rand',
                               action='store_const', const=False,
                               help="use dictionary words (overrides config file)")
        subparser.add_argument('--wordlist',
                               help="custom word list file, one word per line")
        subparser.add_argument('--cap', dest='cap_rule', choices=o.CAP_RULES,
                               help="capitalization rule (default: none)")
        subparser.add_argument('--cap-ratio', dest='cap_ratio', type=float,
                               help="uppercase ratio for 'random' rule (default: 0.2)")
        subparser.add_argument('--digits-before', dest='digits_before', type=int,
                               help="digits to add before each word")
        subparser.add_argument('--digits-after', dest='digits_after', type=int,
                               help="digits to add after each word")
        subparser.add_argument('--symbols-before', dest='symbols_before', type=int,
                               help="symbols to add before each word")
        subparser.add_argument('--symbols-after', dest='symbols_after', type=int,
                               help="symbols to add after each word")
        subparser.add_argument('--symbol-rule', dest='symbol_rule', choices=o.SYMBOL_RULES,
                               help="fixed or random symbols (default: random)")
        subparser.add_argument('--symbol',
                               help="symbol for 'fixed' rule (default: /)")
        subparser.add_argument('--symbol-pool', dest='symbol_pool',
                               help=f"symbols for 'random' rule (default: {o.DEFAULT_POOL})")
        subparser.add_argument('--sep-rule', dest='sep_rule', choices=o.SEP_RULES,
                               help="word separator rule (default: fixed)")
        subparser.add_argument('--sep', dest='separator',
                               help="separator for 'fixed' rule (default: -)")
        subparser.add_argument('--sep-pool', dest='separator_pool',
                               help=f"separators for 'random' rule (default: {o.DEFAULT_POOL})")
        subparser.add_argument('--pad-rule', dest='pad_rule', choices=o.PAD_RULES,
                               help="padding rule (default: random)")
        subparser.add_argument('--pad-symbol', dest='pad_symbol',
                               help="padding symbol for 'fixed' rule (default: .)")
        subparser.add_argument('-l', '--pad-length', dest='pad_length', type=int,
                               help="pad the password to this length")
        subparser.add_argument('--l33t', dest='l33t_ratio', type=float,
                               help="leet substitution ratio, 0.0 - 1.0 (default: 0)")

    args = ap.parse_args(args=argv)

    if 'func' not in args:
        ap_gen.parse_args(args=[], namespace=args)

    return args


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: None
    """
    args = parse_args(argv)
    logging.basicConfig(level='DEBUG' if args.verbose else 'WARNING')
    run_func = args.func
    delattr(args, 'func')
    delattr(args, 'verbose')
    try:
        run_func(**vars(args))
    except MempassError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
