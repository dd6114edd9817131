import pytest

from mempass.errors import OptionsError
from mempass.options import Options, check_options, DEFAULT_POOL


def test_defaults():
    opt = check_options(Options())
    assert opt.word_count == 3
    assert opt.min_word_length == 6
    assert opt.max_word_length == 8
    assert opt.cap_rule == 'none'
    assert opt.sep_rule == 'fixed'
    assert opt.separator == '-'
    assert opt.symbol_rule == 'random'
    assert opt.symbol is None
    assert opt.symbol_pool == DEFAULT_POOL
    assert opt.separator_pool == DEFAULT_POOL
    assert opt.pad_rule == 'random'
    assert opt.pad_length == 0
    assert opt.l33t_ratio == 0
    assert opt.digits_before == opt.digits_after == 0
    assert not opt.use_rand
    assert not opt.calculate_entropy


def test_check_twice():
    opt = check_options(Options(cap_rule='random', sep_rule='random'))
    assert opt.cap_ratio == .2
    assert check_options(opt) is opt
    assert opt.separator is None


@pytest.mark.parametrize("kwargs", [
    dict(min_word_length=29),
    dict(max_word_length=29),
    dict(min_word_length=-1),
    dict(min_word_length=9, max_word_length=4),
    dict(word_count=0),
    dict(digits_before=-1),
    dict(pad_length=-5),
    dict(cap_rule='random', cap_ratio=1.0),
    dict(cap_rule='random', cap_ratio=0.0),
    dict(cap_rule='random', cap_ratio=1.5),
    dict(l33t_ratio=-.1),
    dict(l33t_ratio=1.1),
    dict(cap_rule='shout'),
    dict(sep_rule='sometimes'),
    dict(symbol_rule='none'),
    dict(pad_rule='none'),
    dict(separator='ab'),
    dict(symbol_rule='fixed', symbol='//'),
    dict(pad_rule='fixed', pad_symbol='..'),
])
def test_invalid(kwargs):
    with pytest.raises(OptionsError):
        check_options(Options(**kwargs))


def test_valid_bounds():
    check_options(Options(min_word_length=28, max_word_length=28))
    check_options(Options(min_word_length=0, max_word_length=0))
    check_options(Options(min_word_length=10, max_word_length=0))
    check_options(Options(l33t_ratio=0))
    check_options(Options(l33t_ratio=1))
    check_options(Options(cap_rule='random', cap_ratio=.99))


def test_rule_resolution():
    opt = check_options(Options(symbol_rule='fixed'))
    assert opt.symbol == '/'
    opt = check_options(Options(symbol_rule='random', symbol='!'))
    assert opt.symbol is None
    opt = check_options(Options(sep_rule='random', separator='_'))
    assert opt.separator is None
    opt = check_options(Options(sep_rule='none', separator='_'))
    assert opt.separator is None
    opt = check_options(Options(pad_rule='fixed'))
    assert opt.pad_symbol == '.'
    opt = check_options(Options(pad_rule='random', pad_symbol='#'))
    assert opt.pad_symbol is None


def test_rejected_keeps_chars():
    opt = Options(sep_rule='random', separator='_', symbol='!',
                  pad_symbol='#', l33t_ratio=2)
    with pytest.raises(OptionsError):
        check_options(opt)
    assert opt.separator == '_'
    assert opt.symbol == '!'
    assert opt.pad_symbol == '#'


def test_unknown_option():
    with pytest.raises(OptionsError):
        Options(colour='red')
    with pytest.raises(OptionsError):
        Options().update(colour='red')


def test_repr_hides_passphrase():
    opt = Options(from_passphrase=True, passphrase='secret words')
    assert 'secret' not in repr(opt)
    assert 'from_passphrase=True' in repr(opt)


class TestConfigFile:

    def test_load(self, tmp_path, capsys):
        config_file = tmp_path / 'mempass.conf'
        config_file.write_text("[mempass]\n"
                               "word_count = 2\n"
                               "cap_rule = first_letter\n"
                               "l33t_ratio = 0.5\n"
                               "use_rand = yes\n"
                               "separator = _\n"
                               "colour = red\n"
                               "[other]\n"
                               "x = 1\n")
        opt = Options.from_config(config_file, word_count=4, separator=None)
        assert opt.word_count == 4
        assert opt.cap_rule == 'first_letter'
        assert opt.l33t_ratio == .5
        assert opt.use_rand is True
        assert opt.separator == '_'
        out = capsys.readouterr().out
        assert "WARNING: unknown key" in out and "'colour'" in out
        assert "WARNING: unknown section 'other'" in out

    def test_missing(self, tmp_path):
        opt = Options.from_config(tmp_path / 'does-not-exist.conf')
        assert opt.word_count is None

    def test_invalid_value(self, tmp_path):
        config_file = tmp_path / 'mempass.conf'
        config_file.write_text("[mempass]\nword_count = many\n")
        with pytest.raises(OptionsError):
            Options.from_config(config_file)
