import re

import pytest

from mempass import main as cli


@pytest.fixture(autouse=True)
def no_config(monkeypatch, tmp_path):
    monkeypatch.setattr(cli, 'DEFAULT_CONFIG', tmp_path / 'mempass.conf')


@pytest.fixture()
def clipboard(monkeypatch):
    copied = []
    monkeypatch.setattr(cli, 'copy_to_clipboard', copied.append)
    return copied


def output_lines(capsys):
    captured = capsys.readouterr()
    assert captured.err == ''
    return captured.out.splitlines()


def test_default(capsys):
    cli.main([])
    lines = output_lines(capsys)
    assert len(lines) == 1
    pwd = lines[0].split()[0]
    assert re.fullmatch(r'[a-z]{6,8}-[a-z]{6,8}-[a-z]{6,8}', pwd)
    assert 'bits' in lines[0]


def test_gen(capsys, clipboard):
    cli.main(['gen', '-n', '3', '-w', '2', '--min', '4', '--max', '4',
              '--sep-rule', 'none', '--cap', 'first_letter', '--copy'])
    lines = output_lines(capsys)
    assert len(lines) == 4
    passwords = [line.split()[0] for line in lines[:3]]
    for pwd in passwords:
        assert re.fullmatch(r'([A-Z][a-z]{3}){2}', pwd)
    assert lines[3] == "(Copied to clipboard.)"
    assert clipboard == [passwords[-1]]


def test_gen_config(capsys, tmp_path):
    config_file = tmp_path / 'custom.conf'
    config_file.write_text("[mempass]\nword_count = 2\nseparator = _\n")
    cli.main(['gen', '-c', str(config_file), '--sep', '+'])
    pwd = output_lines(capsys)[0].split()[0]
    assert re.fullmatch(r'[a-z]{6,8}\+[a-z]{6,8}', pwd)


def test_gen_no_rand(capsys, tmp_path):
    wordlist = tmp_path / 'words'
    wordlist.write_text("kiwi\n")
    config_file = tmp_path / 'custom.conf'
    config_file.write_text("[mempass]\nuse_rand = yes\n")
    cli.main(['gen', '-c', str(config_file), '--no-rand', '--wordlist', str(wordlist),
              '--min', '4', '--max', '4'])
    assert output_lines(capsys)[0].split()[0] == 'kiwi-kiwi-kiwi'


def test_gen_error(capsys):
    with pytest.raises(SystemExit) as e:
        cli.main(['gen', '--min', '9', '--max', '4'])
    assert e.value.code == 1
    assert output_lines(capsys)[0].startswith("ERROR: ")


def test_harden(capsys, clipboard):
    cli.main(['harden', 'zzz', '--copy'])
    lines = output_lines(capsys)
    pwd = lines[0].split()[0]
    assert re.fullmatch(r'[zZ]{3}\d-', pwd)
    assert clipboard == [pwd]


def test_harden_prompt(capsys, monkeypatch):
    prompts = []

    def input_passphrase(prompt):
        prompts.append(prompt)
        return 'Tr0ub4dor-horse'

    monkeypatch.setattr(cli, 'input_passphrase', input_passphrase)
    cli.main(['harden'])
    assert prompts == ["Passphrase: "]
    assert output_lines(capsys)[0].split()[0] == 'Tr0ub4dor-horse'


def test_entropy(capsys):
    cli.main(['entropy', 'abc', '--sep-rule', 'none'])
    assert '14.1 bits' in output_lines(capsys)[0]
