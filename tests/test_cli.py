"""
Tests for the valsi command-line interface.
"""
import json
import logging

import pytest

from valsi.cli import build_parser, main


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


def test_parse_valid_text(capsys):
    assert main(['parse', 'mi klama le zarci']) == 0
    out = capsys.readouterr().out
    assert "word 3..8 'klama'" in out
    assert "Words: mi klama le zarci" in out


def test_parse_json(capsys):
    assert main(['parse', 'mi klama', '--format', 'json']) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["rule"] == "text"
    assert data["span"] == [0, 8]


def test_parse_invalid_word(capsys):
    assert main(['parse', 'mi qle']) == 1
    err = capsys.readouterr().err
    assert "ERROR: Invalid word 'qle' found at (3, 6)" in err


def test_parse_invalid_word_json(capsys):
    assert main(['parse', 'qklama', '--format', 'json']) == 1
    data = json.loads(capsys.readouterr().out)
    assert data["error"]["kind"] == "lexical"
    assert data["error"]["span"] == [0, 6]


def test_parse_syntax_error(capsys):
    assert main(['parse', 'mi $']) == 1
    assert "ERROR: Syntax error" in capsys.readouterr().err


def test_parse_from_file(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("mi klama\n.i do citka\n", encoding='utf-8')
    assert main(['parse', '--file', str(source)]) == 0
    assert "Words: mi klama do citka" in capsys.readouterr().out


def test_check_reports_failures(tmp_path, capsys):
    source = tmp_path / "corpus.txt"
    source.write_text("mi klama le zarci\n\nqle\nmi $\ndo prami mi\n", encoding='utf-8')

    assert main(['check', str(source)]) == 1

    out = capsys.readouterr().out
    assert "Lines checked: 4" in out
    assert "Valid: 2 (50.0%)" in out
    assert "line 3: [lexical] Invalid word 'qle'" in out
    assert "line 4: [syntax]" in out


def test_check_all_valid(tmp_path, capsys):
    source = tmp_path / "corpus.txt"
    source.write_text("mi klama\ndo citka\n", encoding='utf-8')
    assert main(['check', str(source)]) == 0
    assert "Valid: 2 (100.0%)" in capsys.readouterr().out


def test_check_missing_file(tmp_path, capsys):
    assert main(['check', str(tmp_path / "missing.txt")]) == 1
    assert "ERROR:" in capsys.readouterr().err


def test_info(capsys):
    assert main(['info']) == 0
    out = capsys.readouterr().out
    assert "cmavo:" in out
    assert "gismu:" in out
    assert "not used for validation" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: valsi" in capsys.readouterr().out


def test_debug_flags_parsed():
    args = build_parser().parse_args(['--debug', '--log-file', 'x.log', 'info'])
    assert args.debug
    assert args.log_file == 'x.log'


@pytest.fixture
def empty_wordlist_dir(tmp_path, monkeypatch):
    wordlist_dir = tmp_path / "wordlists"
    wordlist_dir.mkdir()
    monkeypatch.setenv('VALSI_WORDLIST_DIR', str(wordlist_dir))
    monkeypatch.setattr('valsi.wordlists._default_store', None)
    return wordlist_dir


def test_info_with_missing_wordlists(empty_wordlist_dir, capsys):
    assert main(['info']) == 1
    captured = capsys.readouterr()
    assert f"Directory: {empty_wordlist_dir}" in captured.out
    assert "ERROR: Could not load wordlist" in captured.err


def test_check_with_missing_wordlists(empty_wordlist_dir, tmp_path, capsys):
    source = tmp_path / "corpus.txt"
    source.write_text("mi klama\n", encoding='utf-8')
    assert main(['check', str(source)]) == 1
    assert "ERROR: Could not load wordlist" in capsys.readouterr().err


def test_parse_with_missing_wordlists(empty_wordlist_dir, capsys):
    assert main(['parse', 'mi klama']) == 1
    assert "cmavo.txt" in capsys.readouterr().err
