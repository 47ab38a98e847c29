import pytest

from wordle.cli import build_parser, main, make_config
from wordle.config import config
from tests.util import scripted_input

PRODUCTION = config['production']
TESTING = config['testing']


@pytest.fixture
def single_word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("crane\n", encoding="utf-8")
    return str(path)


def test_make_config_overrides_profile():
    args = build_parser().parse_args(
        ["--max-attempts", "3", "--seed", "5", "--no-color", "--env", "testing"]
    )
    cfg = make_config(args)
    assert issubclass(cfg, TESTING)
    assert cfg.MAX_ATTEMPTS == 3
    assert cfg.RANDOM_SEED == 5
    assert cfg.USE_COLOR is False


def test_make_config_defaults_to_production(monkeypatch):
    monkeypatch.setenv('TERM', 'dumb')
    cfg = make_config(build_parser().parse_args([]))
    assert issubclass(cfg, PRODUCTION)
    assert cfg.MAX_ATTEMPTS == 6


def test_main_plays_a_game(monkeypatch, capsys, single_word_file):
    monkeypatch.setattr('builtins.input', scripted_input(["crane"]))
    exit_code = main(["--words", single_word_file, "--no-color", "--env", "testing"])
    assert exit_code == 0
    assert 'You got it in 1 tries! The word was "crane".' in capsys.readouterr().out


def test_main_with_empty_word_list(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("toolong tiny\n", encoding="utf-8")
    exit_code = main(["--words", str(path), "--no-color", "--env", "testing"])
    assert exit_code == 1
    assert "Cannot start game" in capsys.readouterr().err


def test_main_with_missing_word_file(tmp_path, capsys):
    # default profile: a mistyped --words path must not fall back to the backup list
    exit_code = main(["--words", str(tmp_path / "typo.txt"), "--no-color"])
    assert exit_code == 1
    assert "not found" in capsys.readouterr().err


def test_main_rejects_bad_attempt_count(single_word_file, capsys):
    exit_code = main(["--words", single_word_file, "--max-attempts", "0",
                      "--no-color", "--env", "testing"])
    assert exit_code == 1


def test_words_option_disables_backup_list(tmp_path):
    args = build_parser().parse_args(["--words", str(tmp_path / "words.txt"), "--no-color"])
    assert make_config(args).USE_FALLBACK_WORDS is False


def test_bundled_list_keeps_backup_list():
    cfg = make_config(build_parser().parse_args(["--no-color"]))
    assert cfg.USE_FALLBACK_WORDS is PRODUCTION.USE_FALLBACK_WORDS
