import pytest

from wordle.config import (
    Config,
    DEFAULT_WORD_LIST_PATH,
    FALLBACK_WORDS,
    config,
    load_word_list,
    normalize_words,
    validate_word_list_integrity,
)
from wordle.config.app_config import _int_env


def test_normalize_keeps_only_words_of_configured_length():
    tokens = ["Apple", "grape", "BANANA", "kiwi", "apple", "h0use", "ocean\n", "café!"]
    assert normalize_words(tokens) == ["apple", "grape", "ocean"]
    assert normalize_words(tokens, word_length=4) == ["kiwi"]


def test_load_word_list_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Apple  grape\nBANANA kiwi apple\n\tHOUSE\n", encoding="utf-8")
    assert load_word_list(str(path)) == ["apple", "grape", "house"]


def test_load_word_list_with_no_matching_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat dog elephant", encoding="utf-8")
    assert load_word_list(str(path)) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(str(tmp_path / "missing.txt"))


def test_missing_file_falls_back(tmp_path, caplog):
    words = load_word_list(str(tmp_path / "missing.txt"), use_fallback=True)
    assert words == FALLBACK_WORDS
    assert "Using backup list" in caplog.text


def test_bundled_word_list_is_valid():
    words = load_word_list()
    assert len(words) > 100
    assert "spelt" in words and "erase" in words
    assert validate_word_list_integrity(words)
    assert load_word_list(DEFAULT_WORD_LIST_PATH) == words


@pytest.mark.parametrize("words, message", [
    ([], "cannot be empty"),
    (["spelt", "spel"], "index 1"),
    (["spelt", "sp3lt"], "non-alphabetic"),
    (["spelt", "SPENT"], "lowercase"),
    (["spelt", "spent", "spelt"], "Duplicate"),
])
def test_validate_word_list_integrity_errors(words, message):
    with pytest.raises(ValueError, match=message):
        validate_word_list_integrity(words)


def test_config_defaults():
    assert Config.MAX_ATTEMPTS == 6
    assert Config.WORD_LENGTH == 5
    assert Config.WORD_LIST_PATH == DEFAULT_WORD_LIST_PATH
    assert config['testing'].RANDOM_SEED == 0
    assert not config['testing'].LOG_TO_FILE
    assert config['default'] is config['production']


def test_non_ascii_words_fail_integrity_check():
    with pytest.raises(ValueError, match="non-alphabetic"):
        validate_word_list_integrity(["spelt", "crané"])


def test_int_settings_from_environment(monkeypatch, caplog):
    monkeypatch.setenv('MAX_ATTEMPTS', '8')
    assert _int_env('MAX_ATTEMPTS', 6) == 8

    monkeypatch.setenv('MAX_ATTEMPTS', ' ')
    assert _int_env('MAX_ATTEMPTS', 6) == 6

    monkeypatch.setenv('MAX_ATTEMPTS', 'six')
    assert _int_env('MAX_ATTEMPTS', 6) == 6
    assert "Ignoring MAX_ATTEMPTS='six'" in caplog.text

    monkeypatch.delenv('RANDOM_SEED', raising=False)
    assert _int_env('RANDOM_SEED') is None
