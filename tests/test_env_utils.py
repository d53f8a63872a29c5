import pytest

from vaajoor_solver.core.env import Settings, load_env, DEFAULT_CHECK_URL
from vaajoor_solver.utils import load_words, normalize_word, word_stats


def test_settings_defaults(clean_env):
    settings = Settings.from_env()
    assert settings.check_url == DEFAULT_CHECK_URL
    assert settings.words_file == "words.txt"
    assert settings.timeout == 10.0
    assert settings.max_attempts == 3


def test_settings_from_environment(clean_env):
    clean_env.setenv("VAAJOOR_CHECK_URL", "http://localhost:9000/check")
    clean_env.setenv("VAAJOOR_TIMEOUT", "2.5")
    clean_env.setenv("VAAJOOR_MAX_ATTEMPTS", "1")
    settings = Settings.from_env()
    assert settings.check_url == "http://localhost:9000/check"
    assert settings.timeout == 2.5
    assert settings.max_attempts == 1


def test_settings_rejects_bad_numbers(clean_env):
    clean_env.setenv("VAAJOOR_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        Settings.from_env()


def test_load_env_reads_dotenv_without_overriding(clean_env, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("VAAJOOR_WORDS_FILE=persian.txt\nVAAJOOR_TIMEOUT=4\n")
    clean_env.setenv("VAAJOOR_TIMEOUT", "7")

    found = load_env(str(dotenv))

    assert found["VAAJOOR_WORDS_FILE"] == "persian.txt"
    assert found["VAAJOOR_TIMEOUT"] == "7"
    assert "VAAJOOR_CHECK_URL" not in found


def test_load_words_trims_and_drops_blank_lines(words_file):
    assert load_words(words_file) == ["crate", "crane", "crash"]


def test_load_words_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_words(tmp_path / "nope.txt")


def test_normalize_word():
    assert normalize_word(" Crane") == "crane"
    assert normalize_word("SLATE ") == "slate"


def test_word_stats():
    stats = word_stats(["crane", "crane", "cat", "slate"])
    assert stats["total"] == 4
    assert stats["unique"] == 3
    assert stats["wrong_length"] == ["cat"]
    assert stats["duplicates"] == ["crane"]
    assert stats["top_letters"][0] == ("a", 3)
