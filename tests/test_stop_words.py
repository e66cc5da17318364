import json

import pytest

from modules.spam_check.stop_words import StopWordsLoader, normalize_stop_words, parse_stop_words


def test_normalize_keeps_first_seen_order():
    assert normalize_stop_words([" Casino", "loan", "CASINO", "", "Pills "]) == ["casino", "loan", "pills"]


def test_parse_comma_and_newline_input():
    assert parse_stop_words("casino, Poker\nslots,,\n") == ["casino", "poker", "slots"]
    assert parse_stop_words("") == []


def test_load_text_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# gambling\ncasino\n\nPoker\ncasino\n", encoding="utf-8")
    assert StopWordsLoader(str(path)).load() == ["casino", "poker"]


def test_load_json_categories(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"gambling": ["casino", "slots"], "pharma": ["viagra", "Casino"]}), encoding="utf-8")
    assert StopWordsLoader(str(path)).load() == ["casino", "slots", "viagra"]


def test_load_json_list(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["loan", "payday"]), encoding="utf-8")
    assert StopWordsLoader(str(path)).load() == ["loan", "payday"]


def test_load_json_wrong_shape(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps("casino"), encoding="utf-8")
    with pytest.raises(ValueError):
        StopWordsLoader(str(path)).load()


def test_missing_file(tmp_path):
    assert StopWordsLoader(str(tmp_path / "missing.txt")).load() == []


def test_load_json_category_must_be_a_list(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"gambling": "casino"}), encoding="utf-8")
    with pytest.raises(ValueError, match="must be a list"):
        StopWordsLoader(str(path)).load()


def test_load_json_words_must_be_strings(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"gambling": [["casino", "slots"]]}), encoding="utf-8")
    with pytest.raises(ValueError, match="must be a string"):
        StopWordsLoader(str(path)).load()

    path.write_text(json.dumps(["loan", 42]), encoding="utf-8")
    with pytest.raises(ValueError, match="must be a string"):
        StopWordsLoader(str(path)).load()
