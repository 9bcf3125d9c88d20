import logging

import pytest

from intercept.translator import Language, Translator


def test_language_values_select_translation():
    translator = Translator()
    translator.load_lines(["Options", "Опції"])
    assert translator.translate("Options", 0) == "Options"
    assert translator.translate("Options", 1) == "Опції"
    assert translator.translate("Options", Language(1)) == "Опції"


def test_english_is_returned_unchanged():
    translator = Translator()
    assert translator.translate("Options", Language.ENGLISH) == "Options"
    assert translator.translate("Options", 0) == "Options"


def test_load_lines_pairs():
    translator = Translator()
    translator.load_lines(["Options\n", "Опції\n", "Help\n", "Довідка\n"])
    assert translator.translate("Options", Language.UKRAINIAN) == "Опції"
    assert translator.translate("Help", Language.UKRAINIAN) == "Довідка"


def test_missing_translation_is_empty_and_logged(caplog):
    translator = Translator()
    translator.load_lines(["Options", "Опції"])
    with caplog.at_level(logging.WARNING):
        assert translator.translate("Gravity", Language.UKRAINIAN) == ""
    assert "Gravity" in caplog.text


def test_unpaired_last_line_maps_to_empty():
    translator = Translator()
    translator.load_lines(["Options", "Опції", "Pause"])
    assert translator.translate("Pause", Language.UKRAINIAN) == ""
    assert translator.translate("Options", Language.UKRAINIAN) == "Опції"


def test_load_from_file(tmp_path):
    path = tmp_path / "ukr.txt"
    path.write_text("Camera\nКамера\nPause\nПауза\n", encoding="utf-8")
    translator = Translator()
    translator.load(path)
    assert translator.translate("Camera", Language.UKRAINIAN) == "Камера"
    assert translator.translate("Pause", Language.UKRAINIAN) == "Пауза"


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Translator().load(tmp_path / "absent.txt")


def test_unknown_language_raises():
    with pytest.raises(ValueError):
        Translator().translate("Help", 7)