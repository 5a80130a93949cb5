"""Tests for claro.core.settings_manager — SettingsManager."""
import configparser

import pytest

from claro.core.settings_manager import SettingsManager


class TestDefaults:
    def test_no_file(self):
        s = SettingsManager()
        assert s.prompt == "> "
        assert s.banner is True
        assert s.quote_aware_comments is True
        assert s.continue_after_error is True
        assert s.error_exit_code == 1
        assert s.syntax_sugar == {}

    def test_missing_file(self, tmp_path):
        s = SettingsManager(tmp_path / "absent.ini")
        assert s.prompt == "> "

    def test_missing_required_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Settings file not found"):
            SettingsManager(tmp_path / "absent.ini", required=True)

    def test_validate_defaults(self):
        SettingsManager().validate()


class TestFromFile:
    def test_values(self, write_ini):
        s = write_ini(
            "# Claro settings\n"
            "[GENERAL]\n"
            "prompt = \">> \"\n"
            "banner = false\n"
            "[INTERPRETER]\n"
            "quote_aware_comments = no   # byte-level\n"
            "error_exit_code = 3\n"
        )
        assert s.prompt == ">> "
        assert s.banner is False
        assert s.quote_aware_comments is False
        assert s.error_exit_code == 3
        assert s.continue_after_error is True

    def test_unquoted_prompt(self, write_ini):
        assert write_ini("[GENERAL]\nprompt = $\n").prompt == "$"

    def test_syntax_sugar_upper_cased(self, write_ini):
        s = write_ini("[COMMANDS]\necho = print\nSet = Variable\n")
        assert s.syntax_sugar == {"ECHO": "PRINT", "SET": "VARIABLE"}

    def test_generic_getters(self, write_ini):
        s = write_ini("[X]\nname = value\ncount = 4\nflag = yes\n")
        assert s.get("X", "name") == "value"
        assert s.getint("X", "count") == 4
        assert s.getbool("X", "flag") is True
        assert s.get("X", "absent", "fb") == "fb"


class TestValidate:
    @pytest.mark.parametrize("ini", [
        "[GENERAL]\nbanner = maybe\n",
        "[INTERPRETER]\nquote_aware_comments = maybe\n",
        "[INTERPRETER]\ncontinue_after_error = 2\n",
        "[INTERPRETER]\nerror_exit_code = one\n",
    ])
    def test_bad_values(self, write_ini, ini):
        with pytest.raises(ValueError):
            write_ini(ini).validate()

    def test_no_section_header(self, tmp_path):
        path = tmp_path / "claro.ini"
        path.write_text("prompt = $\n", encoding="utf-8")
        with pytest.raises(configparser.MissingSectionHeaderError):
            SettingsManager(path)
