"""Settings manager — reads claro.ini via configparser."""
from configparser import ConfigParser
from pathlib import Path
from typing import Optional

from claro.core.constants import PROMPT, EXIT_RUNTIME
from claro.core.prefix import COMMENT_PREFIX, QUOTE_CHAR


class SettingsManager:
    def __init__(self, ini_path: Optional[Path] = None, required: bool = False) -> None:
        self.ini_path = ini_path
        self.config = ConfigParser(comment_prefixes=(COMMENT_PREFIX, ";"), inline_comment_prefixes=(COMMENT_PREFIX,))
        if ini_path is not None and required and not ini_path.is_file():
            raise FileNotFoundError(f"Settings file not found: {ini_path}")
        if ini_path is not None and ini_path.exists():
            self.config.read(ini_path, encoding="utf-8")

    # ------------------------------------------------------------------
    # Generic getters
    # ------------------------------------------------------------------
    def get(self, section: str, key: str, fallback: str = "") -> str:
        return self.config.get(section, key, fallback=fallback)

    def getint(self, section: str, key: str, fallback: int = 0) -> int:
        return self.config.getint(section, key, fallback=fallback)

    def getbool(self, section: str, key: str, fallback: bool = False) -> bool:
        return self.config.getboolean(section, key, fallback=fallback)

    # ------------------------------------------------------------------
    # Convenience properties
    # ------------------------------------------------------------------
    @property
    def prompt(self) -> str:
        """Interactive prompt. Quote it in the file to keep trailing spaces."""
        value = self.get("GENERAL", "prompt", PROMPT)
        if len(value) >= 2 and value[0] == value[-1] == QUOTE_CHAR:
            value = value[1:-1]
        return value

    @property
    def banner(self) -> bool:
        return self.getbool("GENERAL", "banner", True)

    @property
    def quote_aware_comments(self) -> bool:
        return self.getbool("INTERPRETER", "quote_aware_comments", True)

    @property
    def continue_after_error(self) -> bool:
        return self.getbool("INTERPRETER", "continue_after_error", True)

    @property
    def error_exit_code(self) -> int:
        return self.getint("INTERPRETER", "error_exit_code", EXIT_RUNTIME)

    @property
    def syntax_sugar(self) -> dict[str, str]:
        """Return alias→canonical mapping from [COMMANDS] section."""
        if not self.config.has_section("COMMANDS"):
            return {}
        return {k.upper(): v.upper() for k, v in self.config.items("COMMANDS")}

    # ------------------------------------------------------------------
    def validate(self) -> None:
        """Read every typed setting once; raises ValueError on a bad value."""
        _ = (self.banner, self.quote_aware_comments,
             self.continue_after_error, self.error_exit_code)
