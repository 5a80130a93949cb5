"""Command executor — classifies one statement and runs its handler.

Commands
--------
COMMENT  text         : no-op
PRINT    "literal"    : write the literal (quotes dropped, no escapes)
PRINT    name         : write the value of a variable
VARIABLE name = value : store a string value

Reserved keywords (IF, WHILE, FUNC, …) are recognised so they fail with
UnsupportedStatement instead of UnknownCommand.

Design notes
------------
- One CommandExecutor per Interpreter; it shares the interpreter's store.
- Keywords are case-sensitive. Aliases from [COMMANDS] are expanded first.
- Handlers raise ClaroError subclasses and never catch them.
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Optional, TextIO

from claro.core.errors import (
    UndefinedVariable, InvalidAssignment, UnknownCommand,
    MissingArgument, UnsupportedStatement,
)
from claro.core.parser import clean_line, split_command, unquote, expand_alias
from claro.core.prefix import ASSIGN_CHAR, COMMENT_PREFIX, QUOTE_CHAR, RESERVED_KEYWORDS
from claro.core.statements import Statement
from claro.core.variable_store import VariableStore

LogFn = Callable[[str, str], None]       # (level, message)


# ---------------------------------------------------------------------------
# Executor
# ---------------------------------------------------------------------------

class CommandExecutor:
    """Executes individual statements against a VariableStore."""

    def __init__(
        self,
        variables:   VariableStore,
        out:         Optional[TextIO]          = None,
        log_fn:      Optional[LogFn]           = None,
        sugar_map:   Optional[dict[str, str]]  = None,
        quote_aware: bool                      = True,
    ) -> None:
        self._vars        = variables
        self._out         = out
        self._log         = log_fn or (lambda level, msg: None)
        self._sugar_map   = sugar_map or {}
        self._quote_aware = quote_aware

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    @property
    def variables(self) -> VariableStore:
        return self._vars

    def execute(self, stmt: Statement) -> None:
        """Dispatch one statement. Raises ClaroError on failure."""
        line = stmt.text.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            return
        keyword, arg = split_command(line)
        if self._sugar_map:
            keyword = expand_alias(keyword, self._sugar_map)
        handler = _DISPATCH.get(keyword)
        if handler is None:
            raise UnknownCommand(line_num=stmt.line_num)
        handler(self, stmt, keyword, arg)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _write(self, text: str) -> None:
        out = self._out if self._out is not None else sys.stdout
        out.write(text + "\n")
        out.flush()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _cmd_print(self, stmt: Statement, keyword: str, arg: str) -> None:
        """PRINT "literal"  /  PRINT name"""
        if not arg:
            raise MissingArgument(f"Missing argument for {keyword}", stmt.line_num)
        if arg.startswith(QUOTE_CHAR):
            self._write(unquote(arg))
            return
        value = self._vars.get(arg)
        if value is None:
            raise UndefinedVariable(line_num=stmt.line_num)
        self._write(value)

    def _cmd_variable(self, stmt: Statement, keyword: str, arg: str) -> None:
        """VARIABLE name = value"""
        name, sep, raw = arg.partition(ASSIGN_CHAR)
        name = name.strip()
        if not sep or not name or len(name.split()) != 1:
            raise InvalidAssignment(line_num=stmt.line_num)
        # The preprocessor already stripped comments; statements built by
        # hand may still carry one.
        raw = clean_line(raw, self._quote_aware)
        if not raw:
            raise InvalidAssignment(line_num=stmt.line_num)
        value = unquote(raw)
        self._vars.set(name, value)
        self._log("INFO", f"{name} = {value!r}")

    def _cmd_unsupported(self, stmt: Statement, keyword: str, arg: str) -> None:
        raise UnsupportedStatement(keyword, stmt.line_num)

    def _cmd_noop(self, stmt: Statement, keyword: str, arg: str) -> None:
        pass


# ---------------------------------------------------------------------------
# Dispatch table — maps command keyword → unbound handler
# ---------------------------------------------------------------------------

_DISPATCH: dict[str, Any] = {
    "COMMENT":  CommandExecutor._cmd_noop,
    "PRINT":    CommandExecutor._cmd_print,
    "VARIABLE": CommandExecutor._cmd_variable,
    # Intended grammar, recognised but not executable
    **{kw: CommandExecutor._cmd_unsupported for kw in RESERVED_KEYWORDS},
}


def is_command(key: str) -> bool:
    return key in _DISPATCH
