"""Error kinds raised while running a batch.

Every error derives from ClaroError and is fatal to the current batch.
Nothing below the interpreter catches them; they unwind straight to the
boundary that called Interpreter.report().
"""
from __future__ import annotations


class ClaroError(Exception):
    """Base class. ``line_num`` is None for errors outside any statement."""

    message = "Error"

    def __init__(self, message: str | None = None, line_num: int | None = None) -> None:
        self.message  = message or self.message
        self.line_num = line_num
        super().__init__(self.message)

    def format(self) -> str:
        if self.line_num is None:
            return f"Error: {self.message}"
        return f"Error on line {self.line_num}: {self.message}"


class UndefinedVariable(ClaroError):
    message = "Undefined variable"


class InvalidAssignment(ClaroError):
    message = "Invalid variable assignment"


class UnknownCommand(ClaroError):
    message = "Unknown command"


class MissingArgument(ClaroError):
    message = "Missing argument"


class UnsupportedStatement(ClaroError):
    """A reserved keyword of the grammar that has no behaviour yet."""

    def __init__(self, keyword: str, line_num: int | None = None) -> None:
        self.keyword = keyword
        super().__init__(f"Unsupported statement: {keyword}", line_num)


class FileOpenError(ClaroError):
    def __init__(self, path, line_num: int | None = None) -> None:
        self.path = path
        super().__init__(f"Could not open file {path}", line_num)
