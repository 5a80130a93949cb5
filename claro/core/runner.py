"""Batch runner — executes a statement sequence in order.

A batch is one file's statements or one interactively entered line. The
runner never catches ClaroError: the first failing statement ends the
batch and the error propagates to the caller's boundary.

Usage
-----
    runner = BatchRunner(executor)
    try:
        runner.run(statements)
    except ClaroError as exc:
        interpreter.report(exc)
"""
from __future__ import annotations

from typing import Iterable

from claro.core.executor import CommandExecutor
from claro.core.statements import Statement


class BatchRunner:
    """Feeds statements to a CommandExecutor one by one."""

    def __init__(self, executor: CommandExecutor) -> None:
        self._exec = executor

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    def run(self, statements: Iterable[Statement]) -> int:
        """Execute statements in order; return how many completed."""
        count = 0
        for stmt in statements:
            self._exec.execute(stmt)
            count += 1
        return count
