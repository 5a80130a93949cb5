"""Interpreter session — owns the variable store and the error boundary.

Architecture
------------
Interpreter (one per session)
  ├─ parser.preprocess()          — text → Statements
  ├─ variable_store.VariableStore — names shared by every batch
  ├─ executor.CommandExecutor     — one statement at a time
  └─ runner.BatchRunner.run()     — a batch, aborted by the first error

Error boundary
--------------
run_source() and run_file() let ClaroError propagate; the caller decides
where the boundary sits and hands the error to report(). run_interactive()
is its own boundary for each entered line unless the settings say
otherwise, in which case the error leaves the session.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from claro.core.constants import BANNER, EXIT_WORD, INTERACTIVE_LINE_NUM
from claro.core.errors import ClaroError, FileOpenError
from claro.core.executor import CommandExecutor, LogFn
from claro.core.parser import clean_line, preprocess
from claro.core.runner import BatchRunner
from claro.core.settings_manager import SettingsManager
from claro.core.statements import Statement
from claro.core.variable_store import VariableStore


class Interpreter:
    """Runs Claro source against one VariableStore.

    Parameters
    ----------
    settings : SettingsManager, optional
        Defaults apply when omitted.
    out, err : text streams, optional
        Program output and diagnostics; sys.stdout / sys.stderr when omitted.
    log_fn : callable(level, message), optional
    """

    def __init__(
        self,
        settings: Optional[SettingsManager] = None,
        out:      Optional[TextIO]          = None,
        err:      Optional[TextIO]          = None,
        log_fn:   Optional[LogFn]           = None,
    ) -> None:
        self._settings  = settings if settings is not None else SettingsManager()
        self._out       = out
        self._err       = err
        self._log       = log_fn or (lambda level, msg: None)
        self._variables = VariableStore()
        self._executor  = CommandExecutor(
            self._variables,
            out         = out,
            log_fn      = self._log,
            sugar_map   = self._settings.syntax_sugar,
            quote_aware = self._settings.quote_aware_comments,
        )
        self._runner    = BatchRunner(self._executor)

    # ------------------------------------------------------------------

    @property
    def variables(self) -> VariableStore:
        return self._variables

    @property
    def _out_stream(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def _err_stream(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    def run_batch(self, statements) -> int:
        """Run statements in order; the first ClaroError propagates."""
        return self._runner.run(statements)

    def run_source(self, text: str) -> int:
        """Preprocess ``text`` and run it as one batch."""
        statements = preprocess(text, self._settings.quote_aware_comments)
        count = self.run_batch(statements)
        self._log("SUCCESS", f"Batch finished ({count} statements)")
        return count

    def run_file(self, path) -> int:
        """Read ``path`` as UTF-8 and run it as one batch."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileOpenError(path) from exc
        self._log("INFO", f"Loaded {path}")
        return self.run_source(text)

    # ------------------------------------------------------------------
    # Interactive
    # ------------------------------------------------------------------

    def run_interactive(self, stdin: Optional[TextIO] = None) -> None:
        """Read-evaluate loop until 'exit' or end of input."""
        inp = stdin if stdin is not None else sys.stdin
        out = self._out_stream
        quote_aware = self._settings.quote_aware_comments
        prompt = self._settings.prompt

        if self._settings.banner:
            out.write(BANNER + "\n")
        while True:
            out.write(prompt)
            out.flush()
            raw = inp.readline()
            if not raw:
                break                       # end of input
            line = clean_line(raw, quote_aware)
            if line == EXIT_WORD:
                break
            if not line:
                continue
            try:
                self.run_batch([Statement(line, INTERACTIVE_LINE_NUM)])
            except ClaroError as exc:
                if not self._settings.continue_after_error:
                    raise
                self.report(exc)

    # ------------------------------------------------------------------
    # Boundary
    # ------------------------------------------------------------------

    def report(self, exc: ClaroError) -> None:
        """Write the diagnostic for ``exc`` to the error stream."""
        err = self._err_stream
        err.write(exc.format() + "\n")
        err.flush()
