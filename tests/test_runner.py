"""Tests for claro.core.runner — BatchRunner."""
import io

import pytest

from claro.core.errors import UndefinedVariable
from claro.core.executor import CommandExecutor
from claro.core.runner import BatchRunner
from claro.core.statements import Statement
from claro.core.variable_store import VariableStore


def make_runner():
    buf = io.StringIO()
    vs = VariableStore()
    runner = BatchRunner(CommandExecutor(vs, out=buf))
    return runner, vs, buf


class TestBatchRunner:
    def test_runs_in_order(self):
        runner, vs, buf = make_runner()
        count = runner.run([
            Statement('VARIABLE x = "hello"', 1),
            Statement("PRINT x", 2),
            Statement('PRINT "done"', 3),
        ])
        assert count == 3
        assert buf.getvalue() == "hello\ndone\n"

    def test_stops_at_first_error(self):
        runner, vs, buf = make_runner()
        with pytest.raises(UndefinedVariable) as info:
            runner.run([
                Statement('PRINT "before"', 1),
                Statement("PRINT missing", 2),
                Statement("VARIABLE after = 1", 3),
            ])
        assert info.value.line_num == 2
        assert buf.getvalue() == "before\n"
        assert "after" not in vs

    def test_empty_batch(self):
        runner, _, buf = make_runner()
        assert runner.run([]) == 0
        assert buf.getvalue() == ""
