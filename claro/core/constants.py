"""Centralised tunables and fixed strings.

Everything the CLI and the interpreter print on their own behalf lives
here so it is easy to find and adjust.
"""

# ---------------------------------------------------------------------------
# Interpreter  (claro/core/interpreter.py)
# ---------------------------------------------------------------------------
PROMPT     = "> "
EXIT_WORD  = "exit"          # exact match after trimming ends the REPL
BANNER     = "Entering interactive mode (type 'exit' to quit)"
INTERACTIVE_LINE_NUM = 0     # interactive lines have no stable position

# ---------------------------------------------------------------------------
# CLI  (main.py)
# ---------------------------------------------------------------------------
PROG_NAME        = "claro"
VERSION          = "1.0"
VERSION_TEXT     = f"Claro Interpreter Version {VERSION}"
DEFAULT_SETTINGS = "claro.ini"

EXIT_OK          = 0
EXIT_USAGE       = 1
EXIT_RUNTIME     = 1         # default for [INTERPRETER] error_exit_code
