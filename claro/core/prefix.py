COMMENT_PREFIX = "#"
QUOTE_CHAR = '"'
ASSIGN_CHAR = "="

# Keywords of the intended grammar that parse but do not execute yet.
RESERVED_KEYWORDS = frozenset({
    "IF", "ELSE", "WHILE", "END", "FOR",
    "INPUT", "FUNC", "CALL",
    "LIST", "DICT", "STRING",
    "TRY", "EXCEPT", "FINALLY",
    "BREAK", "CONTINUE",
    "FILE", "IMPORT",
})
