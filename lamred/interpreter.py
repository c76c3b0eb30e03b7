"""Lambda calculus evaluator.

Basic program flow:
    1. Lexer: turns text into tokens (lamred/pure/lexical.py)
    2. Parser: builds an immutable syntax tree from the tokens (lamred/pure/parser.py)
    3. Reducer: beta-reduces the tree in normal order until no redex is left, printing a trace line per contraction
       (lamred/pure/reducer.py, using lamred/pure/substitution.py)
    4. Printer: prints the normal form (lamred/pure/term.py)

evaluate is the only place errors from steps 1-3 are caught: it never raises a GenericException.
"""
from dataclasses import dataclass
from typing import Optional

from lamred.lang.error import GenericException
from lamred.pure.reducer import NormalOrderReducer


@dataclass(frozen=True)
class Result:
    """Outcome of an evaluation. On failure, value is a human-readable message and error is the exception."""
    value: str
    success: bool
    error: Optional[GenericException] = None

    @property
    def kind(self):
        """Name of the error class, or None on success."""
        return type(self.error).__name__ if self.error is not None else None

    @classmethod
    def failure(cls, error):
        return cls(f"Error: {error.msg}", False, error)

    def __str__(self):
        return self.value


def evaluate(expr, stream=None):
    """Parses and fully reduces expr. The reduction trace goes to stream (stdout if None)."""
    try:
        reducer = NormalOrderReducer(expr)
        return Result(str(reducer.beta_reduce(stream)), True)
    except GenericException as error:
        return Result.failure(error)
