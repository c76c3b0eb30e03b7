"""Pure lambda calculus token generator.

The `pure` directory contains everything needed to evaluate pure lambda calculus: lexing, parsing, substitution and
reduction. Tokens are deliberately tiny:

```
<token> ::= "λ"        ; LAMBDA
          | "."        ; DOT
          | "(" | ")"  ; LPAREN, RPAREN
          | <char>     ; VARIABLE: any single character that is neither whitespace nor a digit
```

Variables are exactly one character wide, so `xy` is two variables and `λxy.x` has two parameters. Digits are never
variables: fresh names produced during alpha conversion are suffixed with digits, so a digit can never clash with a
user-written name.
"""

from dataclasses import dataclass
from enum import Enum

from lamred.lang.error import LexError


class TokenType(Enum):
    VARIABLE = "variable"
    LAMBDA = "λ"
    DOT = "."
    LPAREN = "("
    RPAREN = ")"
    END = "end of input"


@dataclass(frozen=True)
class Token:
    """A single token. value is only set for VARIABLE tokens; pos is the offset of the token in the source text."""
    type: TokenType
    value: str = ""
    pos: int = 0

    def __str__(self):
        return self.value if self.type is TokenType.VARIABLE else self.type.value


class Lexer:
    """Turns source text into a list of Tokens terminated by an END token."""
    BUILTINS = {
        "λ": TokenType.LAMBDA,
        ".": TokenType.DOT,
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
    }

    def __init__(self, expr):
        self.expr = expr
        self.position = 0

    def skip_whitespace(self):
        while self.position < len(self.expr) and self.expr[self.position].isspace():
            self.position += 1

    def tokenize(self):
        """Eagerly tokenizes self.expr. Raises a LexError on the first character that cannot start a token."""
        tokens = []
        while self.position < len(self.expr):
            self.skip_whitespace()
            if self.position >= len(self.expr):
                break

            pos = self.position
            char = self.expr[pos]
            self.position += 1

            if char in Lexer.BUILTINS:
                tokens.append(Token(Lexer.BUILTINS[char], pos=pos))
            elif not char.isspace() and not char.isdigit():
                tokens.append(Token(TokenType.VARIABLE, char, pos))
            else:
                raise LexError("'{}' contains unexpected character '{}'", (self.expr, char), start=pos, end=pos + 1)

        tokens.append(Token(TokenType.END, pos=len(self.expr)))
        return tokens


def tokenize(expr):
    """Shorthand for Lexer(expr).tokenize()."""
    return Lexer(expr).tokenize()
