"""Recursive-descent parser for pure lambda calculus, with one token of lookahead.

```
<expr>        ::= "λ" <var>* "." <expr> | <application>
<application> ::= <term> <term>*
<term>        ::= <var> | "(" <expr> ")"
```

`λx y z.B` is curried into `λx.λy.λz.B`, and `f a b` is grouped as `((f a) b)`. An abstraction swallows everything to
its right, so `λx.x y` is `λx.(x y)`. A header without parameters binds nothing: `λ.x` is just `x`.
"""

from lamred.lang.error import LambdaSyntaxError
from lamred.pure.lexical import TokenType, tokenize
from lamred.pure.term import Abstraction, Application, Variable


class Parser:
    """Builds a LambdaTerm from a token list. Never backtracks."""

    def __init__(self, tokens, expr=""):
        self.tokens = tokens
        self.expr = expr  # source text, only used for error messages
        self.position = 0
        self.current = tokens[0]

    def advance(self):
        if self.position < len(self.tokens) - 1:
            self.position += 1
            self.current = self.tokens[self.position]
        return self.current

    def error(self, msg):
        """Returns a LambdaSyntaxError pointing at the current token."""
        pos = min(self.current.pos, max(len(self.expr) - 1, 0))
        return LambdaSyntaxError(msg, (self.expr, str(self.current)), start=pos, end=pos + 1)

    def parse(self):
        """Parses the whole token list. Leftover tokens after a complete expression are an error."""
        term = self.parse_expression()
        if self.current.type is not TokenType.END:
            raise self.error("'{}' has unexpected '{}' after a complete λ-term")
        return term

    def parse_expression(self):
        if self.current.type is not TokenType.LAMBDA:
            return self.parse_application()

        self.advance()  # skip LAMBDA

        params = []
        while self.current.type is TokenType.VARIABLE:
            params.append(self.current.value)
            self.advance()

        if self.current.type is not TokenType.DOT:
            raise self.error("'{}' expected '.' after λ parameters, got '{}'")
        self.advance()  # skip DOT

        body = self.parse_expression()
        for param in reversed(params):
            body = Abstraction(param, body)
        return body

    def parse_application(self):
        term = self.parse_term()
        while self.current.type in (TokenType.VARIABLE, TokenType.LPAREN):
            term = Application(term, self.parse_term())
        return term

    def parse_term(self):
        if self.current.type is TokenType.VARIABLE:
            name = self.current.value
            self.advance()
            return Variable(name)

        if self.current.type is TokenType.LPAREN:
            self.advance()
            term = self.parse_expression()
            if self.current.type is not TokenType.RPAREN:
                raise self.error("'{}' expected closing parenthesis, got '{}'")
            self.advance()
            return term

        raise self.error("'{}' has unexpected '{}' where a λ-term should start")


def parse(expr):
    """Lexes and parses expr into a LambdaTerm."""
    return Parser(tokenize(expr), expr).parse()
