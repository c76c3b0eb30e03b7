"""Syntax tree of pure lambda calculus.

```
<λ-term> ::= <var>                    ; Variable
           | "λ" <var> "." <λ-term>   ; Abstraction: one parameter, body extends as far right as possible
           | <λ-term> <λ-term>        ; Application: associating by left, abcd = (((a b) c) d)
```

Terms are immutable. Every transformation (substitution, alpha conversion, reduction) builds new nodes, so untouched
subtrees can be shared between an old tree and a new one.

Printing is structural and fully parenthesized: every Application is wrapped in parentheses and an Abstraction that sits
inside an Application is wrapped too, so that printed terms parse back to the same tree.

Sources: https://plato.stanford.edu/entries/lambda-calculus/#Com,
         https://opendsa-server.cs.vt.edu/ODSA/Books/PL/html/Syntax.html
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class LambdaTerm(ABC):
    """Represents a λ-term: Variable, Abstraction, or Application."""
    LAMBDA = "λ"

    @property
    @abstractmethod
    def nodes(self):
        """Child terms, in left-to-right order."""

    @abstractmethod
    def __str__(self):
        """Canonical text of this term."""

    @property
    def expr(self):
        return str(self)

    def display(self, indents=0):
        """Recursively displays the syntax tree in a readable format.

        Format:
        <LambdaTerm>(expr='<expr>', nodes=[
            <LambdaTerm>(expr='<expr>', nodes=[
                ...
                <LambdaTerm>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}(expr='{self}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __repr__(self):
        return f"{type(self).__name__}('{self}')"


@dataclass(frozen=True, repr=False)
class Variable(LambdaTerm):
    """Variable reference. Names written by users are one character; names made by alpha conversion may be longer."""
    name: str

    @property
    def nodes(self):
        return ()

    def __str__(self):
        return self.name


@dataclass(frozen=True, repr=False)
class Abstraction(LambdaTerm):
    """Single-parameter abstraction λparam.body."""
    param: str
    body: LambdaTerm

    @property
    def nodes(self):
        return (Variable(self.param), self.body)

    def __str__(self):
        return f"{LambdaTerm.LAMBDA}{self.param}.{self.body}"


@dataclass(frozen=True, repr=False)
class Application(LambdaTerm):
    """Application of func to arg."""
    func: LambdaTerm
    arg: LambdaTerm

    @property
    def nodes(self):
        return (self.func, self.arg)

    @property
    def is_redex(self):
        """An Application is a redex if its function position is an Abstraction."""
        return isinstance(self.func, Abstraction)

    @staticmethod
    def _wrap(term):
        if isinstance(term, Abstraction):
            return f"({term})"
        return str(term)

    def __str__(self):
        """Prints (func arg), with an Abstraction on either side parenthesized: (λx.x) y prints as ((λx.x) y), not
        (λx.x y), which would parse back as λx.(x y).
        """
        return f"({Application._wrap(self.func)} {Application._wrap(self.arg)})"
