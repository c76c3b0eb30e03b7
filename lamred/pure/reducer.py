"""Normal-order (leftmost-outermost) beta reduction.

A redex `(λp.B) A` is contracted to `B[p := A]` without reducing A first (call-by-name). A single step contracts the
redex at the head of the term if there is one; otherwise it descends into both sides of an application, or into the
body of an abstraction.

beta_reduce has no step limit: a term without a normal form, like `(λx.x x) (λx.x x)`, reduces forever. Interrupt it.
"""

import sys

from lamred.lang.error import InternalShapeError
from lamred.pure.parser import parse
from lamred.pure.substitution import substitute
from lamred.pure.term import Abstraction, Application, LambdaTerm, Variable

TRACE_ARROW = "↪"


def _stream(stream):
    return sys.stdout if stream is None else stream


def beta_reduce_step(term, stream=None):
    """Performs one normal-order reduction step on term, printing a trace line per contracted redex to stream."""
    if isinstance(term, Application):
        if term.is_redex:
            abstraction = term.func
            print(f"{TRACE_ARROW} β-reduce: {abstraction.param} <- {term.arg}", file=_stream(stream))
            return substitute(abstraction.body, abstraction.param, term.arg)
        return Application(beta_reduce_step(term.func, stream), beta_reduce_step(term.arg, stream))

    if isinstance(term, Abstraction):
        return Abstraction(term.param, beta_reduce_step(term.body, stream))

    if isinstance(term, Variable):
        return term
    raise InternalShapeError("cannot reduce '{}': not a λ-term", repr(term))


def is_reduced(term):
    """Whether term is in normal form, i.e. contains no redex."""
    if isinstance(term, Application):
        return not term.is_redex and is_reduced(term.func) and is_reduced(term.arg)
    if isinstance(term, Abstraction):
        return is_reduced(term.body)
    if isinstance(term, Variable):
        return True
    raise InternalShapeError("'{}' is not a λ-term", repr(term))


def beta_reduce(term, stream=None):
    """Reduces term until it is in normal form, then prints 'done.'. Returns the normal form."""
    return NormalOrderReducer(term).beta_reduce(stream)


class NormalOrderReducer:
    """Implements normal-order beta reduction of a syntax tree, keeping the latest tree around."""

    def __init__(self, expr):
        """expr is either source text or an already parsed LambdaTerm."""
        self.tree = expr if isinstance(expr, LambdaTerm) else parse(expr)
        self.steps = 0

    @property
    def reduced(self):
        return is_reduced(self.tree)

    def step(self, stream=None):
        """Performs a single reduction step on self.tree and returns the new tree."""
        self.tree = beta_reduce_step(self.tree, stream)
        self.steps += 1
        return self.tree

    def beta_reduce(self, stream=None):
        """Reduces self.tree to normal form. Does not return if there is none."""
        while not self.reduced:
            self.step(stream)
        print("done.", file=_stream(stream))
        return self.tree

    def __repr__(self):
        return repr(self.tree)

    def __str__(self):
        return self.tree.display()
