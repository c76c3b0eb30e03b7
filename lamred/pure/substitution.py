"""Capture-avoiding substitution.

substitute(term, name, value) replaces the free occurrences of name in term with value. If an abstraction inside term
binds a variable that also occurs in value, that abstraction is first alpha-converted to a fresh parameter, so nothing
free in value ends up bound by it:

    substitute(λx.y, y, x) == λx0.x     (and never λx.x)

Occurrence checks are conservative: bound occurrences count too. That only ever renames more than strictly needed.

Source: http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html
"""

from lamred.lang.error import InternalShapeError
from lamred.pure.term import Abstraction, Application, Variable


def occurs_in(name, term):
    """Whether name appears anywhere in term, as a variable or as a parameter."""
    if isinstance(term, Variable):
        return term.name == name
    if isinstance(term, Abstraction):
        return term.param == name or occurs_in(name, term.body)
    if isinstance(term, Application):
        return occurs_in(name, term.func) or occurs_in(name, term.arg)
    raise InternalShapeError("'{}' is not a λ-term", repr(term))


def fresh_name(base, *context):
    """Returns base, or base suffixed with 0, 1, 2, ..., whichever first occurs in none of the terms in context."""
    name = base
    suffix = 0
    while any(occurs_in(name, term) for term in context):
        name = f"{base}{suffix}"
        suffix += 1
    return name


def alpha_convert(term, old, new):
    """Renames every variable and parameter called old to new."""
    if isinstance(term, Variable):
        return Variable(new) if term.name == old else term
    if isinstance(term, Abstraction):
        param = new if term.param == old else term.param
        return Abstraction(param, alpha_convert(term.body, old, new))
    if isinstance(term, Application):
        return Application(alpha_convert(term.func, old, new), alpha_convert(term.arg, old, new))
    raise InternalShapeError("cannot alpha convert '{}': not a λ-term", repr(term))


def substitute(term, name, value):
    """Returns term with every free occurrence of name replaced by value, renaming binders to avoid capture."""
    if isinstance(term, Variable):
        return value if term.name == name else term

    if isinstance(term, Abstraction):
        if term.param == name:
            return term  # name is shadowed

        if occurs_in(term.param, value):
            param = fresh_name(term.param, value, term.body)
            body = alpha_convert(term.body, term.param, param)
            return Abstraction(param, substitute(body, name, value))

        return Abstraction(term.param, substitute(term.body, name, value))

    if isinstance(term, Application):
        return Application(substitute(term.func, name, value), substitute(term.arg, name, value))

    raise InternalShapeError("cannot substitute into '{}': not a λ-term", repr(term))
