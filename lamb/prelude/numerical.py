"""Natural numbers encoded as Church numerals, and arithmetic on them.

Source: https://en.wikipedia.org/wiki/Church_encoding#Calculation_with_Church_numerals
"""

from lamb.lang.error import GenericException
from lamb.pure.term import Abstraction, Application, Term, Variable

var, lam, app = Term.var, Term.abs, Term.app


def cnumber(num):
    """Returns num as a Church numeral (cnum): λf. λx. f (f (... (f x)))."""
    try:
        assert not isinstance(num, (bool, float))
        num = int(num)
        assert num >= 0
    except (AssertionError, TypeError, ValueError):
        raise GenericException("expected natural number, got '{}'", [num], internal=True)

    body = var("x")
    for _ in range(num):
        body = app(var("f"), body)
    return lam("f", "x", body)


def number(cnum):
    """Returns the natural number encoded by Church numeral cnum, or None if cnum isn't a Church numeral. Parameter
    names do not matter: λs. λz. s z is 1.
    """
    if not isinstance(cnum, Abstraction) or not isinstance(cnum.body, Abstraction):
        return None

    first_arg, second_arg = cnum.param, cnum.body.param
    nth_body = cnum.body.body

    num = 0
    while isinstance(nth_body, Application):
        func, nth_body = nth_body.nodes
        if not isinstance(func, Variable) or func.name != first_arg or first_arg == second_arg:
            return None  # if both parameters share a name, the outer one is shadowed
        num += 1

    if isinstance(nth_body, Variable) and nth_body.name == second_arg:
        return num
    return None


def succ():
    """λn. λf. λx. f (n f x)"""
    return lam("n", "f", "x", app(var("f"), app(var("n"), var("f"), var("x"))))


def add():
    """λm. λn. λf. λx. m f (n f x)"""
    return lam("m", "n", "f", "x", app(var("m"), var("f"), app(var("n"), var("f"), var("x"))))


def mul():
    """λm. λn. λf. m (n f)"""
    return lam("m", "n", "f", app(var("m"), app(var("n"), var("f"))))


PRELUDE = {
    "succ": succ,
    "add": add,
    "mul": mul,
}
