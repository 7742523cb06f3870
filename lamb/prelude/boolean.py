"""Church-encoded booleans and boolean operations."""

from lamb.pure.term import Term

var, lam, app = Term.var, Term.abs, Term.app


def tru():
    """λt. λf. t"""
    return lam("t", "f", var("t"))


def fls():
    """λt. λf. f"""
    return lam("t", "f", var("f"))


def if_then_else():
    """λc. λt. λe. c t e. Church booleans already select between their arguments, so this is only for readability."""
    return lam("c", "t", "e", app(var("c"), var("t"), var("e")))


def not_():
    return lam("b", app(if_then_else(), var("b"), fls(), tru()))


def and_():
    return lam("l", "r", app(var("l"), var("r"), fls()))


def or_():
    return lam("l", "r", app(var("l"), tru(), var("r")))


PRELUDE = {
    "true": tru,
    "false": fls,
    "if": if_then_else,
    "not": not_,
    "and": and_,
    "or": or_,
}
