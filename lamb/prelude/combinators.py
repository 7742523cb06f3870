"""Standard terms and combinators. Every function returns a fresh term, so the results can be freely modified."""

from lamb.pure.term import Term

var, lam, app = Term.var, Term.abs, Term.app


def compose():
    """The function composition combinator B: λf. λg. λx. f (g x)."""
    return lam("f", "g", "x", app(var("f"), app(var("g"), var("x"))))


def flip():
    """The argument flipping combinator C: λf. λx. λy. f y x."""
    return lam("f", "x", "y", app(var("f"), var("y"), var("x")))


def identity():
    """The identity combinator I: λx. x."""
    return lam("x", var("x"))


def constant():
    """The constant (discarding) combinator K: λx. λy. x."""
    return lam("x", "y", var("x"))


def sub():
    """The substitution combinator S: λx. λy. λz. x z (y z)."""
    return lam("x", "y", "z", app(var("x"), var("z"), app(var("y"), var("z"))))


def app_self():
    """The self-application combinator ω: λx. x x."""
    return lam("x", app(var("x"), var("x")))


def omega():
    """The diverging combinator Ω = ω ω. Has no normal form."""
    return app(app_self(), app_self())


def app_rev():
    """Reverse application: λx. λy. y x."""
    return lam("x", "y", app(var("y"), var("x")))


def dup():
    """The duplicating combinator W: λf. λx. f x x."""
    return lam("f", "x", app(var("f"), var("x"), var("x")))


def fix_turing():
    """Turing's fixed-point combinator Θ: (λx. λy. y (x x y)) (λx. λy. y (x x y))."""
    def half():
        return lam("x", "y", app(var("y"), app(var("x"), var("x"), var("y"))))

    return app(half(), half())


def fix_lazy():
    """Curry's (lazy) fixed-point combinator Y: λf. (λx. f (x x)) (λx. f (x x))."""
    def half():
        return lam("x", app(var("f"), app(var("x"), var("x"))))

    return lam("f", app(half(), half()))


def fix_strict():
    """The strict fixed-point combinator Z: λf. (λx. f (λy. x x y)) (λx. f (λy. x x y))."""
    def half():
        return lam("x", app(var("f"), lam("y", app(var("x"), var("x"), var("y")))))

    return lam("f", app(half(), half()))


def universal():
    """The universal combinator ι: λx. x S K."""
    return lam("x", app(var("x"), sub(), constant()))


PRELUDE = {
    "compose": compose,
    "flip": flip,
    "id": identity,
    "constant": constant,
    "sub": sub,
    "app_self": app_self,
    "omega": omega,
    "app_rev": app_rev,
    "dup": dup,
    "fix_turing": fix_turing,
    "fix_lazy": fix_lazy,
    "fix_strict": fix_strict,
    "universal": universal,
}
