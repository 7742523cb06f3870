import unittest

from lamb.lang.error import GenericException
from lamb.prelude import boolean, combinators
from lamb.pure.nameless import LocalNamelessTerm
from lamb.pure.term import Abstraction, Application, Term, Variable
from lamb.pure.var import Bound, Free, InvalidAbsParam, InvalidVarIndex, LocalNamelessError

var, lam, app = Term.var, Term.abs, Term.app


def bound(index):
    return Variable(Bound(index))


def free(name):
    return Variable(Free(name))


class LocalNamelessTermTestCase(unittest.TestCase):

    def test_from_classic(self):
        cases = {
            "λx. λx. x": (lam("x", "x", var("x")), Abstraction(Free("x"), Abstraction(Free("x"), bound(0)))),
            "λx. λy. x": (lam("x", "y", var("x")), Abstraction(Free("x"), Abstraction(Free("y"), bound(1)))),
            "λx. y": (lam("x", var("y")), Abstraction(Free("x"), free("y"))),
            "x (λx. x)": (app(var("x"), lam("x", var("x"))),
                          Application(free("x"), Abstraction(Free("x"), bound(0)))),
            "λx. (λy. x y) x": (lam("x", app(lam("y", app(var("x"), var("y"))), var("x"))),
                                Abstraction(Free("x"), Application(
                                    Abstraction(Free("y"), Application(bound(1), bound(0))), bound(0)))),
        }
        for case, (term, expected) in cases.items():
            self.assertEqual(expected, LocalNamelessTerm.from_classic(term).tree, case)

    def test_round_trip(self):
        cases = [
            lam("x", "x", var("x")),
            app(var("x"), lam("x", var("x"))),
            lam(0, 1, app(var(1), var(0), var(2))),
            boolean.not_(),
        ] + [builder() for builder in combinators.PRELUDE.values()]

        for term in cases:
            before = str(term)
            self.assertEqual(term, LocalNamelessTerm.from_classic(term).to_classic(), before)
            self.assertEqual(before, str(term), before)

    def test_fresh_tree(self):
        term = lam("x", var("x"))
        local_nameless = LocalNamelessTerm.from_classic(term)
        local_nameless.tree.body = free("z")

        self.assertEqual(lam("x", var("x")), term)
        self.assertEqual(lam("x", var("z")), local_nameless.to_classic())

    def test_to_classic(self):
        should_raise = {
            "0": (bound(0), InvalidVarIndex, 0),
            "λx. 1": (Abstraction(Free("x"), bound(1)), InvalidVarIndex, 1),
            "λ0. y": (Abstraction(Bound(0), free("y")), InvalidAbsParam, 0),
            "(λx. x) 0": (Application(Abstraction(Free("x"), bound(0)), bound(0)), InvalidVarIndex, 0),
        }
        for case, (tree, error, index) in should_raise.items():
            with self.assertRaises(error, msg=case) as context:
                LocalNamelessTerm(tree).to_classic()
            self.assertEqual(index, context.exception.index, case)
            self.assertIsInstance(context.exception, LocalNamelessError, case)
            self.assertIsInstance(context.exception, GenericException, case)

        # classic trees are not locally nameless
        for tree in [Variable("x"), Abstraction("x", Variable(Free("y")))]:
            with self.assertRaises(GenericException, msg=str(tree)) as context:
                LocalNamelessTerm(tree).to_classic()
            self.assertTrue(context.exception.internal, str(tree))

    def test_shifted(self):
        tree = Abstraction(Free("x"), Application(bound(0), bound(1)))
        cases = {
            "λx. 0 1 >> 2": (tree.shifted(0, 2), Abstraction(Free("x"), Application(bound(0), bound(3)))),
            "λx. 0 1 >> 2 from 1": (tree.shifted(1, 2), Abstraction(Free("x"), Application(bound(0), bound(1)))),
            "0 >> 5 from 1": (bound(0).shifted(1, 5), bound(0)),
            "y >> 1": (free("y").shifted(0, 1), free("y")),
        }
        for case, (shifted, expected) in cases.items():
            self.assertEqual(expected, shifted, case)

        self.assertEqual(Abstraction(Free("x"), Application(bound(0), bound(1))), tree)

    def test_open(self):
        cases = {
            "0[y/0]": (bound(0).open(0, free("y")), free("y")),
            "2[y/0]": (bound(2).open(0, free("y")), bound(1)),
            "0[y/1]": (bound(0).open(1, free("y")), bound(0)),
            "z[y/0]": (free("z").open(0, free("y")), free("z")),
            # the replacement's own indices are shifted past the abstractions it is moved under
            "(λy. 1)[0/0]": (Abstraction(Free("y"), bound(1)).open(0, bound(0)), Abstraction(Free("y"), bound(1))),
            "(λy. 1 0 2)[w/0]": (Abstraction(Free("y"), Application(Application(bound(1), bound(0)), bound(2)))
                                 .open(0, free("w")),
                                 Abstraction(Free("y"), Application(Application(free("w"), bound(0)), bound(1)))),
        }
        for case, (opened, expected) in cases.items():
            self.assertEqual(expected, opened, case)

        local_nameless = LocalNamelessTerm(Application(bound(0), bound(0)))
        local_nameless.open(LocalNamelessTerm(Abstraction(Free("x"), bound(0))))
        self.assertEqual(app(lam("x", var("x")), lam("x", var("x"))), local_nameless.to_classic())

    def test_rebind(self):
        binds = {"id": LocalNamelessTerm.from_classic(lam("x", var("x")))}

        local_nameless = LocalNamelessTerm.from_classic(app(var("id"), lam("id", var("id")), var("other")))
        local_nameless.rebind(binds)
        expected = Application(Application(Abstraction(Free("x"), bound(0)), Abstraction(Free("id"), bound(0))),
                               free("other"))
        self.assertEqual(expected, local_nameless.tree)

        # rebound terms are copies
        local_nameless.tree.func.func.body = free("q")
        self.assertEqual(Abstraction(Free("x"), bound(0)), binds["id"].tree)

    def test_rebind_one_level(self):
        binds = {
            "a": LocalNamelessTerm.from_classic(var("b")),
            "b": LocalNamelessTerm.from_classic(var("c")),
        }
        local_nameless = LocalNamelessTerm.from_classic(app(var("a"), var("b"))).rebind(binds)
        self.assertEqual(app(var("b"), var("c")), local_nameless.to_classic())

    def test_display(self):
        self.assertEqual("λx. λx. 0", str(LocalNamelessTerm.from_classic(lam("x", "x", var("x")))))
        self.assertEqual("LocalNamelessTerm('λx. y')", repr(LocalNamelessTerm.from_classic(lam("x", var("y")))))


if __name__ == '__main__':
    unittest.main()
