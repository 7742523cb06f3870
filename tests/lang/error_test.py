import io
import unittest
from contextlib import redirect_stdout

from lamb.lang.error import ErrorHandler, GenericException
from lamb.pure.var import InvalidAbsParam, InvalidVarIndex


class GenericExceptionTestCase(unittest.TestCase):

    def test_init(self):
        cases = {
            "'x' is not valid": GenericException("'{}' is not valid", "x"),
            "'3' is not valid": GenericException("'{}' is not valid", 3),
            "a b": GenericException("{} {}", ["a", "b"]),
            "keyboard interrupt": GenericException("keyboard interrupt"),
        }
        for case, error in cases.items():
            self.assertEqual(case, str(error), case)
            self.assertFalse(error.internal, case)

        self.assertTrue(GenericException("oops", internal=True).internal)
        self.assertTrue(GenericException("oops '{}'", ["x"], True).internal)
        self.assertEqual(["x"], GenericException("oops '{}'", ["x"], True).exprs)

    def test_local_nameless_errors(self):
        cases = [(InvalidVarIndex(2), 2), (InvalidAbsParam(0), 0)]
        for error, index in cases:
            self.assertEqual(index, error.index)
            self.assertIn(str(index), str(error))


class ErrorHandlerTestCase(unittest.TestCase):

    def setUp(self):
        self.output = io.StringIO()

    def test_warn(self):
        with redirect_stdout(self.output):
            ErrorHandler().warn("'{}' might not have a normal form", "Ω")
        self.assertIn("warning: ", self.output.getvalue())
        self.assertIn("Ω", self.output.getvalue())

    def test_throw(self):
        with redirect_stdout(self.output):
            ErrorHandler(fatal=False).throw(GenericException("bad '{}'", "x"))
            ErrorHandler(fatal=False).throw(GenericException("worse", internal=True))
        self.assertIn("error: ", self.output.getvalue())
        self.assertIn("[internal] ", self.output.getvalue())

        with redirect_stdout(self.output):
            self.assertRaises(SystemExit, ErrorHandler(fatal=True).throw, GenericException("fatal"))

    def test_context(self):
        should_suppress = [
            (InvalidVarIndex(3), "error: "),
            (RecursionError(), "maximum recursion depth exceeded"),
            (KeyboardInterrupt(), "keyboard interrupt"),
        ]
        for error, expected in should_suppress:
            output = io.StringIO()
            with redirect_stdout(output):
                with ErrorHandler(fatal=False):
                    raise error
            self.assertIn(expected, output.getvalue(), repr(error))

    def test_context_unknown(self):
        with redirect_stdout(self.output):
            with self.assertRaises(ValueError):
                with ErrorHandler(fatal=False):
                    raise ValueError("{not a template}")
        self.assertIn("[internal] ", self.output.getvalue())
        self.assertIn("ValueError", self.output.getvalue())

        with redirect_stdout(self.output):
            with self.assertRaises(SystemExit):
                with ErrorHandler(fatal=False):
                    raise SystemExit(0)

    def test_register_step(self):
        handler = ErrorHandler()
        with redirect_stdout(self.output):
            handler.register_step("β", "y")
        self.assertEqual([("β", "y")], handler.steps)
        self.assertEqual("", self.output.getvalue())

        handler.clear_steps()
        self.assertEqual([], handler.steps)

        with redirect_stdout(self.output):
            ErrorHandler(verbose=True).register_step("β", "z")
        self.assertIn("z", self.output.getvalue())


if __name__ == '__main__':
    unittest.main()
