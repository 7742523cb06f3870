"""Error handling for lamb. Only GenericExceptions should be raised by the library itself: if another type of error
makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Warnings (a reduction hitting its step limit, an overwritten binding) are not errors and are printed through
ErrorHandler.warn without interrupting anything.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a lamb error/warning. msg is a str.format
    template whose fields are filled with exprs.
    """

    def __init__(self, msg, exprs=None, internal=False):
        if exprs is None:
            exprs = []
        if not isinstance(exprs, (list, tuple)):
            exprs = [exprs]

        self.exprs = [str(expr) for expr in exprs]
        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in self.exprs))  # color expr snippets
        self.internal = internal

        super().__init__(msg.format(*self.exprs))


class ErrorHandler:
    """Context manager that will silently suppress Python errors and print lamb errors/warnings instead."""
    ERROR = "red"
    WARNING = "magenta"
    STEP = "cyan"

    def __init__(self, fatal=True, verbose=False):
        self.fatal = fatal
        self.verbose = verbose
        self.steps = []  # (rule, expr) pairs registered during reduction

    def register_step(self, rule, expr):
        """Records a reduction step. rule is the name of the rewrite rule (ex: 'β'), expr the term after rewriting."""
        self.steps.append((rule, str(expr)))
        if self.verbose:
            print(colored(rule, ErrorHandler.STEP, attrs=["bold"]) + f" {expr}")

    def clear_steps(self):
        self.steps = []

    def warn(self, *args, **kwargs):
        """Generates and prints a warning message based on args (see GenericException for args)."""
        error = GenericException(*args, **kwargs)
        print(colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg)

    def throw(self, error):
        """Prints error, which must be a GenericException. Exits the process if self.fatal."""
        error_msg = ""
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("beta normal form might exist, but maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}: {}'", [exc_type.__name__, exc_val], internal=True))
            do_exit = True

        return not do_exit
