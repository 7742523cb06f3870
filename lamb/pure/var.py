"""Variables of the locally nameless representation.

In a locally nameless term, every identifier is wrapped in a Bound or a Free:
- Bound(index) refers to an enclosing abstraction by its De Bruijn index (0 = nearest enclosing abstraction)
- Free(name) is a free (or top-level) variable, keeping its original name

Abstraction parameters are always stored as Free(name) so that the original name can be recovered when converting
back to a classic term. A well-formed locally nameless term never needs these errors: they can only be raised if a
term was built or modified by hand.
"""

from dataclasses import dataclass
from typing import Any

from lamb.lang.error import GenericException


@dataclass(frozen=True)
class Bound:
    """A bound variable, represented by its De Bruijn index."""
    index: int

    def __str__(self):
        return str(self.index)


@dataclass(frozen=True)
class Free:
    """A free variable, represented by its original identifier."""
    name: Any

    def __str__(self):
        return str(self.name)


class LocalNamelessError(GenericException):
    """Raised when a locally nameless term cannot be converted back into a classic term."""

    def __init__(self, msg, index):
        super().__init__(msg, index)
        self.index = index


class InvalidVarIndex(LocalNamelessError):
    """A Bound variable has an index greater than or equal to the number of abstractions enclosing it."""

    def __init__(self, index):
        super().__init__("bound variable index '{}' does not refer to any enclosing abstraction", index)


class InvalidAbsParam(LocalNamelessError):
    """An abstraction's parameter is a Bound, so its original identifier cannot be retrieved."""

    def __init__(self, index):
        super().__init__("abstraction parameter is bound variable '{}' instead of a free identifier", index)
