"""Commands a Session can execute, and their outcomes.

Executing a command always has at least one outcome. Some outcomes (ReduceLimitReached, BindOverwritten) are
warnings: the command still succeeded.
"""

from dataclasses import dataclass, field
from typing import Any, List

from lamb.pure.reduce import ReducedTerm
from lamb.pure.term import Term


@dataclass(frozen=True)
class Reduce:
    """β-reduce a term, up to the session's β-reduction limit."""
    term: Term


@dataclass(frozen=True)
class Exec:
    """Execute statements (see lamb.lang.statement), in order."""
    statements: List = field(default_factory=list)


@dataclass(frozen=True)
class GetReduceLimit:
    pass


@dataclass(frozen=True)
class SetReduceLimit:
    limit: int


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class TermReduced:
    """A term was reduced, up to the (implied) β-reduction limit."""
    reduced: ReducedTerm


@dataclass(frozen=True)
class ReduceLimitReached:
    """The β-reduction limit was reached: the term might not have a normal form. This is a warning."""
    count: int


@dataclass(frozen=True)
class BindAdded:
    name: Any


@dataclass(frozen=True)
class BindOverwritten:
    """A binding replaced a previous binding with the same name. This is a warning."""
    name: Any


@dataclass(frozen=True)
class ReduceLimitGot:
    limit: int


@dataclass(frozen=True)
class ReduceLimitSet:
    limit: int


@dataclass(frozen=True)
class ExitRequested:
    pass
