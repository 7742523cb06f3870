"""Statements that can be executed by a Session."""

from dataclasses import dataclass
from typing import Any

from lamb.pure.term import Term


@dataclass(frozen=True)
class Bind:
    """Binding of a term to a name: once executed, every free occurrence of name in later terms is replaced with term
    before reduction.
    """
    name: Any
    term: Term

    def __str__(self):
        return f"{self.name} = {self.term};"
