"""β-reduction strategies and the reduction driver.

A strategy only has to implement BetaReducer.step, which contracts (at most) one redex of a LocalNamelessTerm in
place. Reducing to normal form, while a predicate holds or up to a step limit is the same loop for every strategy and
is implemented once in BetaReducer.

Non-terminating terms are not detected, only bounded: a reduction that reaches its limit simply returns a step count
equal to the limit, and it is up to the caller to report that the term might not have a normal form.

Traversals are recursive, so a term that nests one level deeper with every step (ex: Θ g or Y g) can exceed Python's
default recursion limit (about 1000 frames) before REDUCE_LIMIT steps are reached. The resulting RecursionError is
reported by ErrorHandler; lower the step limit or raise sys.setrecursionlimit for such terms.
"""

from abc import abstractmethod, ABC
from dataclasses import dataclass

from lamb.pure.nameless import LocalNamelessTerm
from lamb.pure.term import Abstraction, Application, Term

REDUCE_LIMIT = 1000  # default number of β-reduction steps before giving up, see above for deeply nesting terms


class BetaReducer(ABC):
    """A β-reduction strategy. Only step is required; the other methods can be overridden if a strategy can do better.
    """

    @abstractmethod
    def step(self, term):
        """Performs one step of β-reduction on term (a LocalNamelessTerm) in-place. Returns whether or not a reduction
        was performed: False means term is in normal form for this strategy.
        """

    def reduce(self, term):
        """Reduces term in-place until it reaches normal form. Returns the number of steps performed."""
        count = 0
        while self.step(term):
            count += 1
        return count

    def reduce_while(self, term, predicate):
        """Reduces term in-place until it reaches normal form or predicate(term, count) is false, count being the
        number of steps performed so far. The predicate is checked before every step. Returns the number of steps
        performed.
        """
        count = 0
        while predicate(term, count) and self.step(term):
            count += 1
        return count

    def reduce_limit(self, term, limit):
        """Reduces term in-place until it reaches normal form or limit steps were performed. Returns the latter."""
        return self.reduce_while(term, lambda __, count: count < limit)

    def __repr__(self):
        return f"{type(self).__name__}()"


class NormalOrder(BetaReducer):
    """Leftmost outermost (normal order) β-reduction. Finds the normal form of a term whenever there is one."""

    def step(self, term):
        term.tree, reduced = self._step(term.tree)
        return reduced

    def _step(self, node):
        """Returns the node that replaces node and whether or not it was reduced."""
        if isinstance(node, Abstraction):
            node.body, reduced = self._step(node.body)
            return node, reduced

        elif isinstance(node, Application):
            func, arg = node.nodes

            if isinstance(func, Abstraction):
                # the redex's own body is stepped once before the (unreduced) argument is substituted into it
                body, __ = self._step(func.body)
                return body.open(0, arg), True

            node.func, func_reduced = self._step(func)
            node.arg, arg_reduced = self._step(arg)
            return node, func_reduced or arg_reduced

        return node, False  # variables are always in normal form


class Applicative(BetaReducer):
    """Leftmost innermost (applicative order) β-reduction: functions and arguments are reduced to normal form before
    being applied. Contracts exactly one redex per step. May diverge on terms that have a normal form, ex:
    (λx. z) ((λx. x x) (λx. x x)).
    """

    def step(self, term):
        term.tree, reduced = self._step(term.tree)
        return reduced

    def _step(self, node):
        if isinstance(node, Abstraction):
            node.body, reduced = self._step(node.body)
            return node, reduced

        elif isinstance(node, Application):
            node.func, reduced = self._step(node.func)
            if reduced:
                return node, True

            node.arg, reduced = self._step(node.arg)
            if reduced:
                return node, True

            func, arg = node.nodes
            if isinstance(func, Abstraction):
                return func.body.open(0, arg), True

        return node, False


NORMAL = NormalOrder()
APPLICATIVE = Applicative()


@dataclass(frozen=True)
class ReducedTerm:
    """A β-reduced classic term, along with the number of reduction steps it took to get there."""
    count: int
    term: Term

    def __str__(self):
        return str(self.term)


def beta_reduced(term, reducer=NORMAL):
    """Returns the normal form of classic term, wrapped in a ReducedTerm. Never returns if term has no normal form for
    reducer: prefer beta_reduced_limit for untrusted terms. term is left untouched.
    """
    local_nameless = LocalNamelessTerm.from_classic(term)
    count = reducer.reduce(local_nameless)
    return ReducedTerm(count, local_nameless.to_classic())


def beta_reduced_while(term, predicate, reducer=NORMAL):
    """Returns classic term β-reduced while predicate(local nameless term, steps so far) holds, wrapped in a
    ReducedTerm. term is left untouched.
    """
    local_nameless = LocalNamelessTerm.from_classic(term)
    count = reducer.reduce_while(local_nameless, predicate)
    return ReducedTerm(count, local_nameless.to_classic())


def beta_reduced_limit(term, limit=REDUCE_LIMIT, reducer=NORMAL):
    """Returns classic term β-reduced for at most limit steps, wrapped in a ReducedTerm. If the returned count equals
    limit, term might not have a normal form. term is left untouched.
    """
    local_nameless = LocalNamelessTerm.from_classic(term)
    count = reducer.reduce_limit(local_nameless, limit)
    return ReducedTerm(count, local_nameless.to_classic())
