"""Session control for lamb: the state a REPL-style front-end keeps between commands, i.e. the global bindings and the
β-reduction limit.

Terms are expanded with the session's bindings before being reduced or bound themselves. Expansion is one level
deep, but since every binding is expanded when it is added, a binding may freely use earlier bindings.
"""

from lamb.lang.command import BindAdded, BindOverwritten, Exec, Exit, ExitRequested, GetReduceLimit, Reduce
from lamb.lang.command import ReduceLimitGot, ReduceLimitReached, ReduceLimitSet, SetReduceLimit, TermReduced
from lamb.lang.error import ErrorHandler, GenericException
from lamb.lang.statement import Bind
from lamb.prelude import boolean, combinators, numerical
from lamb.pure.nameless import LocalNamelessTerm
from lamb.pure.reduce import NORMAL, REDUCE_LIMIT, ReducedTerm


class Session:
    """Governs a lamb session, with control over the bindings in scope."""
    PRELUDE = [combinators.PRELUDE, boolean.PRELUDE, numerical.PRELUDE]

    def __init__(self, error_handler=None, reduce_limit=REDUCE_LIMIT, reducer=NORMAL):
        if error_handler is None:
            error_handler = ErrorHandler(fatal=False)

        self.error_handler = error_handler
        self.reduce_limit = reduce_limit  # max number of β-reduction steps per reduced term
        self.reducer = reducer            # β-reduction strategy

        self.binds = {}    # dict of name: LocalNamelessTerm that exist in the current session
        self.results = []  # ReducedTerms, in order of reduction

    def exec(self, command):
        """Executes command, returning a list of outcomes (see lamb.lang.command). The list is never empty."""
        if isinstance(command, Reduce):
            reduced = self.reduce(command.term)
            outcomes = [TermReduced(reduced)]
            if reduced.count >= self.reduce_limit:
                outcomes.append(ReduceLimitReached(reduced.count))
            return outcomes

        elif isinstance(command, Exec):
            return [self.add(statement) for statement in command.statements]

        elif isinstance(command, GetReduceLimit):
            return [ReduceLimitGot(self.reduce_limit)]

        elif isinstance(command, SetReduceLimit):
            self.set_reduce_limit(command.limit)
            return [ReduceLimitSet(self.reduce_limit)]

        elif isinstance(command, Exit):
            return [ExitRequested()]

        raise GenericException("'{}' is not a valid command", repr(command), internal=True)

    def add(self, statement):
        """Executes statement, returning its outcome."""
        if isinstance(statement, Bind):
            if self.bind(statement.name, statement.term):
                return BindOverwritten(statement.name)
            return BindAdded(statement.name)

        raise GenericException("'{}' is not a valid statement", repr(statement), internal=True)

    def bind(self, name, term):
        """Binds classic term to name after expanding it with the current bindings. Returns whether or not a previous
        binding was overwritten, which is warned about.
        """
        local_nameless = LocalNamelessTerm.from_classic(term).rebind(self.binds)

        overwritten = name in self.binds
        self.binds[name] = local_nameless

        if overwritten:
            self.error_handler.warn("binding '{}' overwrote a previous binding", [name])
        return overwritten

    def reduce(self, term):
        """Expands classic term with the current bindings, then β-reduces it up to the β-reduction limit. Reaching the
        limit is warned about, since term might not have a normal form.
        """
        local_nameless = LocalNamelessTerm.from_classic(term).rebind(self.binds)
        count = self.reducer.reduce_while(local_nameless, self._keep_reducing)

        reduced = ReducedTerm(count, local_nameless.to_classic())
        if count >= self.reduce_limit:
            msg = "'{}' reached the β-reduction limit of {} steps and might not have a normal form"
            self.error_handler.warn(msg, [term, count])

        self.results.append(reduced)
        return reduced

    def _keep_reducing(self, term, count):
        """Reduction predicate: registers the previous step (if any) with the error handler when it is verbose."""
        if count and self.error_handler.verbose:
            self.error_handler.register_step("β", term.to_classic())
        return count < self.reduce_limit

    def set_reduce_limit(self, limit):
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise GenericException("expected natural number as β-reduction limit, got '{}'", [limit])
        self.reduce_limit = limit

    def import_prelude(self):
        """Binds every prelude definition (combinators, booleans, numerals) that is not already bound."""
        for prelude in Session.PRELUDE:
            for name, builder in prelude.items():
                if name not in self.binds:
                    self.binds[name] = LocalNamelessTerm.from_classic(builder())
        return self

    def pop(self):
        """Pops the last reduced term."""
        return self.results.pop()
