"""Locally nameless representation of terms.

Variables bound by an enclosing abstraction are replaced by their De Bruijn index (Bound), while free variables keep
their original identifier (Free). Substitution then never needs α-conversion: a term spliced under new abstractions
only has its dangling indices shifted (see Term.open and Term.shifted).

Converting a classic term always produces a fresh tree, which is then the only thing mutated during reduction:

```
>>> term = Term.abs("x", Term.abs("x", Term.var("x")))
>>> LocalNamelessTerm.from_classic(term)
LocalNamelessTerm('λx. λx. 0')
>>> LocalNamelessTerm.from_classic(term).to_classic() == term
True
```
"""


class LocalNamelessTerm:
    """Mutable holder of a locally nameless tree. The root itself may be replaced during reduction (ex: when the whole
    term is a redex), so the tree should always be accessed through self.tree.
    """

    def __init__(self, tree):
        self.tree = tree

    @classmethod
    def from_classic(cls, term):
        """Converts a classic term. term is left untouched."""
        return cls(term.to_nameless([]))

    def to_classic(self):
        """Converts back to a fresh classic term. Raises a LocalNamelessError (InvalidVarIndex or InvalidAbsParam) if
        the tree was malformed by hand.
        """
        return self.tree.to_classic([])

    def rebind(self, binds):
        """Replaces free variables in-place with the matching bindings. binds maps identifiers to LocalNamelessTerms;
        free variables without a binding are left untouched. Bindings are not expanded transitively.
        """
        self.tree = self.tree.rebind({name: bound.tree for name, bound in binds.items()})
        return self

    def open(self, replacement, depth=0):
        """Substitutes replacement (a LocalNamelessTerm) for Bound(depth) in-place."""
        self.tree = self.tree.open(depth, replacement.tree)
        return self

    def shifted(self, amount, depth=0):
        """Returns a copy with every Bound index >= depth incremented by amount."""
        return LocalNamelessTerm(self.tree.shifted(depth, amount))

    def beta_reduce(self, reducer):
        """Fully β-reduces in-place using reducer, returning the number of steps performed."""
        return reducer.reduce(self)

    def beta_reduce_while(self, predicate, reducer):
        """β-reduces in-place while predicate(self, steps so far) holds, returning the number of steps performed."""
        return reducer.reduce_while(self, predicate)

    def beta_reduce_limit(self, limit, reducer):
        """β-reduces in-place for at most limit steps, returning the number of steps performed."""
        return reducer.reduce_limit(self, limit)

    def beta_reduce_step(self, reducer):
        """Performs a single step of β-reduction in-place, returning whether or not anything was reduced."""
        return reducer.step(self)

    def __eq__(self, other):
        return isinstance(other, LocalNamelessTerm) and self.tree == other.tree

    def __repr__(self):
        return f"LocalNamelessTerm('{self.tree}')"

    def __str__(self):
        return str(self.tree)
