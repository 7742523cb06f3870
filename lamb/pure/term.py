"""Pure untyped lambda calculus terms.

A term is one of

```
<term> ::= <identifier>          ; "variable"
         | "λ" <identifier> "." <term>   ; "abstraction": exactly one parameter
         | <term> <term>          ; "application": associating by left, f a b = ((f a) b)
```

Terms are generic over their identifier type: any value that supports `==` and survives `copy.deepcopy` will do
(strings, integers, tuples, custom symbols...). Terms built by callers are never mutated by this library.

The same classes are used for locally nameless terms (see lamb.pure.nameless), whose identifiers are all
lamb.pure.var.Bound or lamb.pure.var.Free values. The traversals used on locally nameless trees (open, shifted,
rebind, to_classic) live here beside the classic ones so that each node type defines its whole behavior in one place.

Trees are strict: no node is ever referenced twice. Every operation that copies part of a tree into another position
(substitution, rebinding) copies it.
"""

from abc import abstractmethod, ABC
from copy import deepcopy

from lamb.pure.var import Bound, Free, InvalidAbsParam, InvalidVarIndex
from lamb.lang.error import GenericException


def _position(binders, name):
    """Position of the nearest binder named name, 0 being the innermost. None if name is not bound."""
    for index, binder in enumerate(binders):
        if binder == name:
            return index
    return None


class Term(ABC):
    """Superclass of Variable, Abstraction and Application. Sub-terms are kept in self.nodes, which always holds two
    nodes for Abstractions (parameter, body) and Applications (function, argument), and none for Variables.
    """

    def __init__(self, *nodes):
        self.nodes = list(nodes)
        self._cls = type(self).__name__

    @staticmethod
    def var(name):
        """Builds a variable. No validation is performed: any identifier is legal."""
        return Variable(name)

    @staticmethod
    def abs(*params_and_body):
        """Builds an abstraction. Term.abs(x, y, body) is shorthand for Term.abs(x, Term.abs(y, body))."""
        *params, body = params_and_body
        if not params:
            raise ValueError("an abstraction needs at least one parameter")

        for param in reversed(params):
            body = Abstraction(param, body)
        return body

    @staticmethod
    def app(func, *args):
        """Builds an application. Term.app(f, a, b) is shorthand for Term.app(Term.app(f, a), b)."""
        if not args:
            raise ValueError("an application needs at least one argument")

        for arg in args:
            func = Application(func, arg)
        return func

    @property
    @abstractmethod
    def compound(self):
        """Whether or not this term has sub-terms. Compound arguments are parenthesized when displayed."""

    @abstractmethod
    def to_nameless(self, binders):
        """Returns a fresh locally nameless copy of this classic term. binders holds the parameters of the enclosing
        abstractions, innermost first.
        """

    @abstractmethod
    def to_classic(self, binders):
        """Returns a fresh classic copy of this locally nameless term. binders holds the parameter names of the
        enclosing abstractions, innermost first. Raises InvalidVarIndex or InvalidAbsParam if the term is malformed.
        """

    @abstractmethod
    def open(self, depth, replacement):
        """Replaces, in place, every Bound(depth) in this locally nameless term with a copy of replacement and removes
        the abstraction that depth referred to (greater indices are decremented). Returns the node that should take
        this node's place, which is self unless self is the replaced variable.
        """

    @abstractmethod
    def shifted(self, depth, amount):
        """Returns a copy of this locally nameless term with every Bound index >= depth incremented by amount."""

    @abstractmethod
    def rebind(self, binds):
        """Replaces, in place, every Free(name) with a copy of binds[name] if name is in binds. Returns the node that
        should take this node's place.
        """

    @abstractmethod
    def _collect_free(self, binders, found):
        """Appends free variable names not already in found."""

    @abstractmethod
    def alpha_equals(self, other, binders=None, other_binders=None):
        """Whether or not two classic terms are equal up to consistent renaming of bound variables. binders and
        other_binders hold the enclosing parameters of self and other respectively, innermost first.
        """

    def free_vars(self):
        """Names of the free variables of this classic term, in order of first occurrence."""
        found = []
        self._collect_free([], found)
        return found

    def display(self, indents=0):
        """Recursively displays the term tree in a readable format.

        Format:
        <Term>(expr='<expr>', nodes=[
            <Term>(expr='<expr>', nodes=[
                ...
                <Term>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{self._cls}(expr='{self}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __repr__(self):
        return f"{self._cls}('{self}')"

    def __eq__(self, other):
        return type(other) is type(self) and self.nodes == other.nodes


class Variable(Term):
    """Variable: a reference to an abstraction's parameter, or a free identifier."""

    def __init__(self, name):
        super().__init__()
        self.name = name

    @property
    def compound(self):
        return False

    def to_nameless(self, binders):
        index = _position(binders, self.name)
        if index is None:
            return Variable(Free(deepcopy(self.name)))
        return Variable(Bound(index))

    def to_classic(self, binders):
        if isinstance(self.name, Bound):
            if self.name.index >= len(binders):
                raise InvalidVarIndex(self.name.index)
            return Variable(deepcopy(binders[self.name.index]))
        elif isinstance(self.name, Free):
            return Variable(deepcopy(self.name.name))
        raise GenericException("'{}' is not a locally nameless variable", repr(self.name), internal=True)

    def open(self, depth, replacement):
        if isinstance(self.name, Bound):
            if self.name.index == depth:
                return replacement.shifted(0, depth)
            elif self.name.index > depth:
                self.name = Bound(self.name.index - 1)
        return self

    def shifted(self, depth, amount):
        if isinstance(self.name, Bound) and self.name.index >= depth:
            return Variable(Bound(self.name.index + amount))
        return Variable(self.name)  # Bound and Free are immutable

    def rebind(self, binds):
        if isinstance(self.name, Free) and self.name.name in binds:
            return deepcopy(binds[self.name.name])
        return self

    def _collect_free(self, binders, found):
        if self.name not in binders and self.name not in found:
            found.append(self.name)

    def alpha_equals(self, other, binders=None, other_binders=None):
        if not isinstance(other, Variable):
            return False

        index = _position(binders or [], self.name)
        other_index = _position(other_binders or [], other.name)
        if index is None and other_index is None:
            return self.name == other.name
        return index == other_index

    def __str__(self):
        return str(self.name)

    def __eq__(self, other):
        return type(other) is type(self) and self.name == other.name


class Abstraction(Term):
    """Abstraction: a function literal of exactly one parameter. The parameter is kept as a Variable in nodes[0]."""

    def __init__(self, param, body):
        super().__init__(Variable(param), body)

    @property
    def param(self):
        return self.nodes[0].name

    @property
    def body(self):
        return self.nodes[1]

    @body.setter
    def body(self, body):
        self.nodes[1] = body

    @property
    def compound(self):
        return True

    def to_nameless(self, binders):
        return Abstraction(Free(deepcopy(self.param)), self.body.to_nameless([self.param] + binders))

    def to_classic(self, binders):
        if isinstance(self.param, Bound):
            raise InvalidAbsParam(self.param.index)
        elif not isinstance(self.param, Free):
            raise GenericException("'{}' is not a locally nameless parameter", repr(self.param), internal=True)

        name = self.param.name
        return Abstraction(deepcopy(name), self.body.to_classic([name] + binders))

    def open(self, depth, replacement):
        self.body = self.body.open(depth + 1, replacement)
        return self

    def shifted(self, depth, amount):
        return Abstraction(self.param, self.body.shifted(depth + 1, amount))

    def rebind(self, binds):
        self.body = self.body.rebind(binds)  # the parameter slot is a label, never rebound
        return self

    def _collect_free(self, binders, found):
        self.body._collect_free([self.param] + binders, found)

    def alpha_equals(self, other, binders=None, other_binders=None):
        if not isinstance(other, Abstraction):
            return False

        binders = [self.param] + (binders or [])
        other_binders = [other.param] + (other_binders or [])
        return self.body.alpha_equals(other.body, binders, other_binders)

    def __str__(self):
        return f"λ{self.param}. {self.body}"


class Application(Term):
    """Application of a function to a single argument."""

    def __init__(self, func, arg):
        super().__init__(func, arg)

    @property
    def func(self):
        return self.nodes[0]

    @func.setter
    def func(self, func):
        self.nodes[0] = func

    @property
    def arg(self):
        return self.nodes[1]

    @arg.setter
    def arg(self, arg):
        self.nodes[1] = arg

    @property
    def compound(self):
        return True

    def to_nameless(self, binders):
        return Application(self.func.to_nameless(binders), self.arg.to_nameless(binders))

    def to_classic(self, binders):
        return Application(self.func.to_classic(binders), self.arg.to_classic(binders))

    def open(self, depth, replacement):
        self.func = self.func.open(depth, replacement)
        self.arg = self.arg.open(depth, replacement)
        return self

    def shifted(self, depth, amount):
        return Application(self.func.shifted(depth, amount), self.arg.shifted(depth, amount))

    def rebind(self, binds):
        self.func = self.func.rebind(binds)
        self.arg = self.arg.rebind(binds)
        return self

    def _collect_free(self, binders, found):
        for node in self.nodes:
            node._collect_free(binders, found)

    def alpha_equals(self, other, binders=None, other_binders=None):
        if not isinstance(other, Application):
            return False

        for node, other_node in zip(self.nodes, other.nodes):
            if not node.alpha_equals(other_node, binders, other_binders):
                return False
        return True

    def __str__(self):
        func, arg = self.nodes

        # only an abstraction in function position needs parentheses: applications associate by left
        func_expr = f"({func})" if isinstance(func, Abstraction) else f"{func}"
        arg_expr = f"({arg})" if arg.compound else f"{arg}"
        return f"{func_expr} {arg_expr}"
