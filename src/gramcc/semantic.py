"""
Semantic functions and the trees composed from them.

A semantic function has a name, a cost and bounds on the number of
arguments it accepts. Calling a function composes a tree node.

>>> reg = SemanticRegistry()
>>> followers = reg.new_semantic('followers', cost=0.5, min_params=1, max_params=1)
>>> me = reg.new_semantic_arg('me', cost=0.1)
>>> tree = followers(me)
>>> print(tree)
followers(me)
>>> tree.cost
0.6

Arity is checked as the tree is composed.

>>> followers(me, me)
Traceback (most recent call last):
    ...
gramcc.errors.ArityError: followers() takes at most 1 argument(s), 2 given

Commutative functions order their arguments canonically so that
equivalent trees compare equal.

>>> union = reg.new_semantic('union', cost=0.5, min_params=1, max_params=100, commutative=True)
>>> repos = reg.new_semantic('repos-liked', cost=0.5, min_params=1, max_params=1)
>>> print(union(repos(me), followers(me)))
union(followers(me),repos-liked(me))
>>> union(repos(me), followers(me)) == union(followers(me), repos(me))
True
"""

from .errors import ArityError, DuplicateSemanticError, IllFormedOptionsError
from .options import check_cost, check_name

class SemanticFunction:
    def __init__(self, name, cost, min_params, max_params, commutative=False):
        self.name = name
        self.cost = cost
        self.min_params = min_params
        self.max_params = max_params
        self.commutative = commutative

    def is_arg(self):
        return self.max_params == 0

    def __call__(self, *args):
        if len(args) < self.min_params:
            raise ArityError('%s() takes at least %d argument(s), %d given' % (self.name, self.min_params, len(args)))
        if len(args) > self.max_params:
            raise ArityError('%s() takes at most %d argument(s), %d given' % (self.name, self.max_params, len(args)))
        for arg in args:
            if not isinstance(arg, (SemanticNode, str)):
                raise IllFormedOptionsError('semantic argument must be a tree or an entity literal, got %r' % (arg,))
        if self.commutative:
            args = sorted(args, key=str)
        return SemanticNode(self, args)

    def functions(self):
        yield self

    def literals(self):
        return iter(())

    def to_dict(self):
        return {'name': self.name}

    def __str__(self):
        return self.name

    def __repr__(self):
        return '<SemanticFunction %s>' % self.name

class SemanticNode:
    """A semantic function applied to an ordered list of arguments.

    Arguments are other nodes or entity literals.
    """
    def __init__(self, function, args):
        self.function = function
        self.args = tuple(args)

    @property
    def cost(self):
        return self.function.cost + sum(arg.cost for arg in self.args if isinstance(arg, SemanticNode))

    def functions(self):
        """Yields every function used in the tree."""
        yield self.function
        for arg in self.args:
            if isinstance(arg, SemanticNode):
                for fn in arg.functions():
                    yield fn

    def literals(self):
        """Yields every entity literal used in the tree."""
        for arg in self.args:
            if isinstance(arg, SemanticNode):
                for lit in arg.literals():
                    yield lit
            else:
                yield arg

    def to_dict(self):
        return {
            'name': self.function.name,
            'args': [arg.to_dict() if isinstance(arg, SemanticNode) else arg for arg in self.args],
            }

    def __str__(self):
        if self.function.is_arg():
            return self.function.name
        return '%s(%s)' % (self.function.name, ','.join(str(arg) for arg in self.args))

    def __repr__(self):
        return '<SemanticNode %s>' % self

    def __eq__(self, other):
        return isinstance(other, SemanticNode) and str(self) == str(other)

    def __hash__(self):
        return hash(str(self))

def semantic_cost(semantic):
    """Returns the cost a rule's semantic adds to its parse.

    >>> semantic_cost(None)
    0
    """
    if semantic is None:
        return 0
    return semantic.cost

class SemanticRegistry:
    """Owns every semantic function of one grammar, in registration order."""

    def __init__(self):
        self._functions = {}

    def new_semantic(self, name, cost, min_params, max_params, commutative=False):
        check_name('semantic name', name)
        check_cost('semantic cost', cost, optional=False)
        for what, value in (('min_params', min_params), ('max_params', max_params)):
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise IllFormedOptionsError('%s of %r must be a positive integer, got %r' % (what, name, value))
        if min_params > max_params:
            raise IllFormedOptionsError('min_params of %r exceeds max_params' % name)
        return self._add(SemanticFunction(name, cost, min_params, max_params, commutative=commutative))

    def new_semantic_arg(self, name, cost):
        """Registers a semantic that takes no arguments and returns it as a complete tree."""
        check_name('semantic name', name)
        check_cost('semantic cost', cost, optional=False)
        return self._add(SemanticFunction(name, cost, 0, 0))()

    def _add(self, fn):
        if fn.name in self._functions:
            raise DuplicateSemanticError(fn.name)
        self._functions[fn.name] = fn
        return fn

    def __getitem__(self, name):
        return self._functions[name]

    def __contains__(self, name):
        return name in self._functions

    def __iter__(self):
        return iter(self._functions.values())

    def __len__(self):
        return len(self._functions)

    def to_dict(self):
        res = {}
        for fn in self:
            d = {'cost': fn.cost, 'min_params': fn.min_params, 'max_params': fn.max_params}
            if fn.commutative:
                d['commutative'] = True
            res[fn.name] = d
        return res
