EMPTY_SYMBOL = '<empty>'
INT_SYMBOL = '<int>'

TENSES = ('present', 'past')

class Child:
    """Represents one slot on the right side of a nonterminal rule.

    Besides the symbol name, a slot carries the annotations that concern
    only that position of the rule.

    >>> c = Child('stop-words', is_optional=True, no_text=True)
    >>> c
    Child('stop-words', is_optional=True, no_text=True)
    >>> c.blocks_insertion()
    False
    >>> Child('have', no_insert=True).blocks_insertion()
    True
    """

    _flags = ('is_optional', 'no_insert', 'no_text')

    def __init__(self, symbol, is_optional=False, no_insert=False, no_text=False, grammatical_form=None):
        self.symbol = getattr(symbol, 'name', symbol)
        self.is_optional = bool(is_optional)
        self.no_insert = bool(no_insert)
        self.no_text = bool(no_text)
        self.grammatical_form = grammatical_form

    def blocks_insertion(self):
        return self.no_insert

    def replace(self, **kw):
        args = dict(self.items())
        args.update(kw)
        return Child(self.symbol, **args)

    def items(self):
        """Yields the annotations that differ from their defaults."""
        for flag in self._flags:
            if getattr(self, flag):
                yield flag, True
        if self.grammatical_form is not None:
            yield 'grammatical_form', self.grammatical_form

    def __eq__(self, other):
        return isinstance(other, Child) and (self.symbol, sorted(self.items())) == (other.symbol, sorted(other.items()))

    def __hash__(self):
        return hash((self.symbol, tuple(sorted(self.items()))))

    def __repr__(self):
        args = [repr(self.symbol)]
        args.extend('%s=%r' % item for item in self.items())
        return 'Child(%s)' % ', '.join(args)

class Rule:
    """Represents a single production of the grammar.

    A rule has a left-hand symbol name and is either terminal or nonterminal.
    A terminal rule matches a single input token; its `right` is a one-tuple
    holding the literal and `text` is either a display string or a record
    of inflected forms.

    >>> r = Rule('negation', 'not', is_terminal=True, text='not')
    >>> print(r)
    negation -> "not"
    >>> r.right
    ('not',)

    A nonterminal rule has one or two children. Each child may be given
    as a plain symbol name or as a `Child` carrying slot annotations.

    >>> r = Rule('be-negation', ('be', Child('negation', no_insert=True)))
    >>> print(r)
    be-negation -> be negation
    >>> r.children[1]
    Child('negation', no_insert=True)

    Rules produced by the edit-rule derivation are flagged as synthesized.

    >>> print(Rule('x', ('b', 'a'), is_synthesized=True, is_transposition=True))
    x -> b a (transposed)
    """

    def __init__(self, left, right, is_terminal=False, cost=0, text=None,
            tense=None, insertion_cost=None, cost_penalty=None,
            int_min=None, int_max=None, entity_category=None,
            semantic=None, grammatical_form=None, person_number=None,
            accepted_tense=None, transposition_cost=None, no_insert=False,
            no_insertion_indexes=(), is_synthesized=False,
            insertion_text=None, insertion_index=None, is_transposition=False,
            inserted_semantic=None):
        self.left = left
        self.is_terminal = is_terminal
        if is_terminal:
            if isinstance(right, str):
                right = (right,)
            self.right = tuple(right)
            self.children = ()
        else:
            self.children = tuple(c if isinstance(c, Child) else Child(c) for c in right)
            self.right = tuple(c.symbol for c in self.children)

        self.cost = cost
        self.text = text

        # terminal rules only
        self.tense = tense
        self.insertion_cost = insertion_cost
        self.cost_penalty = cost_penalty
        self.int_min = int_min
        self.int_max = int_max
        self.entity_category = entity_category

        # nonterminal rules only
        self.semantic = semantic
        self.grammatical_form = grammatical_form
        self.person_number = person_number
        self.accepted_tense = accepted_tense
        self.transposition_cost = transposition_cost
        self.no_insert = no_insert
        self.no_insertion_indexes = tuple(sorted(set(no_insertion_indexes)))

        self.is_synthesized = is_synthesized
        self.insertion_text = insertion_text
        self.insertion_index = insertion_index
        self.is_transposition = is_transposition
        # semantic arguments supplied by the inserted child, if any
        self.inserted_semantic = tuple(inserted_semantic) if inserted_semantic else None

    def rhs_key(self):
        """Identifies the right-hand side; no two rules of a symbol may share it."""
        return (self.is_terminal, self.right)

    def is_binary(self):
        return not self.is_terminal and len(self.children) == 2

    def blocks_insertion_at(self, index):
        """Tests whether the child at `index` may not be inserted.

        >>> r = Rule('x', ('a', Child('b', no_insert=True)), no_insertion_indexes=[0])
        >>> [r.blocks_insertion_at(i) for i in (0, 1)]
        [True, True]
        >>> Rule('x', ('a', 'b'), no_insert=True).blocks_insertion_at(1)
        True
        >>> Rule('x', ('a', 'b')).blocks_insertion_at(1)
        False
        """
        return self.no_insert or index in self.no_insertion_indexes or self.children[index].blocks_insertion()

    def annotations(self):
        """Returns the semantic and grammatical properties that derived rules inherit."""
        return dict(
            semantic=self.semantic,
            grammatical_form=self.grammatical_form,
            person_number=self.person_number,
            accepted_tense=self.accepted_tense,
            text=self.text,
            )

    def __str__(self):
        if self.is_terminal:
            r = ['%s -> "%s"' % (self.left, self.right[0])]
        else:
            r = ['%s -> %s' % (self.left, ' '.join(self.right))]
        if self.is_transposition:
            r.append(' (transposed)')
        elif self.is_synthesized:
            r.append(' (inserted)')
        return ''.join(r)

    def __repr__(self):
        kind = 'terminal' if self.is_terminal else 'nonterminal'
        return '<Rule %s %s cost=%r>' % (kind, self, self.cost)
