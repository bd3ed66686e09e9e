import logging
from .rule import Rule, Child, EMPTY_SYMBOL, INT_SYMBOL, TENSES
from .semantic import SemanticRegistry, SemanticFunction, SemanticNode
from .entity import EntityCategory
from .options import check_cost, check_name, check_literal
from .errors import (IllFormedOptionsError, DuplicateSymbolError, DuplicateRuleError,
    UnknownSymbolError)

logger = logging.getLogger(__name__)

PERSON_NUMBERS = ('one_sg', 'three_sg', 'pl')

_terminal_options = frozenset(('cost', 'text', 'tense', 'insertion_cost', 'cost_penalty', 'int_min', 'int_max'))
_nonterminal_options = frozenset(('cost', 'text', 'semantic', 'grammatical_form', 'person_number',
    'accepted_tense', 'transposition_cost', 'no_insert', 'no_insertion_indexes'))

def hyphenate(*tokens):
    """Joins name tokens into a symbol name.

    >>> hyphenate('be', 'pl')
    'be-pl'
    >>> hyphenate(3, 'sg', 'poss')
    '3-sg-poss'
    """
    return '-'.join(str(token) for token in tokens)

class Symbol:
    """A named symbol of the grammar and the ordered list of rules it produces.

    Symbols are created through `Grammar.new_symbol` or one of the term set
    builders, never directly.
    """
    def __init__(self, grammar, name):
        self.grammar = grammar
        self.name = name
        self.rules = []

        self.is_term_set = False
        self.term_set_kind = None
        self.sequence_type = None

        # The display record shared by every rule of an inflected term set.
        self.text_forms = None
        # The display text that substitutions of this set resolve to.
        self.default_text = None

        # Set once a `<empty>` rule of this symbol has been collapsed.
        self.empty_cost = None

    def term_type(self):
        """Returns 'verb', 'invariable' or 'pronoun' for term sets, None otherwise."""
        if self.term_set_kind == 'sequence':
            return self.sequence_type
        return self.term_set_kind

    def add_rule(self, rhs, terminal=False, **options):
        """Appends a rule to this symbol and returns it.

        A terminal rule takes a single literal as `rhs`, a nonterminal rule
        takes a list of one or two symbols (names, `Symbol`s or `Child` slots).

        >>> g = Grammar()
        >>> neg = g.new_symbol('negation')
        >>> print(neg.add_rule('not', terminal=True, insertion_cost=1))
        negation -> "not"
        >>> print(g.start_symbol.add_rule([neg]))
        start -> negation
        >>> g.start_symbol.add_rule(['negation'])
        Traceback (most recent call last):
            ...
        gramcc.errors.DuplicateRuleError: Duplicate rule: start -> negation
        """
        if self.is_term_set:
            raise IllFormedOptionsError('cannot add rules to the term set %r' % self.name)
        rule = self.grammar.make_rule(self.name, rhs, terminal, options)
        self._commit(rule)
        return rule

    def has_rhs(self, right, is_terminal=False):
        key = (is_terminal, tuple(right))
        return any(rule.rhs_key() == key for rule in self.rules)

    def _commit(self, rule):
        if self.has_rhs(rule.right, rule.is_terminal):
            raise DuplicateRuleError(self.name, rule.right)
        self.rules.append(rule)

    def __repr__(self):
        return '<Symbol %s (%d rules)>' % (self.name, len(self.rules))

class Grammar:
    """The mutable store of symbols, semantics and entity categories of a build.

    All authoring calls go through one `Grammar` instance, which owns
    the single namespace of symbol names. The grammar is created
    with its start symbol.

    >>> g = Grammar()
    >>> g.start_symbol
    <Symbol start (0 rules)>
    >>> be = g.new_invariable_term('be', accepted_terms=['is', 'are'])
    >>> neg = g.new_invariable_term('negation', accepted_terms=['not'])
    >>> print(g.start_symbol.add_rule([be, neg]))
    start -> be negation
    >>> print(g)
    start -> be negation
    be -> "is"
    be -> "are"
    negation -> "not"
    >>> len(g), g.rule_count()
    (3, 4)
    >>> g.new_symbol('be')
    Traceback (most recent call last):
        ...
    gramcc.errors.DuplicateSymbolError: Duplicate symbol name: 'be'
    """

    def __init__(self, start_symbol='start'):
        self._symbols = {}
        self.semantics = SemanticRegistry()
        self.entities = {}
        self.start_symbol = self.new_symbol(start_symbol)

    def new_symbol(self, *name_tokens):
        name = hyphenate(*name_tokens)
        self._check_symbol_name(name)
        return self._add_symbol(name)

    def _check_symbol_name(self, name):
        check_name('symbol name', name)
        if name in (EMPTY_SYMBOL, INT_SYMBOL):
            raise IllFormedOptionsError('%r is a reserved symbol name' % name)
        if name in self._symbols:
            raise DuplicateSymbolError(name)

    def _add_symbol(self, name):
        sym = Symbol(self, name)
        self._symbols[name] = sym
        return sym

    def new_rule_set(self, name, rules, term_set_kind=None):
        """Creates a symbol owning `rules` after checking all of them.

        Either the whole set is committed, or nothing is and an error is raised.
        """
        self._check_symbol_name(name)
        seen = set()
        for rule in rules:
            if rule.rhs_key() in seen:
                raise DuplicateRuleError(name, rule.right)
            seen.add(rule.rhs_key())
            rule.left = name

        sym = self._add_symbol(name)
        sym.rules.extend(rules)
        if term_set_kind is not None:
            sym.is_term_set = True
            sym.term_set_kind = term_set_kind
        logger.debug('Added symbol %s with %d rule(s)', name, len(rules))
        return sym

    def make_rule(self, left, rhs, terminal, options):
        """Validates rule options and returns a new, uncommitted rule."""
        allowed = _terminal_options if terminal else _nonterminal_options
        unknown = [k for k in options if k not in allowed]
        if unknown:
            raise IllFormedOptionsError('%s rule for %r: unrecognized option(s): %s' % (
                'terminal' if terminal else 'nonterminal', left, ', '.join(sorted(unknown))))

        cost = options.get('cost', 0)
        check_cost('cost', cost)
        if terminal:
            return self._make_terminal_rule(left, rhs, cost, options)
        return self._make_nonterminal_rule(left, rhs, cost, options)

    def _make_terminal_rule(self, left, literal, cost, options):
        if literal == INT_SYMBOL:
            int_min, int_max = options.get('int_min'), options.get('int_max')
            if not isinstance(int_min, int) or not isinstance(int_max, int) or int_min > int_max:
                raise IllFormedOptionsError('%s rule for %r needs int_min <= int_max' % (INT_SYMBOL, left))
        else:
            check_literal(literal)
            if 'int_min' in options or 'int_max' in options:
                raise IllFormedOptionsError('int_min and int_max apply only to %s rules' % INT_SYMBOL)

        tense = options.get('tense')
        if tense is not None and tense not in TENSES:
            raise IllFormedOptionsError('unrecognized tense: %r' % tense)
        for k in ('insertion_cost', 'cost_penalty'):
            check_cost(k, options.get(k))

        text = options.get('text', literal)
        if not isinstance(text, (str, dict)):
            raise IllFormedOptionsError('terminal rule text must be a string or a dict of forms, got %r' % (text,))

        return Rule(left, literal, is_terminal=True,
            cost=cost + (options.get('cost_penalty') or 0),
            text=text,
            tense=tense,
            insertion_cost=options.get('insertion_cost'),
            cost_penalty=options.get('cost_penalty'),
            int_min=options.get('int_min'),
            int_max=options.get('int_max'))

    def _make_nonterminal_rule(self, left, rhs, cost, options):
        if isinstance(rhs, (str, Symbol, Child)) or not 1 <= len(rhs) <= 2:
            raise IllFormedOptionsError('nonterminal rule for %r needs one or two children, got %r' % (left, rhs))

        children = []
        for item in rhs:
            child = item if isinstance(item, Child) else Child(item)
            if isinstance(item, Symbol) and item.grammar is not self:
                raise UnknownSymbolError('symbol %r belongs to another grammar' % item.name)
            if child.symbol != EMPTY_SYMBOL and child.symbol not in self._symbols:
                raise UnknownSymbolError('rule for %r refers to unknown symbol %r' % (left, child.symbol))
            children.append(child)
        names = [c.symbol for c in children]
        if names == [left]:
            raise IllFormedOptionsError('rule for %r produces only itself' % left)
        if names.count(EMPTY_SYMBOL) == 2:
            raise IllFormedOptionsError('rule for %r produces only empty strings' % left)

        semantic = options.get('semantic')
        if semantic is not None:
            fn = semantic.function if isinstance(semantic, SemanticNode) else semantic
            if not isinstance(fn, SemanticFunction) or fn.name not in self.semantics or self.semantics[fn.name] is not fn:
                raise IllFormedOptionsError('rule for %r has an unregistered semantic: %r' % (left, semantic))

        person_number = options.get('person_number')
        if person_number is not None and person_number not in PERSON_NUMBERS:
            raise IllFormedOptionsError('unrecognized person_number: %r' % person_number)
        accepted_tense = options.get('accepted_tense')
        if accepted_tense is not None and accepted_tense not in TENSES:
            raise IllFormedOptionsError('unrecognized accepted_tense: %r' % accepted_tense)
        grammatical_form = options.get('grammatical_form')
        if grammatical_form is not None:
            check_name('grammatical_form', grammatical_form)

        transposition_cost = options.get('transposition_cost')
        check_cost('transposition_cost', transposition_cost)
        if transposition_cost is not None and len(children) != 2:
            raise IllFormedOptionsError('transposition_cost for %r requires a binary rule' % left)

        no_insertion_indexes = options.get('no_insertion_indexes', ())
        if any(i not in range(len(children)) for i in no_insertion_indexes):
            raise IllFormedOptionsError('no_insertion_indexes out of range for %r: %r' % (left, no_insertion_indexes))

        return Rule(left, children,
            cost=cost,
            text=options.get('text'),
            semantic=semantic,
            grammatical_form=grammatical_form,
            person_number=person_number,
            accepted_tense=accepted_tense,
            transposition_cost=transposition_cost,
            no_insert=bool(options.get('no_insert')),
            no_insertion_indexes=no_insertion_indexes)

    def new_binary_rule(self, rhs, **options):
        """Creates a symbol named after its two children, producing them as a binary rule.

        An item of `rhs` that is itself a pair is built as a nested binary rule first.

        >>> g = Grammar()
        >>> do = g.new_invariable_term('do', accepted_terms=['do'])
        >>> neg = g.new_invariable_term('not', accepted_terms=['not'])
        >>> have = g.new_invariable_term('have', accepted_terms=['have'])
        >>> sym = g.new_binary_rule([[do, neg], Child(have, grammatical_form='infinitive')])
        >>> for rule in sym.rules: print(rule)
        do-not-have -> do-not have
        """
        if isinstance(rhs, (str, Symbol, Child)) or len(rhs) != 2:
            raise IllFormedOptionsError('a binary rule needs exactly two children, got %r' % (rhs,))
        children = []
        for item in rhs:
            if isinstance(item, (list, tuple)):
                item = self.new_binary_rule(item)
            children.append(item)
        name = hyphenate(*(getattr(c, 'symbol', getattr(c, 'name', c)) for c in children))
        rule = self.make_rule(name, children, False, options)
        return self.new_rule_set(name, [rule])

    def new_semantic(self, name, cost, min_params, max_params, commutative=False):
        return self.semantics.new_semantic(name, cost, min_params, max_params, commutative=commutative)

    def new_semantic_arg(self, name, cost):
        return self.semantics.new_semantic_arg(name, cost)

    def new_entity_category(self, name, entities):
        """Registers an entity category and returns the symbol that matches it.

        >>> g = Grammar()
        >>> sym = g.new_entity_category('user', ['Danny'])
        >>> for rule in sym.rules: print(rule)
        {user} -> "{user}"
        """
        cat = EntityCategory(name, entities)
        if name in self.entities:
            raise DuplicateSymbolError(cat.symbol_name)
        rule = self.make_rule(cat.symbol_name, cat.symbol_name, True, {})
        rule.entity_category = name
        sym = self.new_rule_set(cat.symbol_name, [rule])
        self.entities[name] = cat
        return sym

    def new_verb(self, symbol_name, verb_forms, insertion_cost=None):
        from .terminal_sets import new_verb
        return new_verb(self, symbol_name, verb_forms, insertion_cost=insertion_cost)

    def new_invariable_term(self, symbol_name, accepted_terms, substituted_terms=None, insertion_cost=None):
        from .terminal_sets import new_invariable_term
        return new_invariable_term(self, symbol_name, accepted_terms,
            substituted_terms=substituted_terms, insertion_cost=insertion_cost)

    def new_pronoun(self, symbol_name, pronoun_forms, insertion_cost=None):
        from .terminal_sets import new_pronoun
        return new_pronoun(self, symbol_name, pronoun_forms, insertion_cost=insertion_cost)

    def new_term_sequence(self, symbol_name, kind, accepted_terms, substituted_terms=None, insertion_cost=None):
        from .terminal_sets import new_term_sequence
        return new_term_sequence(self, symbol_name, kind, accepted_terms,
            substituted_terms=substituted_terms, insertion_cost=insertion_cost)

    def create_edit_rules(self):
        """Derives insertion and transposition rules; returns the number of rules added."""
        from .edit_rules import create_edit_rules
        return create_edit_rules(self)

    def find_unused_components(self):
        from .unused import find_unused_components
        return find_unused_components(self)

    def check_for_unused_components(self):
        from .unused import check_for_unused_components
        check_for_unused_components(self)

    def sort(self):
        """Orders the symbols by name, keeping the start symbol first.

        >>> g = Grammar()
        >>> _ = g.new_symbol('b'), g.new_symbol('a')
        >>> [sym.name for sym in g]
        ['start', 'b', 'a']
        >>> g.sort()
        >>> [sym.name for sym in g]
        ['start', 'a', 'b']
        """
        start = self.start_symbol.name
        names = sorted(name for name in self._symbols if name != start)
        self._symbols = dict((name, self._symbols[name]) for name in [start] + names)

    def to_dict(self):
        from .serializer import grammar_to_dict
        return grammar_to_dict(self)

    def write(self, path):
        from .serializer import write_artifact
        write_artifact(self, path)

    def rules(self, left):
        """Retrieves the list of rules with a given symbol on the left."""
        sym = self._symbols.get(left)
        return sym.rules if sym is not None else ()

    def all_rules(self):
        for sym in self:
            for rule in sym.rules:
                yield rule

    def rule_count(self):
        return sum(len(sym.rules) for sym in self)

    def __getitem__(self, name):
        return self._symbols[name]

    def __contains__(self, name):
        return name in self._symbols

    def __iter__(self):
        return iter(list(self._symbols.values()))

    def __len__(self):
        return len(self._symbols)

    def __str__(self):
        return '\n'.join(str(rule) for rule in self.all_rules())
