"""
Builders for terminal rule sets.

A term set is a symbol whose rules together form one vocabulary item:
a verb with all of its inflections, a pronoun in both cases, or an
invariable term with its synonyms. Every rule of an inflected set
shares one display record, which the parser conjugates according to
the grammatical annotations of the parent rules.

>>> from gramcc.grammar import Grammar
>>> g = Grammar()
>>> be = g.new_verb('be', {'one_sg': 'am', 'three_sg': 'is', 'pl': 'are', 'past': 'was'})
>>> for rule in be.rules: print(rule)
be -> "am"
be -> "is"
be -> "are"
be -> "was"
>>> like = g.new_verb('like', {'one_sg': 'like', 'three_sg': 'likes', 'pl': 'like', 'past': 'liked'})
>>> len(like.rules)
3
>>> like.rules[0].text is like.rules[2].text
True

Builders check their whole input before touching the grammar.

>>> g.new_verb('do', {'one_sg': 'do', 'three_sg': 'does', 'pl': 'do', 'past': 'do'})
Traceback (most recent call last):
    ...
gramcc.errors.DuplicateRuleError: Duplicate rule: do -> do
>>> 'do' in g
False
"""

from .grammar import Symbol
from .options import VerbForms, PronounForms, SubstitutedTerm, check_cost, check_name
from .errors import IllFormedOptionsError

TERM_TYPES = ('verb', 'invariable', 'pronoun')

def join_text(texts):
    """Concatenates display texts, merging adjacent strings.

    >>> join_text(['have', None, 'not'])
    'have not'
    >>> join_text([{'one_sg': 'do'}, 'not']) == [{'one_sg': 'do'}, 'not']
    True
    >>> print(join_text([]))
    None
    """
    res = []
    for text in texts:
        if text is None:
            continue
        for item in (text if isinstance(text, list) else [text]):
            if isinstance(item, str) and res and isinstance(res[-1], str):
                res[-1] = res[-1] + ' ' + item
            else:
                res.append(item)
    if not res:
        return None
    if len(res) == 1:
        return res[0]
    return res

def _check_builder_args(symbol_name, insertion_cost):
    check_name('symbol_name', symbol_name)
    check_cost('insertion_cost', insertion_cost)

def new_verb(grammar, symbol_name, verb_forms, insertion_cost=None):
    """Creates a symbol producing a terminal rule for each form of a verb.

    Only the first-person-singular rule carries `insertion_cost`. The plural
    rule is left out when it is spelled like the first-person-singular one.
    """
    _check_builder_args(symbol_name, insertion_cost)
    forms = VerbForms.coerce(verb_forms)
    text = forms.text_forms()

    def _rule(literal, tense=None, **kw):
        return grammar.make_rule(symbol_name, literal, True, dict(text=text, tense=tense, **kw))

    rules = [
        _rule(forms.one_sg, insertion_cost=insertion_cost),
        _rule(forms.three_sg),
        ]
    if forms.pl != forms.one_sg:
        rules.append(_rule(forms.pl))
    rules.append(_rule(forms.past, tense='past'))

    if forms.present_subjunctive is not None:
        rules.append(_rule(forms.present_subjunctive))
    if forms.present_participle is not None:
        rules.append(_rule(forms.present_participle))
    if forms.past_participle is not None:
        rules.append(_rule(forms.past_participle, tense='past'))

    sym = grammar.new_rule_set(symbol_name, rules, 'verb')
    sym.text_forms = text
    sym.default_text = text
    return sym

def new_pronoun(grammar, symbol_name, pronoun_forms, insertion_cost=None):
    """Creates a symbol producing the nominative and objective forms of a pronoun.

    >>> from gramcc.grammar import Grammar
    >>> g = Grammar()
    >>> they = new_pronoun(g, '3-pl', {'nom': 'they', 'obj': 'them'}, insertion_cost=1)
    >>> [(rule.right[0], rule.insertion_cost) for rule in they.rules]
    [('they', 1), ('them', None)]
    >>> they.rules[1].text == {'nom': 'they', 'obj': 'them'}
    True
    """
    _check_builder_args(symbol_name, insertion_cost)
    forms = PronounForms.coerce(pronoun_forms)
    text = forms.text_forms()

    rules = [grammar.make_rule(symbol_name, forms.nom, True, dict(text=text, insertion_cost=insertion_cost))]
    if forms.obj != forms.nom:
        rules.append(grammar.make_rule(symbol_name, forms.obj, True, dict(text=text)))

    sym = grammar.new_rule_set(symbol_name, rules, 'pronoun')
    sym.text_forms = text
    sym.default_text = text
    return sym

def _check_terms(what, terms):
    if isinstance(terms, (str, dict)) or not terms:
        raise IllFormedOptionsError('%s must be a non-empty list, got %r' % (what, terms))

def new_invariable_term(grammar, symbol_name, accepted_terms, substituted_terms=None, insertion_cost=None):
    """Creates a symbol producing terminal rules for terms that do not inflect.

    Each accepted term displays itself. Each substituted term displays the
    first accepted term and costs its penalty more.

    >>> from gramcc.grammar import Grammar
    >>> g = Grammar()
    >>> sym = new_invariable_term(g, 'do', ['do'], substituted_terms=['does', {'term': 'did', 'cost_penalty': 0.5}])
    >>> [(rule.right[0], rule.text, rule.cost) for rule in sym.rules]
    [('do', 'do', 0), ('does', 'do', 0), ('did', 'do', 0.5)]
    >>> new_invariable_term(g, 'opt-github', ['GitHub', 'git hub'])
    Traceback (most recent call last):
        ...
    gramcc.errors.MalformedTerminalError: terminal symbol contains whitespace: 'git hub'
    """
    _check_builder_args(symbol_name, insertion_cost)
    _check_terms('accepted_terms', accepted_terms)

    rules = []
    for i, term in enumerate(accepted_terms):
        options = dict(text=term)
        if i == 0:
            options['insertion_cost'] = insertion_cost
        rules.append(grammar.make_rule(symbol_name, term, True, options))

    default_text = accepted_terms[0]
    if substituted_terms is not None:
        _check_terms('substituted_terms', substituted_terms)
        for item in substituted_terms:
            sub = SubstitutedTerm.coerce(item)
            rules.append(grammar.make_rule(symbol_name, sub.term, True,
                dict(text=default_text, cost_penalty=sub.cost_penalty)))

    sym = grammar.new_rule_set(symbol_name, rules, 'invariable')
    sym.default_text = default_text
    return sym

def _term_components(grammar, term):
    """Splits a sequence entry into its components and rule options."""
    options = {}
    if isinstance(term, dict):
        unknown = [k for k in term if k not in ('term', 'no_insertion_indexes')]
        if unknown or 'term' not in term:
            raise IllFormedOptionsError('ill-formed term sequence entry: %r' % (term,))
        if 'no_insertion_indexes' in term:
            options['no_insertion_indexes'] = term['no_insertion_indexes']
        term = term['term']

    if isinstance(term, str):
        if options:
            raise IllFormedOptionsError('no_insertion_indexes requires a pair of terms: %r' % term)
        return term, options

    components = list(term) if isinstance(term, (list, tuple)) else [term]
    if len(components) not in (1, 2):
        raise IllFormedOptionsError('a term sequence entry holds one or two term sets, got %r' % (term,))
    for sym in components:
        if not isinstance(sym, Symbol) or sym.grammar is not grammar or not sym.is_term_set:
            raise IllFormedOptionsError('term sequence components must be term sets of this grammar, got %r' % (sym,))
    return components, options

def _check_kind(symbol_name, kind, components, accepted):
    if isinstance(components, str):
        if kind != 'invariable':
            raise IllFormedOptionsError('%s sequence %r cannot accept the plain literal %r' % (kind, symbol_name, components))
        return

    types = [sym.term_type() for sym in components]
    if kind == 'invariable':
        ok = all(t == 'invariable' for t in types)
    elif kind == 'pronoun':
        ok = types == ['pronoun'] or (not accepted and all(t in ('pronoun', 'invariable') for t in types))
    else:
        ok = types.count('verb') == 1 and all(t in ('verb', 'invariable') for t in types)
        ok = ok or (not accepted and all(t in ('verb', 'invariable') for t in types))
    if not ok:
        raise IllFormedOptionsError('%s sequence %r cannot hold %s' % (
            kind, symbol_name, ' + '.join('%s (%s)' % (sym.name, t) for sym, t in zip(components, types))))

def _components_text(components):
    if isinstance(components, str):
        return components
    return join_text([sym.default_text for sym in components])

def new_term_sequence(grammar, symbol_name, kind, accepted_terms, substituted_terms=None, insertion_cost=None):
    """Creates a symbol that accepts sequences of existing term sets.

    Entries are literals (invariable sequences only), term set symbols, or
    pairs of term set symbols, which become binary rules. Substitutions
    display the text of the first accepted entry.

    >>> from gramcc.grammar import Grammar
    >>> g = Grammar()
    >>> do = g.new_verb('do', {'one_sg': 'do', 'three_sg': 'does', 'pl': 'do', 'past': 'did'})
    >>> neg = g.new_invariable_term('not', ['not'])
    >>> dont = g.new_invariable_term('dont', ['dont'])
    >>> seq = new_term_sequence(g, 'do-not', 'verb', [[do, neg]], substituted_terms=[dont])
    >>> for rule in seq.rules: print(rule)
    do-not -> do not
    do-not -> dont
    >>> seq.rules[1].text == [do.text_forms, 'not']
    True
    >>> new_term_sequence(g, 'not-not', 'verb', [[neg, neg]])
    Traceback (most recent call last):
        ...
    gramcc.errors.IllFormedOptionsError: verb sequence 'not-not' cannot hold not (invariable) + not (invariable)
    """
    _check_builder_args(symbol_name, insertion_cost)
    if kind not in TERM_TYPES:
        raise IllFormedOptionsError('unrecognized term sequence type: %r' % (kind,))
    _check_terms('accepted_terms', accepted_terms)

    rules = []
    default_text = None
    for i, term in enumerate(accepted_terms):
        components, options = _term_components(grammar, term)
        _check_kind(symbol_name, kind, components, True)
        if i == 0:
            default_text = _components_text(components)
        if isinstance(components, str):
            options['text'] = components
            rule = grammar.make_rule(symbol_name, components, True, options)
        else:
            rule = grammar.make_rule(symbol_name, components, False, options)
        if i == 0 and insertion_cost is not None:
            rule.insertion_cost = insertion_cost
        rules.append(rule)

    if substituted_terms is not None:
        _check_terms('substituted_terms', substituted_terms)
        for item in substituted_terms:
            sub = SubstitutedTerm.coerce(item)
            components, options = _term_components(grammar, sub.term)
            _check_kind(symbol_name, kind, components, False)
            options['text'] = default_text
            if isinstance(components, str):
                options['cost_penalty'] = sub.cost_penalty
                rule = grammar.make_rule(symbol_name, components, True, options)
            else:
                options['cost'] = sub.cost_penalty
                rule = grammar.make_rule(symbol_name, components, False, options)
                rule.cost_penalty = sub.cost_penalty
            rules.append(rule)

    sym = grammar.new_rule_set(symbol_name, rules, 'sequence')
    sym.sequence_type = kind
    sym.default_text = default_text
    if kind != 'invariable' and isinstance(default_text, dict):
        sym.text_forms = default_text
    return sym
