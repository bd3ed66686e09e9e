"""
Checks a finished grammar for components that no parse can use.

Symbols are used if they are reachable from the start symbol.
Semantic functions and entity categories are used if a reachable
rule refers to them. All findings are collected before anything is
reported, so that a single check lists every problem.

>>> from gramcc.grammar import Grammar
>>> g = Grammar()
>>> neg = g.new_invariable_term('negation', ['not'])
>>> orphan = g.new_invariable_term('orphan', ['orphan'])
>>> not_fn = g.new_semantic('not', cost=0.5, min_params=1, max_params=1)
>>> _ = g.start_symbol.add_rule([neg], semantic=not_fn)
>>> _ = g.new_semantic('unused', cost=0, min_params=1, max_params=1)
>>> for f in find_unused_components(g): print(f)
unused symbol: orphan
unused semantic: unused
"""

import logging
from collections import namedtuple
from .errors import UnusedComponentsError

logger = logging.getLogger(__name__)

class UnusedComponent(namedtuple('UnusedComponent', 'kind name')):
    def __str__(self):
        return 'unused %s: %s' % (self.kind, self.name)

def reachable_symbols(grammar):
    """Returns the names of all symbols reachable from the start symbol."""
    start = grammar.start_symbol.name
    res = set([start])
    q = [start]
    while q:
        name = q.pop()
        for rule in grammar.rules(name):
            if rule.is_terminal:
                continue
            for target in rule.right:
                if target not in res and target in grammar:
                    res.add(target)
                    q.append(target)
    return res

def find_unused_components(grammar):
    reachable = reachable_symbols(grammar)

    used_semantics = set()
    used_literals = set()
    used_entities = set()
    for sym in grammar:
        if sym.name not in reachable:
            continue
        for rule in sym.rules:
            if rule.semantic is not None:
                used_semantics.update(fn.name for fn in rule.semantic.functions())
                used_literals.update(rule.semantic.literals())
            if rule.entity_category is not None:
                used_entities.add(rule.entity_category)

    findings = []
    for sym in grammar:
        if sym.name not in reachable:
            findings.append(UnusedComponent('symbol', sym.name))
    for fn in grammar.semantics:
        if fn.name not in used_semantics:
            findings.append(UnusedComponent('semantic', fn.name))
    for name, cat in grammar.entities.items():
        if name not in used_entities and cat.symbol_name not in used_literals:
            findings.append(UnusedComponent('entity', name))

    for f in findings:
        logger.warning('%s', f)
    return findings

def check_for_unused_components(grammar):
    """Raises `UnusedComponentsError` listing every unused component, if there are any."""
    findings = find_unused_components(grammar)
    if findings:
        raise UnusedComponentsError(findings)
