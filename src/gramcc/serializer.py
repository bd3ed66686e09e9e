"""
Converts a grammar to the artifact read by the parser and writes it as JSON.

>>> from gramcc.grammar import Grammar
>>> g = Grammar()
>>> neg = g.new_invariable_term('negation', ['not'], insertion_cost=1)
>>> _ = g.start_symbol.add_rule([neg])
>>> doc = grammar_to_dict(g)
>>> doc['grammar']['negation']
[{'is_terminal': True, 'rhs': 'not', 'cost': 0, 'text': 'not', 'insertion_cost': 1}]
>>> doc['grammar']['start']
[{'is_terminal': False, 'rhs': ['negation'], 'cost': 0}]
>>> rule_count(doc)
2
"""

import json
import logging
import os
from .rule import EMPTY_SYMBOL, INT_SYMBOL

logger = logging.getLogger(__name__)

_terminal_fields = ('text', 'tense', 'insertion_cost', 'cost_penalty', 'int_min', 'int_max', 'entity_category')
_nonterminal_fields = ('text', 'grammatical_form', 'person_number', 'accepted_tense',
    'transposition_cost', 'insertion_cost', 'cost_penalty', 'no_insert')
_synthesized_fields = ('is_synthesized', 'insertion_text', 'insertion_index', 'is_transposition')

def rule_to_dict(rule):
    res = {'is_terminal': rule.is_terminal}
    if rule.is_terminal:
        res['rhs'] = rule.right[0]
        fields = _terminal_fields
    else:
        res['rhs'] = list(rule.right)
        fields = _nonterminal_fields
    res['cost'] = rule.cost

    for field in fields + _synthesized_fields:
        value = getattr(rule, field)
        if value is not None and value is not False:
            res[field] = value

    if not rule.is_terminal:
        if rule.semantic is not None:
            res['semantic'] = rule.semantic.to_dict()
        if rule.inserted_semantic:
            res['inserted_semantic'] = [s.to_dict() for s in rule.inserted_semantic]
        if rule.no_insertion_indexes:
            res['no_insertion_indexes'] = list(rule.no_insertion_indexes)
        children = [dict(c.items()) for c in rule.children]
        if any(children):
            res['children'] = children
    return res

def grammar_to_dict(grammar):
    return {
        'start_symbol': grammar.start_symbol.name,
        'empty_symbol': EMPTY_SYMBOL,
        'int_symbol': INT_SYMBOL,
        'grammar': dict((sym.name, [rule_to_dict(rule) for rule in sym.rules]) for sym in grammar),
        'semantics': grammar.semantics.to_dict(),
        'entities': dict((name, cat.to_dict()) for name, cat in grammar.entities.items()),
        'empty_costs': dict((sym.name, sym.empty_cost) for sym in grammar if sym.empty_cost is not None),
        }

def write_artifact(grammar, path):
    """Writes the artifact to `path`, replacing any previous one only once complete."""
    doc = grammar_to_dict(grammar)
    tmp_path = path + '.tmp'
    with open(tmp_path, 'w', encoding='utf-8') as fout:
        json.dump(doc, fout, indent=1, ensure_ascii=False)
        fout.write('\n')
    os.replace(tmp_path, path)
    logger.info('Wrote %s (%d rules)', path, rule_count(doc))

def load_artifact(path):
    with open(path, 'r', encoding='utf-8') as fin:
        return json.load(fin)

def rule_count(doc):
    return sum(len(rules) for rules in doc['grammar'].values())

def previous_rule_count(path):
    """Returns the rule count of the artifact at `path`, or None if there is none."""
    if not os.path.exists(path):
        return None
    return rule_count(load_artifact(path))
