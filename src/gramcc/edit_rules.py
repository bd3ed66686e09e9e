"""
Derives edit rules from the costs declared on authored rules.

Authors only write the canonical form of each rule. This module adds
the rules that let the parser recognize input in which some of that
content is missing (insertion rules) or in which two children appear
in the opposite order (transposition rules).

A symbol is insertable if it can be matched without consuming input:
it produces `<empty>`, one of its rules carries an insertion cost, or
all children of one of its rules are insertable.

>>> from gramcc.grammar import Grammar
>>> g = Grammar()
>>> like = g.new_invariable_term('like', ['like'])
>>> me = g.new_invariable_term('me', ['me'], insertion_cost=1.5)
>>> _ = g.start_symbol.add_rule([like, me], transposition_cost=2)
>>> create_edit_rules(g)
2
>>> for rule in g.rules('start'): print('%s [%s]' % (rule, rule.cost))
start -> like me [0]
start -> like (inserted) [1.5]
start -> me like (transposed) [2]
>>> g.rules('start')[1].insertion_text
'me'

Running the derivation again adds nothing.

>>> create_edit_rules(g)
0
"""

import json
import logging
from collections import namedtuple
from .rule import Rule, EMPTY_SYMBOL
from .semantic import SemanticNode
from .terminal_sets import join_text
from .errors import DuplicateRuleError

logger = logging.getLogger(__name__)

class Insertion(namedtuple('Insertion', 'cost text semantic')):
    """The cost, display text and semantic arguments of matching a symbol without input."""

    def key(self):
        return (self.cost, _text_key(self.text), _semantic_key(self.semantic))

def _text_key(text):
    return json.dumps(text, sort_keys=True)

def _semantic_key(semantic):
    return ','.join(str(s) for s in semantic)

def _apply_semantic(semantic, args):
    """Returns the semantic arguments a rule passes up, or None if its function cannot be reduced.

    >>> from gramcc.semantic import SemanticRegistry
    >>> reg = SemanticRegistry()
    >>> followers = reg.new_semantic('followers', cost=0.5, min_params=1, max_params=1)
    >>> me = reg.new_semantic_arg('me', cost=0)
    >>> [str(s) for s in _apply_semantic(followers, (me,))]
    ['followers(me)']
    >>> _apply_semantic(followers, ()) is None
    True
    """
    if semantic is None:
        return args
    if isinstance(semantic, SemanticNode):
        return (semantic,) + args
    if semantic.min_params <= len(args) <= semantic.max_params:
        return (semantic(*args),)
    return None

def collapse_empty_strings(grammar):
    """Removes `<empty>` from every rule that refers to it.

    A rule producing only `<empty>` is dropped and its symbol is marked
    as matchable without input at the rule's cost. A binary rule with an
    `<empty>` child becomes a unary rule with the other child.

    >>> from gramcc.grammar import Grammar
    >>> g = Grammar()
    >>> opt = g.new_symbol('opt')
    >>> _ = opt.add_rule([EMPTY_SYMBOL], cost=1)
    >>> _ = g.start_symbol.add_rule([opt, EMPTY_SYMBOL])
    >>> collapse_empty_strings(g)
    2
    >>> opt.rules, opt.empty_cost
    ([], 1)
    >>> print(g.rules('start')[0])
    start -> opt
    """
    collapsed = 0
    for sym in grammar:
        rules = []
        for rule in sym.rules:
            if rule.is_terminal or EMPTY_SYMBOL not in rule.right:
                rules.append(rule)
                continue

            collapsed += 1
            kept = [(i, c) for i, c in enumerate(rule.children) if c.symbol != EMPTY_SYMBOL]
            if not kept:
                if sym.empty_cost is None or rule.cost < sym.empty_cost:
                    sym.empty_cost = rule.cost
                continue

            i, child = kept[0]
            if child.symbol == sym.name:
                continue
            new_rule = Rule(sym.name, [child.replace(no_insert=rule.blocks_insertion_at(i))],
                cost=rule.cost, **rule.annotations())
            if sym.has_rhs(new_rule.right) or any(r.rhs_key() == new_rule.rhs_key() for r in rules):
                raise DuplicateRuleError(sym.name, new_rule.right)
            rules.append(new_rule)
        sym.rules[:] = rules

    if collapsed:
        logger.debug('Collapsed %d rule(s) with %s', collapsed, EMPTY_SYMBOL)
    return collapsed

def _rule_text(grammar, rule):
    if rule.text is not None or rule.is_terminal:
        return rule.text
    return join_text([grammar[c.symbol].default_text for c in rule.children if not c.no_text])

def _elision(rule, index, insertions):
    """Returns the cheapest way to leave out a child of `rule`, or None.

    Leaving out an optional child contributes no semantic. A child that
    is inserted passes up its semantic even when its text is hidden.
    """
    child = rule.children[index]
    candidates = []
    if child.is_optional:
        candidates.append(Insertion(0, None, ()))
    ins = insertions.get(child.symbol)
    if ins is not None and not rule.blocks_insertion_at(index):
        candidates.append(Insertion(ins.cost, None if child.no_text else ins.text, ins.semantic))
    if not candidates:
        return None
    return min(candidates, key=Insertion.key)

def _rule_insertion(grammar, rule, insertions):
    if rule.insertion_cost is not None:
        semantic = _apply_semantic(rule.semantic, ())
        if semantic is None:
            return None
        return Insertion(rule.cost + rule.insertion_cost, _rule_text(grammar, rule), semantic)
    if rule.is_terminal:
        return None

    cost = rule.cost
    texts = []
    args = ()
    for i in range(len(rule.children)):
        ins = _elision(rule, i, insertions)
        if ins is None:
            return None
        cost += ins.cost
        texts.append(ins.text)
        args += ins.semantic
    semantic = _apply_semantic(rule.semantic, args)
    if semantic is None:
        return None
    return Insertion(cost, join_text(texts), semantic)

def find_insertions(grammar):
    """Computes the cheapest insertion of every insertable symbol.

    Each pass over the rules can only lower a symbol's cost. A cheapest
    insertion never needs a symbol twice on one path, so the values stop
    changing after at most one pass per symbol.

    >>> from gramcc.grammar import Grammar
    >>> g = Grammar()
    >>> a = g.new_invariable_term('a', ['a'], insertion_cost=1)
    >>> b = g.new_invariable_term('b', ['b'], insertion_cost=2)
    >>> ab = g.new_binary_rule([a, b])
    >>> c = g.new_symbol('c')
    >>> _ = c.add_rule([ab], cost=0.5)
    >>> ins = find_insertions(g)
    >>> ins['a-b']
    Insertion(cost=3, text='a b', semantic=())
    >>> ins['c']
    Insertion(cost=3.5, text='a b', semantic=())
    >>> 'start' in ins
    False
    """
    insertions = {}
    for sym in grammar:
        if sym.empty_cost is not None:
            insertions[sym.name] = Insertion(sym.empty_cost, None, ())

    for passes in range(1, len(grammar) + 2):
        done = True
        for rule in grammar.all_rules():
            ins = _rule_insertion(grammar, rule, insertions)
            if ins is None:
                continue
            cur = insertions.get(rule.left)
            if cur is None or ins.key() < cur.key():
                insertions[rule.left] = ins
                done = False
        if done:
            break

    logger.debug('Found %d insertable symbol(s) after %d pass(es)', len(insertions), passes)
    return insertions

def _insertion_rules(grammar, insertions):
    for rule in grammar.all_rules():
        if rule.is_synthesized or not rule.is_binary():
            continue

        # Of the two possible single-sided insertions, only the cheaper is kept;
        # on a tie, the first child is kept.
        best = None
        for i in (1, 0):
            ins = _elision(rule, i, insertions)
            if ins is None or rule.children[1 - i].symbol == rule.left:
                continue
            if best is None or ins.cost < best[1].cost:
                best = (i, ins)
        if best is None:
            continue

        i, ins = best
        kept = rule.children[1 - i]
        kept = kept.replace(no_insert=rule.blocks_insertion_at(1 - i))
        yield Rule(rule.left, [kept],
            cost=rule.cost + ins.cost,
            is_synthesized=True,
            insertion_text=ins.text,
            insertion_index=i,
            inserted_semantic=ins.semantic or None,
            **rule.annotations())

def _transposition_rules(grammar):
    for rule in grammar.all_rules():
        if rule.is_synthesized or not rule.is_binary() or rule.transposition_cost is None:
            continue
        first, second = rule.children
        if first.symbol == second.symbol:
            continue
        yield Rule(rule.left, [second, first],
            cost=rule.cost + rule.transposition_cost,
            no_insert=rule.no_insert,
            no_insertion_indexes=[1 - i for i in rule.no_insertion_indexes],
            is_synthesized=True,
            is_transposition=True,
            **rule.annotations())

def _annotation_key(rule):
    return json.dumps([
        str(rule.semantic) if rule.semantic is not None else None,
        _semantic_key(rule.inserted_semantic or ()),
        rule.grammatical_form,
        rule.person_number,
        rule.accepted_tense,
        rule.text,
        [sorted(c.items()) for c in rule.children],
        ], sort_keys=True)

def _rule_key(rule):
    """Orders candidates for one right-hand side; lower keys win.

    Ties on cost fall back to a canonical rendering of everything the rule
    carries, so the winner does not depend on the order rules were authored.
    """
    index = rule.insertion_index if rule.insertion_index is not None else -1
    return (rule.cost, _text_key(rule.insertion_text), index, rule.is_transposition, _annotation_key(rule))

def _merge(grammar, candidates):
    """Adds the candidate rules the grammar lacks; returns the number of changes.

    An authored rule is never replaced. A synthesized rule is replaced only
    by a cheaper candidate with the same right-hand side.
    """
    changes = 0
    for (left, right), new_rule in sorted(candidates.items(), key=lambda item: item[0]):
        rules = grammar[left].rules
        for i, rule in enumerate(rules):
            if rule.rhs_key() == new_rule.rhs_key():
                if rule.is_synthesized and _rule_key(new_rule) < _rule_key(rule):
                    rules[i] = new_rule
                    changes += 1
                break
        else:
            rules.append(new_rule)
            changes += 1
    return changes

def create_edit_rules(grammar):
    """Adds insertion and transposition rules to `grammar` until none are missing.

    Returns the number of rules added or replaced. The result does not
    depend on the order in which rules were authored.
    """
    before = grammar.rule_count()
    collapse_empty_strings(grammar)

    total = 0
    rounds = 0
    while True:
        rounds += 1
        insertions = find_insertions(grammar)

        candidates = {}
        for rule in list(_insertion_rules(grammar, insertions)) + list(_transposition_rules(grammar)):
            key = (rule.left, rule.right)
            prev = candidates.get(key)
            if prev is None or _rule_key(rule) < _rule_key(prev):
                candidates[key] = rule

        changes = _merge(grammar, candidates)
        logger.debug('Edit rule round %d: %d change(s)', rounds, changes)
        if not changes:
            break
        total += changes

    logger.info('Derived edit rules: %d -> %d rules', before, grammar.rule_count())
    return total
