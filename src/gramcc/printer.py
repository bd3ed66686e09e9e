"""
Human-readable renderings of a grammar and of build results.

>>> print(format_rule_count(120))
Rules: 120
>>> print(format_rule_count(120, previous=100))
Rules: 100 -> 120 (+20)
>>> print(format_rule_count(95, previous=100))
Rules: 100 -> 95 (-5)
"""

import json
from jinja2 import Template

grammar_templ = Template(r"""
{%- for sym in symbols -%}
# {{ sym.name }}{% if sym.kind %} ({{ sym.kind }}){% endif %}
{% for rule in sym.rules -%}
{{ sym.name }} ::= {{ rule.rhs }}.{% for note in rule.notes %} {{ note }}{% endfor %}
{% endfor %}
{% endfor -%}
""")

rule_count_templ = Template(
    'Rules: {% if previous is not none and previous != count %}'
    '{{ previous }} -> {{ count }} ({{ "%+d"|format(count - previous) }})'
    '{% else %}{{ count }}{% endif %}')

def _format_rhs(rule):
    if rule.is_terminal:
        return '"%s"' % rule.right[0]
    names = []
    for child in rule.children:
        name = child.symbol
        if child.is_optional:
            name = '[%s]' % name
        names.append(name)
    return ' '.join(names)

def _format_text(text):
    if isinstance(text, str):
        return text
    return json.dumps(text, sort_keys=True)

def _rule_notes(rule):
    notes = []
    if rule.cost:
        notes.append('[%g]' % rule.cost)
    if rule.semantic is not None:
        notes.append('{%s}' % rule.semantic)
    if rule.inserted_semantic:
        notes.append('{+%s}' % ','.join(str(s) for s in rule.inserted_semantic))
    if rule.insertion_cost is not None:
        notes.append('<insert %g>' % rule.insertion_cost)
    if rule.transposition_cost is not None:
        notes.append('<transpose %g>' % rule.transposition_cost)
    if rule.is_transposition:
        notes.append('(transposed)')
    elif rule.is_synthesized:
        if rule.insertion_text is not None:
            notes.append('(inserted %s)' % _format_text(rule.insertion_text))
        else:
            notes.append('(optional)')
    return notes

def format_grammar(grammar):
    """Renders every symbol and rule of `grammar` as `lhs ::= rhs.` lines."""
    symbols = []
    for sym in grammar:
        kind = sym.term_type()
        if sym.empty_cost is not None:
            kind = 'optional' if kind is None else '%s, optional' % kind
        symbols.append({
            'name': sym.name,
            'kind': kind,
            'rules': [{'rhs': _format_rhs(rule), 'notes': _rule_notes(rule)} for rule in sym.rules],
            })
    return grammar_templ.render(symbols=symbols)

def format_rule_count(count, previous=None):
    return rule_count_templ.render(count=count, previous=previous)
