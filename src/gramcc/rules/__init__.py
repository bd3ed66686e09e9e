"""
A small English grammar for queries about people on a code-hosting site,
such as "people who do not follow me" or "my followers".
"""

from . import conjunctions, negation, aux_verbs, users, follow

def define_rules(g):
    conj = conjunctions.define(g)
    neg = negation.define(g)
    aux = aux_verbs.define(g, neg)
    user = users.define(g, conj)
    follow.define(g, user, aux, neg)
