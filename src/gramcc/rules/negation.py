from types import SimpleNamespace

def define(g):
    semantic = g.new_semantic('not', cost=0.5, min_params=1, max_params=1)

    # (people who do) not (follow me)
    term = g.new_invariable_term('not', ['not'], substituted_terms=[
        {'term': "n't", 'cost_penalty': 0},
        {'term': 'never', 'cost_penalty': 0.5},
        ])

    return SimpleNamespace(semantic=semantic, term=term)
