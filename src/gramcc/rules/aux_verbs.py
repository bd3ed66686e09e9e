from types import SimpleNamespace
from ..rule import Child

def define(g, neg):
    ns = SimpleNamespace()

    ns.do = g.new_verb('do', insertion_cost=0.2, verb_forms={
        'one_sg': 'do',
        'three_sg': 'does',
        'pl': 'do',
        'past': 'did',
        'present_participle': 'doing',
        'past_participle': 'done',
        })

    # (people who) do not (follow me)
    ns.do_not = g.new_term_sequence('do-not', 'verb', [[ns.do, neg.term]])

    # (people who) have (been followed by me)
    ns.have = g.new_verb('have', insertion_cost=0.8, verb_forms={
        'one_sg': 'have',
        'three_sg': 'has',
        'pl': 'have',
        'past': 'had',
        'present_participle': 'having',
        })

    # (people who) are (followed by me)
    ns.be_pl = g.new_invariable_term('be-pl', ['are', 'were'], insertion_cost=1, substituted_terms=[
        'is',
        'be',
        {'term': 'being', 'cost_penalty': 0.5},
        ])

    sentence_adverbial = g.new_invariable_term('sentence-adverbial', ['currently', 'still', 'also'])

    # (people who are) <stop> (followed by me)
    ns.be_pl_sentence_adverbial = g.new_binary_rule([
        ns.be_pl,
        Child(sentence_adverbial, is_optional=True, no_insert=True, no_text=True),
        ])

    # (people who have) been (followed by me)
    been = g.new_invariable_term('been', ['been'], insertion_cost=1, substituted_terms=['be'])

    # (people who) have been (followed by me)
    ns.have_been = g.new_binary_rule([Child(ns.have, grammatical_form='infinitive'), been])

    return ns
