from types import SimpleNamespace

def define(g, conj):
    ns = SimpleNamespace()

    ns.me = g.new_semantic_arg('me', cost=0)

    one_sg = g.new_pronoun('1-sg', {'nom': 'I', 'obj': 'me'})
    he = g.new_pronoun('he', {'nom': 'he', 'obj': 'him'})
    she = g.new_pronoun('she', {'nom': 'she', 'obj': 'her'})
    three_sg = g.new_term_sequence('3-sg', 'pronoun', [he, she])
    user = g.new_entity_category('user', ['Danny', 'Aang', 'Sokka'])

    # (people) who (follow me)
    ns.who = g.new_invariable_term('who', ['who', 'that'], insertion_cost=0.5)

    # people (who follow me)
    ns.people = g.new_invariable_term('people', ['people', 'users'], insertion_cost=2.5, substituted_terms=[
        {'term': 'person', 'cost_penalty': 0.5},
        ])

    # (people who follow) me
    obj_users = g.new_symbol('obj', 'users')
    obj_users.add_rule([one_sg], semantic=ns.me)
    obj_users.add_rule([three_sg])
    obj_users.add_rule([user])
    ns.obj_users_plus = conj.add_for_symbol(obj_users)

    # (people) I (follow)
    nom_users = g.new_symbol('nom', 'users')
    nom_users.add_rule([one_sg], semantic=ns.me, person_number='one_sg')
    nom_users.add_rule([three_sg], person_number='three_sg')
    nom_users.add_rule([user], person_number='three_sg')
    ns.nom_users_plus = conj.add_for_symbol(nom_users)

    # my (followers)
    ns.poss_determiner = g.new_symbol('poss', 'determiner')
    my = g.new_invariable_term('my', ['my'], substituted_terms=['mine'])
    ns.poss_determiner.add_rule([my], semantic=ns.me)

    return ns
