from ..rule import Child

def define(g, user, aux, neg):
    followers = g.new_semantic('followers', cost=0.5, min_params=1, max_params=1)
    users_followed = g.new_semantic('users-followed', cost=0.5, min_params=1, max_params=1)

    follow = g.new_verb('follow', insertion_cost=1, verb_forms={
        'one_sg': 'follow',
        'three_sg': 'follows',
        'pl': 'follow',
        'past': 'followed',
        'present_participle': 'following',
        })
    by = g.new_invariable_term('by', ['by'], insertion_cost=0.5)
    followers_term = g.new_invariable_term('followers', ['followers', 'subscribers'], insertion_cost=1)

    # (people who) follow me
    follow_obj = g.new_binary_rule([follow, user.obj_users_plus])
    # (people who are) followed by me
    followed_by = g.new_binary_rule([Child(follow, grammatical_form='past'), [by, user.obj_users_plus]])

    user_filter = g.new_symbol('user', 'filter')
    user_filter.add_rule([follow_obj], semantic=followers, person_number='pl')
    # (people who) do not follow me
    user_filter.add_rule([aux.do_not, user_filter], semantic=neg.semantic, person_number='pl')
    # (people who) are followed by me
    user_filter.add_rule([aux.be_pl_sentence_adverbial, followed_by], semantic=users_followed)
    # (people who) have been followed by me
    user_filter.add_rule([aux.have_been, followed_by], semantic=users_followed)

    # (people) I follow
    obj_filter = g.new_symbol('user', 'obj', 'filter')
    obj_filter.add_rule([user.nom_users_plus, follow], semantic=users_followed, no_insertion_indexes=[0])

    start = g.start_symbol
    # people who follow me
    start.add_rule([user.people, g.new_binary_rule([user.who, user_filter])])
    # people I follow; I follow people
    start.add_rule([user.people, obj_filter], transposition_cost=1)
    # my followers
    start.add_rule([user.poss_determiner, followers_term], semantic=followers)
