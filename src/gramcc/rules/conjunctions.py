from types import SimpleNamespace

def define(g):
    intersect = g.new_semantic('intersect', cost=0, min_params=1, max_params=100, commutative=True)
    union = g.new_semantic('union', cost=0.5, min_params=1, max_params=100, commutative=True)

    and_term = g.new_invariable_term('and', ['and'], insertion_cost=2)
    or_term = g.new_invariable_term('or', ['or'])

    def add_for_symbol(sym):
        """Creates `<sym>+`, matching `sym` alone or joined to further ones by and/or."""
        # (people who follow) [obj-users]
        plus = g.new_symbol(sym.name + '+')
        plus.add_rule([sym])

        # (people who follow) [obj-users] and [obj-users+]
        and_plus = g.new_symbol('and', plus.name)
        and_plus.add_rule([and_term, plus])
        plus.add_rule([sym, and_plus], semantic=intersect)

        # (people who follow) [obj-users] or [obj-users+]
        or_plus = g.new_symbol('or', plus.name)
        or_plus.add_rule([or_term, plus])
        plus.add_rule([sym, or_plus], semantic=union)

        return plus

    return SimpleNamespace(intersect=intersect, union=union, add_for_symbol=add_for_symbol)
