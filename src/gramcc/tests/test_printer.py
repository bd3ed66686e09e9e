import unittest
from gramcc import Grammar, Child, EMPTY_SYMBOL
from gramcc.printer import format_grammar, format_rule_count

class TestFormatGrammar(unittest.TestCase):
    def test_listing(self):
        g = Grammar()
        like = g.new_invariable_term('like', ['like'])
        me = g.new_invariable_term('me', ['me'], insertion_cost=1.5)
        fn = g.new_semantic('f', cost=0, min_params=1, max_params=1)
        g.start_symbol.add_rule([like, me], transposition_cost=2, semantic=fn)
        g.create_edit_rules()

        self.assertEqual(format_grammar(g).splitlines(), [
            '# start',
            'start ::= like me. {f} <transpose 2>',
            'start ::= like. [1.5] {f} (inserted me)',
            'start ::= me like. [2] {f} (transposed)',
            '',
            '# like (invariable)',
            'like ::= "like".',
            '',
            '# me (invariable)',
            'me ::= "me". <insert 1.5>',
            '',
            ])

    def test_optional_children(self):
        g = Grammar()
        stop = g.new_invariable_term('stop', ['the'])
        opt = g.new_symbol('opt')
        opt.add_rule([EMPTY_SYMBOL])
        opt.add_rule([stop])
        g.start_symbol.add_rule([Child(stop, is_optional=True), opt])
        g.create_edit_rules()

        text = format_grammar(g)
        self.assertIn('start ::= [stop] opt.', text)
        self.assertIn('# opt (optional)', text)
        # both sides cost nothing to leave out, so the first one is kept
        self.assertIn('start ::= [stop]. (optional)', text)

    def test_inserted_semantic(self):
        g = Grammar()
        follow = g.new_invariable_term('follow', ['follow'])
        me = g.new_semantic_arg('me', cost=0)
        followers = g.new_semantic('followers', cost=0.5, min_params=1, max_params=1)
        obj = g.new_symbol('obj')
        obj.add_rule([g.new_invariable_term('me', ['me'], insertion_cost=0.5)], semantic=me)
        g.start_symbol.add_rule([follow, obj], semantic=followers)
        g.create_edit_rules()
        self.assertIn('start ::= follow. [0.5] {followers} {+me} (inserted me)', format_grammar(g))

class TestFormatRuleCount(unittest.TestCase):
    def test_first_build(self):
        self.assertEqual(format_rule_count(42), 'Rules: 42')

    def test_unchanged(self):
        self.assertEqual(format_rule_count(42, previous=42), 'Rules: 42')

    def test_delta(self):
        self.assertEqual(format_rule_count(50, previous=42), 'Rules: 42 -> 50 (+8)')
        self.assertEqual(format_rule_count(40, previous=42), 'Rules: 42 -> 40 (-2)')

if __name__ == '__main__':
    unittest.main()
