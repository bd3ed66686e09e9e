import unittest
from gramcc import Grammar
from gramcc.rules import define_rules

def build():
    g = Grammar()
    define_rules(g)
    g.create_edit_rules()
    return g

def derived(g, left):
    return dict((rule.right, rule) for rule in g.rules(left) if rule.is_synthesized)

class TestBundledRules(unittest.TestCase):
    def setUp(self):
        self.g = build()

    def test_nothing_unused(self):
        self.assertEqual(self.g.find_unused_components(), [])

    def test_idempotent(self):
        count = self.g.rule_count()
        self.assertEqual(self.g.create_edit_rules(), 0)
        self.assertEqual(self.g.rule_count(), count)

    def test_deterministic(self):
        def rules(g):
            return [str(rule) + ' %r' % rule.cost for rule in g.all_rules()]
        self.assertEqual(rules(self.g), rules(build()))

    def test_relative_pronoun_insertion(self):
        rule = derived(self.g, 'who-user-filter')[('user-filter',)]
        self.assertEqual(rule.insertion_text, 'who')
        self.assertEqual(rule.cost, 0.5)

    def test_aux_verb_insertion(self):
        rule = derived(self.g, 'do-not')[('not',)]
        self.assertEqual(rule.insertion_text['three_sg'], 'does')
        self.assertEqual(rule.insertion_index, 0)

    def test_cheaper_side_is_inserted(self):
        rule, = derived(self.g, 'have-been').values()
        self.assertEqual(rule.right, ('been',))
        self.assertEqual(rule.cost, 0.8)

    def test_stop_words(self):
        rule, = derived(self.g, 'be-pl-sentence-adverbial').values()
        self.assertEqual(rule.right, ('be-pl',))
        self.assertEqual(rule.cost, 0)
        self.assertIsNone(rule.insertion_text)

    def test_no_insertion_index(self):
        rules = derived(self.g, 'user-obj-filter')
        self.assertEqual(list(rules), [('nom-users+',)])

    def test_transposition(self):
        rule = derived(self.g, 'start')[('user-obj-filter', 'people')]
        self.assertTrue(rule.is_transposition)
        self.assertEqual(rule.cost, 1)

    def test_conjunctions(self):
        semantics = [str(rule.semantic) for rule in self.g.rules('obj-users+') if not rule.is_synthesized]
        self.assertEqual(semantics, ['None', 'intersect', 'union'])
        rule = derived(self.g, 'and-obj-users+')[('obj-users+',)]
        self.assertEqual(rule.insertion_text, 'and')

    def test_registries(self):
        self.assertEqual(sorted(fn.name for fn in self.g.semantics),
            ['followers', 'intersect', 'me', 'not', 'union', 'users-followed'])
        self.assertEqual(list(self.g.entities), ['user'])

if __name__ == '__main__':
    unittest.main()
