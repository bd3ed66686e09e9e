import unittest
from gramcc import Grammar, IllFormedOptionsError, DuplicateRuleError, MalformedTerminalError

be_forms = {'one_sg': 'am', 'three_sg': 'is', 'pl': 'are', 'past': 'was'}
like_forms = {'one_sg': 'like', 'three_sg': 'likes', 'pl': 'like', 'past': 'liked'}

class TestVerbs(unittest.TestCase):
    def setUp(self):
        self.g = Grammar()

    def test_distinct_forms(self):
        be = self.g.new_verb('be', be_forms)
        self.assertEqual([r.right[0] for r in be.rules], ['am', 'is', 'are', 'was'])
        self.assertEqual([r.tense for r in be.rules], [None, None, None, 'past'])
        self.assertTrue(all(r.text == be_forms for r in be.rules))
        self.assertEqual(be.term_type(), 'verb')
        self.assertTrue(be.is_term_set)

    def test_plural_like_first_person(self):
        like = self.g.new_verb('like', like_forms)
        self.assertEqual([r.right[0] for r in like.rules], ['like', 'likes', 'liked'])

    def test_insertion_cost_on_first_person_only(self):
        like = self.g.new_verb('like', like_forms, insertion_cost=1)
        self.assertEqual([r.insertion_cost for r in like.rules], [1, None, None])

    def test_optional_forms(self):
        forms = dict(be_forms, present_subjunctive='be', present_participle='being', past_participle='been')
        be = self.g.new_verb('be', forms)
        self.assertEqual([r.right[0] for r in be.rules], ['am', 'is', 'are', 'was', 'be', 'being', 'been'])
        self.assertEqual(be.rules[-1].tense, 'past')
        self.assertEqual(be.rules[-1].text, be_forms)

    def test_missing_form(self):
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_verb('be', {'one_sg': 'am', 'three_sg': 'is', 'pl': 'are'})
        self.assertNotIn('be', self.g)

    def test_unknown_form(self):
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_verb('be', dict(be_forms, future='will'))

    def test_form_with_whitespace(self):
        with self.assertRaises(MalformedTerminalError):
            self.g.new_verb('like', dict(like_forms, past='did like'))
        self.assertNotIn('like', self.g)

    def test_colliding_forms(self):
        with self.assertRaises(DuplicateRuleError):
            self.g.new_verb('put', {'one_sg': 'put', 'three_sg': 'puts', 'pl': 'put', 'past': 'put'})
        self.assertNotIn('put', self.g)

    def test_negative_insertion_cost(self):
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_verb('like', like_forms, insertion_cost=-1)

class TestPronouns(unittest.TestCase):
    def test_forms(self):
        g = Grammar()
        one_sg = g.new_pronoun('1-sg', {'nom': 'I', 'obj': 'me'}, insertion_cost=0.5)
        self.assertEqual([r.right[0] for r in one_sg.rules], ['I', 'me'])
        self.assertEqual(one_sg.rules[0].insertion_cost, 0.5)
        self.assertEqual(one_sg.rules[1].text, {'nom': 'I', 'obj': 'me'})
        self.assertEqual(one_sg.term_type(), 'pronoun')

    def test_same_forms(self):
        g = Grammar()
        you = g.new_pronoun('2', {'nom': 'you', 'obj': 'you'})
        self.assertEqual(len(you.rules), 1)

class TestInvariableTerms(unittest.TestCase):
    def setUp(self):
        self.g = Grammar()

    def test_accepted_terms(self):
        sym = self.g.new_invariable_term('repos', ['repos', 'repositories'], insertion_cost=2)
        self.assertEqual([(r.right[0], r.text, r.insertion_cost) for r in sym.rules],
            [('repos', 'repos', 2), ('repositories', 'repositories', None)])
        self.assertEqual(sym.default_text, 'repos')
        self.assertEqual(sym.term_type(), 'invariable')

    def test_substituted_terms(self):
        sym = self.g.new_invariable_term('in', ['in'], substituted_terms=['within', {'term': 'inside', 'cost_penalty': 1}])
        self.assertEqual([(r.right[0], r.text, r.cost) for r in sym.rules],
            [('in', 'in', 0), ('within', 'in', 0), ('inside', 'in', 1)])
        self.assertEqual(sym.rules[2].cost_penalty, 1)

    def test_empty_lists(self):
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_invariable_term('in', [])
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_invariable_term('in', 'in')
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_invariable_term('in', ['in'], substituted_terms=[])

    def test_bad_substitution(self):
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_invariable_term('in', ['in'], substituted_terms=[{'term': 'inside', 'penalty': 1}])
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_invariable_term('in', ['in'], substituted_terms=[{'term': 'inside', 'cost_penalty': -1}])
        self.assertNotIn('in', self.g)

    def test_duplicate_term(self):
        with self.assertRaises(DuplicateRuleError):
            self.g.new_invariable_term('in', ['in', 'inside'], substituted_terms=['in'])

class TestTermSequences(unittest.TestCase):
    def setUp(self):
        self.g = Grammar()
        self.do = self.g.new_verb('do', {'one_sg': 'do', 'three_sg': 'does', 'pl': 'do', 'past': 'did'})
        self.have = self.g.new_verb('have', {'one_sg': 'have', 'three_sg': 'has', 'pl': 'have', 'past': 'had'})
        self.neg = self.g.new_invariable_term('not', ['not'])
        self.no = self.g.new_invariable_term('no', ['no'])
        self.they = self.g.new_pronoun('3-pl', {'nom': 'they', 'obj': 'them'})

    def test_verb_sequence(self):
        seq = self.g.new_term_sequence('do-not', 'verb', [[self.do, self.neg]], insertion_cost=3)
        rule = seq.rules[0]
        self.assertFalse(rule.is_terminal)
        self.assertEqual(rule.right, ('do', 'not'))
        self.assertEqual(rule.insertion_cost, 3)
        self.assertEqual(seq.term_type(), 'verb')
        self.assertEqual(seq.default_text, [self.do.text_forms, 'not'])

    def test_verb_sequence_of_one_verb(self):
        seq = self.g.new_term_sequence('own', 'verb', [self.have])
        self.assertEqual(seq.rules[0].right, ('have',))
        self.assertEqual(seq.text_forms, self.have.text_forms)

    def test_verb_sequence_needs_one_verb(self):
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_term_sequence('do-have', 'verb', [[self.do, self.have]])
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_term_sequence('no-not', 'verb', [[self.no, self.neg]])

    def test_substitution_takes_default_text(self):
        seq = self.g.new_term_sequence('do-not', 'verb', [[self.do, self.neg]],
            substituted_terms=[{'term': [self.have, self.neg], 'cost_penalty': 1}])
        rule = seq.rules[1]
        self.assertEqual(rule.right, ('have', 'not'))
        self.assertEqual(rule.text, [self.do.text_forms, 'not'])
        self.assertEqual(rule.cost, 1)

    def test_invariable_sequence(self):
        seq = self.g.new_term_sequence('none', 'invariable', ['none', [self.no, self.neg]])
        self.assertEqual([r.is_terminal for r in seq.rules], [True, False])
        self.assertEqual(seq.default_text, 'none')
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_term_sequence('not-do', 'invariable', [[self.neg, self.do]])

    def test_literal_needs_invariable_sequence(self):
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_term_sequence('dont', 'verb', ['dont'])

    def test_pronoun_sequence(self):
        seq = self.g.new_term_sequence('they-all', 'pronoun', [self.they])
        self.assertEqual(seq.term_type(), 'pronoun')
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_term_sequence('they-not', 'pronoun', [[self.they, self.neg]])

    def test_no_insertion_indexes(self):
        seq = self.g.new_term_sequence('do-not', 'verb', [{'term': [self.do, self.neg], 'no_insertion_indexes': [0]}])
        self.assertEqual(seq.rules[0].no_insertion_indexes, (0,))

    def test_components_must_be_term_sets(self):
        plain = self.g.new_symbol('plain')
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_term_sequence('do-plain', 'verb', [[self.do, plain]])
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_term_sequence('do-x', 'verb', [[self.do, 'x']])

    def test_unknown_kind(self):
        with self.assertRaises(IllFormedOptionsError):
            self.g.new_term_sequence('do-not', 'noun', [[self.do, self.neg]])

if __name__ == '__main__':
    unittest.main()
