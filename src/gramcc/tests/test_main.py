import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr
from gramcc.__main__ import _main
from gramcc.serializer import load_artifact

class TestMain(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.mkdtemp()
        self.path = os.path.join(self.dir, 'grammar.json')

    def tearDown(self):
        shutil.rmtree(self.dir)

    def run_main(self, *args):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            res = _main(['-q', '-o', self.path] + list(args))
        return res, out.getvalue(), err.getvalue()

    def test_build(self):
        res, out, err = self.run_main()
        self.assertEqual(res, 0)
        doc = load_artifact(self.path)
        self.assertEqual(doc['start_symbol'], 'start')
        self.assertEqual(out, 'Rules: %d\n' % sum(len(rules) for rules in doc['grammar'].values()))
        self.assertEqual(list(doc['grammar'])[0], 'start')

    def test_rebuild_reports_no_change(self):
        self.run_main()
        with open(self.path) as fin:
            first = fin.read()
        res, out, err = self.run_main()
        self.assertEqual(res, 0)
        self.assertNotIn('->', out)
        with open(self.path) as fin:
            self.assertEqual(fin.read(), first)

    def test_delta(self):
        with open(self.path, 'w') as fout:
            fout.write('{"grammar": {"start": [{}]}}')
        res, out, err = self.run_main()
        self.assertEqual(res, 0)
        self.assertTrue(out.startswith('Rules: 1 -> '), out)
        self.assertIn('(+', out)

    def test_unreadable_previous_artifact(self):
        with open(self.path, 'w') as fout:
            fout.write('not json')
        with self.assertLogs('gramcc', level='WARNING'):
            res, out, err = self.run_main()
        self.assertEqual(res, 0)
        self.assertNotIn('->', out)

    def test_previous_artifact_not_an_object(self):
        for text in ('[]', '{"grammar": []}'):
            with self.subTest(text=text):
                with open(self.path, 'w') as fout:
                    fout.write(text)
                with self.assertLogs('gramcc', level='WARNING'):
                    res, out, err = self.run_main()
                self.assertEqual(res, 0)
                self.assertNotIn('->', out)

    def test_print_grammar(self):
        res, out, err = self.run_main('--print-grammar')
        self.assertEqual(res, 0)
        self.assertTrue(out.startswith('# start\n'))
        self.assertIn('start ::= user-obj-filter people. [1] (transposed)', out)

    def test_unused_components(self):
        res, out, err = self.run_main('gramcc.tests.rules_with_orphan')
        self.assertEqual(res, 1)
        self.assertIn('unused symbol: orphan', err)
        self.assertFalse(os.path.exists(self.path))

        res, out, err = self.run_main('--no-check', 'gramcc.tests.rules_with_orphan')
        self.assertEqual(res, 0)
        self.assertIn('orphan', load_artifact(self.path)['grammar'])

    def test_several_modules(self):
        res, out, err = self.run_main('gramcc.tests.rules_with_orphan', 'gramcc.tests.rules_with_orphan')
        self.assertEqual(res, 1)
        self.assertIn('Duplicate symbol name', err)

    def test_bad_modules(self):
        res, out, err = self.run_main('gramcc.tests.no_such_module')
        self.assertEqual(res, 1)
        self.assertIn('no_such_module', err)

        res, out, err = self.run_main('gramcc.errors')
        self.assertEqual(res, 1)
        self.assertIn('define_rules', err)
        self.assertFalse(os.path.exists(self.path))

if __name__ == '__main__':
    unittest.main()
