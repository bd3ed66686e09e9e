"""
Builds the grammar defined by a list of rule modules and writes it
to a JSON file for the parser.

Each module must provide `define_rules(grammar)`; the modules are
called in order against one shared grammar.
"""

import importlib
import logging
import sys
from argparse import ArgumentParser
from .grammar import Grammar
from .errors import GrammarError
from .printer import format_grammar, format_rule_count
from .serializer import previous_rule_count

logger = logging.getLogger('gramcc')

def build_grammar(module_names):
    g = Grammar()
    for name in module_names:
        module = importlib.import_module(name)
        define_rules = getattr(module, 'define_rules', None)
        if define_rules is None:
            raise GrammarError('module %r does not define define_rules(grammar)' % name)
        logger.debug('Defining rules from %s', name)
        define_rules(g)
    return g

def _previous_rule_count(path):
    try:
        return previous_rule_count(path)
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.warning('Ignoring unreadable previous grammar %s: %s', path, e)
        return None

def _main(argv=None):
    ap = ArgumentParser(prog='gramcc')
    ap.add_argument('-o', '--output', default='grammar.json', help='The file to store the compiled grammar to')
    ap.add_argument('--print-grammar', action='store_true', help='Print the rules of the compiled grammar')
    ap.add_argument('--no-check', action='store_true', help='Do not check for unused symbols, semantics and entities')
    ap.add_argument('-v', '--verbose', action='store_true', help='Log every derivation step')
    ap.add_argument('-q', '--quiet', action='store_true', help='Log warnings and errors only')
    ap.add_argument('modules', nargs='*', default=['gramcc.rules'], help='The rule modules to build the grammar from')
    args = ap.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    try:
        g = build_grammar(args.modules)
        g.create_edit_rules()
        if not args.no_check:
            g.check_for_unused_components()
        g.sort()
        previous = _previous_rule_count(args.output)
        g.write(args.output)
    except ImportError as e:
        print('error: %s' % e, file=sys.stderr)
        return 1
    except GrammarError as e:
        print('error: %s' % e, file=sys.stderr)
        return 1

    if args.print_grammar:
        print(format_grammar(g))
    print(format_rule_count(g.rule_count(), previous))
    return 0

if __name__ == '__main__':
    sys.exit(_main())
