"""Rule module used by the command-line tests; leaves one symbol unused."""

def define_rules(g):
    repos = g.new_invariable_term('repos', ['repos', 'repositories'])
    g.start_symbol.add_rule([repos])
    g.new_invariable_term('orphan', ['orphan'])
