"""
Exceptions raised while building a grammar.

Every error aborts the build; nothing is written once one is raised.
"""

class GrammarError(Exception):
    """Base class for all build errors."""

class IllFormedOptionsError(GrammarError):
    """Raised if the options passed to a builder do not match its schema."""

class DuplicateSymbolError(GrammarError):
    """Raised if a symbol name is registered twice."""
    def __init__(self, name):
        GrammarError.__init__(self, 'Duplicate symbol name: %r' % name)
        self.name = name

class DuplicateRuleError(GrammarError):
    """Raised if a symbol already has a rule with the same right-hand side."""
    def __init__(self, symbol_name, rhs):
        GrammarError.__init__(self, 'Duplicate rule: %s -> %s' % (symbol_name, ' '.join(rhs)))
        self.symbol_name = symbol_name
        self.rhs = rhs

class UnknownSymbolError(GrammarError):
    """Raised if a rule refers to a symbol the grammar does not own."""

class MalformedTerminalError(GrammarError):
    """Raised if a terminal literal is empty or contains whitespace."""

class ArityError(GrammarError):
    """Raised if a semantic function is applied to too few or too many arguments."""

class UnusedComponentsError(GrammarError):
    """Raised after a check that found unused symbols, semantics or entities.

    All findings of a single check are carried in `findings`.
    """
    def __init__(self, findings):
        GrammarError.__init__(self, '%d unused grammar component(s):\n%s' % (
            len(findings), '\n'.join('  %s' % (f,) for f in findings)))
        self.findings = findings

class DuplicateSemanticError(GrammarError):
    """Raised if a semantic function name is registered twice."""
    def __init__(self, name):
        GrammarError.__init__(self, 'Duplicate semantic name: %r' % name)
        self.name = name
