from .grammar import Grammar, Symbol, hyphenate
from .rule import Rule, Child, EMPTY_SYMBOL, INT_SYMBOL
from .semantic import SemanticFunction, SemanticNode
from .options import VerbForms, PronounForms, SubstitutedTerm
from .errors import (GrammarError, IllFormedOptionsError, DuplicateSymbolError, DuplicateRuleError,
    DuplicateSemanticError, UnknownSymbolError, MalformedTerminalError, ArityError, UnusedComponentsError)
