"""
Option schemas for the grammar builders.

Each builder accepts its structured options either as an instance of
the matching model below or as a plain dict, which is validated on the
spot. Validation covers the complete option set, so a builder can
reject bad input before it touches the grammar.

>>> forms = VerbForms.coerce({'one_sg': 'am', 'three_sg': 'is', 'pl': 'are', 'past': 'was'})
>>> forms.text_forms() == {'one_sg': 'am', 'three_sg': 'is', 'pl': 'are', 'past': 'was'}
True
>>> VerbForms.coerce({'one_sg': 'am', 'three_sg': 'is', 'pl': 'are'})
Traceback (most recent call last):
    ...
gramcc.errors.IllFormedOptionsError: VerbForms: missing required option(s): past
>>> PronounForms.coerce({'nom': 'he', 'obj': 'him', 'poss': 'his'})
Traceback (most recent call last):
    ...
gramcc.errors.IllFormedOptionsError: PronounForms: unrecognized option(s): poss
>>> VerbForms.coerce({'one_sg': 'like', 'three_sg': 'likes', 'pl': 'like', 'past': 'did like'})
Traceback (most recent call last):
    ...
gramcc.errors.MalformedTerminalError: verb form past contains whitespace: 'did like'
"""

import re
from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from .errors import IllFormedOptionsError, MalformedTerminalError

_whitespace_re = re.compile(r'\s')

def is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)

def check_cost(what, value, optional=True):
    """Raises `IllFormedOptionsError` unless `value` is a nonnegative number.

    >>> check_cost('insertion_cost', None)
    >>> check_cost('insertion_cost', -1)
    Traceback (most recent call last):
        ...
    gramcc.errors.IllFormedOptionsError: insertion_cost must be a nonnegative number, got -1
    """
    if value is None and optional:
        return
    if not is_number(value) or value < 0:
        raise IllFormedOptionsError('%s must be a nonnegative number, got %r' % (what, value))

def check_name(what, value):
    if not isinstance(value, str) or not value:
        raise IllFormedOptionsError('%s must be a non-empty string, got %r' % (what, value))

def check_literal(literal, what='terminal symbol'):
    """Raises `MalformedTerminalError` unless `literal` is a single token.

    >>> check_literal('likes')
    >>> check_literal('subscribe to', 'verb form')
    Traceback (most recent call last):
        ...
    gramcc.errors.MalformedTerminalError: verb form contains whitespace: 'subscribe to'
    """
    if not isinstance(literal, str) or not literal:
        raise MalformedTerminalError('%s must be a non-empty string, got %r' % (what, literal))
    if _whitespace_re.search(literal):
        raise MalformedTerminalError('%s contains whitespace: %r' % (what, literal))

class _LiteralError(ValueError):
    pass

def _check_token(value, what):
    if not value:
        raise _LiteralError('%s must be a non-empty string, got %r' % (what, value))
    if _whitespace_re.search(value):
        raise _LiteralError('%s contains whitespace: %r' % (what, value))
    return value

def _options_error(name, e):
    """Converts a pydantic `ValidationError` into the matching grammar error."""
    errors = e.errors()
    for err in errors:
        cause = err.get('ctx', {}).get('error')
        if isinstance(cause, _LiteralError):
            return MalformedTerminalError(str(cause))

    unknown = sorted(str(err['loc'][0]) for err in errors if err['type'] == 'extra_forbidden')
    if unknown:
        return IllFormedOptionsError('%s: unrecognized option(s): %s' % (name, ', '.join(unknown)))
    missing = [str(err['loc'][0]) for err in errors if err['type'] == 'missing']
    if missing:
        return IllFormedOptionsError('%s: missing required option(s): %s' % (name, ', '.join(missing)))

    details = []
    for err in errors:
        cause = err.get('ctx', {}).get('error')
        loc = '.'.join(str(part) for part in err['loc'])
        details.append('%s: %s' % (loc, cause if cause is not None else err['msg']))
    return IllFormedOptionsError('%s: %s' % (name, '; '.join(details)))

class Options(BaseModel):
    """A fixed set of named options, validated on construction."""

    model_config = ConfigDict(extra='forbid')

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if not isinstance(value, dict):
            value = cls._from_scalar(value)
        try:
            return cls.model_validate(value)
        except ValidationError as e:
            raise _options_error(cls.__name__, e) from None

    @classmethod
    def _from_scalar(cls, value):
        raise IllFormedOptionsError('%s: expected a dict, got %r' % (cls.__name__, value))

    def items(self):
        """Yields the options that are set, in declaration order."""
        for k in type(self).model_fields:
            v = getattr(self, k)
            if v is not None:
                yield k, v

class VerbForms(Options):
    """The inflections of a verb.

    The person-number forms and `past` make up the display record used
    for conjugation. The subjunctive and participle forms are accepted
    spellings only; when matched they display one of the first four.
    """

    one_sg: str
    three_sg: str
    pl: str
    past: str
    present_subjunctive: Optional[str] = None
    present_participle: Optional[str] = None
    past_participle: Optional[str] = None

    @field_validator('*')
    @classmethod
    def _single_token(cls, value, info):
        if value is not None:
            _check_token(value, 'verb form %s' % info.field_name)
        return value

    def text_forms(self):
        return dict((k, getattr(self, k)) for k in ('one_sg', 'three_sg', 'pl', 'past'))

class PronounForms(Options):
    """The nominative and objective case forms of a pronoun."""

    nom: str
    obj: str

    @field_validator('*')
    @classmethod
    def _single_token(cls, value, info):
        return _check_token(value, 'pronoun form %s' % info.field_name)

    def text_forms(self):
        return dict(self.items())

class SubstitutedTerm(Options):
    """A term that is accepted on input but displayed as a set's default text.

    >>> SubstitutedTerm.coerce('tho').cost_penalty
    0
    >>> SubstitutedTerm.coerce({'term': 'tho', 'cost_penalty': 0.5}).cost_penalty
    0.5
    >>> SubstitutedTerm.coerce({'term': 'tho', 'cost_penalty': -1})
    Traceback (most recent call last):
        ...
    gramcc.errors.IllFormedOptionsError: SubstitutedTerm: cost_penalty: cost_penalty must be a nonnegative number, got -1
    """

    term: Any
    cost_penalty: Optional[Union[int, float]] = 0

    @field_validator('cost_penalty', mode='before')
    @classmethod
    def _nonnegative(cls, value):
        if value is None:
            return 0
        if not is_number(value) or value < 0:
            raise ValueError('cost_penalty must be a nonnegative number, got %r' % (value,))
        return value

    @classmethod
    def _from_scalar(cls, value):
        return {'term': value}
