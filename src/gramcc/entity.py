"""
Entity categories.

An entity category is a placeholder, such as `{user}`, that the parser
matches against a set of known names. A matched name is passed to the
semantic tree as a literal argument.

>>> cat = EntityCategory('user', ['Danny', {'text': 'Aang', 'id': 'u-2'}])
>>> cat.symbol_name
'{user}'
>>> [(e.text, e.id) for e in cat.entities]
[('Danny', 'Danny'), ('Aang', 'u-2')]
"""

from typing import Optional
from pydantic import field_validator, model_validator
from .errors import IllFormedOptionsError
from .options import Options, check_name

class Entity(Options):
    """One name of a category; `id` defaults to the name."""

    text: str
    id: Optional[str] = None

    @field_validator('text')
    @classmethod
    def _non_empty(cls, value):
        if not value:
            raise ValueError('entity text must be a non-empty string')
        return value

    @model_validator(mode='after')
    def _default_id(self):
        if self.id is None:
            self.id = self.text
        return self

    @classmethod
    def _from_scalar(cls, value):
        return {'text': value}

class EntityCategory:
    def __init__(self, name, entities):
        check_name('entity category name', name)
        if isinstance(entities, str) or not entities:
            raise IllFormedOptionsError('entity category %r needs a non-empty list of entities' % name)
        self.name = name
        self.symbol_name = '{%s}' % name
        self.entities = [Entity.coerce(e) for e in entities]

        seen = set()
        for e in self.entities:
            if e.text.lower() in seen:
                raise IllFormedOptionsError('duplicate entity %r in category %r' % (e.text, name))
            seen.add(e.text.lower())

    def to_dict(self):
        return {
            'symbol': self.symbol_name,
            'entities': [dict(e.items()) for e in self.entities],
            }

    def __repr__(self):
        return '<EntityCategory %s (%d entities)>' % (self.name, len(self.entities))
