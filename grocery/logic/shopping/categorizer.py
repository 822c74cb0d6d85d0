"""Keyword taxonomy for grocery categories.

Matching is a lower-case substring test, categories are tried in declared
order and the first hit wins ("green pepper" is Produce, not Pantry). Names
matching nothing fall into "Other".
"""
from __future__ import annotations
from typing import Iterable, Tuple
from grocery.utilities.constants import OTHER_CATEGORY

Taxonomy = Tuple[Tuple[str, Tuple[str, ...]], ...]


def build_taxonomy(entries: Iterable[Tuple[str, Iterable[str]]]) -> Taxonomy:
    """Freeze (category, keywords) pairs into an ordered, immutable taxonomy."""
    return tuple((category, tuple(k.lower() for k in keywords)) for category, keywords in entries)


DEFAULT_TAXONOMY: Taxonomy = build_taxonomy([
    ('Produce', ['tomato', 'onion', 'garlic', 'carrot', 'celery', 'pepper', 'lettuce', 'spinach',
                 'potato', 'apple', 'banana', 'lemon', 'lime', 'orange', 'cucumber', 'mushroom',
                 'broccoli', 'cauliflower', 'zucchini', 'herbs', 'cilantro', 'parsley', 'basil',
                 'thyme', 'rosemary']),
    ('Meat & Seafood', ['chicken', 'beef', 'pork', 'turkey', 'fish', 'salmon', 'tuna', 'shrimp',
                        'crab', 'lobster', 'bacon', 'ham', 'sausage', 'ground']),
    ('Dairy & Eggs', ['milk', 'cheese', 'butter', 'yogurt', 'cream', 'egg', 'sour cream',
                      'cottage cheese', 'mozzarella', 'cheddar', 'parmesan']),
    ('Pantry & Dry Goods', ['flour', 'sugar', 'salt', 'pepper', 'oil', 'vinegar', 'rice', 'pasta',
                            'bread', 'oats', 'quinoa', 'beans', 'lentils', 'nuts', 'seeds']),
    ('Spices & Seasonings', ['cumin', 'paprika', 'oregano', 'bay leaves', 'cinnamon', 'nutmeg',
                             'ginger', 'turmeric', 'curry', 'chili', 'cayenne']),
    ('Condiments & Sauces', ['ketchup', 'mustard', 'mayo', 'soy sauce', 'hot sauce', 'bbq sauce',
                             'worcestershire', 'honey', 'maple syrup']),
    ('Frozen', ['frozen', 'ice cream']),
    ('Beverages', ['water', 'juice', 'soda', 'beer', 'wine', 'coffee', 'tea']),
    ('Baking', ['baking powder', 'baking soda', 'vanilla', 'extract', 'cocoa', 'chocolate']),
    ('Canned Goods', ['canned', 'can', 'tomato sauce', 'tomato paste', 'broth', 'stock']),
])


class Categorizer:
    def __init__(self, taxonomy: Taxonomy = DEFAULT_TAXONOMY, default: str = OTHER_CATEGORY):
        self.taxonomy = taxonomy
        self.default = default

    @property
    def categories(self):
        return [category for category, _ in self.taxonomy]

    def categorize(self, name: str) -> str:
        n = (name or '').lower()
        for category, keywords in self.taxonomy:
            if any(keyword in n for keyword in keywords):
                return category
        return self.default

    __call__ = categorize


_DEFAULT_CATEGORIZER = Categorizer()


def categorize(name: str) -> str:
    """Category of an ingredient name under the default taxonomy."""
    return _DEFAULT_CATEGORIZER.categorize(name)


__all__ = ['Taxonomy', 'DEFAULT_TAXONOMY', 'Categorizer', 'build_taxonomy', 'categorize']
