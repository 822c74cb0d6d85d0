"""Ingredient line of a recipe: name, amount (text), unit, original free text."""


class IngredientLine:
    def __init__(self, name: str = "", amount: str = "", unit: str = "", original: str = ""):
        self.name = name
        self.amount = amount
        self.unit = unit
        self.original = original

    def __str__(self) -> str:
        return f"{self.name} - {self.amount} {self.unit}".rstrip()

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an IngredientLine from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        amount = d.get("amount")
        return IngredientLine(
            name=d.get("name") or "",
            amount="" if amount is None else str(amount),
            unit=d.get("unit") or "",
            original=d.get("original") or "",
        )

    def to_dict(self):
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "original": self.original,
        }
