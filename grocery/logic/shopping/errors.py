"""Errors raised or reported by the grocery aggregation pipeline."""


class InvalidInput(ValueError):
    """Recipe set is empty or not a sequence."""


class PartialResultWarning(UserWarning):
    """Some requested recipes could not be resolved; the list is built from the rest."""

    def __init__(self, missing_ids):
        self.missing_ids = list(missing_ids)
        super().__init__(f"Some recipes not found: {', '.join(self.missing_ids)}")


__all__ = ['InvalidInput', 'PartialResultWarning']
