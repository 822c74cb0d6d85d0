"""Merge collected ingredient lines into one AggregatedItem per normalized name.

The first line seen for a name fixes the item's unit and amount basis. Later
lines are summed into the running amount only when the unit is textually
equal and both amounts are numeric; everything else is kept as an
alternative amount. A running total that overflowed to inf stops accepting
contributions. A name whose first amount is free text ("to taste")
therefore never starts a numeric sum of its own.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable
from grocery.domain.AggregatedItem import AggregatedItem, AlternativeAmount, ProvenanceRecord
from grocery.domain.Amount import Numeric, parse_amount
from grocery.logic.shopping.collector import CollectedLine

logger = logging.getLogger(__name__)


def _provenance(line: CollectedLine) -> ProvenanceRecord:
    return ProvenanceRecord(line.recipe_id, line.recipe_name, line.raw_amount, line.multiplier)


def _scaled(line: CollectedLine):
    amount = parse_amount(line.raw_amount)
    if isinstance(amount, Numeric):
        return amount.scaled(line.multiplier)
    return amount


def _summable(amount) -> bool:
    return isinstance(amount, Numeric) and amount.is_finite


def merge(lines: Iterable[CollectedLine]) -> Dict[str, AggregatedItem]:
    """Return normalized name -> AggregatedItem, in first-seen order."""
    items: Dict[str, AggregatedItem] = {}
    for line in lines:
        incoming = _scaled(line)
        existing = items.get(line.normalized_name)
        if existing is None:
            items[line.normalized_name] = AggregatedItem(
                name=line.display_name,
                amount=incoming,
                unit=line.unit,
                original=line.original,
                recipes=[_provenance(line)],
            )
            continue

        if (existing.unit == line.unit
                and _summable(existing.amount)
                and _summable(incoming)):
            existing.amount = existing.amount.plus(incoming)
            existing.recipes.append(_provenance(line))
        else:
            logger.debug("Keeping %r from %s apart: %s %s vs %s %s", line.normalized_name,
                         line.recipe_id, incoming.format(), line.unit,
                         existing.amount.format(), existing.unit)
            existing.alternative_amounts.append(AlternativeAmount(
                amount=incoming.format(),
                unit=line.unit,
                original=line.original,
                recipe_id=line.recipe_id,
                recipe_name=line.recipe_name,
                multiplier=line.multiplier,
            ))
    return items


__all__ = ['merge']
