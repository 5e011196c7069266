"""Aggregate statistics shown in the dashboard tiles.

All functions are pure and recomputed on every render. A missing or
non-numeric field counts as zero; nothing here raises.
"""

from typing import Iterable, Sequence

from config.schemas import DashboardStats, Harvest, Investment
from utils.parsing import as_number


def total_weight(harvests: Iterable[Harvest]) -> float:
    return sum((as_number(h.get('weight_kg')) for h in harvests), 0.0)


def average_price(harvests: Sequence[Harvest]) -> float:
    """Simple mean of price_per_kg over all harvests, not weighted by volume."""
    if not harvests:
        return 0.0
    return sum(as_number(h.get('price_per_kg')) for h in harvests) / len(harvests)


def estimated_revenue(harvests: Iterable[Harvest]) -> float:
    return sum(
        (as_number(h.get('weight_kg')) * as_number(h.get('price_per_kg')) for h in harvests),
        0.0,
    )


def total_invested(investments: Iterable[Investment]) -> float:
    return sum((as_number(i.get('amount_usd')) for i in investments), 0.0)


def compute_stats(
    harvests: Sequence[Harvest], investments: Sequence[Investment]
) -> DashboardStats:
    return DashboardStats(
        total_weight=total_weight(harvests),
        average_price=average_price(harvests),
        estimated_revenue=estimated_revenue(harvests),
        total_invested=total_invested(investments),
    )
