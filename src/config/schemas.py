"""Schema definitions for structured data used in the project."""

from typing import TypedDict


class Harvest(TypedDict, total=False):
    _id: str            # assigned by the backend
    harvest_date: str   # ISO date, YYYY-MM-DD
    boat: str
    location: str
    weight_kg: float
    price_per_kg: float
    notes: str


class Investment(TypedDict, total=False):
    _id: str
    investor_name: str
    amount_usd: float
    investment_date: str
    instrument: str
    notes: str


class HarvestDraft(TypedDict):
    harvest_date: str
    boat: str
    location: str
    weight_kg: str
    price_per_kg: str
    notes: str


class InvestmentDraft(TypedDict):
    investor_name: str
    amount_usd: str
    investment_date: str
    instrument: str
    notes: str


class DashboardStats(TypedDict):
    total_weight: float
    average_price: float
    estimated_revenue: float
    total_invested: float


class CheckResult(TypedDict):
    name: str
    url: str
    ok: bool
    detail: str
    elapsed_ms: int
    count: int


def empty_harvest_draft() -> HarvestDraft:
    return HarvestDraft(
        harvest_date="", boat="", location="", weight_kg="", price_per_kg="", notes=""
    )


def empty_investment_draft() -> InvestmentDraft:
    return InvestmentDraft(
        investor_name="", amount_usd="", investment_date="", instrument="", notes=""
    )
