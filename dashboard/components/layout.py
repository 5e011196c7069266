"""
Shared layout helpers for dashboard components.

Provides formatting for stat tiles and table cells, the stat tile row,
record tables and the loading/error indicator.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Sequence
import streamlit as st

from config.config import PRICE_DECIMALS, USD_DECIMALS, WEIGHT_DECIMALS
from config.schemas import DashboardStats, Harvest, Investment

HARVEST_COLUMNS = ("Date", "Boat", "Location", "Weight (kg)", "Price/kg")
INVESTMENT_COLUMNS = ("Date", "Investor", "Instrument", "Amount")


def _fixed(value: float, places: int) -> str:
    """Fixed-point text rounded half up, as money is usually shown."""
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def format_weight(kg: float) -> str:
    """Format a total weight, e.g. ``1234.5 kg``."""
    return f"{_fixed(kg, WEIGHT_DECIMALS)} kg"


def format_price_per_kg(price: float) -> str:
    return f"${_fixed(price, PRICE_DECIMALS)}/kg"


def format_usd(amount: float) -> str:
    return f"${_fixed(amount, USD_DECIMALS)}"


def format_cell_number(value: Any) -> str:
    """
    Render a raw backend number for a table cell.

    Whole floats drop the trailing ``.0``; anything that isn't a number is
    shown as-is, and a missing value as an empty cell.
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _record_date(record: Dict[str, Any], key: str) -> str:
    # Older records carry a plain ``date`` field
    return str(record.get(key) or record.get("date") or "")


def harvest_rows(harvests: Sequence[Harvest]) -> List[Dict[str, str]]:
    """Rows for the Recent Harvests table, in collection order."""
    rows = []
    for h in harvests:
        price = format_cell_number(h.get("price_per_kg"))
        rows.append({
            "Date": _record_date(h, "harvest_date"),
            "Boat": str(h.get("boat") or ""),
            "Location": str(h.get("location") or ""),
            "Weight (kg)": format_cell_number(h.get("weight_kg")),
            "Price/kg": f"${price}" if price else "",
        })
    return rows


def investment_rows(investments: Sequence[Investment]) -> List[Dict[str, str]]:
    """Rows for the Recent Investments table, in collection order."""
    rows = []
    for i in investments:
        amount = format_cell_number(i.get("amount_usd"))
        rows.append({
            "Date": _record_date(i, "investment_date"),
            "Investor": str(i.get("investor_name") or ""),
            "Instrument": str(i.get("instrument") or ""),
            "Amount": f"${amount}" if amount else "",
        })
    return rows


def stat_tiles(stats: DashboardStats) -> List[Dict[str, str]]:
    """Label/value pairs for the four stat tiles."""
    return [
        {"label": "Total Catch", "value": format_weight(stats["total_weight"])},
        {"label": "Avg Dock Price", "value": format_price_per_kg(stats["average_price"])},
        {"label": "Est. Revenue", "value": format_usd(stats["estimated_revenue"])},
        {"label": "Total Invested", "value": format_usd(stats["total_invested"])},
    ]


def render_stat_tiles(stats: DashboardStats) -> None:
    """Render the four stat tiles in one row."""
    tiles = stat_tiles(stats)
    for col, tile in zip(st.columns(len(tiles)), tiles):
        with col:
            st.metric(label=tile["label"], value=tile["value"])


def render_records_table(
    title: str,
    rows: List[Dict[str, str]],
    columns: Sequence[str],
    empty_message: Optional[str] = None,
) -> None:
    """
    Render a read-only record table.

    Args:
        title: Table heading
        rows: Pre-formatted rows (see ``harvest_rows`` / ``investment_rows``)
        columns: Column order, used for the header when there are no rows
        empty_message: Caption shown under an empty table
    """
    st.subheader(title)
    if rows:
        st.dataframe(rows, column_order=list(columns), hide_index=True)
    else:
        st.dataframe({c: [] for c in columns}, hide_index=True)
        if empty_message:
            st.caption(empty_message)


NOTIFICATIONS_KEY = "_notifications"


def queue_notification(message: str, level: str = "error") -> None:
    """Keep a message for the next render (survives ``st.rerun``)."""
    st.session_state.setdefault(NOTIFICATIONS_KEY, []).append((level, message))


def render_notifications() -> None:
    """Show and clear queued notifications."""
    for level, message in st.session_state.pop(NOTIFICATIONS_KEY, []):
        if level == "error":
            st.error(f"❌ {message}")
        elif level == "warning":
            st.warning(f"⚠️ {message}")
        else:
            st.success(f"✅ {message}")


def render_status(loading: bool, error: str) -> None:
    """Inline error message and loading indicator."""
    if error:
        st.error(error)
    if loading:
        st.info("Loading...")


def apply_custom_css() -> None:
    """Apply custom CSS styling for the stat tiles."""
    st.markdown("""
    <style>
    [data-testid="stMetric"] {
        background-color: #ffffff;
        border: 1px solid #e6e9ef;
        padding: 1rem 1.25rem;
        border-radius: 0.75rem;
        box-shadow: 0 1px 3px rgba(0, 0, 0, 0.08);
    }

    [data-testid="stMetricLabel"] {
        color: #6b7280;
    }

    h1 {
        color: #047857;
    }
    </style>
    """, unsafe_allow_html=True)
