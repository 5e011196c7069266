"""Dashboard controller: owns the view state and the user-facing commands.

Key Features:
- ``DashboardState`` holds the two collection snapshots, the loading flag,
  the inline error message and the two form drafts
- ``refresh()`` reads both collections concurrently and replaces them as a pair
- ``submit_harvest()`` / ``submit_investment()`` post a draft, reset it on
  success and re-read the collections
- ``dispatch()`` maps named commands (load, refresh, submit_*) to handlers

Save failures are reported through the ``notify`` callback; fetch failures
are kept in ``state.error``. Neither propagates to the caller.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from config.config import (
    FETCH_WORKERS,
    HARVEST_FIELDS,
    HARVEST_NUMERIC,
    INVESTMENT_FIELDS,
    INVESTMENT_NUMERIC,
)
from config.schemas import (
    DashboardStats,
    Harvest,
    HarvestDraft,
    Investment,
    InvestmentDraft,
    empty_harvest_draft,
    empty_investment_draft,
)
from service.backend_client import BackendClient
from service.errors import FetchFailure, SaveFailure
from service.stats import compute_stats
from utils.logging import get_logger
from utils.parsing import parse_decimal, to_wire_number

logger = get_logger(__name__)

Notifier = Callable[[str], None]


@dataclass
class DashboardState:
    """Everything the page renders from."""
    harvests: List[Harvest] = field(default_factory=list)
    investments: List[Investment] = field(default_factory=list)
    loading: bool = False
    error: str = ""
    harvest_draft: HarvestDraft = field(default_factory=empty_harvest_draft)
    investment_draft: InvestmentDraft = field(default_factory=empty_investment_draft)


def build_payload(draft: Dict[str, str], numeric_fields: tuple) -> Dict[str, Any]:
    """Copy draft fields into a request body, parsing the numeric ones.

    Numbers that fail to parse are still sent (as JSON null); the backend
    decides whether the record is acceptable.
    """
    payload: Dict[str, Any] = dict(draft)
    for name in numeric_fields:
        payload[name] = to_wire_number(parse_decimal(draft.get(name, "")))
    return payload


class DashboardController:
    """Single owner of ``DashboardState``."""

    COMMANDS = ("load", "refresh", "submit_harvest", "submit_investment")

    def __init__(self, client: BackendClient, notify: Optional[Notifier] = None):
        self.client = client
        self.state = DashboardState()
        self._notify = notify or (lambda message: None)
        self._handlers: Dict[str, Callable[[], bool]] = {
            "load": self.refresh,
            "refresh": self.refresh,
            "submit_harvest": self.submit_harvest,
            "submit_investment": self.submit_investment,
        }

    # ----- commands -----

    def dispatch(self, command: str) -> bool:
        """Run a named command handler and return its success flag."""
        handler = self._handlers.get(command)
        if handler is None:
            raise ValueError(f"Unknown command: {command!r} (expected one of {self.COMMANDS})")
        logger.debug(f"Dispatching {command}")
        return handler()

    def refresh(self) -> bool:
        """Re-read both collections; replace them only if both reads succeed."""
        self.state.loading = True
        try:
            with ThreadPoolExecutor(max_workers=FETCH_WORKERS) as pool:
                harvest_future = pool.submit(self.client.list_harvests)
                investment_future = pool.submit(self.client.list_investments)
                # Wait for both before touching state
                harvest_exc = harvest_future.exception()
                investment_exc = investment_future.exception()

            failure = harvest_exc or investment_exc
            if failure is not None:
                raise failure

            harvests = harvest_future.result()
            investments = investment_future.result()
            self.state.harvests = list(harvests)
            self.state.investments = list(investments)
            self.state.error = ""
            logger.info(f"Loaded {len(harvests)} harvests and {len(investments)} investments")
            return True
        except FetchFailure as e:
            self.state.error = e.message
            logger.warning(f"Refresh failed, keeping previous snapshot: {e.message}")
            return False
        finally:
            self.state.loading = False

    def submit_harvest(self) -> bool:
        payload = build_payload(self.state.harvest_draft, HARVEST_NUMERIC)
        try:
            self.client.create_harvest(payload)
        except SaveFailure as e:
            logger.warning(f"Harvest not saved: {e.message}")
            self._notify(e.message)
            return False

        logger.info(f"Saved harvest for boat {payload.get('boat')!r}")
        self.state.harvest_draft = empty_harvest_draft()
        self.refresh()
        return True

    def submit_investment(self) -> bool:
        payload = build_payload(self.state.investment_draft, INVESTMENT_NUMERIC)
        try:
            self.client.create_investment(payload)
        except SaveFailure as e:
            logger.warning(f"Investment not saved: {e.message}")
            self._notify(e.message)
            return False

        logger.info(f"Saved investment from {payload.get('investor_name')!r}")
        self.state.investment_draft = empty_investment_draft()
        self.refresh()
        return True

    # ----- drafts -----

    def update_harvest_draft(self, **fields: str) -> None:
        self._update_draft(self.state.harvest_draft, HARVEST_FIELDS, fields)

    def update_investment_draft(self, **fields: str) -> None:
        self._update_draft(self.state.investment_draft, INVESTMENT_FIELDS, fields)

    @staticmethod
    def _update_draft(draft: Dict[str, str], allowed: tuple, fields: Dict[str, Any]) -> None:
        unknown = [name for name in fields if name not in allowed]
        if unknown:
            raise KeyError(f"Unknown draft field(s): {', '.join(unknown)}")
        for name, value in fields.items():
            draft[name] = "" if value is None else str(value)

    # ----- derived -----

    def stats(self) -> DashboardStats:
        return compute_stats(self.state.harvests, self.state.investments)
