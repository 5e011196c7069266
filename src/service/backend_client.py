"""HTTP client for the harvest/investment backend.

Wraps the four endpoints the dashboard consumes:

- ``GET  {base_url}/harvest``     -> list of harvest records
- ``GET  {base_url}/investment``  -> list of investment records
- ``POST {base_url}/harvest``     -> create a harvest
- ``POST {base_url}/investment``  -> create an investment

Any non-2xx status, network error or undecodable body is reported as
:class:`FetchFailure` (reads) or :class:`SaveFailure` (writes). There is no
retry here; callers decide what to do with a failure.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, List, Optional

import requests

from config.config import (
    FETCH_FAILED_MSG,
    HARVEST_PATH,
    INVESTMENT_PATH,
    SAVE_HARVEST_FAILED_MSG,
    SAVE_INVESTMENT_FAILED_MSG,
)
from config.models import DashboardConfig
from config.schemas import Harvest, Investment
from service.errors import FetchFailure, SaveFailure
from utils.decorators import timer
from utils.logging import get_logger

logger = get_logger(__name__)


def _is_success(resp: requests.Response) -> bool:
    # resp.ok is also true for 3xx
    return 200 <= resp.status_code < 300


class BackendClient:
    """Thin ``requests`` wrapper around the backend collections.

    ``requests.Session`` is not thread-safe and the two reads of a refresh
    run on separate pool threads, so each thread gets its own session from
    ``session_factory``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self.base_url = (base_url or "").rstrip("/")
        self.timeout = timeout
        self._session_factory = session_factory
        self._local = threading.local()
        self._sessions: List[requests.Session] = []
        self._lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        """The calling thread's session, created on first use."""
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            self._local.session = session
            with self._lock:
                self._sessions.append(session)
        return session

    @classmethod
    def from_config(cls, config: DashboardConfig) -> 'BackendClient':
        return cls(config.base_url, timeout=config.request_timeout_s)

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    # ----- reads -----

    def _get_list(self, path: str) -> List[Dict[str, Any]]:
        url = self.url(path)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"GET {url} failed: {e}")
            raise FetchFailure(FETCH_FAILED_MSG) from e

        logger.debug(f"GET {url} -> {resp.status_code}")
        if not _is_success(resp):
            logger.warning(f"GET {url} returned HTTP {resp.status_code}")
            raise FetchFailure(FETCH_FAILED_MSG, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning(f"GET {url} returned a non-JSON body")
            raise FetchFailure(FETCH_FAILED_MSG, status_code=resp.status_code) from e

        if not isinstance(data, list):
            logger.warning(f"GET {url} returned {type(data).__name__}, expected a list")
            raise FetchFailure(FETCH_FAILED_MSG, status_code=resp.status_code)
        return data

    @timer
    def list_harvests(self) -> List[Harvest]:
        return self._get_list(HARVEST_PATH)

    @timer
    def list_investments(self) -> List[Investment]:
        return self._get_list(INVESTMENT_PATH)

    # ----- writes -----

    def _post(self, path: str, payload: Dict[str, Any], failure_msg: str) -> None:
        url = self.url(path)
        try:
            resp = self.session.post(url, json=payload, timeout=self.timeout)
        except (requests.RequestException, ValueError) as e:
            # ValueError covers payloads requests refuses to encode
            logger.warning(f"POST {url} failed: {e}")
            raise SaveFailure(failure_msg) from e

        logger.debug(f"POST {url} -> {resp.status_code}")
        if not _is_success(resp):
            snippet = (resp.text or "").strip().replace("\n", " ")[:240]
            logger.warning(f"POST {url} returned HTTP {resp.status_code}: {snippet}")
            raise SaveFailure(failure_msg, status_code=resp.status_code)

    def create_harvest(self, payload: Dict[str, Any]) -> None:
        self._post(HARVEST_PATH, payload, SAVE_HARVEST_FAILED_MSG)

    def create_investment(self, payload: Dict[str, Any]) -> None:
        self._post(INVESTMENT_PATH, payload, SAVE_INVESTMENT_FAILED_MSG)

    def close(self) -> None:
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()
        self._local = threading.local()
