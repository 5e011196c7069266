"""Backend connectivity checks for the System Test panel."""

import time
from typing import Callable, Dict, List, Tuple

from config.config import HARVEST_PATH, INVESTMENT_PATH
from config.schemas import CheckResult
from service.backend_client import BackendClient
from service.errors import FetchFailure
from utils.logging import get_logger

logger = get_logger(__name__)


def _run_check(name: str, url: str, read: Callable[[], list]) -> CheckResult:
    start = time.perf_counter()
    try:
        records = read()
    except FetchFailure as e:
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        cause = e.__cause__
        if e.status_code is not None:
            detail = f"HTTP {e.status_code}"
        elif cause is not None:
            detail = f"{type(cause).__name__}: {cause}"
        else:
            detail = e.message
        return CheckResult(name=name, url=url, ok=False, detail=detail,
                           elapsed_ms=elapsed_ms, count=0)

    elapsed_ms = int((time.perf_counter() - start) * 1000)
    return CheckResult(name=name, url=url, ok=True, detail=f"{len(records)} records",
                       elapsed_ms=elapsed_ms, count=len(records))


def run_system_test(client: BackendClient) -> List[CheckResult]:
    """Probe each collection endpoint once and report what happened."""
    checks: List[Tuple[str, str, Callable[[], list]]] = [
        ("Harvest collection", client.url(HARVEST_PATH), client.list_harvests),
        ("Investment collection", client.url(INVESTMENT_PATH), client.list_investments),
    ]
    results = [_run_check(name, url, read) for name, url, read in checks]
    for r in results:
        logger.info(f"System test {r['name']}: {'ok' if r['ok'] else 'FAILED'} ({r['detail']}, {r['elapsed_ms']}ms)")
    return results


def summarize(results: List[CheckResult]) -> Dict[str, object]:
    passed = sum(1 for r in results if r['ok'])
    return {
        "status": "ok" if results and passed == len(results) else "failed",
        "passed": passed,
        "total": len(results),
    }
