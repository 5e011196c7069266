"""Project-wide single-source configuration constants for the harvest dashboard."""

from pathlib import Path
from utils.path_utils import find_repo_root

# ----- Base directory configuration -------
PROJECT_ROOT = find_repo_root()
CONFIG_PATH: Path = PROJECT_ROOT / "dashboard.yaml"   # optional YAML overrides
DOTENV_PATH: Path = PROJECT_ROOT / ".env"

# ------ Backend -------
DEFAULT_BACKEND_URL: str = "http://localhost:8000"   # local development backend
BACKEND_URL_ENV: str = "BACKEND_URL"
LEGACY_BACKEND_URL_ENV: str = "VITE_BACKEND_URL"     # name used by older .env files
HARVEST_PATH: str = "/harvest"
INVESTMENT_PATH: str = "/investment"
REQUEST_TIMEOUT_S = None            # None waits forever; set via dashboard.yaml
FETCH_WORKERS: int = 2              # one per collection

# ------ Logging -------
LOG_LEVEL: str = "INFO"
LOG_FILE = None

# ------ Error messages shown to the user -------
FETCH_FAILED_MSG: str = "Failed to fetch data"
SAVE_HARVEST_FAILED_MSG: str = "Failed to save harvest"
SAVE_INVESTMENT_FAILED_MSG: str = "Failed to save investment"

# ------ Forms -------
HARVEST_FIELDS: tuple[str, ...] = (
    "harvest_date", "boat", "location", "weight_kg", "price_per_kg", "notes",
)
INVESTMENT_FIELDS: tuple[str, ...] = (
    "investor_name", "amount_usd", "investment_date", "instrument", "notes",
)
HARVEST_REQUIRED: tuple[str, ...] = HARVEST_FIELDS[:-1]        # notes optional
INVESTMENT_REQUIRED: tuple[str, ...] = INVESTMENT_FIELDS[:-1]
HARVEST_NUMERIC: tuple[str, ...] = ("weight_kg", "price_per_kg")
INVESTMENT_NUMERIC: tuple[str, ...] = ("amount_usd",)

# ------ Display -------
PAGE_TITLE: str = "Lobster Harvest Dashboard"
WEIGHT_DECIMALS: int = 1
PRICE_DECIMALS: int = 2
USD_DECIMALS: int = 0
