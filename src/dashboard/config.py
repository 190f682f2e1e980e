from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

LOG_DIR = PROJECT_ROOT / "logs"
LOG_FILE_NAME = "squad_dashboard.log"

# Remote API (local development server)
API_BASE_URL = "http://localhost:3001"
SQUADS_ENDPOINT = "/api/squads"
MEMBERS_ENDPOINT = "/api/members"
REQUEST_TIMEOUT_SECONDS = 10.0

# Shown for any acquisition failure; partial failures are not distinguished
GENERIC_ERROR_MESSAGE = "Failed to fetch data. Please try again later."

# Ranking
DEFAULT_TOP_N = 3

# Metric columns in chart order
CHART_METRICS = ("performance", "efficiency", "quality")

DASHBOARD_TITLE = "Squad Performance Dashboard"
