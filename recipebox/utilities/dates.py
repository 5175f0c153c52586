"""Date helpers shared by the repositories and the API."""
from datetime import date, datetime, timezone

from recipebox.utilities.constants import DATE_KEY_FORMAT


def now_iso() -> str:
    '''UTC timestamp like "2024-06-10T14:03:22.517Z".'''
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_date_key(value: str) -> date:
    """Parse a YYYY-MM-DD key. Raises ValueError on anything else."""
    return datetime.strptime(value, DATE_KEY_FORMAT).date()
