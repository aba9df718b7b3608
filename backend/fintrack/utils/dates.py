"""Calendar date and month utilities."""
import re
from datetime import date, datetime, timezone
from typing import Optional

_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(s: str) -> date:
    """
    Parse an ISO 8601 calendar day ("YYYY-MM-DD").

    Raises:
        ValueError: If the string is not a valid calendar day
    """
    if not s:
        raise ValueError("Date is required")

    s = s.strip()
    if not _DATE_RE.match(s):
        raise ValueError(f"Invalid date: {s}. Expected YYYY-MM-DD")

    # Rejects impossible days such as 2024-02-30
    return date.fromisoformat(s)


def current_month(now: Optional[datetime] = None) -> str:
    """Return the reference month ("YYYY-MM") in UTC."""
    reference = now if now else datetime.now(timezone.utc)
    return reference.strftime("%Y-%m")


def validate_month(month: str) -> str:
    """Check a "YYYY-MM" month string."""
    if not _MONTH_RE.match(month or ""):
        raise ValueError(f"Invalid month: {month}. Expected YYYY-MM")
    return month
