"""
Allowed values for schedule platforms and statuses.
"""
from typing import Optional

PLATFORMS = ("facebook", "twitter", "instagram")
STATUSES = ("pending", "published", "failed")

STATUS_PENDING = "pending"
STATUS_PUBLISHED = "published"
STATUS_FAILED = "failed"


def normalize_platform(platform: Optional[str]) -> Optional[str]:
    """Lowercase a platform name; platforms are always stored lowercase."""
    if platform is None:
        return None
    return platform.strip().lower()


def _in_clause(column: str, values) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"


PLATFORM_CHECK = _in_clause("platform", PLATFORMS)
STATUS_CHECK = _in_clause("status", STATUSES)
