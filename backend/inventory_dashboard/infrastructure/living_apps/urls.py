"""Record URL helpers: stateless string utilities, no I/O."""

import re

DEFAULT_BASE_URL = "https://my.living-apps.de/rest"

_RECORD_ID_SUFFIX = re.compile(r"([a-f0-9]{24})$", re.IGNORECASE)


def extract_record_id(url: str | None) -> str | None:
    """Return the 24-character hex record id ending ``url``, or None."""
    if not url:
        return None
    match = _RECORD_ID_SUFFIX.search(url)
    return match.group(1) if match else None


def create_record_url(
    app_id: str, record_id: str, base_url: str = DEFAULT_BASE_URL
) -> str:
    """Build the canonical URL of a record, e.g. for use as a reference value."""
    return f"{base_url.rstrip('/')}/apps/{app_id}/records/{record_id}"
