# coverageplanner/export/utils.py
import re
from datetime import datetime, timezone

def safe_filename(name: str) -> str:
    return re.sub(r'[^a-z0-9]', '_', name, flags=re.IGNORECASE)

def export_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()
