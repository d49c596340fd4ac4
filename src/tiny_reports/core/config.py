import os

# In a real deployment, load from environment variables or a config file
PRIORITY_THRESHOLD: int = int(os.getenv("REPORT_PRIORITY_THRESHOLD", "1000"))
VISIBILITY_LIMIT: int = int(os.getenv("REPORT_VISIBILITY_LIMIT", "500"))

# Strict mode raises on unknown roles/report types instead of rendering an empty report
STRICT_MODE: bool = os.getenv("REPORT_STRICT_MODE", "False").lower() in ("true", "1", "t")
# Off by default: existing consumers expect fields interpolated as-is
ESCAPE_FIELDS: bool = os.getenv("REPORT_ESCAPE_FIELDS", "False").lower() in ("true", "1", "t")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
