import logging
import sys

from .config import LOG_LEVEL


class NamespaceFilter(logging.Filter):
    def __init__(self, allowed_namespaces=None):
        super().__init__()
        self.allowed_namespaces = allowed_namespaces if allowed_namespaces is not None else []

    def filter(self, record):
        if not self.allowed_namespaces:
            return True # If no namespaces are specified, allow all records
        # Allow record if its name starts with any of the allowed namespaces
        return any(record.name.startswith(ns) for ns in self.allowed_namespaces)

log_formatter = logging.Formatter(
    fmt="%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

app_logger = logging.getLogger("tiny_reports")
app_logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(log_formatter)

# --- Namespace-based Filter (Optional) ---
# To only see logs from the report pipeline and not the HTTP shell:
#
# namespace_filter = NamespaceFilter(["tiny_reports.features.reports"])
# console_handler.addFilter(namespace_filter)
#
# An empty or None list lets every record through.

app_logger.addHandler(console_handler)

# Modules use logging.getLogger(__name__), so "tiny_reports.features.reports.service"
# inherits its level from "tiny_reports" unless set here, e.g.:
# logging.getLogger("tiny_reports.features.reports").setLevel(logging.DEBUG)
