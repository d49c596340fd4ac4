"""
Reports Service Module

This module wires the report pipeline together: the visibility filter decides
which items the user may see, the aggregator totals exactly those items, and
the renderer turns both into CSV or HTML text.

Every call works only on its own arguments and returns a fresh string, so a
ReportGenerator can be shared between concurrent requests.
"""

import logging
from typing import Any, Iterable, Optional, Union

from ...core import config
from . import aggregator, renderer, visibility
from .schemas import Item, ReportFormat, ReportOutcome, ReportType, User, Visibility

logger = logging.getLogger(__name__)


class ReportGenerator:
    """
    Generates role-filtered CSV/HTML reports.

    Args:
        database: Data-access handle kept for callers that load items; the
            pipeline itself never touches it
        policy: Priority threshold and visibility limit, defaulting to config
        strict: Raise on unknown roles and report types instead of returning
            an empty report, defaulting to config.STRICT_MODE
        escape: Escape fields before embedding them, defaulting to
            config.ESCAPE_FIELDS
    """

    def __init__(
        self,
        database: Any = None,
        policy: Optional[visibility.ReportPolicy] = None,
        strict: Optional[bool] = None,
        escape: Optional[bool] = None,
    ):
        self.db = database
        self.policy = policy or visibility.ReportPolicy()
        self.strict = config.STRICT_MODE if strict is None else strict
        self.escape = config.ESCAPE_FIELDS if escape is None else escape

    def build_report(
        self, report_type: Union[ReportType, str, None], user: User, items: Iterable[Item]
    ) -> ReportOutcome:
        """
        Runs the pipeline once and reports how the output was produced.

        Args:
            report_type: CSV or HTML
            user: The viewer the report is generated for
            items: Input items; they are never modified

        Returns:
            ReportOutcome: The trimmed report text together with the resolved
            visibility and format, the number of visible items and the total.

        Raises:
            UnknownRoleError: In strict mode, for an unrecognized role.
            UnsupportedReportTypeError: In strict mode, for an unrecognized report type.
        """
        report_format = renderer.resolve_format(report_type, strict=self.strict)
        role_visibility = visibility.resolve_visibility(user.role, strict=self.strict)

        visible_items = visibility.filter_items(role_visibility, items, self.policy)
        total = aggregator.total(visible_items)
        content = renderer.render(
            report_type, user, visible_items, total,
            escape=self.escape, report_format=report_format,
        ).strip()

        logger.debug(
            f"Built {report_format.value} report for role {user.role!r}: "
            f"{role_visibility.value} visibility, {len(visible_items)} item(s), total {total}"
        )
        if report_format is ReportFormat.UNSUPPORTED:
            logger.warning(f"Unsupported report type {report_type!r}, returning an empty report")
        elif role_visibility is Visibility.DENIED:
            logger.warning(f"Unrecognized role {user.role!r}, no items are visible")

        return ReportOutcome(
            content=content,
            visibility=role_visibility,
            report_format=report_format,
            item_count=len(visible_items),
            total=total,
        )

    def generate_report(
        self, report_type: Union[ReportType, str, None], user: User, items: Iterable[Item]
    ) -> str:
        """Returns only the report text of build_report."""
        return self.build_report(report_type, user, items).content


def generate_report(report_type: Union[ReportType, str, None], user: User, items: Iterable[Item]) -> str:
    return ReportGenerator().generate_report(report_type, user, items)
