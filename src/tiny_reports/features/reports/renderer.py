"""
Report Renderer Module

Turns the visible items and their total into CSV or HTML text. Each report is
built as header + body + footer, and each of those stages is keyed on the
resolved ReportFormat. An unsupported report type renders every stage as an
empty string.

By default fields are interpolated as-is. Passing escape=True quotes CSV fields
(RFC 4180) and HTML-escapes text, which changes the output for values that
contain commas, quotes, newlines or markup.
"""

import csv
import html
import io
from typing import Any, Iterable, Optional

from ...core.errors import UnsupportedReportTypeError
from .schemas import AnnotatedItem, Number, ReportFormat, ReportType, User

CSV_HEADER = "ID,NOME,VALOR,USUARIO"
PRIORITY_STYLE = 'style="font-weight:bold;"'

_FORMATS = {
    ReportType.CSV.value: ReportFormat.CSV,
    ReportType.HTML.value: ReportFormat.HTML,
}


def resolve_format(report_type: Any, strict: bool = False) -> ReportFormat:
    """
    Maps a report type selector to the format that renders it.

    Raises:
        UnsupportedReportTypeError: If strict is set and the type is unrecognized.
    """
    key = report_type.value if isinstance(report_type, ReportType) else report_type
    report_format = _FORMATS.get(key, ReportFormat.UNSUPPORTED) if isinstance(key, str) else ReportFormat.UNSUPPORTED
    if report_format is ReportFormat.UNSUPPORTED and strict:
        raise UnsupportedReportTypeError(report_type)
    return report_format


def _text(value) -> str:
    return "" if value is None else str(value)


def _csv_line(fields, escape: bool) -> str:
    if not escape:
        return ",".join(_text(f) for f in fields) + "\n"
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow([_text(f) for f in fields])
    return buf.getvalue()


def _html_field(value, escape: bool) -> str:
    text = _text(value)
    return html.escape(text) if escape else text


def render_header(report_format: ReportFormat, user: User, escape: bool = False) -> str:
    if report_format is ReportFormat.CSV:
        return CSV_HEADER + "\n"
    if report_format is ReportFormat.HTML:
        return (
            "<html><body>\n"
            "<h1>Relatório</h1>\n"
            f"<h2>Usuário: {_html_field(user.name, escape)}</h2>\n"
            "<table>\n"
            "<tr><th>ID</th><th>Nome</th><th>Valor</th></tr>\n"
        )
    return ""


def render_row(report_format: ReportFormat, item: AnnotatedItem, user: User, escape: bool = False) -> str:
    if report_format is ReportFormat.CSV:
        return _csv_line((item.id, item.name, item.value, user.name), escape)
    if report_format is ReportFormat.HTML:
        style = PRIORITY_STYLE if item.priority else ""
        return (
            f"<tr {style}>"
            f"<td>{_html_field(item.id, escape)}</td>"
            f"<td>{_html_field(item.name, escape)}</td>"
            f"<td>{_html_field(item.value, escape)}</td>"
            "</tr>\n"
        )
    return ""


def render_body(
    report_format: ReportFormat, visible_items: Iterable[AnnotatedItem], user: User, escape: bool = False
) -> str:
    return "".join(render_row(report_format, item, user, escape) for item in visible_items)


def render_footer(report_format: ReportFormat, total: Number) -> str:
    if report_format is ReportFormat.CSV:
        return f"\nTotal,,\n{total},,\n"
    if report_format is ReportFormat.HTML:
        return "</table>\n" + f"<h3>Total: {total}</h3>\n" + "</body></html>\n"
    return ""


def render(
    report_type: Any,
    user: User,
    visible_items: Iterable[AnnotatedItem],
    total: Number,
    escape: bool = False,
    report_format: Optional[ReportFormat] = None,
) -> str:
    """
    Renders a complete report.

    Args:
        report_type: CSV or HTML; anything else renders an empty string
        user: The viewer, whose name is embedded in the output
        visible_items: Items already passed through the visibility filter
        total: The aggregate over visible_items
        escape: Quote/escape fields instead of interpolating them literally
        report_format: An already resolved format, skipping resolution of report_type

    Returns:
        str: header + body + footer, untrimmed.
    """
    if report_format is None:
        report_format = resolve_format(report_type)
    return (
        render_header(report_format, user, escape)
        + render_body(report_format, visible_items, user, escape)
        + render_footer(report_format, total)
    )
