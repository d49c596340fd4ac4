import pytest

from tiny_reports.core.errors import UnsupportedReportTypeError
from tiny_reports.features.reports.renderer import (
    PRIORITY_STYLE,
    render,
    render_footer,
    render_header,
    render_row,
    resolve_format,
)
from tiny_reports.features.reports.schemas import AnnotatedItem, ReportFormat, ReportType, User


def test_resolve_format():
    assert resolve_format("CSV") is ReportFormat.CSV
    assert resolve_format(ReportType.HTML) is ReportFormat.HTML
    assert resolve_format("PDF") is ReportFormat.UNSUPPORTED
    assert resolve_format("csv") is ReportFormat.UNSUPPORTED
    assert resolve_format(None) is ReportFormat.UNSUPPORTED


def test_resolve_format_strict():
    with pytest.raises(UnsupportedReportTypeError):
        resolve_format("PDF", strict=True)


def test_csv_sections():
    user = User(name="Ana", role="USER")
    item = AnnotatedItem(id=1, name="X", value=100)

    assert render_header(ReportFormat.CSV, user) == "ID,NOME,VALOR,USUARIO\n"
    assert render_row(ReportFormat.CSV, item, user) == "1,X,100,Ana\n"
    assert render_footer(ReportFormat.CSV, 100) == "\nTotal,,\n100,,\n"


def test_html_header_embeds_user_name():
    header = render_header(ReportFormat.HTML, User(name="Bruno", role="ADMIN"))
    assert header.startswith("<html><body>\n<h1>Relatório</h1>\n")
    assert "<h2>Usuário: Bruno</h2>" in header
    assert header.endswith("<tr><th>ID</th><th>Nome</th><th>Valor</th></tr>\n")


def test_html_row_priority_is_bold():
    user = User(name="Bruno", role="ADMIN")
    flagged = render_row(ReportFormat.HTML, AnnotatedItem(id=1, name="Big", value=1500, priority=True), user)
    plain = render_row(ReportFormat.HTML, AnnotatedItem(id=2, name="Small", value=900), user)

    assert flagged == f"<tr {PRIORITY_STYLE}><td>1</td><td>Big</td><td>1500</td></tr>\n"
    assert plain == "<tr ><td>2</td><td>Small</td><td>900</td></tr>\n"


def test_html_footer():
    assert render_footer(ReportFormat.HTML, 42) == "</table>\n<h3>Total: 42</h3>\n</body></html>\n"


def test_unsupported_format_renders_nothing():
    user = User(name="Ana", role="USER")
    items = [AnnotatedItem(id=1, name="X", value=100)]
    assert render("XML", user, items, 100) == ""


def test_missing_fields_render_as_empty_text():
    user = User(role="USER")
    row = render_row(ReportFormat.CSV, AnnotatedItem(), user)
    assert row == ",,,\n"


def test_fields_are_literal_by_default():
    user = User(name="<b>Ana</b>", role="USER")
    item = AnnotatedItem(id=1, name="Bolt, M6", value=5)

    assert render_row(ReportFormat.CSV, item, user) == "1,Bolt, M6,5,<b>Ana</b>\n"
    assert "<h2>Usuário: <b>Ana</b></h2>" in render_header(ReportFormat.HTML, user)


def test_escape_quotes_csv_fields():
    user = User(name='Ana "A"', role="USER")
    item = AnnotatedItem(id=1, name="Bolt, M6", value=5)

    assert render_row(ReportFormat.CSV, item, user, escape=True) == '1,"Bolt, M6",5,"Ana ""A"""\n'


def test_escape_html_fields():
    user = User(name="<script>", role="ADMIN")
    item = AnnotatedItem(id=1, name="Tom & Jerry", value=5)

    assert "<h2>Usuário: &lt;script&gt;</h2>" in render_header(ReportFormat.HTML, user, escape=True)
    assert "<td>Tom &amp; Jerry</td>" in render_row(ReportFormat.HTML, item, user, escape=True)


def test_escape_quotes_embedded_newlines():
    user = User(name="Ana", role="USER")
    item = AnnotatedItem(id=1, name="line one\nline two", value=5)

    assert render_row(ReportFormat.CSV, item, user, escape=True) == '1,"line one\nline two",5,Ana\n'


def test_resolve_format_unhashable_selector():
    assert resolve_format(["CSV"]) is ReportFormat.UNSUPPORTED
    assert resolve_format({"x": 1}) is ReportFormat.UNSUPPORTED
