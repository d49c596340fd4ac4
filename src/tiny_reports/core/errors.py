"""Exceptions raised by the report pipeline when running in strict mode.

In the default lenient mode unknown roles and report types degrade to an
empty report and none of these are raised."""


class ReportError(Exception):
    """Base class for report generation errors."""


class UnknownRoleError(ReportError):
    """The user's role is not one the visibility filter recognizes."""

    def __init__(self, role):
        self.role = role
        super().__init__(f"Unknown role: {role!r}")


class UnsupportedReportTypeError(ReportError):
    """The requested report type has no renderer."""

    def __init__(self, report_type):
        self.report_type = report_type
        super().__init__(f"Unsupported report type: {report_type!r}")
