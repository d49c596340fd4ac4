"""Role-filtered item reports for tiny-reports

This package turns a list of items into a CSV or HTML report for a given
user. A visibility filter decides which items the user's role may see,
an aggregator totals exactly those items, and a renderer formats them.

Unknown roles see nothing and unknown report types render an empty
report, unless strict mode is enabled, in which case both raise a
ReportError. The HTTP endpoints and the CLI delegate to the service
module, which contains the pipeline."""
