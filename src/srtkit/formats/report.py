"""XML and HTML renderers for reading-speed statistics."""

from xml.sax.saxutils import escape, quoteattr

from srtkit.core.statistics import StatisticsReport


def _format_percent(percent: float) -> str:
    # 50.0 -> "50", 33.3 -> "33.3"
    return f"{percent:g}"


def render_statistics_xml(report: StatisticsReport) -> str:
    """Render a statistics report as an XML document.

    Args:
        report: Report built by ``ReadingStatistics.to_report``

    Returns:
        XML string with one ``<range>`` element per bucket
    """
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f"<statistics file={quoteattr(report.source_name)}>",
    ]
    for row in report.ranges:
        lines.append(
            f'<range name="{row.name}" color="{row.color}" value="{row.value}" '
            f'percent="{_format_percent(row.percent)}" />'
        )
    lines.append("</statistics>")
    return "\n".join(lines)


def render_statistics_html(report: StatisticsReport) -> str:
    """Render a statistics report as an HTML unordered list.

    Args:
        report: Report built by ``ReadingStatistics.to_report``

    Returns:
        HTML fragment with one coloured list item per bucket
    """
    items = [
        f'<li style="background-color:{row.color}">{escape(row.label)} = '
        f'<span style="float:right;">{row.value} '
        f"({_format_percent(row.percent)}%)</span></li>"
        for row in report.ranges
    ]
    return '<ul class="srt_stats">' + "".join(items) + "</ul>"
