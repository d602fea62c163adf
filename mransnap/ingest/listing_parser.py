"""Extract snapshot dates from an HTML directory index or file listing."""

import re

DATE_PATTERN = r"\d{4}-\d{2}-\d{2}"

_DATE_RE = re.compile(DATE_PATTERN)

# Directory index rows look like: <a href="2014-09-17/">2014-09-17/</a>  17-Sep-2014 00:00  -
_ANCHOR_RE = re.compile(rf"<a href=.*?>({DATE_PATTERN}).*?</a>")


def parse_snapshot_listing(lines: list[str]) -> list[str]:
    """Return the snapshot dates found in `lines`, in listing order.

    Lines without a YYYY-MM-DD substring are dropped. For HTML rows the
    date inside the anchor text is kept; otherwise the first date
    substring on the line is used.
    """
    dates: list[str] = []
    for line in lines:
        if not _DATE_RE.search(line):
            continue
        anchor = _ANCHOR_RE.search(line)
        if anchor is not None:
            dates.append(anchor.group(1))
        else:
            dates.append(_DATE_RE.search(line).group(0))
    return dates
