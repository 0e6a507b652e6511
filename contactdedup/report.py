from typing import IO, Iterable

from .resolver import ReportRow

REPORT_HEADER = "ContactID Source,ContactID Match,Accuracy\n"


def write_report(rows: Iterable[ReportRow], stream: IO[str]) -> int:
    """Write report rows as CSV lines. Returns the number of rows written."""
    stream.write(REPORT_HEADER)
    count = 0
    for row in rows:
        stream.write(f"{row.source_id},{row.match_id},{row.accuracy}\n")
        count += 1
    return count
