"""
Mileage report rendering.

A Report holds the header and rows produced by the ledger; this module turns
it into delimited text for download.
"""

import csv
from datetime import date
from decimal import Decimal
from io import StringIO

REPORT_HEADER = ["Date", "From", "To", "Miles"]


def format_miles(value):
    """Render miles without a trailing ``.0`` (12.0 -> "12", 8.50 -> "8.5")."""
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return format(Decimal(str(value)).normalize(), "f")
    return value


def format_currency(amount):
    return "${:,.2f}".format(amount)


class Report:
    def __init__(self, rows, header=None):
        self.header = list(header or REPORT_HEADER)
        self.rows = [list(row) for row in rows]

    def __len__(self):
        return len(self.rows)

    def to_csv(self):
        buffer = StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(self.header)
        for row in self.rows:
            writer.writerow([format_miles(cell) for cell in row])
        return buffer.getvalue()

    @staticmethod
    def filename(day=None):
        day = day or date.today()
        return f"mileage_report_{day.strftime('%Y-%m-%d')}.csv"
