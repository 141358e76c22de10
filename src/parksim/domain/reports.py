# File: src/parksim/domain/reports.py
"""
Session Ledger reporting

Aggregates and renders the completed sessions of the current day. Totals are
recomputed from the sessions on every call and never cached.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Sequence

from .models import ParkingSession, format_timestamp


@dataclass(frozen=True)
class LedgerSummary:
    """Value Object: Count and fee total of a set of sessions"""
    session_count: int
    total_fee: Decimal

    @classmethod
    def from_sessions(cls, sessions: Iterable[ParkingSession]) -> 'LedgerSummary':
        count = 0
        total = Decimal('0.00')
        for session in sessions:
            count += 1
            total += session.fee
        return cls(session_count=count, total_fee=total)


class DailyReportFormatter:
    """Renders the daily ledger as a fixed-width text report"""

    TITLE = "Daily Parking Report"
    SEPARATOR = "=" * 20
    EMPTY_MESSAGE = "No vehicles departed today."

    HEADER_FORMAT = "{:<15} {:<12} {:<20} {:<20} {:<10}"
    ROW_FORMAT = "{:<15} {:<12} {:<20} {:<20} {:>8.2f}"

    def format(self, sessions: Sequence[ParkingSession]) -> str:
        lines: List[str] = [self.TITLE, self.SEPARATOR]

        if not sessions:
            lines.append(self.EMPTY_MESSAGE)
            return "\n".join(lines) + "\n"

        lines.append(self.HEADER_FORMAT.format(
            "License Plate", "Type", "Entry Time", "Exit Time", "Fee"
        ))
        for session in sessions:
            lines.append(self.ROW_FORMAT.format(
                session.license_plate,
                session.vehicle_type,
                format_timestamp(session.entry_time),
                format_timestamp(session.exit_time),
                session.fee
            ))

        summary = LedgerSummary.from_sessions(sessions)
        lines.append(self.SEPARATOR)
        lines.append(f"Total vehicles departed: {summary.session_count}")
        lines.append(f"Total income: {summary.total_fee:.2f}")
        return "\n".join(lines) + "\n"
