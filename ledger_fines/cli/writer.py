"""Report writers for the console"""

import sys
from typing import List, Optional, TextIO
from ledger_fines.cli.schemas import ReportResponse
from ledger_fines.domain.models import MonthlyLeader, RunReport


def format_leader(leader: MonthlyLeader, unit: str) -> str:
    if not leader.has_data:
        return f"{leader.month_key}: no data"
    return f"{leader.month_key}: user {leader.user_id} ({leader.value} {unit})"


def render_text(report: RunReport) -> List[str]:
    """
    Plain text report:

        Most deposits
        01: user 149 (1200 deposited)
        Most transactions
        01: user 12 (9 transactions)
        Fines
        user 7: 16
    """
    lines = ["Most deposits"]
    lines += [format_leader(m.top_depositor, "deposited") for m in report.months]
    lines.append("Most transactions")
    lines += [format_leader(m.top_transactor, "transactions") for m in report.months]
    lines.append("Fines")
    if not report.fines:
        lines.append("none")
    for fine in report.fines:
        fined_months = ", ".join(p.month_key for p in fine.months if not p.waived)
        lines.append(f"user {fine.user_id}: {fine.total_fines} (months {fined_months})")
    return lines


def render_json(report: RunReport) -> str:
    return ReportResponse.from_domain(report).model_dump_json(indent=2)


def write_report(report: RunReport, fmt: str = "text", out: Optional[TextIO] = None) -> None:
    """Write the report to `out` (stdout by default) as text or JSON"""
    out = out or sys.stdout
    if fmt == "json":
        out.write(render_json(report) + "\n")
    else:
        out.write("\n".join(render_text(report)) + "\n")
