"""Pydantic schemas for the JSON report output"""

from pydantic import BaseModel
from typing import List, Optional
from ledger_fines.domain.models import MonthlyLeader, RunReport


class LeaderSchema(BaseModel):
    """Top account of a month, user_id is null when nobody was active"""

    user_id: Optional[str] = None
    value: int = 0

    @classmethod
    def from_domain(cls, leader: MonthlyLeader) -> "LeaderSchema":
        return cls(user_id=leader.user_id, value=leader.value)


class MonthSchema(BaseModel):
    """Leaders of a single month"""

    month: str
    most_deposited: LeaderSchema
    most_transactions: LeaderSchema


class MonthlyPenaltySchema(BaseModel):
    month: str
    waived: bool
    penalty: int


class FineSchema(BaseModel):
    """Fines owed by one user"""

    user_id: str
    total_fines: int
    months: List[MonthlyPenaltySchema]


class ReportResponse(BaseModel):
    """Full run report"""

    months: List[MonthSchema]
    fines: List[FineSchema]
    dropped_transactions: int = 0

    @classmethod
    def from_domain(cls, report: RunReport) -> "ReportResponse":
        return cls(
            months=[
                MonthSchema(
                    month=m.month_key,
                    most_deposited=LeaderSchema.from_domain(m.top_depositor),
                    most_transactions=LeaderSchema.from_domain(m.top_transactor),
                )
                for m in report.months
            ],
            fines=[
                FineSchema(
                    user_id=f.user_id,
                    total_fines=f.total_fines,
                    months=[
                        MonthlyPenaltySchema(month=p.month_key, waived=p.waived, penalty=p.penalty)
                        for p in f.months
                    ],
                )
                for f in report.fines
            ],
            dropped_transactions=report.dropped_transactions,
        )
