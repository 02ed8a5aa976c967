"""
Pydantic schemas for revenue reports.
"""
from pydantic import BaseModel, Field, field_serializer
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")


def display_amount(value: Decimal) -> str:
    """Two-decimal display form; the stored value keeps full precision."""
    return str(value.quantize(CENTS, rounding=ROUND_HALF_UP))


class ReportRow(BaseModel):
    """Count and revenue for one service name."""
    service_name: str
    count: int = 0
    total_revenue: Decimal = Decimal("0")

    @field_serializer("total_revenue", when_used="json")
    def _serialize_revenue(self, value: Decimal) -> str:
        return display_amount(value)


class Report(BaseModel):
    """Report over completed vehicles in a date range."""
    start_date: date
    end_date: date
    service_ids: list[int] = Field(default_factory=list)
    rows: list[ReportRow] = Field(default_factory=list)
    total_count: int = 0
    total_revenue: Decimal = Decimal("0")

    @field_serializer("total_revenue", when_used="json")
    def _serialize_revenue(self, value: Decimal) -> str:
        return display_amount(value)
