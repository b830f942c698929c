"""Flat-rate income tax estimate."""

from __future__ import annotations

from dataclasses import dataclass

from taxbot.core.settings import settings


@dataclass(frozen=True, slots=True)
class TaxEstimate:
    """Gross pay, estimated taxes and the remaining net pay."""

    gross_pay: float
    taxes: float
    net_pay: float


class TaxCalculator:
    """Applies fixed federal and state rates to hours times hourly rate."""

    def __init__(self, federal_rate: float | None = None, state_rate: float | None = None) -> None:
        self.federal_rate = settings.federal_rate if federal_rate is None else federal_rate
        self.state_rate = settings.state_rate if state_rate is None else state_rate

    @property
    def total_rate(self) -> float:
        return self.federal_rate + self.state_rate

    def estimate(self, hours: float, rate: float) -> TaxEstimate:
        """Return the estimate for ``hours`` worked at ``rate`` per hour."""
        gross_pay = hours * rate
        taxes = gross_pay * self.total_rate
        return TaxEstimate(gross_pay=gross_pay, taxes=taxes, net_pay=gross_pay - taxes)
