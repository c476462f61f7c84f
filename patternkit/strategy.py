"""Strategy pattern: interchangeable tax calculations behind one context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class TaxStrategy(ABC):
    """A flat tax: the total multiplied by the strategy's rate."""

    @property
    @abstractmethod
    def rate(self) -> float:
        """Fraction of the total that is owed as tax."""

    def calculate_tax(self, total_money: float) -> float:
        return total_money * self.rate


class CNTax(TaxStrategy):
    rate = 0.3


class USTax(TaxStrategy):
    rate = 0.18


class JPTax(TaxStrategy):
    rate = 0.16


class DETax(TaxStrategy):
    rate = 0.43


@dataclass
class TaxContext:
    """Computes tax with whichever strategy is currently set."""

    strategy: TaxStrategy

    def calculate_tax(self, total_money: float) -> float:
        return self.strategy.calculate_tax(total_money)


def main(argv: list[str] | None = None) -> int:
    """Print the tax on one amount under each country's strategy."""
    total_money = 1000.0
    context = TaxContext(CNTax())
    for label, strategy in (("CN", CNTax()), ("US", USTax()), ("JP", JPTax()), ("DE", DETax())):
        context.strategy = strategy
        print(f"{label} Tax: {context.calculate_tax(total_money):g}")
    return 0