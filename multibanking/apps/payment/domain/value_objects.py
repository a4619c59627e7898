"""Value Objects для платежей."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Money:
    """Сумма с валютой (Value Object)."""
    
    amount: Decimal
    currency: str
    
    def to_dict(self) -> dict:
        return {"amount": str(self.amount), "currency": self.currency}
