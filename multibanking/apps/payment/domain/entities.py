"""Доменные сущности платежей."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from ..schemas import BankAccount, Link, TransactionType
from .value_objects import Money


@dataclass
class PaymentEntity:
    """Доменная сущность платежа."""
    
    id: Optional[str] = None
    order_id: Optional[str] = None
    payment_id: Optional[str] = None
    user_id: Optional[str] = None
    transaction_type: Optional[TransactionType] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    created_at: Optional[datetime] = None
    product: Optional[str] = None
    purpose: Optional[str] = None
    purpose_code: Optional[str] = None
    raw_data: Optional[str] = None
    receiver: Optional[str] = None
    receiver_account_currency: Optional[str] = None
    receiver_account_number: Optional[str] = None
    receiver_bank_code: Optional[str] = None
    receiver_bic: Optional[str] = None
    receiver_iban: Optional[str] = None
    psu_account: Optional[BankAccount] = None
    tan_submit_external: Any = None
    links: Optional[tuple[Link, ...]] = None
    
    @property
    def money(self) -> Optional[Money]:
        """Сумма платежа с валютой, если известны обе части."""
        if self.amount is None or self.currency is None:
            return None
        return Money(amount=self.amount, currency=self.currency)
    
    def is_sepa_receiver(self) -> bool:
        """Проверить, задан ли получатель через IBAN."""
        return bool(self.receiver_iban)
