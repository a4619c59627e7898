"""Pydantic схемы платежного ресурса Multibanking REST API."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import InvalidEnumValueError


class TransactionType(str, Enum):
    SINGLE_PAYMENT = "SINGLE_PAYMENT"                              # Разовый платеж
    FOREIGN_PAYMENT = "FOREIGN_PAYMENT"                            # Зарубежный платеж
    FUTURE_SINGLE_PAYMENT = "FUTURE_SINGLE_PAYMENT"                # Отложенный платеж
    FUTURE_SINGLE_PAYMENT_DELETE = "FUTURE_SINGLE_PAYMENT_DELETE"  # Отмена отложенного платежа
    BULK_PAYMENT = "BULK_PAYMENT"                                  # Пакетный платеж
    FUTURE_BULK_PAYMENT = "FUTURE_BULK_PAYMENT"                    # Отложенный пакетный платеж
    FUTURE_BULK_PAYMENT_DELETE = "FUTURE_BULK_PAYMENT_DELETE"      # Отмена отложенного пакета
    STANDING_ORDER = "STANDING_ORDER"                              # Постоянное поручение
    STANDING_ORDER_DELETE = "STANDING_ORDER_DELETE"                # Отмена постоянного поручения
    RAW_SEPA = "RAW_SEPA"                                          # Сырой SEPA документ
    TAN_REQUEST = "TAN_REQUEST"                                    # Запрос TAN
    LOAD_BANKACCOUNTS = "LOAD_BANKACCOUNTS"                        # Загрузка счетов
    LOAD_BALANCES = "LOAD_BALANCES"                                # Загрузка остатков
    LOAD_TRANSACTIONS = "LOAD_TRANSACTIONS"                        # Загрузка операций

    @classmethod
    def parse(cls, value: str) -> "TransactionType":
        """
        Преобразовать значение с провода в элемент перечисления.

        Args:
            value: Строковый тег (точное совпадение, с учетом регистра)

        Returns:
            Элемент TransactionType

        Raises:
            InvalidEnumValueError: Если тег не входит в закрытый набор
        """
        try:
            return cls(value)
        except ValueError as exc:
            raise invalid_transaction_type(value) from exc

    @property
    def is_payment(self) -> bool:
        """Платежное поручение (а не отмена, запрос TAN или загрузка)."""
        return self in _PAYMENT_TYPES

    @property
    def is_delete(self) -> bool:
        return self in _DELETE_TYPES

    @property
    def is_future(self) -> bool:
        """Отложенная операция, включая ее отмену."""
        return self in _FUTURE_TYPES

    @property
    def is_load(self) -> bool:
        return self in _LOAD_TYPES


_PAYMENT_TYPES = frozenset({
    TransactionType.SINGLE_PAYMENT,
    TransactionType.FOREIGN_PAYMENT,
    TransactionType.FUTURE_SINGLE_PAYMENT,
    TransactionType.BULK_PAYMENT,
    TransactionType.FUTURE_BULK_PAYMENT,
    TransactionType.STANDING_ORDER,
    TransactionType.RAW_SEPA,
})

_DELETE_TYPES = frozenset({
    TransactionType.FUTURE_SINGLE_PAYMENT_DELETE,
    TransactionType.FUTURE_BULK_PAYMENT_DELETE,
    TransactionType.STANDING_ORDER_DELETE,
})

_FUTURE_TYPES = frozenset({
    TransactionType.FUTURE_SINGLE_PAYMENT,
    TransactionType.FUTURE_SINGLE_PAYMENT_DELETE,
    TransactionType.FUTURE_BULK_PAYMENT,
    TransactionType.FUTURE_BULK_PAYMENT_DELETE,
})

_LOAD_TYPES = frozenset({
    TransactionType.LOAD_BANKACCOUNTS,
    TransactionType.LOAD_BALANCES,
    TransactionType.LOAD_TRANSACTIONS,
})


def invalid_transaction_type(value: Any) -> InvalidEnumValueError:
    """Ошибка для значения transactionType вне закрытого набора."""
    return InvalidEnumValueError(
        f"Недопустимое значение transactionType: {value!r}",
        details={
            "field": "transactionType",
            "value": value,
            "allowed": [member.value for member in TransactionType],
        },
    )


class Link(BaseModel):
    """HATEOAS ссылка ресурса (внешний контракт, неизвестные поля сохраняются)."""
    rel: Optional[str] = None
    href: Optional[str] = None
    hreflang: Optional[str] = None
    media: Optional[str] = None
    title: Optional[str] = None
    type: Optional[str] = None
    deprecation: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="allow")


class BankAccount(BaseModel):
    """Счет пользователя платежного сервиса (PSU), внешний контракт."""
    id: Optional[str] = None
    accountNumber: Optional[str] = None
    blz: Optional[str] = None
    bic: Optional[str] = None
    iban: Optional[str] = None
    bankName: Optional[str] = None
    currency: Optional[str] = None
    name: Optional[str] = None
    owner: Optional[str] = None
    type: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="allow")


class PaymentResource(BaseModel):
    """
    Платежный ресурс (ResourceSinglePaymentEntity).

    Все поля необязательны: отсутствие поля (None) отличается от нулевого
    значения. Неизвестные поля входящих данных отбрасываются. Сумма
    передается на проводе точной десятичной строкой.
    """
    links: Optional[tuple[Link, ...]] = None
    amount: Optional[Decimal] = None
    createdDateTime: Optional[datetime] = None
    currency: Optional[str] = None
    id: Optional[str] = None
    orderId: Optional[str] = None
    paymentId: Optional[str] = None
    product: Optional[str] = None
    psuAccount: Optional[BankAccount] = None
    purpose: Optional[str] = None
    purposecode: Optional[str] = None
    rawData: Optional[str] = None
    receiver: Optional[str] = None
    receiverAccountCurrency: Optional[str] = None
    receiverAccountNumber: Optional[str] = None
    receiverBankCode: Optional[str] = None
    receiverBic: Optional[str] = None
    receiverIban: Optional[str] = None
    tanSubmitExternal: Any = None
    transactionType: Optional[TransactionType] = None
    userId: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    def get_link(self, rel: str) -> Optional[Link]:
        """Найти первую ссылку с указанным отношением (rel)."""
        for link in self.links or ():
            if link.rel == rel:
                return link
        return None
