"""Общие фикстуры тестов."""

import logging
from typing import Any

import pytest

from multibanking.apps.payment.services.payment_service import PaymentService


@pytest.fixture
def payment_payload() -> dict[str, Any]:
    """Полный платежный ресурс в том виде, как его отдает API."""
    return {
        "links": [
            {"rel": "self", "href": "https://multibanking.example/api/v1/payments/p-1"},
            {
                "rel": "transactionAuthorisation",
                "href": "https://multibanking.example/api/v1/payments/p-1/authorisation",
            },
        ],
        "amount": 125.5,
        "createdDateTime": "2024-03-01T10:15:00",
        "currency": "EUR",
        "id": "p-1",
        "orderId": "ord-77",
        "paymentId": "pay-9",
        "product": "Girokonto",
        "psuAccount": {
            "iban": "DE89370400440532013000",
            "bic": "COBADEFFXXX",
            "currency": "EUR",
            "owner": "Max Mustermann",
        },
        "purpose": "Miete Maerz",
        "purposecode": "RENT",
        "rawData": "<Document/>",
        "receiver": "Erika Mustermann",
        "receiverAccountCurrency": "EUR",
        "receiverAccountNumber": "0532013000",
        "receiverBankCode": "37040044",
        "receiverBic": "COBADEFFXXX",
        "receiverIban": "DE89370400440532013000",
        "tanSubmitExternal": {"challenge": "1234", "scaMethod": "chipTAN"},
        "transactionType": "SINGLE_PAYMENT",
        "userId": "user-1",
    }


@pytest.fixture
def encoded_payment_payload(payment_payload: dict[str, Any]) -> dict[str, Any]:
    """Тот же ресурс после кодирования: сумма передается точной строкой."""
    return {**payment_payload, "amount": "125.5"}


@pytest.fixture
def payment_service() -> PaymentService:
    return PaymentService()


@pytest.fixture
def restore_logging():
    """Вернуть конфигурацию логирования после теста."""
    root = logging.getLogger()
    package_logger = logging.getLogger("multibanking")
    handlers = root.handlers[:]
    root_level = root.level
    package_level = package_logger.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(root_level)
    package_logger.setLevel(package_level)
