"""Кодек платежного ресурса: JSON <-> PaymentResource."""

import logging
from collections.abc import Mapping
from typing import Any, Callable

from pydantic import ValidationError

from ..exceptions import PaymentDecodeError
from ..schemas import PaymentResource, invalid_transaction_type

logger = logging.getLogger(__name__)


def decode_payment(payload: Mapping[str, Any]) -> PaymentResource:
    """
    Декодировать платежный ресурс из словаря (разобранного JSON).

    Args:
        payload: Объект с полями платежного ресурса

    Returns:
        PaymentResource

    Raises:
        InvalidEnumValueError: Если transactionType вне закрытого набора
        PaymentDecodeError: Если структура данных некорректна
    """
    if not isinstance(payload, Mapping):
        raise PaymentDecodeError(
            "Платежный ресурс должен быть JSON объектом",
            details={"type": type(payload).__name__},
        )
    return _validate(PaymentResource.model_validate, dict(payload))


def decode_payment_json(data: str | bytes) -> PaymentResource:
    """Декодировать платежный ресурс из JSON текста."""
    return _validate(PaymentResource.model_validate_json, data)


def encode_payment(resource: PaymentResource) -> dict[str, Any]:
    """
    Закодировать платежный ресурс в JSON-совместимый словарь.

    Отсутствующие поля не выводятся (а не передаются как null).
    Сумма выводится точной десятичной строкой, без потери разрядов.
    """
    return resource.model_dump(mode="json", exclude_none=True)


def encode_payment_json(resource: PaymentResource) -> str:
    """Закодировать платежный ресурс в JSON текст."""
    return resource.model_dump_json(exclude_none=True)


def _validate(validator: Callable[[Any], PaymentResource], data: Any) -> PaymentResource:
    try:
        resource = validator(data)
    except ValidationError as exc:
        for error in exc.errors():
            if error["loc"] == ("transactionType",) and error["type"] == "enum":
                value = error.get("input")
                logger.warning("Отклонен платеж с неизвестным transactionType: %r", value)
                raise invalid_transaction_type(value) from exc
        raise PaymentDecodeError(
            "Ошибка декодирования платежного ресурса",
            details={"errors": exc.errors(include_url=False, include_context=False)},
        ) from exc

    logger.debug(
        "Декодирован платеж: id=%s, transactionType=%s",
        resource.id,
        resource.transactionType.value if resource.transactionType else None,
    )
    return resource
