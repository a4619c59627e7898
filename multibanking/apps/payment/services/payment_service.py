"""Сервис для работы с платежными ресурсами."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from ..domain.entities import PaymentEntity
from ..exceptions import PaymentDecodeError, PaymentMappingError
from ..schemas import PaymentResource
from .payment_codec import decode_payment, encode_payment

logger = logging.getLogger(__name__)


class PaymentService:
    """Преобразование платежных ресурсов API в доменные сущности и обратно."""

    def parse(self, payload: Mapping[str, Any]) -> PaymentEntity:
        """Декодировать ответ API в доменную сущность."""
        return self.to_entity(decode_payment(payload))

    def parse_many(self, payloads: Iterable[Mapping[str, Any]]) -> list[PaymentEntity]:
        """
        Декодировать список платежей.

        Args:
            payloads: Объекты платежных ресурсов

        Returns:
            Список доменных сущностей в исходном порядке

        Raises:
            PaymentDecodeError: Если хотя бы один элемент некорректен
        """
        entities = []
        for index, payload in enumerate(payloads):
            try:
                entities.append(self.parse(payload))
            except PaymentDecodeError as exc:
                exc.details.setdefault("index", index)
                raise
        logger.debug("Декодировано платежей: %d", len(entities))
        return entities

    def to_payload(self, entity: PaymentEntity) -> dict[str, Any]:
        """Собрать тело запроса из доменной сущности."""
        return encode_payment(self.to_resource(entity))

    @staticmethod
    def to_entity(resource: PaymentResource) -> PaymentEntity:
        """Преобразовать ресурс API в доменную сущность."""
        return PaymentEntity(
            id=resource.id,
            order_id=resource.orderId,
            payment_id=resource.paymentId,
            user_id=resource.userId,
            transaction_type=resource.transactionType,
            amount=resource.amount,
            currency=resource.currency,
            created_at=resource.createdDateTime,
            product=resource.product,
            purpose=resource.purpose,
            purpose_code=resource.purposecode,
            raw_data=resource.rawData,
            receiver=resource.receiver,
            receiver_account_currency=resource.receiverAccountCurrency,
            receiver_account_number=resource.receiverAccountNumber,
            receiver_bank_code=resource.receiverBankCode,
            receiver_bic=resource.receiverBic,
            receiver_iban=resource.receiverIban,
            psu_account=resource.psuAccount,
            tan_submit_external=resource.tanSubmitExternal,
            links=resource.links,
        )

    @staticmethod
    def to_resource(entity: PaymentEntity) -> PaymentResource:
        """
        Преобразовать доменную сущность в ресурс API.

        Raises:
            PaymentMappingError: Если значения полей имеют неверный тип
        """
        try:
            return PaymentResource(
                links=entity.links,
                amount=entity.amount,
                createdDateTime=entity.created_at,
                currency=entity.currency,
                id=entity.id,
                orderId=entity.order_id,
                paymentId=entity.payment_id,
                product=entity.product,
                psuAccount=entity.psu_account,
                purpose=entity.purpose,
                purposecode=entity.purpose_code,
                rawData=entity.raw_data,
                receiver=entity.receiver,
                receiverAccountCurrency=entity.receiver_account_currency,
                receiverAccountNumber=entity.receiver_account_number,
                receiverBankCode=entity.receiver_bank_code,
                receiverBic=entity.receiver_bic,
                receiverIban=entity.receiver_iban,
                tanSubmitExternal=entity.tan_submit_external,
                transactionType=entity.transaction_type,
                userId=entity.user_id,
            )
        except ValidationError as exc:
            raise PaymentMappingError(
                "Невозможно собрать платежный ресурс из сущности",
                details={
                    "id": entity.id,
                    "errors": exc.errors(include_url=False, include_context=False),
                },
            ) from exc
