"""Исключения для работы с платежными ресурсами Multibanking."""


class PaymentBaseException(Exception):
    """Базовое исключение для платежных ресурсов."""
    
    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class PaymentDecodeError(PaymentBaseException):
    """Полезная нагрузка не соответствует структуре платежного ресурса."""


class InvalidEnumValueError(PaymentDecodeError):
    """Значение вне закрытого перечисления (например, transactionType)."""


class PaymentMappingError(PaymentBaseException):
    """Невозможно построить полезную нагрузку из доменной сущности."""
