"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ReceiptActionError(DomainException):
    """Receipt action could not be initiated"""

    pass


class ReceiptServiceError(ReceiptActionError):
    """Receipt service returned an error or is unavailable"""

    pass
