"""Domain-specific exceptions

Business data never raises in the calculation engine (bad numbers become 0,
unknown levels fall back, missing dates are classified). These exceptions
cover programming errors and malformed records at the persistence boundary.
"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidDateError(DomainException):
    """A value passed where a calendar date is required is not a date"""

    pass


class InvalidRecordError(DomainException):
    """A persistence row does not match the expected record shape"""

    pass


class UnknownPaymentTemplateError(DomainException):
    """No payment template is registered under the requested name"""

    pass
