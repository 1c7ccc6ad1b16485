from enum import IntEnum


class PaymentStatus(IntEnum):
    """Gateway-reported payment state as stored in the `success` field."""

    UNKNOWN = -1  # no gateway row
    UNFINISHED = 0
    SUCCESS = 1
    AWAITING_PASSWORD = 2
    OK = 3
