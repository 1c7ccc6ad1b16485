from payreport.db.models.gateway import (
    gateway_metadata,
    paygw_cryptocloud,
    paygw_payanyway,
    paygw_robokassa,
    paygw_yookassa,
)
from payreport.db.models.payment import Payment, PaymentAccount

__all__ = [
    "Payment",
    "PaymentAccount",
    "gateway_metadata",
    "paygw_cryptocloud",
    "paygw_payanyway",
    "paygw_robokassa",
    "paygw_yookassa",
]
