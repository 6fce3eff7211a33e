from dataclasses import dataclass
from typing import Optional


@dataclass
class PaymentMethodConfig:
    id: str
    name: str                           # one of PAYMENT_METHODS
    balance: int                        # may go negative after overspend
    credit_limit: Optional[int] = None
    billing_date: Optional[int] = None  # 1-31
    notes: str = ""
