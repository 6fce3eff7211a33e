from dataclasses import dataclass


@dataclass
class Expense:
    id: str
    amount: int             # minor units, > 0
    category: str
    payment_method: str     # one of PAYMENT_METHODS
    date: str               # 'YYYY-MM-DD'
    description: str = ""
    created_at: str = ""
