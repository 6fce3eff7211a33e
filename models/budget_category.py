from dataclasses import dataclass


@dataclass
class BudgetCategory:
    id: str
    name: str
    created_at: str = ""
