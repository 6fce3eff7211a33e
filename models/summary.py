from dataclasses import dataclass, field

from models.budget import Budget


@dataclass
class MonthlySummary:
    month: str                  # 'YYYY-MM'
    total_expenses: int = 0
    expenses_by_category: dict[str, int] = field(default_factory=dict)
    expenses_by_payment_method: dict[str, int] = field(default_factory=dict)
    budgets: list[Budget] = field(default_factory=list)

    @property
    def total_budget(self) -> int:
        return sum(b.amount for b in self.budgets)
