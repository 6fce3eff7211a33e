from dataclasses import dataclass


@dataclass
class Budget:
    id: str
    category: str
    amount: int         # minor units, > 0
    month: str          # 'YYYY-MM'
    created_at: str = ""


@dataclass
class BudgetStatus:
    budget: Budget
    spent: int = 0

    @property
    def category(self) -> str:
        return self.budget.category

    @property
    def remaining(self) -> int:
        return self.budget.amount - self.spent

    @property
    def percentage(self) -> float:
        if self.budget.amount <= 0:
            return 0.0
        return self.spent / self.budget.amount

    @property
    def exceeded(self) -> bool:
        return self.spent > self.budget.amount
