from models.budget import BudgetStatus
from models.summary import MonthlySummary
from services.budget_store import BudgetStore
from utils.constants import PAYMENT_METHOD_LABELS, PAYMENT_METHODS, RECENT_EXPENSE_LIMIT, TREND_MONTHS
from utils.date_helpers import current_month_str, recent_months


class ReportService:
    def __init__(self, store: BudgetStore):
        self._store = store

    def get_monthly_summary(self, month: str | None = None) -> MonthlySummary:
        m = month or current_month_str()
        expenses = self._store.get_expenses_by_month(m)
        by_category: dict[str, int] = {}
        by_method: dict[str, int] = {}
        for e in expenses:
            by_category[e.category] = by_category.get(e.category, 0) + e.amount
            by_method[e.payment_method] = by_method.get(e.payment_method, 0) + e.amount
        return MonthlySummary(
            month=m,
            total_expenses=sum(e.amount for e in expenses),
            expenses_by_category=by_category,
            expenses_by_payment_method=by_method,
            budgets=self._store.get_budgets_by_month(m),
        )

    def get_budget_status(self, month: str | None = None) -> list[BudgetStatus]:
        """Return the month's budgets with spent amounts filled in."""
        m = month or current_month_str()
        return [
            BudgetStatus(
                budget=b,
                spent=self._store.get_category_total_by_month(b.category, m),
            )
            for b in self._store.get_budgets_by_month(m)
        ]

    def get_category_breakdown(self, month: str | None = None) -> list[dict]:
        """Return [{category, amount, budget, remaining}, ...] for budget and expense categories."""
        m = month or current_month_str()
        budgets = self._store.get_budgets_by_month(m)
        expenses = self._store.get_expenses_by_month(m)
        categories = sorted(
            {b.category for b in budgets} | {e.category for e in expenses}
        )
        rows = []
        for category in categories:
            total = self._store.get_category_total_by_month(category, m)
            budget = self._store.get_budget(category, m)
            limit = budget.amount if budget else 0
            if total == 0 and limit == 0:
                continue
            rows.append({
                "category": category,
                "amount": total,
                "budget": limit,
                "remaining": limit - total if budget else 0,
            })
        return rows

    def get_payment_method_breakdown(self, month: str | None = None) -> list[dict]:
        """Return [{method, label, amount}, ...] in canonical order, non-zero only."""
        by_method = self.get_monthly_summary(month).expenses_by_payment_method
        return [
            {
                "method": method,
                "label": PAYMENT_METHOD_LABELS[method],
                "amount": by_method[method],
            }
            for method in PAYMENT_METHODS
            if by_method.get(method, 0) > 0
        ]

    def get_monthly_trend(
        self, months: int = TREND_MONTHS, end_month: str | None = None
    ) -> list[dict]:
        """Return [{month, amount}, ...] oldest first, for a bar chart."""
        return [
            {
                "month": m,
                "amount": sum(e.amount for e in self._store.get_expenses_by_month(m)),
            }
            for m in recent_months(months, end_month)
        ]

    def get_unallocated_balance(self, month: str | None = None) -> int:
        """Total balance across payment methods minus the month's budgeted total."""
        m = month or current_month_str()
        allocated = sum(b.amount for b in self._store.get_budgets_by_month(m))
        return self._store.get_total_balance() - allocated

    def get_recent_expenses(
        self, month: str | None = None, limit: int = RECENT_EXPENSE_LIMIT
    ) -> list:
        """Newest expenses of the month (default current), at most `limit`."""
        m = month or current_month_str()
        return self._store.get_expenses(month=m)[:limit]

    def get_usage_by_method(self, method: str, month: str | None = None) -> int:
        """Total spent with a payment method; all months unless one is given."""
        return sum(e.amount for e in self._store.get_expenses(month=month, payment_method=method))

    def get_credit_card_due_total(self, month: str | None = None) -> int:
        """Credit card spending awaiting settlement; 0 when no card is configured."""
        if not any(m.name == "credit_card" for m in self._store.payment_methods):
            return 0
        return self.get_usage_by_method("credit_card", month)
