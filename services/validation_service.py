"""Form-level validation performed before calling the store mutators.

The store itself persists whatever it is given; these checks turn raw form
input into clean keyword arguments or raise ValueError with a message fit
for display.
"""
from services.budget_store import BudgetStore
from utils.constants import PAYMENT_METHODS
from utils.date_helpers import parse_date, parse_month


class ValidationService:
    def validate_expense(self, data: dict) -> dict:
        amount = self._to_int(data.get("amount"), "Amount")
        if amount is None or amount < 1:
            raise ValueError("Amount must be at least 1.")
        category = self._text(data.get("category"))
        if not category:
            raise ValueError("Please choose a category.")
        payment_method = self._payment_method(data.get("payment_method"))
        date_str = self._text(data.get("date"))
        if parse_date(date_str) is None:
            raise ValueError("Invalid date format. Use YYYY-MM-DD.")
        return {
            "amount": amount,
            "category": category,
            "payment_method": payment_method,
            "date": date_str,
            "description": self._text(data.get("description")),
        }

    def validate_budget(self, data: dict) -> dict:
        category = self._text(data.get("category"))
        if not category:
            raise ValueError("Please choose a category.")
        amount = self._to_int(data.get("amount"), "Budget amount")
        if amount is None or amount < 1:
            raise ValueError("Budget amount must be at least 1.")
        month = self._text(data.get("month"))
        if parse_month(month) is None:
            raise ValueError("Invalid month format. Use YYYY-MM.")
        return {"category": category, "amount": amount, "month": month}

    def validate_budget_allocation(
        self,
        store: BudgetStore,
        category: str,
        amount: int,
        month: str,
        budget_id: str | None = None,
    ):
        """Reject a budget that would push the month's allocated total above
        the total balance of all payment methods.

        The budget being edited (budget_id), or the one an add would overwrite,
        does not count towards the existing total.
        """
        if budget_id is None:
            existing = store.get_budget(category, month)
            budget_id = existing.id if existing else None
        allocated = sum(
            b.amount for b in store.get_budgets_by_month(month) if b.id != budget_id
        )
        if allocated + amount > store.get_total_balance():
            raise ValueError("Budgets cannot exceed the total balance of your payment methods.")

    def validate_payment_method(self, data: dict) -> dict:
        name = self._payment_method(data.get("name"))
        balance = self._to_int(data.get("balance"), "Balance")
        if balance is None or balance < 0:
            raise ValueError("Balance must be 0 or greater.")
        credit_limit = self._to_int(data.get("credit_limit"), "Credit limit")
        if credit_limit is not None and credit_limit < 0:
            raise ValueError("Credit limit must be 0 or greater.")
        billing_date = self._to_int(data.get("billing_date"), "Billing date")
        if billing_date is not None and not 1 <= billing_date <= 31:
            raise ValueError("Billing date must be between 1 and 31.")
        return {
            "name": name,
            "balance": balance,
            "credit_limit": credit_limit,
            "billing_date": billing_date,
            "notes": self._text(data.get("notes")),
        }

    def validate_budget_category(self, data: dict) -> dict:
        name = self._text(data.get("name"))
        if not name:
            raise ValueError("Category name cannot be empty.")
        return {"name": name}

    # ── Helpers ──────────────────────────────────────────────────────────────

    @staticmethod
    def _text(value) -> str:
        return str(value).strip() if value is not None else ""

    @staticmethod
    def _to_int(value, label: str) -> int | None:
        """Blank input is None; anything else must be a whole number."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        if isinstance(value, bool):
            raise ValueError(f"{label} must be a whole number.")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"{label} must be a whole number.")
            return int(value)
        try:
            return int(str(value).strip().replace(",", ""))
        except ValueError:
            raise ValueError(f"{label} must be a whole number.") from None

    @staticmethod
    def _payment_method(value) -> str:
        if value not in PAYMENT_METHODS:
            raise ValueError(
                f"Invalid payment method '{value}'. "
                f"Must be one of: {', '.join(PAYMENT_METHODS)}."
            )
        return value
