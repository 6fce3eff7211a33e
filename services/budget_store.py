"""In-memory source of truth for expenses, budgets, payment methods and
budget categories.

One ``BudgetStore`` is built per session and handed to every consumer.
Mutators write through to the collection DAOs and then update memory, so
memory and storage agree after every call. Queries are plain linear scans
recomputed on each call.
"""
import dataclasses
import logging
import uuid

from database.budget_category_dao import BudgetCategoryDAO
from database.budget_dao import BudgetDAO
from database.collection_dao import CollectionDAO
from database.expense_dao import ExpenseDAO
from database.payment_method_dao import PaymentMethodDAO
from models.budget import Budget
from models.budget_category import BudgetCategory
from models.expense import Expense
from models.payment_method import PaymentMethodConfig
from utils.date_helpers import now_iso

logger = logging.getLogger(__name__)


def new_id() -> str:
    return str(uuid.uuid4())


class BudgetStore:
    def __init__(
        self,
        expense_dao: ExpenseDAO,
        budget_dao: BudgetDAO,
        payment_method_dao: PaymentMethodDAO,
        budget_category_dao: BudgetCategoryDAO,
    ):
        self._expense_dao = expense_dao
        self._budget_dao = budget_dao
        self._payment_method_dao = payment_method_dao
        self._budget_category_dao = budget_category_dao
        self._expenses: list[Expense] = []
        self._budgets: list[Budget] = []
        self._payment_methods: list[PaymentMethodConfig] = []
        self._budget_categories: list[BudgetCategory] = []

    @classmethod
    def from_db(cls, db) -> "BudgetStore":
        return cls(
            ExpenseDAO(db),
            BudgetDAO(db),
            PaymentMethodDAO(db),
            BudgetCategoryDAO(db),
        )

    # ── State ────────────────────────────────────────────────────────────────

    @property
    def expenses(self) -> list[Expense]:
        return list(self._expenses)

    @property
    def budgets(self) -> list[Budget]:
        return list(self._budgets)

    @property
    def payment_methods(self) -> list[PaymentMethodConfig]:
        return list(self._payment_methods)

    @property
    def budget_categories(self) -> list[BudgetCategory]:
        return list(self._budget_categories)

    def initialize(self):
        """Reload every collection from storage, replacing what is held.

        Does nothing when storage is unavailable, so memory-only records survive.
        """
        if not self._expense_dao.available:
            logger.debug("Storage unavailable; keeping in-memory state")
            return
        # Decode all four before replacing any
        expenses = self._expense_dao.get_all()
        budgets = self._budget_dao.get_all()
        payment_methods = self._payment_method_dao.get_all()
        budget_categories = self._budget_category_dao.get_all()
        self._expenses = expenses
        self._budgets = budgets
        self._payment_methods = payment_methods
        self._budget_categories = budget_categories
        logger.debug(
            "Loaded %d expenses, %d budgets, %d payment methods, %d categories",
            len(self._expenses), len(self._budgets),
            len(self._payment_methods), len(self._budget_categories),
        )

    # ── Expenses ─────────────────────────────────────────────────────────────

    def add_expense(
        self,
        amount: int,
        category: str,
        payment_method: str,
        date: str,
        description: str = "",
    ) -> Expense:
        expense = Expense(
            id=new_id(),
            amount=amount,
            category=category,
            payment_method=payment_method,
            date=date,
            description=description,
            created_at=now_iso(),
        )
        self._expense_dao.add(expense)
        self._expenses.append(expense)
        logger.debug("Added expense %s (%s, %d)", expense.id, category, amount)
        return expense

    def update_expense(self, expense_id: str, **updates):
        self._expenses = self._patch(self._expense_dao, self._expenses, expense_id, updates)

    def delete_expense(self, expense_id: str):
        self._expenses = self._remove(self._expense_dao, self._expenses, expense_id)

    # ── Budgets ──────────────────────────────────────────────────────────────

    def add_budget(self, category: str, amount: int, month: str) -> Budget:
        """Create a budget, or overwrite the amount of the one already set
        for the same category and month."""
        existing = self.get_budget(category, month)
        if existing is not None:
            self.update_budget(existing.id, amount=amount)
            logger.debug("Replaced budget %s for %s %s", existing.id, category, month)
            return self.get_budget(category, month)
        budget = Budget(
            id=new_id(),
            category=category,
            amount=amount,
            month=month,
            created_at=now_iso(),
        )
        self._budget_dao.add(budget)
        self._budgets.append(budget)
        logger.debug("Added budget %s (%s %s, %d)", budget.id, category, month, amount)
        return budget

    def update_budget(self, budget_id: str, **updates):
        """Patch a budget. Raises ValueError if the patch would give it the
        category and month of another budget."""
        current = next((b for b in self._budgets if b.id == budget_id), None)
        if current is not None and ("category" in updates or "month" in updates):
            category = updates.get("category", current.category)
            month = updates.get("month", current.month)
            clash = self.get_budget(category, month)
            if clash is not None and clash.id != budget_id:
                raise ValueError(f"A budget for '{category}' in {month} already exists.")
        self._budgets = self._patch(self._budget_dao, self._budgets, budget_id, updates)

    def delete_budget(self, budget_id: str):
        self._budgets = self._remove(self._budget_dao, self._budgets, budget_id)

    # ── Payment methods ──────────────────────────────────────────────────────

    def add_payment_method(
        self,
        name: str,
        balance: int,
        credit_limit: int | None = None,
        billing_date: int | None = None,
        notes: str = "",
    ) -> PaymentMethodConfig:
        method = PaymentMethodConfig(
            id=new_id(),
            name=name,
            balance=balance,
            credit_limit=credit_limit,
            billing_date=billing_date,
            notes=notes,
        )
        self._payment_method_dao.add(method)
        self._payment_methods.append(method)
        logger.debug("Added payment method %s (%s)", method.id, name)
        return method

    def update_payment_method(self, method_id: str, **updates):
        self._payment_methods = self._patch(
            self._payment_method_dao, self._payment_methods, method_id, updates
        )

    def delete_payment_method(self, method_id: str):
        self._payment_methods = self._remove(
            self._payment_method_dao, self._payment_methods, method_id
        )

    # ── Budget categories ────────────────────────────────────────────────────

    def add_budget_category(self, name: str) -> BudgetCategory:
        category = BudgetCategory(id=new_id(), name=name, created_at=now_iso())
        self._budget_category_dao.add(category)
        self._budget_categories.append(category)
        logger.debug("Added budget category %s (%s)", category.id, name)
        return category

    def update_budget_category(self, category_id: str, **updates):
        self._budget_categories = self._patch(
            self._budget_category_dao, self._budget_categories, category_id, updates
        )

    def delete_budget_category(self, category_id: str):
        self._budget_categories = self._remove(
            self._budget_category_dao, self._budget_categories, category_id
        )

    # ── Queries ──────────────────────────────────────────────────────────────

    def get_expenses_by_month(self, month: str) -> list[Expense]:
        return [e for e in self._expenses if e.date.startswith(month)]

    def get_budgets_by_month(self, month: str) -> list[Budget]:
        return [b for b in self._budgets if b.month == month]

    def get_budget(self, category: str, month: str) -> Budget | None:
        for budget in self._budgets:
            if budget.category == category and budget.month == month:
                return budget
        return None

    def get_category_total_by_month(self, category: str, month: str) -> int:
        return sum(
            e.amount for e in self.get_expenses_by_month(month)
            if e.category == category
        )

    def is_budget_exceeded(self, category: str, month: str) -> bool:
        budget = self.get_budget(category, month)
        if budget is None:
            return False
        return self.get_category_total_by_month(category, month) > budget.amount

    def get_total_balance(self) -> int:
        return sum(m.balance for m in self._payment_methods)

    def get_categories(self) -> list[str]:
        """Sorted distinct labels from the category registry and from budgets."""
        names = {c.name for c in self._budget_categories}
        names.update(b.category for b in self._budgets)
        return sorted(names)

    def get_expenses(
        self,
        month: str | None = None,
        category: str | None = None,
        payment_method: str | None = None,
    ) -> list[Expense]:
        """Expenses matching every filter given, newest date first."""
        expenses = self._expenses
        if month:
            expenses = [e for e in expenses if e.date.startswith(month)]
        if category:
            expenses = [e for e in expenses if e.category == category]
        if payment_method:
            expenses = [e for e in expenses if e.payment_method == payment_method]
        return sorted(expenses, key=lambda e: e.date, reverse=True)

    # ── Helpers ──────────────────────────────────────────────────────────────

    @staticmethod
    def _patch(dao: CollectionDAO, items: list, item_id: str, updates: dict) -> list:
        # The identifier is fixed at creation
        updates = {k: v for k, v in updates.items() if k != "id"}
        dao.update(item_id, updates)
        return [
            dataclasses.replace(item, **updates) if item.id == item_id else item
            for item in items
        ]

    @staticmethod
    def _remove(dao: CollectionDAO, items: list, item_id: str) -> list:
        dao.delete(item_id)
        return [item for item in items if item.id != item_id]
