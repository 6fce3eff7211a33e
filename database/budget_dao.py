from database.collection_dao import CollectionDAO
from models.budget import Budget
from utils.constants import STORAGE_KEYS


class BudgetDAO(CollectionDAO):
    storage_key = STORAGE_KEYS["budgets"]
    model_class = Budget

    def _record_to_model(self, record: dict) -> Budget:
        return Budget(
            id=self._required(record, "id", str),
            category=self._required(record, "category", str),
            amount=self._required(record, "amount", int),
            month=self._required(record, "month", str),
            created_at=self._optional(record, "createdAt", str, ""),
        )

    def _model_to_record(self, budget: Budget) -> dict:
        return {
            "id": budget.id,
            "category": budget.category,
            "amount": budget.amount,
            "month": budget.month,
            "createdAt": budget.created_at,
        }
