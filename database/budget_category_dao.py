from database.collection_dao import CollectionDAO
from models.budget_category import BudgetCategory
from utils.constants import STORAGE_KEYS


class BudgetCategoryDAO(CollectionDAO):
    storage_key = STORAGE_KEYS["budget_categories"]
    model_class = BudgetCategory

    def _record_to_model(self, record: dict) -> BudgetCategory:
        return BudgetCategory(
            id=self._required(record, "id", str),
            name=self._required(record, "name", str),
            created_at=self._optional(record, "createdAt", str, ""),
        )

    def _model_to_record(self, category: BudgetCategory) -> dict:
        return {
            "id": category.id,
            "name": category.name,
            "createdAt": category.created_at,
        }
