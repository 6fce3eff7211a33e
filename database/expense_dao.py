from database.collection_dao import CollectionDAO
from models.expense import Expense
from utils.constants import PAYMENT_METHOD_LABELS, STORAGE_KEYS

# Records written by the browser build carry the display label instead of the code
_CODES_BY_LABEL = {label: code for code, label in PAYMENT_METHOD_LABELS.items()}


def normalize_payment_method(value: str) -> str:
    return _CODES_BY_LABEL.get(value, value)


class ExpenseDAO(CollectionDAO):
    storage_key = STORAGE_KEYS["expenses"]
    model_class = Expense

    def _record_to_model(self, record: dict) -> Expense:
        return Expense(
            id=self._required(record, "id", str),
            amount=self._required(record, "amount", int),
            category=self._required(record, "category", str),
            payment_method=normalize_payment_method(
                self._required(record, "paymentMethod", str)
            ),
            date=self._required(record, "date", str),
            description=self._optional(record, "description", str, ""),
            created_at=self._optional(record, "createdAt", str, ""),
        )

    def _model_to_record(self, expense: Expense) -> dict:
        return {
            "id": expense.id,
            "amount": expense.amount,
            "category": expense.category,
            "paymentMethod": expense.payment_method,
            "description": expense.description,
            "date": expense.date,
            "createdAt": expense.created_at,
        }
