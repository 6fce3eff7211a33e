import pytest

from database.budget_category_dao import BudgetCategoryDAO
from database.budget_dao import BudgetDAO
from database.collection_dao import StorageFormatError
from database.db_manager import DatabaseManager
from database.expense_dao import ExpenseDAO
from database.payment_method_dao import PaymentMethodDAO
from services.budget_store import BudgetStore
from services.data_service import DataService


def _service(db, store):
    return DataService(store, ExpenseDAO(db), BudgetDAO(db), PaymentMethodDAO(db), BudgetCategoryDAO(db))


@pytest.fixture
def populated(db, store):
    store.add_expense(amount=1000, category="食費", payment_method="cash", date="2024-01-15")
    store.add_budget(category="食費", amount=50000, month="2024-01")
    store.add_payment_method(name="cash", balance=20000)
    store.add_budget_category(name="食費")
    return _service(db, store)


def test_export_contains_every_collection(populated):
    data = populated.export_json()
    assert data["export_version"] == 1
    assert len(data["expenses"]) == 1
    assert data["expenses"][0]["paymentMethod"] == "cash"
    assert data["budgets"][0]["amount"] == 50000
    assert data["payment_methods"][0]["balance"] == 20000
    assert data["budget_categories"][0]["name"] == "食費"


def test_replace_import_into_fresh_database(populated, store):
    data = populated.export_json()
    other_db = DatabaseManager(":memory:")
    other_db.initialize()
    other_store = BudgetStore.from_db(other_db)
    stats = _service(other_db, other_store).import_json(data, "replace")
    assert stats == {"expenses": 1, "budgets": 1, "payment_methods": 1, "budget_categories": 1}
    assert other_store.expenses == store.expenses
    assert other_store.get_total_balance() == 20000
    other_db.close()


def test_merge_import_skips_known_ids(populated, store):
    data = populated.export_json()
    data["expenses"].append({
        "id": "new", "amount": 700, "category": "交通費",
        "paymentMethod": "mobile_pay", "date": "2024-01-20",
    })
    stats = populated.import_json(data, "merge")
    assert stats["expenses"] == 1
    assert stats["budgets"] == 0
    assert len(store.expenses) == 2
    assert store.get_category_total_by_month("交通費", "2024-01") == 700


def test_invalid_mode_raises(populated):
    with pytest.raises(ValueError, match="mode"):
        populated.import_json({}, "append")


def test_malformed_import_writes_nothing(populated, store):
    data = populated.export_json()
    data["budgets"] = [{"id": "b"}]
    with pytest.raises(StorageFormatError):
        populated.import_json(data, "replace")
    assert len(store.expenses) == 1
    assert len(store.budgets) == 1


def test_import_without_storage_reports_nothing_written(populated):
    data = populated.export_json()
    db = DatabaseManager.unavailable()
    store = BudgetStore.from_db(db)
    stats = _service(db, store).import_json(data, "replace")
    assert stats == {"expenses": 0, "budgets": 0, "payment_methods": 0, "budget_categories": 0}
