import pytest

from database.db_manager import DatabaseManager
from services.budget_store import BudgetStore


@pytest.fixture
def db():
    manager = DatabaseManager(":memory:")
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def store(db):
    s = BudgetStore.from_db(db)
    s.initialize()
    return s
