"""Export and import all user data (expenses, budgets, payment methods,
budget categories) as a single JSON document.
"""
import logging
from datetime import datetime

from database.budget_category_dao import BudgetCategoryDAO
from database.budget_dao import BudgetDAO
from database.collection_dao import CollectionDAO
from database.expense_dao import ExpenseDAO
from database.payment_method_dao import PaymentMethodDAO
from services.budget_store import BudgetStore

logger = logging.getLogger(__name__)

EXPORT_VERSION = 1
IMPORT_MODES = ("merge", "replace")


class DataService:
    def __init__(
        self,
        store: BudgetStore,
        expense_dao: ExpenseDAO,
        budget_dao: BudgetDAO,
        payment_method_dao: PaymentMethodDAO,
        budget_category_dao: BudgetCategoryDAO,
    ):
        self._store = store
        self._daos: dict[str, CollectionDAO] = {
            "expenses": expense_dao,
            "budgets": budget_dao,
            "payment_methods": payment_method_dao,
            "budget_categories": budget_category_dao,
        }

    # ── Export ────────────────────────────────────────────────────────────────

    def export_json(self) -> dict:
        """Return a full export dict (caller writes to disk)."""
        data = {
            "export_version": EXPORT_VERSION,
            "exported_at": datetime.now().isoformat(),
        }
        for name, dao in self._daos.items():
            data[name] = dao.to_records(dao.get_all())
        return data

    # ── Import ────────────────────────────────────────────────────────────────

    def import_json(self, data: dict, mode: str) -> dict:
        """Import from a previously exported JSON dict.

        mode: 'merge' | 'replace'
        Returns stats dict with the number of records written per collection.
        Every collection is decoded before anything is written.
        """
        if mode not in IMPORT_MODES:
            raise ValueError(f"Invalid import mode '{mode}'. Must be one of: {', '.join(IMPORT_MODES)}.")

        incoming = {
            name: dao.from_records(data.get(name, []))
            for name, dao in self._daos.items()
        }

        stats = {}
        for name, dao in self._daos.items():
            records = incoming[name]
            if not dao.available:
                logger.warning("Storage unavailable; %d %s not imported", len(records), name)
                stats[name] = 0
                continue
            if mode == "replace":
                dao.save(records)
                stats[name] = len(records)
                continue
            current = dao.get_all()
            known = {m.id for m in current}
            added = [m for m in records if m.id not in known]
            dao.save(current + added)
            stats[name] = len(added)

        self._store.initialize()
        logger.info("Imported data (%s): %s", mode, stats)
        return stats
