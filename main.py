import argparse
import os
import sys

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.db_manager import DatabaseManager
from services.budget_store import BudgetStore
from services.report_service import ReportService
from utils.app_config import get_currency_symbol, get_db_folder
from utils.constants import APP_NAME, PAYMENT_METHOD_LABELS
from utils.currency import format_currency, format_signed
from utils.date_helpers import current_month_str, format_display_date, friendly_month
from utils.logging_setup import configure_logging


def print_summary(store: BudgetStore, month: str, symbol: str):
    reports = ReportService(store)
    summary = reports.get_monthly_summary(month)

    print(f"{APP_NAME}: {friendly_month(month)}")
    print(f"  Expenses:      {format_currency(summary.total_expenses, symbol)}")
    print(f"  Budgeted:      {format_currency(summary.total_budget, symbol)}")
    print(f"  Total balance: {format_currency(store.get_total_balance(), symbol)}")
    print(f"  Unallocated:   {format_signed(reports.get_unallocated_balance(month), symbol)}")

    statuses = reports.get_budget_status(month)
    if statuses:
        print("Budgets:")
    for status in statuses:
        flag = "  OVER" if status.exceeded else ""
        print(
            f"  {status.category}: {format_currency(status.spent, symbol)}"
            f" / {format_currency(status.budget.amount, symbol)}"
            f" ({status.percentage:.0%}){flag}"
        )

    recent = reports.get_recent_expenses(month)
    if recent:
        print("Recent expenses:")
    for e in recent:
        method = PAYMENT_METHOD_LABELS.get(e.payment_method, e.payment_method)
        print(
            f"  {format_display_date(e.date)} {e.category}"
            f" {format_currency(e.amount, symbol)} ({method})"
        )


def main(argv=None):
    parser = argparse.ArgumentParser(description=f"{APP_NAME} monthly summary")
    parser.add_argument("--month", default=current_month_str(), help="YYYY-MM")
    parser.add_argument("--db-folder", default=None)
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    db = DatabaseManager.open(db_folder=args.db_folder or get_db_folder())
    try:
        store = BudgetStore.from_db(db)
        store.initialize()
        print_summary(store, args.month, get_currency_symbol())
    finally:
        db.close()


if __name__ == "__main__":
    main()
