APP_NAME = "Kakeibo"
DB_FILE = "kakeibo.db"
DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"
DEFAULT_CURRENCY_SYMBOL = "¥"
TREND_MONTHS = 6
RECENT_EXPENSE_LIMIT = 5

# Storage keys kept identical to the browser build so exported data stays readable
STORAGE_KEYS = {
    "expenses":          "budget-app-expenses",
    "budgets":           "budget-app-budgets",
    "payment_methods":   "budget-app-payment-methods",
    "budget_categories": "budget-app-budget-categories",
}

PAYMENT_METHODS = ("cash", "credit_card", "debit_card", "mobile_pay", "other")

PAYMENT_METHOD_LABELS = {
    "cash":        "現金",
    "credit_card": "クレジットカード",
    "debit_card":  "デビットカード",
    "mobile_pay":  "PayPay",
    "other":       "その他",
}

CHART_COLORS = [
    "#0088FE", "#00C49F", "#FFBB28", "#FF8042",
    "#8884D8", "#82CA9D", "#FFC658", "#FF7C7C",
]
BUDGET_BAR_COLOR = "#82CA9D"
SPENT_BAR_COLOR = "#8884D8"
