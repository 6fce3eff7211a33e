import pytest

from services.validation_service import ValidationService


@pytest.fixture
def validator():
    return ValidationService()


def test_validate_expense_cleans_form_input(validator):
    cleaned = validator.validate_expense({
        "amount": "1,500",
        "category": " 食費 ",
        "payment_method": "cash",
        "date": "2024-01-15",
    })
    assert cleaned == {
        "amount": 1500,
        "category": "食費",
        "payment_method": "cash",
        "date": "2024-01-15",
        "description": "",
    }


@pytest.mark.parametrize("amount", [0, -5, "", None, "abc", 10.5])
def test_validate_expense_rejects_bad_amount(validator, amount):
    with pytest.raises(ValueError):
        validator.validate_expense({
            "amount": amount, "category": "食費",
            "payment_method": "cash", "date": "2024-01-15",
        })


def test_validate_expense_requires_category(validator):
    with pytest.raises(ValueError, match="category"):
        validator.validate_expense({
            "amount": 100, "category": "  ",
            "payment_method": "cash", "date": "2024-01-15",
        })


def test_validate_expense_rejects_unknown_payment_method(validator):
    with pytest.raises(ValueError, match="payment method"):
        validator.validate_expense({
            "amount": 100, "category": "食費",
            "payment_method": "bitcoin", "date": "2024-01-15",
        })


def test_validate_expense_rejects_bad_date(validator):
    with pytest.raises(ValueError, match="date"):
        validator.validate_expense({
            "amount": 100, "category": "食費",
            "payment_method": "cash", "date": "2024-02-30",
        })


def test_validate_budget(validator):
    assert validator.validate_budget(
        {"category": "食費", "amount": 50000, "month": "2024-01"}
    ) == {"category": "食費", "amount": 50000, "month": "2024-01"}
    with pytest.raises(ValueError, match="month"):
        validator.validate_budget({"category": "食費", "amount": 1, "month": "2024-13"})


def test_validate_payment_method_optional_fields(validator):
    cleaned = validator.validate_payment_method({
        "name": "credit_card", "balance": "0", "credit_limit": "", "billing_date": 27,
    })
    assert cleaned == {
        "name": "credit_card",
        "balance": 0,
        "credit_limit": None,
        "billing_date": 27,
        "notes": "",
    }


@pytest.mark.parametrize("billing_date", [0, 32])
def test_validate_payment_method_billing_date_range(validator, billing_date):
    with pytest.raises(ValueError, match="Billing date"):
        validator.validate_payment_method(
            {"name": "credit_card", "balance": 0, "billing_date": billing_date}
        )


def test_validate_payment_method_rejects_negative_balance(validator):
    with pytest.raises(ValueError, match="Balance"):
        validator.validate_payment_method({"name": "cash", "balance": -1})


def test_validate_budget_category(validator):
    assert validator.validate_budget_category({"name": " 趣味 "}) == {"name": "趣味"}
    with pytest.raises(ValueError):
        validator.validate_budget_category({"name": ""})


@pytest.fixture
def funded(store):
    store.add_payment_method(name="cash", balance=60000)
    store.add_budget(category="食費", amount=40000, month="2024-01")
    return store


def test_budget_allocation_within_balance(validator, funded):
    validator.validate_budget_allocation(funded, "交通費", 20000, "2024-01")
    validator.validate_budget_allocation(funded, "交通費", 60000, "2024-02")


def test_budget_allocation_over_balance(validator, funded):
    with pytest.raises(ValueError, match="total balance"):
        validator.validate_budget_allocation(funded, "交通費", 20001, "2024-01")


def test_budget_allocation_excludes_edited_budget(validator, funded):
    food = funded.get_budget("食費", "2024-01")
    validator.validate_budget_allocation(funded, "食費", 60000, "2024-01", budget_id=food.id)
    validator.validate_budget_allocation(funded, "食費", 60000, "2024-01")
    with pytest.raises(ValueError):
        validator.validate_budget_allocation(funded, "食費", 60001, "2024-01", budget_id=food.id)
