from database.collection_dao import CollectionDAO
from database.expense_dao import normalize_payment_method
from models.payment_method import PaymentMethodConfig
from utils.constants import STORAGE_KEYS


class PaymentMethodDAO(CollectionDAO):
    storage_key = STORAGE_KEYS["payment_methods"]
    model_class = PaymentMethodConfig

    def _record_to_model(self, record: dict) -> PaymentMethodConfig:
        return PaymentMethodConfig(
            id=self._required(record, "id", str),
            name=normalize_payment_method(self._required(record, "name", str)),
            balance=self._required(record, "balance", int),
            credit_limit=self._optional(record, "creditLimit", int),
            billing_date=self._optional(record, "billingDate", int),
            notes=self._optional(record, "notes", str, ""),
        )

    def _model_to_record(self, method: PaymentMethodConfig) -> dict:
        record = {
            "id": method.id,
            "name": method.name,
            "balance": method.balance,
        }
        # Optional keys are omitted rather than written as null
        if method.credit_limit is not None:
            record["creditLimit"] = method.credit_limit
        if method.billing_date is not None:
            record["billingDate"] = method.billing_date
        if method.notes:
            record["notes"] = method.notes
        return record
