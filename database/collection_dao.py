"""Whole-collection persistence of record lists under fixed storage keys.

Every collection is stored as one JSON array. Writes always replace the
whole array; add/update/delete are read-all, mutate, write-all.
"""
import dataclasses
import json
import logging
from typing import Any

from database.db_manager import DatabaseManager

logger = logging.getLogger(__name__)

_MISSING = object()


class StorageFormatError(ValueError):
    """Stored data under a collection key could not be decoded."""

    def __init__(self, key: str, message: str):
        super().__init__(f"Malformed data under '{key}': {message}")
        self.key = key


class CollectionDAO:
    storage_key = ""
    model_class: type = object

    def __init__(self, db: DatabaseManager):
        self._db = db

    @property
    def available(self) -> bool:
        return self._db.available

    # ── Subclass hooks ───────────────────────────────────────────────────────

    def _record_to_model(self, record: dict):
        raise NotImplementedError

    def _model_to_record(self, model) -> dict:
        raise NotImplementedError

    # ── Collection access ────────────────────────────────────────────────────

    def get_all(self) -> list:
        raw = self._db.get_item(self.storage_key)
        if raw is None:
            return []
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageFormatError(self.storage_key, f"invalid JSON ({exc.msg})") from exc
        return self.from_records(records)

    def from_records(self, records) -> list:
        """Decode plain records (as stored or exported) into models."""
        if not isinstance(records, list):
            raise StorageFormatError(self.storage_key, "expected a JSON array")
        models = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise StorageFormatError(
                    self.storage_key, f"entry {index} is not an object"
                )
            models.append(self._record_to_model(record))
        return models

    def to_records(self, models: list) -> list[dict]:
        return [self._model_to_record(m) for m in models]

    def save(self, models: list):
        payload = json.dumps(self.to_records(models), ensure_ascii=False)
        self._db.set_item(self.storage_key, payload)

    def add(self, model):
        models = self.get_all()
        models.append(model)
        self.save(models)

    def check_fields(self, updates: dict[str, Any]):
        known = {f.name for f in dataclasses.fields(self.model_class)}
        unknown = sorted(set(updates) - known)
        if unknown:
            raise TypeError(
                f"{self.model_class.__name__} has no field(s): {', '.join(unknown)}"
            )

    def update(self, item_id: str, updates: dict[str, Any]):
        """Merge updates into the matching record. Returns None when id is unknown."""
        self.check_fields(updates)
        models = self.get_all()
        for index, model in enumerate(models):
            if model.id == item_id:
                models[index] = dataclasses.replace(model, **updates)
                self.save(models)
                return models[index]
        logger.debug("No record %s under %s; update skipped", item_id, self.storage_key)
        return None

    def delete(self, item_id: str):
        models = self.get_all()
        kept = [m for m in models if m.id != item_id]
        if len(kept) != len(models):
            self.save(kept)

    # ── Field decoding ───────────────────────────────────────────────────────

    def _required(self, record: dict, name: str, kind: type):
        value = record.get(name, _MISSING)
        if value is _MISSING or value is None:
            raise StorageFormatError(self.storage_key, f"record missing '{name}'")
        return self._check_type(name, value, kind)

    def _optional(self, record: dict, name: str, kind: type, default=None):
        value = record.get(name)
        if value is None:
            return default
        return self._check_type(name, value, kind)

    def _check_type(self, name: str, value, kind: type):
        # bool is an int subclass; amounts and days must be real integers
        if kind is int and isinstance(value, bool):
            raise StorageFormatError(self.storage_key, f"'{name}' must be an integer")
        if kind is int and isinstance(value, float) and value.is_integer():
            return int(value)
        if not isinstance(value, kind):
            raise StorageFormatError(
                self.storage_key, f"'{name}' must be {kind.__name__}, got {type(value).__name__}"
            )
        return value
