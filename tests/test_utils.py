import json

import pytest

from utils import app_config
from utils.currency import format_currency, format_signed
from utils.date_helpers import (
    format_display_date,
    friendly_month,
    next_month,
    now_iso,
    today_str,
    prev_month,
    recent_months,
)


def test_format_currency():
    assert format_currency(1000) == "¥1,000"
    assert format_currency(1000000) == "¥1,000,000"
    assert format_currency(0) == "¥0"
    assert format_currency(-1000) == "-¥1,000"
    assert format_currency(1234, symbol="$") == "$1,234"


def test_format_signed():
    assert format_signed(500) == "+¥500"
    assert format_signed(-500) == "-¥500"


def test_month_navigation():
    assert prev_month("2024-01") == "2023-12"
    assert next_month("2024-12") == "2025-01"
    with pytest.raises(ValueError):
        prev_month("January")


def test_recent_months_oldest_first():
    assert recent_months(3, "2024-02") == ["2023-12", "2024-01", "2024-02"]


def test_japanese_display_formats():
    assert friendly_month("2024-01") == "2024年1月"
    assert friendly_month("2024-12") == "2024年12月"
    assert format_display_date("2024-01-15") == "2024年1月15日"
    assert format_display_date("bad") == "bad"


def test_now_iso_is_utc():
    stamp = now_iso()
    assert stamp.endswith("Z")
    assert "T" in stamp


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "kakeibo" / "config.json"
    monkeypatch.setattr(app_config, "CONFIG_FILE", path)
    return path


def test_load_config_missing_file(config_file):
    assert app_config.load_config() == {}


def test_load_config_corrupt_file(config_file):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("{broken", encoding="utf-8")
    assert app_config.load_config() == {}


def test_db_folder_round_trip(config_file):
    app_config.set_db_folder("/data/kakeibo")
    assert app_config.get_db_folder() == "/data/kakeibo"
    assert json.loads(config_file.read_text(encoding="utf-8")) == {"db_folder": "/data/kakeibo"}
    app_config.set_db_folder(None)
    assert app_config.get_db_folder() is None


def test_currency_symbol_default(config_file):
    assert app_config.get_currency_symbol() == "¥"


def test_today_str_is_iso_date():
    assert len(today_str()) == 10
    assert today_str()[4] == "-"
