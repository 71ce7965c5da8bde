import json
import logging

from beerstock.infrastructure.config import Settings
from beerstock.infrastructure.logging import _json_formatter


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="beerstock.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="beer %s not found",
        args=(2,),
        exc_info=None,
    )


def test_json_formatter_renders_message():
    payload = json.loads(_json_formatter(_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "beerstock.test"
    assert payload["message"] == "beer 2 not found"


def test_json_formatter_includes_extra_fields():
    record = _record()
    record.beer_id = 2
    payload = json.loads(_json_formatter(record))
    assert payload["beer_id"] == 2
    assert "pathname" not in payload


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("BEERSTOCK_DATA_FILE", str(tmp_path / "x.json"))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_JSON", "true")
    settings = Settings()
    assert settings.data_file == tmp_path / "x.json"
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True
