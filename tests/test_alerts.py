from __future__ import annotations

import pytest

from choreboard.core import alerts
from choreboard.core import config as core_config
from choreboard.routers.crud import parse_sort


@pytest.fixture()
def app_name(monkeypatch):
    monkeypatch.setenv("APP_NAME", "flatApp")
    core_config.get_settings.cache_clear()
    yield "flatApp"
    core_config.get_settings.cache_clear()


def test_success_alerts(app_name):
    assert alerts.entity_creation_alert("badge", "3") == {
        "X-flatApp-alert": "A new badge is created with identifier 3",
        "X-flatApp-params": "3",
    }
    assert alerts.entity_update_alert("flat", "4")["X-flatApp-alert"] == "A flat is updated with identifier 4"
    assert alerts.entity_deletion_alert("chore", "5")["X-flatApp-alert"] == "A chore is deleted with identifier 5"


def test_failure_alert(app_name):
    assert alerts.failure_alert("flat", "idexists") == {
        "X-flatApp-error": "error.idexists",
        "X-flatApp-params": "flat",
    }
    assert alerts.alert_header_names() == ["X-flatApp-alert", "X-flatApp-error", "X-flatApp-params"]


def test_parse_sort():
    sortable = {"id": "id", "name": "name", "earnedAt": "earned_at"}
    assert parse_sort(["name,desc", "id"], sortable) == [("name", True), ("id", False)]
    assert parse_sort(["earnedAt,id,ASC"], sortable) == [("earned_at", False), ("id", False)]
    assert parse_sort([], sortable) == []
    with pytest.raises(ValueError):
        parse_sort(["colour"], sortable)
