"""Tests for the stop_info example script."""
import json
from unittest.mock import patch

import pytest

from conftest import TEST_STOP_ID
from mgtapi.transit import NetworkError, StopData
from scripts import stop_info


@pytest.fixture
def stop(stop_json) -> StopData:
    return StopData.from_json(stop_json)


def test_format_stop(stop):
    out = stop_info.format_stop(stop)
    lines = out.splitlines()
    assert lines[0] == "Остановка: ул. Льва Толстого"
    assert lines[1].startswith("  bus М10 -> Киевский вокзал: ")
    assert lines[1].endswith("*")


def test_format_stop_without_forecasts():
    out = stop_info.format_stop(StopData.model_validate({"name": "Тест", "routePath": [{"type": "tram", "number": "3"}]}))
    assert out.splitlines()[1] == "  tram 3 -> : -"


def test_main_prints_stop(stop, capsys):
    with patch("scripts.stop_info.TransitClient") as client_cls:
        client = client_cls.return_value.__enter__.return_value
        client.get_stop_data.return_value = stop
        code = stop_info.main([TEST_STOP_ID, "--base-url", "http://localhost:9/api/"])

    assert code == 0
    assert client_cls.call_args.args[0] == "http://localhost:9/api/"
    client.get_stop_data.assert_called_once_with(TEST_STOP_ID)
    assert "ул. Льва Толстого" in capsys.readouterr().out


def test_main_json_output(stop, capsys):
    with patch("scripts.stop_info.TransitClient") as client_cls:
        client_cls.return_value.__enter__.return_value.get_stop_data.return_value = stop
        code = stop_info.main(["--json"])

    assert code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["id"] == TEST_STOP_ID
    assert printed["routePath"][0]["number"] == "М10"


def test_main_reports_errors(capsys):
    with patch("scripts.stop_info.TransitClient") as client_cls:
        client_cls.return_value.__enter__.return_value.get_stop_data.side_effect = NetworkError("request error: refused")
        code = stop_info.main([TEST_STOP_ID])

    assert code == 1
    assert "request error: refused" in capsys.readouterr().err
