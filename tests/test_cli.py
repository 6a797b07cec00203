from __future__ import annotations

import json

import pytest

from synccode.cli import build_parser, main


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch) -> None:
    monkeypatch.delenv("SYNCCODE_REGISTRY", raising=False)
    monkeypatch.delenv("SYNCCODE_LOG_LEVEL", raising=False)


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_validate_prints_canonical(capsys) -> None:
    assert main(["validate", "zbtu-0034"]) == 0
    assert capsys.readouterr().out.strip() == "ZBTU-0034"


def test_validate_reports_error(capsys, caplog) -> None:
    assert main(["validate", "ZXYZ-0034"]) == 1
    assert capsys.readouterr().out == ""
    assert "Device type not allowed. (ZXYZ-0034)" in caplog.text


def test_check_sets_exit_status(capsys) -> None:
    assert main(["check", "ZBTU-0034"]) == 0
    assert capsys.readouterr().out.strip() == "valid"
    assert main(["check", "garbage"]) == 1
    assert capsys.readouterr().out.strip() == "invalid"


def test_make_split_and_hyphenate(capsys) -> None:
    assert main(["make", "A", "BTU", "1234"]) == 0
    assert main(["split", "ZBTU-0034"]) == 0
    assert main(["hyphenate", "ZBTU0034"]) == 0
    assert capsys.readouterr().out.splitlines() == ["ABTU-1234", "ZBTU 0034", "ZBTU-0034"]


def test_parse_prints_json(capsys) -> None:
    assert main(["parse", "zbtu-0034"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "series": "Z",
        "device": "BTU",
        "identifier": "0034",
        "description": "Energy Sensor",
        "model": "BTU-0100",
        "canonical": "ZBTU-0034",
        "number": 34,
    }


def test_devices_lists_registry(capsys) -> None:
    assert main(["devices"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 14
    assert lines[0] == "BTU\tEnergy Sensor\tBTU-0100"


def test_registry_from_environment(tmp_path, monkeypatch, capsys) -> None:
    path = tmp_path / "devices.json"
    path.write_text(json.dumps({"devices": ["TST"]}), encoding="utf-8")
    monkeypatch.setenv("SYNCCODE_REGISTRY", str(path))

    assert main(["validate", "atst-0001"]) == 0
    assert capsys.readouterr().out.strip() == "ATST-0001"
    assert main(["check", "ABTU-0001"]) == 1


def test_registry_flag_overrides_environment(tmp_path, monkeypatch, capsys) -> None:
    env_path = tmp_path / "env.json"
    env_path.write_text(json.dumps({"devices": ["ENV"]}), encoding="utf-8")
    flag_path = tmp_path / "flag.json"
    flag_path.write_text(json.dumps({"devices": ["FLG"]}), encoding="utf-8")
    monkeypatch.setenv("SYNCCODE_REGISTRY", str(env_path))

    assert main(["--registry", str(flag_path), "devices"]) == 0
    assert capsys.readouterr().out.strip() == "FLG"


def test_unknown_log_level_does_not_crash(monkeypatch, capsys) -> None:
    monkeypatch.setenv("SYNCCODE_LOG_LEVEL", "LOGGER")

    assert main(["validate", "zbtu-0034"]) == 0
    assert capsys.readouterr().out.strip() == "ZBTU-0034"
