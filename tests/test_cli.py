import json

import pytest

from tomb_crawler import cli


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    monkeypatch.delenv("TOMB_SETTINGS", raising=False)
    monkeypatch.delenv("TOMB_SEED", raising=False)
    monkeypatch.setattr("tomb_crawler.settings.user_settings_path", lambda: tmp_path / "missing.yaml")


def test_scripted_run_prints_summary(capsys):
    rc = cli.main(["--seed", "3", "--script", "wait,mouse 1 1", "--summary"])
    assert rc == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["frames"] == 3
    assert summary["turns"] == 0
    assert summary["player"]["hp"] == 30
    assert summary["player"]["alive"] is True
    assert summary["explored_tiles"] > 0
    assert summary["messages"][0].startswith("Welcome stranger!")


def test_same_seed_same_run(capsys):
    cli.main(["--seed", "8", "--script", "up,up,left", "--summary"])
    first = capsys.readouterr().out
    cli.main(["--seed", "8", "--script", "up,up,left", "--summary"])
    assert capsys.readouterr().out == first


def test_screen_output(capsys):
    assert cli.main(["--seed", "3", "--script", "", "--max-frames", "1"]) == 0
    out = capsys.readouterr().out
    assert "@" in out
    assert "HP: 30/30" in out


def test_bad_settings_file(tmp_path, capsys):
    bad = tmp_path / "bad.yaml"
    bad.write_text("map:\n  width: wide\n", encoding="utf-8")
    assert cli.main(["--settings", str(bad), "--summary"]) == 2
    assert "map/width" in capsys.readouterr().err
    assert cli.main(["--settings", str(tmp_path / "absent.yaml")]) == 2
