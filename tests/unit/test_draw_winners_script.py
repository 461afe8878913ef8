from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest
from pydantic import ValidationError

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "draw_winners.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("draw_winners", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_script_draws_all_tickets_without_redraw(tmp_path, capsys):
    csv_path = tmp_path / "participants.csv"
    csv_path.write_text("identity,tickets\nalice,2\nbob,1\n", encoding="utf-8")
    script = _load_script()

    exit_code = script.main(["--csv", str(csv_path), "--count", "10", "--no-redraw", "--seed", "4"])

    printed = capsys.readouterr().out.split()
    assert exit_code == 0
    assert sorted(printed) == ["alice", "alice", "bob"]


def test_script_reads_config_and_applies_unique(tmp_path, capsys):
    config_path = tmp_path / "lotto.yaml"
    config_path.write_text(
        "seed: 1\n"
        "participants:\n"
        "  - identity: only\n"
        "    tickets: 5\n"
        "draw:\n"
        "  count: 3\n",
        encoding="utf-8",
    )
    script = _load_script()

    assert script.main(["--config", str(config_path), "--unique"]) == 0
    assert capsys.readouterr().out.split() == ["only"]


def test_script_reports_invalid_count(tmp_path):
    csv_path = tmp_path / "participants.csv"
    csv_path.write_text("identity,tickets\nalice,1\n", encoding="utf-8")
    script = _load_script()

    with pytest.raises(ValidationError, match="count"):
        script.build_config(script.parse_args(["--csv", str(csv_path), "--count", "-3"]))
    with pytest.raises(SystemExit, match="greater than or equal to 0"):
        script.main(["--csv", str(csv_path), "--count", "-3"])
