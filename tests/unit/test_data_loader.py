from __future__ import annotations

import pytest

from lotto.data.loader import DataValidationError, ParticipantCsvLoader


def test_load_csv_with_aliased_columns(tmp_path):
    csv_path = tmp_path / "participants.csv"
    csv_path.write_text(
        "Name, Weight ,memo\n" "alice,3,first\n" " bob ,1,second\n" "007,2,agent\n",
        encoding="utf-8",
    )

    entries = ParticipantCsvLoader().load_and_validate(csv_path)

    assert entries == [("alice", 3), ("bob", 1), ("007", 2)]


def test_integral_float_tickets_are_accepted(tmp_path):
    csv_path = tmp_path / "float.csv"
    csv_path.write_text("identity,tickets\nalice,2.0\n", encoding="utf-8")

    assert ParticipantCsvLoader().load_and_validate(csv_path) == [("alice", 2)]


def test_missing_required_column_raises(tmp_path):
    csv_path = tmp_path / "missing.csv"
    csv_path.write_text("identity\nalice\n", encoding="utf-8")

    loader = ParticipantCsvLoader()
    dataframe = loader.load_csv(csv_path)
    with pytest.raises(DataValidationError, match="Missing required columns"):
        loader.validate(dataframe)


@pytest.mark.parametrize("tickets", ["0", "-2", "1.5"])
def test_non_natural_tickets_raise(tmp_path, tickets):
    csv_path = tmp_path / "tickets.csv"
    csv_path.write_text(f"identity,tickets\nalice,1\nbob,{tickets}\n", encoding="utf-8")

    with pytest.raises(DataValidationError, match=r"invalid at rows: \[2\]"):
        ParticipantCsvLoader().load_and_validate(csv_path)


def test_non_numeric_tickets_raise(tmp_path):
    csv_path = tmp_path / "text.csv"
    csv_path.write_text("identity,tickets\nalice,many\n", encoding="utf-8")

    with pytest.raises(DataValidationError, match="must be numeric"):
        ParticipantCsvLoader().load_and_validate(csv_path)


def test_blank_identity_raises(tmp_path):
    csv_path = tmp_path / "blank.csv"
    csv_path.write_text("identity,tickets\nalice,1\n  ,2\n", encoding="utf-8")

    with pytest.raises(DataValidationError, match="Blank identity"):
        ParticipantCsvLoader().load_and_validate(csv_path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ParticipantCsvLoader().load_csv(tmp_path / "nope.csv")
