"""CSV loader and validator for initial participants."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

REQUIRED_COLUMNS = ["identity", "tickets"]
COLUMN_ALIASES = {"participant": "identity", "name": "identity", "weight": "tickets"}


class DataValidationError(ValueError):
    """Raised when participant data fails validation."""


class ParticipantCsvLoader:
    """Load and validate ``identity,tickets`` CSV data."""

    def load_csv(self, path: str | Path, encoding: str = "utf-8") -> pd.DataFrame:
        """Load CSV and normalize column names."""
        csv_path = Path(path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_path}")

        dataframe = pd.read_csv(csv_path, encoding=encoding, dtype=str, keep_default_na=False)
        return self._normalize_columns(dataframe)

    def validate(self, dataframe: pd.DataFrame) -> None:
        """Validate schema, identities and ticket counts."""
        missing = [col for col in REQUIRED_COLUMNS if col not in dataframe.columns]
        if missing:
            raise DataValidationError(f"Missing required columns: {missing}")

        identities = dataframe["identity"].astype(str).str.strip()
        blank = identities == ""
        if blank.any():
            rows = (dataframe.index[blank.to_numpy()] + 1).tolist()
            raise DataValidationError(f"Blank identity at rows: {rows}")

        try:
            tickets = pd.to_numeric(dataframe["tickets"], errors="raise")
        except (ValueError, TypeError) as exc:
            raise DataValidationError("Column 'tickets' must be numeric.") from exc

        invalid = (tickets < 1) | (tickets % 1 != 0) | tickets.isna()
        if invalid.any():
            rows = (dataframe.index[invalid.to_numpy()] + 1).tolist()
            raise DataValidationError(
                f"Column 'tickets' must hold natural numbers; invalid at rows: {rows}"
            )

    def to_entries(self, dataframe: pd.DataFrame) -> list[tuple[Any, int]]:
        """Return ``(identity, tickets)`` pairs in file order."""
        self.validate(dataframe)
        identities = dataframe["identity"].astype(str).str.strip().tolist()
        tickets = pd.to_numeric(dataframe["tickets"]).astype(int).tolist()
        return list(zip(identities, tickets))

    def load_and_validate(self, path: str | Path, encoding: str = "utf-8") -> list[tuple[Any, int]]:
        """Load CSV, validate it, and return participant entries."""
        dataframe = self.load_csv(path, encoding=encoding)
        return self.to_entries(dataframe)

    @staticmethod
    def _normalize_columns(dataframe: pd.DataFrame) -> pd.DataFrame:
        normalized = {}
        for column in dataframe.columns:
            new_name = str(column).strip().lower()
            normalized[column] = COLUMN_ALIASES.get(new_name, new_name)
        return dataframe.rename(columns=normalized)
