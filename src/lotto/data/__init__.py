"""Participant data loading and validation."""

from .loader import DataValidationError, ParticipantCsvLoader

__all__ = ["DataValidationError", "ParticipantCsvLoader"]
