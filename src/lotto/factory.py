"""Factory functions that build a Lotto from participants, options or config."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .config.schema import LottoConfig
from .data.loader import ParticipantCsvLoader
from .engine.random_source import RandomFunction
from .lotto import Lotto

ParticipantEntry = tuple[Any, int]


@dataclass(frozen=True)
class LottoOptions:
    """Creation options: a custom random function, a seed and initial participants."""

    random: RandomFunction | None = None
    participants: tuple[ParticipantEntry, ...] = field(default_factory=tuple)
    seed: int | None = None


def create_lotto(
    participants_or_options: Iterable[ParticipantEntry] | LottoOptions | Mapping[str, Any] | None = None,
) -> Lotto:
    """Create a Lotto from initial participants or creation options."""
    options = _resolve_options(participants_or_options)
    lotto = Lotto(options.random, seed=options.seed)
    _add_all(lotto, options.participants)
    return lotto


def create_lotto_from_config(config: LottoConfig) -> Lotto:
    """Create a seeded Lotto with inline and CSV participants from config."""
    lotto = Lotto(seed=config.seed)
    _add_all(lotto, ((entry.identity, entry.tickets) for entry in config.participants))
    if config.participants_csv is not None:
        _add_all(lotto, ParticipantCsvLoader().load_and_validate(config.participants_csv))
    return lotto


def _resolve_options(
    value: Iterable[ParticipantEntry] | LottoOptions | Mapping[str, Any] | None,
) -> LottoOptions:
    if value is None:
        return LottoOptions()
    if isinstance(value, LottoOptions):
        return value
    if isinstance(value, Mapping):
        unknown = set(value) - {"random", "participants", "seed"}
        if unknown:
            raise TypeError(f"Unknown lotto options: {sorted(unknown)}")
        return LottoOptions(
            random=value.get("random"),
            participants=tuple(value.get("participants") or ()),
            seed=value.get("seed"),
        )
    if isinstance(value, (str, bytes)):
        raise TypeError("Participants must be a sequence of (participant, tickets) pairs.")
    return LottoOptions(participants=tuple(value))


def _add_all(lotto: Lotto, entries: Iterable[ParticipantEntry]) -> None:
    for participant, tickets in entries:
        lotto.add(participant, tickets)
