#!/usr/bin/env python3
"""Draw winners from a config file and/or a participants CSV."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from pydantic import ValidationError

from lotto import LottoError, create_lotto_from_config
from lotto.config import ConfigLoadError, LottoConfig, load_config
from lotto.data import DataValidationError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Draw weighted lotto winners.")
    parser.add_argument("--config", help="Path to a YAML/JSON lotto config.")
    parser.add_argument("--csv", help="Participants CSV with identity,tickets columns.")
    parser.add_argument("--count", type=int, help="Number of winning tickets to draw.")
    parser.add_argument("--no-redraw", action="store_true", help="Winners lose the drawn ticket.")
    parser.add_argument("--unique", action="store_true", help="Drop repeated winners.")
    parser.add_argument("--seed", type=int, help="Seed for the default random generator.")
    parser.add_argument("--verbose", action="store_true", help="Log each draw.")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> LottoConfig:
    config = load_config(args.config) if args.config else LottoConfig()

    updates: dict[str, object] = {}
    if args.csv:
        updates["participants_csv"] = args.csv
    if args.seed is not None:
        updates["seed"] = args.seed

    draw_updates: dict[str, object] = {}
    if args.count is not None:
        draw_updates["count"] = args.count
    if args.no_redraw:
        draw_updates["redrawable"] = False
    if args.unique:
        draw_updates["unique"] = True
    if draw_updates:
        updates["draw"] = {**config.draw.model_dump(), **draw_updates}

    if not updates:
        return config
    return LottoConfig.model_validate({**config.model_dump(), **updates})


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        lotto = create_lotto_from_config(config)
        winners = lotto.draw_multiple(config.draw.count, config.draw.to_options())
    except (FileNotFoundError, ConfigLoadError, DataValidationError, ValidationError, LottoError) as exc:
        raise SystemExit(f"error: {exc}") from exc

    for winner in winners:
        print(winner)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
