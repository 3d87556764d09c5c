"""
Command-line entry point for the Lufft telegram codec.

Subcommands:
1. **decode**: decode one telegram and print the reading as JSON.
2. **encode**: generate a random reading and print it as a telegram.
3. **simulate**: send random telegrams to the SMS gateway webhook, spread
   round-robin over the configured station numbers.
4. **replay**: send recorded ``status,number,msg`` CSV rows to the webhook.

Structured JSON logging goes to stderr; command output goes to stdout.

CHANGELOG:
- 2026-10-19: Add replay subcommand for recorded CSV traffic
- 2026-10-19: Add simulate subcommand backed by TelegramSender
- 2026-10-19: Initial creation (STORY-111)

TODO:
- None
"""

from __future__ import annotations

import argparse
import asyncio
import csv
import json
import logging
import random
import sys
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from lufft.src.config import SimulatorSettings
from lufft.src.decoder import decode
from lufft.src.encoder import encode
from lufft.src.layouts import InvalidTelegramError, Variant
from lufft.src.sender import TelegramSender
from lufft.src.simulator import random_reading

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Structured JSON logging setup
# ---------------------------------------------------------------------------


def configure_logging(level: int = logging.INFO) -> None:
    """Configure structured JSON logging on the root logger (stderr)."""

    class _JsonFormatter(logging.Formatter):
        """Minimal JSON log formatter."""

        def format(self, record: logging.LogRecord) -> str:
            log_entry = {
                "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "msg": record.getMessage(),
            }
            if record.exc_info and record.exc_info[1] is not None:
                log_entry["exception"] = self.formatException(record.exc_info)
            return json.dumps(log_entry)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_JsonFormatter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _parse_now(value: str | None) -> datetime:
    """Parse ``--now``; naive values are taken as UTC."""
    if value is None:
        return datetime.now(tz=UTC)
    now = datetime.fromisoformat(value)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return now


def _cmd_decode(args: argparse.Namespace) -> int:
    try:
        reading = decode(args.telegram, now=_parse_now(args.now))
    except InvalidTelegramError as exc:
        logger.error("Cannot decode telegram: %s", exc)
        return 1
    print(reading.model_dump_json(indent=2))
    return 0


def _cmd_encode(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    for _ in range(args.count):
        reading = random_reading(_parse_now(args.now), rng)
        print(encode(reading, args.variant))
    return 0


async def run_simulation(
    settings: SimulatorSettings,
    *,
    sender: TelegramSender | None = None,
    rng: random.Random | None = None,
) -> tuple[int, int]:
    """Send ``settings.request_count`` random telegrams to the gateway.

    Returns:
        ``(sent, failed)`` counts.
    """
    sender = sender or TelegramSender(
        settings.gateway_base_url, timeout_s=settings.request_timeout_s
    )
    rng = rng or random.Random()
    numbers = settings.numbers

    logger.info(
        "Simulating %d V%d telegrams to %s from %d station(s)",
        settings.request_count,
        settings.telegram_variant,
        sender.url,
        len(numbers),
    )

    sent = failed = 0
    for i in range(settings.request_count):
        reading = random_reading(datetime.now(tz=UTC), rng)
        telegram = encode(reading, settings.telegram_variant)
        if await sender.send(numbers[i % len(numbers)], telegram):
            sent += 1
        else:
            failed += 1

    logger.info("Simulation done: sent=%d failed=%d", sent, failed)
    return sent, failed


def _cmd_simulate(args: argparse.Namespace) -> int:
    overrides: dict[str, object] = {}
    if args.count is not None:
        overrides["request_count"] = args.count
    if args.variant is not None:
        overrides["telegram_variant"] = args.variant
    if args.url is not None:
        overrides["gateway_base_url"] = args.url

    settings = SimulatorSettings(**overrides)
    _, failed = asyncio.run(run_simulation(settings, rng=random.Random(args.seed)))
    return 1 if failed else 0


@dataclass(frozen=True, slots=True)
class ReplayResult:
    """Outcome counts of a CSV replay."""

    sent: int
    failed: int
    skipped: int


def read_replay_rows(path: Path) -> tuple[list[tuple[str, str]], int]:
    """Read recorded ``status,number,msg`` rows from a CSV file.

    Rows without exactly three columns, or whose status is not an integer
    (e.g. a header line), are skipped. Blank lines are ignored.

    Returns:
        ``(rows, skipped)`` where *rows* holds ``(number, msg)`` pairs.

    Raises:
        OSError: If the file cannot be opened.
    """
    rows: list[tuple[str, str]] = []
    skipped = 0

    with path.open(newline="", encoding="utf-8") as fh:
        for row_no, record in enumerate(csv.reader(fh), start=1):
            if not record:
                continue
            if len(record) != 3:
                logger.warning(
                    "Skipping row %d: expected 3 columns, got %d", row_no, len(record)
                )
                skipped += 1
                continue
            status, number, msg = record
            try:
                int(status)
            except ValueError:
                logger.warning(
                    "Skipping row %d: status %r is not an integer", row_no, status
                )
                skipped += 1
                continue
            rows.append((number, msg))

    return rows, skipped


async def run_replay(
    path: Path,
    settings: SimulatorSettings,
    *,
    sender: TelegramSender | None = None,
) -> ReplayResult:
    """Send recorded telegrams from *path* to the gateway, in file order.

    Telegrams are posted verbatim, so recorded gateway artifacts reach the
    webhook unchanged.
    """
    sender = sender or TelegramSender(
        settings.gateway_base_url, timeout_s=settings.request_timeout_s
    )
    rows, skipped = read_replay_rows(path)

    logger.info("Replaying %d telegram(s) from %s to %s", len(rows), path, sender.url)

    sent = failed = 0
    for number, msg in rows:
        if await sender.send(number, msg):
            sent += 1
        else:
            failed += 1

    logger.info("Replay done: sent=%d failed=%d skipped=%d", sent, failed, skipped)
    return ReplayResult(sent=sent, failed=failed, skipped=skipped)


def _cmd_replay(args: argparse.Namespace) -> int:
    overrides: dict[str, object] = {}
    if args.url is not None:
        overrides["gateway_base_url"] = args.url

    settings = SimulatorSettings(**overrides)
    try:
        result = asyncio.run(run_replay(Path(args.csv), settings))
    except OSError as exc:
        logger.error("Cannot read replay file: %s", exc)
        return 1
    return 1 if result.failed else 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    variants = [v.value for v in Variant]

    p = argparse.ArgumentParser(description="Lufft SMS telegram codec tools")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    dec = sub.add_parser("decode", help="Decode a telegram and print it as JSON")
    dec.add_argument("telegram", help="Raw telegram text")
    dec.add_argument("--now", help="Receipt time (ISO 8601, default: current time)")
    dec.set_defaults(func=_cmd_decode)

    enc = sub.add_parser("encode", help="Print random telegrams")
    enc.add_argument("--variant", type=int, choices=variants, default=23)
    enc.add_argument("--count", type=int, default=1, help="Number of telegrams")
    enc.add_argument("--seed", type=int, default=None, help="Random seed")
    enc.add_argument("--now", help="Telegram time (ISO 8601, default: current time)")
    enc.set_defaults(func=_cmd_encode)

    sim = sub.add_parser("simulate", help="Send random telegrams to the gateway")
    sim.add_argument("--variant", type=int, choices=variants, default=None)
    sim.add_argument("--count", type=int, default=None, help="Number of requests")
    sim.add_argument("--url", default=None, help="Gateway base URL")
    sim.add_argument("--seed", type=int, default=None, help="Random seed")
    sim.set_defaults(func=_cmd_simulate)

    rep = sub.add_parser("replay", help="Send recorded telegrams from a CSV file")
    rep.add_argument("csv", help="CSV file with status,number,msg rows")
    rep.add_argument("--url", default=None, help="Gateway base URL")
    rep.set_defaults(func=_cmd_replay)

    return p


def main(argv: list[str] | None = None) -> int:
    """Synchronous entrypoint; returns the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
