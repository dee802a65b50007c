"""Entry point for the age calculator CLI.

Run with:
    python main.py [--abbreviate] [--agent]

The script configures structured logging, prompts the user for a birthdate
and an optional reference date, validates both, and prints the age report.
With ``--agent`` the question is answered by the Strands agent instead.
"""

import argparse
import datetime
import json
import logging
import sys
import time
import uuid

from age_calculator import create_agent
from age_calculator.agent import invoke_with_audit
from age_calculator.config import Settings
from age_calculator.engine import InvalidInput
from age_calculator.parsing import parse_date
from age_calculator.report import build_report, format_display_date, render_report

logger: logging.Logger = logging.getLogger(__name__)

RULE: str = "=" * 40


def _configure_logging() -> None:
    """Configure logging format from ``LOG_FORMAT`` and ``LOG_LEVEL``.

    Set LOG_FORMAT=json for structured JSON output (CloudWatch-friendly).
    Any other value (or absent) falls back to human-readable plaintext.
    Settings are re-read on every call so the current environment wins.
    """
    config = Settings()
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    if config.log_format == "json":
        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload: dict = {
                    "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                }
                # Merge any extra fields passed via logger.info(..., extra={...})
                for key, value in record.__dict__.items():
                    if key not in logging.LogRecord.__dict__ and not key.startswith("_"):
                        payload[key] = value
                return json.dumps(payload, default=str)

        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate your age, next birthday, and zodiac sign.")
    parser.add_argument(
        "--abbreviate",
        action="store_true",
        help="Show the abbreviated age format (e.g. 34y 0m 0d) first.",
    )
    parser.add_argument(
        "--agent",
        action="store_true",
        help="Answer through the Bedrock-backed agent instead of printing the report.",
    )
    return parser.parse_args(argv)


def _read_date(prompt: str, field_name: str, allow_blank: bool = False) -> datetime.date | None:
    """Prompt for a date; print an error and exit with code 1 if it is invalid."""
    try:
        raw = input(prompt).strip()
    except EOFError:
        print()
        print("Error: No date entered.")
        sys.exit(1)
    if allow_blank and not raw:
        return None
    try:
        return parse_date(raw, field_name)
    except InvalidInput:
        print(
            f"Error: '{raw}' is not a valid date. "
            "Please use the format YYYY-MM-DD (e.g. 1990-05-15)."
        )
        sys.exit(1)


def _print_report(birth_date: datetime.date, reference_date: datetime.date | None, abbreviate: bool) -> None:
    try:
        report = build_report(birth_date, reference_date)
    except InvalidInput as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    reference_label = format_display_date(report.reference_date)
    if reference_date is None:
        reference_label = f"Today ({reference_label})"

    print()
    print(RULE)
    print("Age Calculation Results")
    print(RULE)
    print(f"Birthdate: {format_display_date(report.birth_date)}")
    print(f"Reference date: {reference_label}")
    print("-" * len(RULE))
    for line in render_report(report, abbreviate=abbreviate):
        print(line)
    print(RULE)


def _ask_agent(birth_date: datetime.date, reference_date: datetime.date | None, session_id: str) -> None:
    prompt = f"My birthdate is {birth_date.isoformat()}."
    if reference_date is not None:
        prompt += f" Use {reference_date.isoformat()} as the reference date."
    prompt += " How old am I, when is my next birthday, and what is my zodiac sign?"

    try:
        agent = create_agent()
    except RuntimeError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    try:
        invoke_with_audit(agent, prompt, session_id=session_id)
    except Exception as exc:  # noqa: BLE001 — the audit record already holds status=error
        logger.error("agent_invocation_failed", extra={"error_type": type(exc).__name__})
        print(f"Error: The agent could not answer ({type(exc).__name__}). Please try again later.")
        sys.exit(1)


def run(argv: list[str] | None = None) -> None:
    """Configure logging, prompt for dates, and print or ask for the result.

    Exits with code 1 on invalid input so that callers (shell scripts,
    Docker health checks, etc.) can detect failure cleanly.

    After a successful run a structured record is emitted via
    ``logger.info`` containing session_id, timestamp (ISO UTC), elapsed_ms,
    and mode.  Dates are intentionally excluded to avoid retaining PII.
    """
    args = _parse_args(argv)
    _configure_logging()

    print("Welcome to the Age Calculator!")
    birth_date = _read_date(
        "Please enter your birthdate (YYYY-MM-DD, e.g. 1990-05-15): ",
        "birth_date",
    )
    reference_date = _read_date(
        "Enter a reference date (YYYY-MM-DD) or press Enter for today: ",
        "reference_date",
        allow_blank=True,
    )

    session_id = str(uuid.uuid4())
    start = time.monotonic()
    if args.agent:
        _ask_agent(birth_date, reference_date, session_id)
    else:
        _print_report(birth_date, reference_date, args.abbreviate)
    elapsed_ms = (time.monotonic() - start) * 1000

    logger.info(
        "age_report",
        extra={
            "session_id": session_id,
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "elapsed_ms": round(elapsed_ms, 1),
            "mode": "agent" if args.agent else "report",
        },
    )


if __name__ == "__main__":
    run()
