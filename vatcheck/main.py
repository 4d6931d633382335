"""Action entry point.

Usage:
    python -m vatcheck.main

Reads the ``INPUT_*`` variables set by the Actions runner, validates every
VAT number and exits non-zero when the step failed.
"""

from __future__ import annotations

import asyncio
import logging
import sys

import structlog
from pydantic import ValidationError

from vatcheck.action import run_action
from vatcheck.config import ActionInputs, Settings
from vatcheck.host.reporter import GitHubActionsReporter

# ── Logging setup ────────────────────────────────────────────────────


def configure_logging(log_level: str) -> None:
    """Diagnostics go to stderr; stdout carries workflow commands."""
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # httpx logs full request URLs at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


logger = structlog.get_logger(__name__)


def main() -> int:
    try:
        settings = Settings()
        inputs = ActionInputs()
    except ValidationError as exc:
        # No runner files known yet: report on stdout only
        reporter = GitHubActionsReporter()
        reporter.fail(f"Action failed: {exc}")
        return reporter.exit_code

    configure_logging(settings.log_level)

    reporter = GitHubActionsReporter.from_settings(settings.runner)
    if inputs.api_key is not None:
        reporter.mask_secret(inputs.api_key.get_secret_value())

    logger.debug("vatcheck starting", fail_on_invalid=inputs.fail_on_invalid)
    asyncio.run(run_action(inputs, reporter, api=settings.api))
    logger.debug("vatcheck finished", exit_code=reporter.exit_code)
    return reporter.exit_code


if __name__ == "__main__":
    sys.exit(main())
