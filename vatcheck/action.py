"""The action itself: inputs in, outputs and job summary out.

Configuration errors and anything unexpected end the run through
``reporter.fail``; nothing is raised past ``run_action``.
"""

from __future__ import annotations

import logging

from vatcheck.config import ActionInputs, ApiSettings
from vatcheck.errors import ConfigurationError
from vatcheck.host.reporter import Reporter
from vatcheck.integrations.vericorp.client import VatValidator, VeriCorpClient
from vatcheck.report.summary import build_job_summary, build_summary_table
from vatcheck.validation.engine import validate_batch
from vatcheck.validation.normalizer import parse_vat_numbers

logger = logging.getLogger(__name__)


def _missing(name: str) -> ConfigurationError:
    return ConfigurationError(f"Input required and not supplied: {name}")


async def run_action(
    inputs: ActionInputs,
    reporter: Reporter,
    client: VatValidator | None = None,
    api: ApiSettings | None = None,
) -> None:
    """Validate every supplied VAT number and publish the results.

    Args:
        inputs: Action inputs read from the environment.
        reporter: Host bridge receiving log lines, outputs and the summary.
        client: Validator to use; defaults to a VeriCorpClient built from the API key.
        api: Endpoint settings for the default client.
    """
    try:
        if inputs.vat_numbers is None:
            raise _missing("vat-numbers")
        api_key = inputs.api_key.get_secret_value() if inputs.api_key else ""
        if not api_key:
            raise _missing("api-key")

        vat_numbers = parse_vat_numbers(inputs.vat_numbers)
        if not vat_numbers:
            raise ConfigurationError("No VAT numbers provided")

        reporter.info(f"Validating {len(vat_numbers)} VAT number(s)...")

        validator = client if client is not None else VeriCorpClient(api_key, api)
        report = await validate_batch(vat_numbers, validator, reporter)

        reporter.set_output("results", report.results_json())
        reporter.set_output("valid-count", str(report.valid_count))
        reporter.set_output("invalid-count", str(report.invalid_count))
        reporter.set_output("summary", build_summary_table(report.results))
        reporter.write_summary(build_job_summary(report))

        if inputs.fail_on_invalid and report.invalid_count > 0:
            reporter.fail(f"{report.invalid_count} VAT number(s) are invalid")

    except ConfigurationError as exc:
        reporter.fail(str(exc))

    except Exception as exc:
        logger.exception("Unexpected error during validation run")
        reporter.fail(f"Action failed: {exc}")
