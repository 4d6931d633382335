"""Async httpx client for the VeriCorp VAT validation API (RapidAPI)."""

from __future__ import annotations

import logging
from typing import Protocol
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from vatcheck.config import ApiSettings
from vatcheck.errors import DecodeError, RemoteStatusError, TransportError
from vatcheck.integrations.vericorp.schemas import ValidationResult

logger = logging.getLogger(__name__)

_VALIDATE_PATH = "/v1/validate/"

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"


class VatValidator(Protocol):
    """Anything that can validate a single VAT number."""

    async def validate(self, tax_id: str) -> ValidationResult: ...


def build_validate_url(base_url: str, tax_id: str) -> str:
    """Return the validation URL with ``tax_id`` percent-encoded into the path."""
    return f"{base_url.rstrip('/')}{_VALIDATE_PATH}{quote(tax_id, safe=_URI_COMPONENT_SAFE)}"


class VeriCorpClient:
    """Thin async wrapper around the VeriCorp validation endpoint.

    Endpoint: GET {base_url}/v1/validate/{tax_id}
    Auth: X-RapidAPI-Key + X-RapidAPI-Host headers

    Each call opens and closes its own connection. Nothing is retried.
    """

    def __init__(self, api_key: str, api: ApiSettings | None = None) -> None:
        api = api or ApiSettings()
        self._base_url = api.vericorp_base_url
        self._host = api.vericorp_host
        self._api_key = api_key
        self._timeout = httpx.Timeout(api.vericorp_timeout, connect=api.vericorp_connect_timeout)

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "X-RapidAPI-Key": self._api_key,
            "X-RapidAPI-Host": self._host,
        }

    async def validate(self, tax_id: str) -> ValidationResult:
        """Validate one VAT number.

        Raises:
            RemoteStatusError: The API answered with a non-2xx status.
            TransportError: No request could be built or no response arrived.
            DecodeError: The 2xx body is not a validation result.
        """
        logger.debug("VeriCorp request for %s", tax_id[:4])

        try:
            url = build_validate_url(self._base_url, tax_id)
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, headers=self._headers)
                response.raise_for_status()
                payload = response.json()

        except httpx.HTTPStatusError as exc:
            logger.debug("VeriCorp HTTP error %s for %s", exc.response.status_code, tax_id[:4])
            raise RemoteStatusError(exc.response.status_code, tax_id) from exc

        except httpx.TimeoutException as exc:
            raise TransportError(f"Request timed out for {tax_id}", tax_id) from exc

        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"Request failed for {tax_id}: {exc}", tax_id) from exc

        # Before ValueError, which it subclasses
        except UnicodeEncodeError as exc:
            raise TransportError(f"Cannot encode request for {tax_id}: {exc.reason}", tax_id) from exc

        except ValueError as exc:
            raise DecodeError(f"Response for {tax_id} is not valid JSON", tax_id) from exc

        return self._parse_response(tax_id, payload)

    def _parse_response(self, tax_id: str, payload: object) -> ValidationResult:
        """Validate the decoded JSON body into a ValidationResult."""
        try:
            return ValidationResult.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(
                f"Response for {tax_id} has an unexpected shape ({exc.error_count()} error(s))",
                tax_id,
            ) from exc
