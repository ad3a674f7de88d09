"""Akamai CCU (Content Control Utility) v2 client."""
from __future__ import annotations

from typing import Any, Sequence

import httpx
from pydantic import ValidationError

from ccu_tools.models.ccu import CcuResponse, PurgeResult, PurgeStatus, QueueStatus
from ccu_tools.models.keyring_config import ConfigKey, KeyringConfig
from ccu_tools.models.settings import env
from ccu_tools.utils import uris
from ccu_tools.utils.logs import http_event_hooks, log

# httpStatus values in the body that mean the purge was queued
AKAMAI_SUCCESS_CODE = 201
AKAMAI_RESERVED_CODE = 200


class CcuError(RuntimeError):
    """The CCU API rejected a request."""


def ccu_client(password: str | None = None) -> httpx.Client:
    """Client authenticated against the CCU API."""
    if password is None:
        cfg = KeyringConfig.load_from_keyring()
        password = cfg.get_with_prompt(ConfigKey.AKAMAI_PASSWORD, env.akamai_password)
    return httpx.Client(
        auth=(env.akamai_username, password),
        headers={"User-Agent": env.user_agent},
        timeout=env.timeout,
        event_hooks=http_event_hooks(),
    )


def _decode(res: httpx.Response) -> dict[str, Any]:
    try:
        body = res.json()
    except ValueError:
        raise CcuError(
            f"Akamai Cache Clear error: unexpected response ({res.status_code}): {res.text[:200]!r}"
        )
    if not isinstance(body, dict):
        raise CcuError(f"Akamai Cache Clear error: unexpected response: {body!r}")
    # some gateway errors omit httpStatus from the body
    body.setdefault("httpStatus", res.status_code)
    return body


def _parse(model: type[CcuResponse], body: dict[str, Any]) -> CcuResponse:
    try:
        return model.model_validate(body)
    except ValidationError as e:
        raise CcuError(f"Akamai Cache Clear error: malformed response: {e}")


def process_response(body: dict[str, Any]) -> PurgeResult:
    """Turn a purge response body into a result, raising on rejection."""
    result = _parse(PurgeResult, body)
    if result.http_status not in (AKAMAI_SUCCESS_CODE, AKAMAI_RESERVED_CODE):
        raise CcuError(f"Akamai Cache Clear error: {result.detail}")
    if result.estimated_seconds is None:
        raise CcuError("Akamai Cache Clear error: accepted without an estimated completion time")
    return result


def clear_cache(
    arls: Sequence[str],
    options: dict[str, Any] | None = None,
    client: httpx.Client | None = None,
) -> PurgeResult | None:
    """Request that the given ARLs are cleared. Returns None when there is nothing to clear."""
    if not arls:
        return None

    payload = dict(env.purge_options if options is None else options)
    payload["objects"] = list(arls)

    log.info("Submitting %d ARL(s) to %s", len(arls), env.ccu_endpoint)
    with client or ccu_client() as http:
        res = http.post(env.ccu_endpoint, json=payload)

    return process_response(_decode(res))


def purge_status(progress_uri: str, client: httpx.Client | None = None) -> PurgeStatus:
    """Fetch the progress of a submitted purge."""
    if progress_uri.startswith(("http://", "https://")):
        url = progress_uri
    else:
        url = uris.join(env.ccu_api_root, progress_uri)

    with client or ccu_client() as http:
        res = http.get(url)

    status = _parse(PurgeStatus, _decode(res))
    if not status.ok:
        raise CcuError(f"Akamai purge status error: {status.detail}")
    return status


def queue_length(client: httpx.Client | None = None) -> QueueStatus:
    """Fetch the number of outstanding objects in the purge queue."""
    with client or ccu_client() as http:
        res = http.get(env.ccu_endpoint)

    status = _parse(QueueStatus, _decode(res))
    if not status.ok:
        raise CcuError(f"Akamai queue error: {status.detail}")
    return status
