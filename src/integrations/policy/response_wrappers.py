from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import ValidationError

from src.integrations.contracts.verification import DecisionResult, FieldSchema, SchemaMap

logger = logging.getLogger(__name__)


class IntegrationResponseError(ValueError):
    pass


def parse_schema_map(raw: Any) -> SchemaMap:
    """
    Turn the provider's parameter listing into FieldSchema entries, keeping key order.

    Malformed entries are skipped and logged; the rest of the listing is kept.
    """
    if not isinstance(raw, dict):
        raise IntegrationResponseError(f"Parameter schema must be an object; got {type(raw).__name__}.")

    schema: SchemaMap = {}
    for key, entry in raw.items():
        if not isinstance(entry, dict):
            logger.warning("Skipping parameter '%s': expected an object, got %s", key, type(entry).__name__)
            continue
        try:
            schema[key] = FieldSchema(**{**entry, "name": entry.get("name") or key})
        except ValidationError as exc:
            logger.warning("Skipping parameter '%s': %s", key, exc)
    return schema


def normalize_decision_response(raw: Any) -> DecisionResult:
    if not isinstance(raw, dict):
        raise IntegrationResponseError(f"Decision response must be an object; got {type(raw).__name__}.")

    payload: Dict[str, Any] = dict(raw)
    summary = payload.get("summary")
    if not isinstance(summary, dict):
        payload["summary"] = {}
    else:
        summary = dict(summary)
        if summary.get("outcome") is None:
            summary["outcome"] = ""
        if not isinstance(summary.get("outcome_reasons"), list):
            summary["outcome_reasons"] = []
        summary["outcome_reasons"] = [str(r) for r in summary["outcome_reasons"]]
        payload["summary"] = summary
    if payload.get("application_token") is None:
        payload["application_token"] = ""

    try:
        return DecisionResult(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}") from exc
