"""
Advisory text generation for a sized duct.

Sends a formatted snapshot of the sizing result to the Gemini
``generateContent`` endpoint and returns the free-text reply. This is
the only module that talks to the network; the sizing engine never
imports it.

Configuration:
    GEMINI_API_KEY            API key (or pass ``api_key``)
    DUCTCALC_ADVISORY_MODEL   model name override
"""

import json
import logging
import os
from enum import Enum
from typing import Dict, Optional

import requests

from .formatting import build_data_context

logger = logging.getLogger(__name__)

API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
DEFAULT_MODEL = "gemini-2.5-flash-preview-09-2025"
DEFAULT_TIMEOUT = 30  # s

FAILURE_MESSAGE = "Failed to connect to AI. Please try again."
EMPTY_RESPONSE = "No response generated."


class AdvisoryKind(Enum):
    ANALYZE = "analyze"
    DRAFT = "draft"


class AdvisoryError(Exception):
    """Raised when the advisory service cannot produce a reply."""
    pass


def build_prompt(kind, context: Dict[str, str]) -> str:
    """
    Build the prompt for an advisory request.

    Args:
        kind: AdvisoryKind.ANALYZE for a SMACNA assessment, DRAFT for a
            field instruction note
        context: Formatted snapshot from formatting.build_data_context

    Returns:
        Prompt text
    """
    kind = AdvisoryKind(kind)
    if kind is AdvisoryKind.ANALYZE:
        return (
            "Act as a senior HVAC Engineer. Analyze this duct design based on SMACNA standards.\n"
            f"Data: {json.dumps(context)}.\n"
            "Please provide a concise assessment of:\n"
            "1. Noise risk (is velocity too high for an office?).\n"
            "2. Efficiency (is friction too high?).\n"
            "3. Recommendation. Keep it short (max 3 sentences)."
        )
    return (
        "Act as an HVAC Project Manager. Draft a short, professional field instruction note "
        "for the installation team.\n"
        f"Include the Airflow ({context['airflow']}), Required Rectangular Size "
        f"({context['rectSize']}), and mention that it is equivalent to {context['roundSize']}.\n"
        "Remind them to verify field constraints. Keep it purely instructional and ready to copy/paste."
    )


def _extract_text(payload) -> str:
    try:
        return payload['candidates'][0]['content']['parts'][0]['text'] or EMPTY_RESPONSE
    except (KeyError, IndexError, TypeError):
        return EMPTY_RESPONSE


def request_advisory(prompt: str, api_key: Optional[str] = None, model: Optional[str] = None,
                     timeout: float = DEFAULT_TIMEOUT, session=None) -> str:
    """
    Send ``prompt`` to the text-generation service and return its reply.

    Raises:
        AdvisoryError: on connection failure, an error status or an
            unreadable response body
    """
    if api_key is None:
        api_key = os.environ.get("GEMINI_API_KEY", "")
    if model is None:
        model = os.environ.get("DUCTCALC_ADVISORY_MODEL", DEFAULT_MODEL)
    http = session or requests

    url = API_URL.format(model=model)
    body = {"contents": [{"parts": [{"text": prompt}]}]}
    try:
        resp = http.post(
            url,
            params={"key": api_key},
            headers={"Content-Type": "application/json"},
            json=body,
            timeout=timeout,
        )
        resp.raise_for_status()
        payload = resp.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("Advisory request to %s failed: %s", model, e)
        raise AdvisoryError(FAILURE_MESSAGE) from e

    return _extract_text(payload)


def advise(kind, sizing_input, result, system, **kwargs) -> str:
    """Build the data context and prompt for a result and request advice."""
    context = build_data_context(sizing_input, result, system)
    return request_advisory(build_prompt(kind, context), **kwargs)
