"""Client for the external AI log auditor.

The auditor is a hosted Gemini model called through its REST
`generateContent` endpoint with a JSON response schema.
"""

from __future__ import annotations

import json
import logging
from typing import Optional, Protocol

import requests

logger = logging.getLogger(__name__)

GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

AUDIT_PROMPT = """Act as a construction company auditor.
Review these logs for duplicate entries, anomalies, or suspicious patterns.
Duplicate entries are multiple logs for the same employee on the same date for the same project.
Anomalies include excessive overtime (> 4 hours daily) or unusually large advances.

Employees: {employees}
Projects: {projects}
Attendance: {attendance}
Advances: {advances}
"""

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "findings": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "severity": {"type": "STRING", "description": "low, medium, high"},
                    "type": {"type": "STRING", "description": "Duplicate, Anomaly, or Insight"},
                    "description": {"type": "STRING"},
                    "affectedEntryIds": {"type": "ARRAY", "items": {"type": "STRING"}},
                },
                "required": ["severity", "type", "description"],
            },
        },
        "summary": {"type": "STRING"},
    },
    "required": ["findings", "summary"],
}


class AuditClient(Protocol):
    def audit(self, payload: dict) -> dict:
        """Send collections, return the parsed JSON answer."""

        raise NotImplementedError


class GeminiAuditClient(AuditClient):
    def __init__(self, api_key: str, *, model: str = "gemini-2.0-flash", timeout: Optional[float] = None):
        self._api_key = api_key
        self._model = model
        self._timeout = timeout

    def _prompt(self, payload: dict) -> str:
        return AUDIT_PROMPT.format(
            **{k: json.dumps(payload.get(k, []), default=str) for k in ("employees", "projects", "attendance", "advances")}
        )

    def audit(self, payload: dict) -> dict:
        body = {
            "contents": [{"parts": [{"text": self._prompt(payload)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }
        logger.debug("Requesting audit from %s", self._model)
        resp = requests.post(
            GEMINI_ENDPOINT.format(model=self._model),
            headers={"x-goog-api-key": self._api_key, "Content-Type": "application/json"},
            json=body,
            timeout=self._timeout,
        )
        resp.raise_for_status()

        data = resp.json()
        text = data["candidates"][0]["content"]["parts"][0]["text"]
        return json.loads(text)
