"""
HTTP client for /api/generate.

Mirrors the web form: whatever the server does, the caller always gets a
draft, with a notice when it is local fallback copy.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

import httpx

from .fallback import FALLBACK_NOTICE, build_fallback
from .models import GenerationRequest
from .wizard import WizardForm, to_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Draft:
    text: str
    notice: str = ""

    @property
    def is_fallback(self) -> bool:
        return bool(self.notice)


class ArgumentClient:
    def __init__(self, base_url: str = "http://localhost:8787", http_client: Optional[httpx.Client] = None,
                 rng: Optional[random.Random] = None):
        self.http = http_client or httpx.Client(base_url=base_url)
        self.rng = rng

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ArgumentClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def request_draft(self, form: WizardForm) -> Draft:
        """POST the form; fall back to local copy on any HTTP or payload problem."""
        try:
            response = self.http.post("/api/generate", json=to_payload(form))
            response.raise_for_status()
            data = response.json()
            variants = data.get("variants") if isinstance(data, dict) else None
            if not isinstance(variants, list) or len(variants) < 1:
                raise ValueError("No variants returned")
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"DRAFT_FALLBACK err={e}")
            return Draft(self.fallback_text(form), notice=FALLBACK_NOTICE)

        notice = data.get("notice") or ""
        return Draft(str(variants[0]), notice=notice)

    def fallback_text(self, form: WizardForm) -> str:
        payload = to_payload(form)
        payload["imageDataUrl"] = None
        request = GenerationRequest.from_payload(payload, validate=False)
        return build_fallback(request, rng=self.rng)
