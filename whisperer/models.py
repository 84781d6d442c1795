"""Request and result types for a single generation."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from . import catalog
from .errors import GenerationFailure, ValidationError
from .images import accept_image_data_url

LENGTH_ULTRA = "ultra"
LENGTH_STANDARD = "standard"
MIN_FEATURE_LENGTH = 3


def normalize_length(value: Optional[str]) -> str:
    return LENGTH_ULTRA if value == LENGTH_ULTRA else LENGTH_STANDARD


def _text(payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class GenerationRequest:
    feature: str
    problem: str = ""
    persona_label: str = ""
    persona_note: str = ""
    outcome_label: str = ""
    evidence: str = ""
    length: str = LENGTH_STANDARD
    image_data_url: Optional[str] = None

    @property
    def image_present(self) -> bool:
        return bool(self.image_data_url)

    @property
    def is_ultra(self) -> bool:
        return self.length == LENGTH_ULTRA

    def validate(self) -> None:
        if len((self.feature or "").strip()) < MIN_FEATURE_LENGTH:
            raise ValidationError("Feature is required.")

    @classmethod
    def from_payload(cls, payload: Optional[Dict[str, Any]], validate: bool = True) -> "GenerationRequest":
        """
        Build a request from the /api/generate JSON body.

        persona/outcome may be catalog ids or free text; personaArchetype is
        used when persona is absent. Raises ValidationError for a short feature
        unless validate is False.
        """
        payload = payload if isinstance(payload, dict) else {}
        persona = _text(payload, "persona") or _text(payload, "personaArchetype")
        request = cls(
            feature=_text(payload, "feature"),
            problem=_text(payload, "problem"),
            persona_label=catalog.persona_label(persona),
            persona_note=_text(payload, "personaNote"),
            outcome_label=catalog.outcome_label(_text(payload, "outcome")),
            evidence=_text(payload, "evidence"),
            length=normalize_length(payload.get("length")),
            image_data_url=accept_image_data_url(payload.get("imageDataUrl")),
        )
        if validate:
            request.validate()
        return request


@dataclass(frozen=True)
class GeneratedArgument:
    text: str


@dataclass(frozen=True)
class GenerationResult:
    argument: GeneratedArgument
    error: Optional[GenerationFailure] = None

    @property
    def fallback_used(self) -> bool:
        return self.error is not None

    @property
    def text(self) -> str:
        return self.argument.text
