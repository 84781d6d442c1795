"""
Local fallback copy used when the generation service is unavailable.

Phrase selection is random; structure is fixed: two sentences for "ultra",
three otherwise, always ending with a closing ask.
"""

import random
import re
from typing import Optional

from .models import GenerationRequest

FALLBACK_OPENERS = (
    "As a direct, low-scope lever with real upside",
    "As a focused, high-signal feature request",
    "As a pragmatic move with measurable impact",
)

FALLBACK_ASKS = (
    "If you agree, I can send a 1-pager and we can run a quick smoke test.",
    "We can test this with a small cohort and review the lift together.",
    "Happy to put a one-pager together and run a lightweight pilot.",
)

FALLBACK_NOTICE = "LLM unavailable. Showing local fallback copy."


_SENTENCE_BREAK = re.compile(r"[.!?]+\s+")


def clamp_text(text: Optional[str]) -> str:
    """Collapse whitespace and fold user text into a single clause."""
    collapsed = " ".join((text or "").split()).rstrip(".!? ")
    return _SENTENCE_BREAK.sub("; ", collapsed)


def build_fallback(request: GenerationRequest, rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    feature = clamp_text(request.feature) or "this feature"
    outcome = clamp_text(request.outcome_label).lower() or "our current goals"
    persona = clamp_text(request.persona_label)
    note = clamp_text(request.persona_note)

    opener = f"{rng.choice(FALLBACK_OPENERS)}, {feature} directly supports {outcome}."
    ask = rng.choice(FALLBACK_ASKS)

    if request.is_ultra:
        return " ".join([opener, ask])

    framing = f"It is framed for a {persona}" if persona else "It is framed for the PM"
    if note:
        framing = f"{framing} ({note})"
    return " ".join([opener, f"{framing}.", ask])
