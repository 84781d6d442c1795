"""Step sequencing for the five-step feature request form."""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict

STEP_LABELS = ("Feature", "Problem", "PM context", "Outcome", "Argument")
FIRST_STEP = 0
LAST_INPUT_STEP = 3
RESULT_STEP = len(STEP_LABELS) - 1


@dataclass(frozen=True)
class WizardForm:
    feature: str = ""
    problem: str = ""
    persona_archetype: str = "data-revenue"
    persona: str = "growth"
    persona_note: str = "They are data-obsessed and care about ARR above all else."
    outcome: str = "speed"
    evidence: str = ""
    length: str = "short"
    image_data_url: str = ""
    image_name: str = ""

    def update(self, **changes) -> "WizardForm":
        return replace(self, **changes)


def progress_label(step: int) -> str:
    if 0 <= step < len(STEP_LABELS):
        return STEP_LABELS[step]
    return STEP_LABELS[RESULT_STEP]


def can_continue(step: int, form: WizardForm) -> bool:
    if step == 0:
        return len(form.feature.strip()) > 2
    if step == 1:
        return len(form.problem.strip()) > 2
    if step == 2:
        return len(form.persona_archetype.strip()) > 0
    if step == 3:
        return len(form.outcome.strip()) > 0
    return True


def next_step(step: int, form: WizardForm) -> int:
    """Advance one step if the current one is complete; stays put otherwise."""
    if not can_continue(step, form):
        return step
    return min(step + 1, RESULT_STEP)


def previous_step(step: int) -> int:
    return max(step - 1, FIRST_STEP)


def reset() -> int:
    return FIRST_STEP


def to_payload(form: WizardForm) -> Dict[str, Any]:
    """JSON body for POST /api/generate."""
    data = asdict(form)
    return {
        "feature": data["feature"],
        "problem": data["problem"],
        "personaArchetype": data["persona_archetype"],
        "persona": data["persona"],
        "personaNote": data["persona_note"],
        "outcome": data["outcome"],
        "evidence": data["evidence"],
        "length": data["length"],
        "imageDataUrl": data["image_data_url"],
        "imageName": data["image_name"],
    }
