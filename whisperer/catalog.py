"""Static options offered by the form: PM personas, PM archetypes and sales outcomes."""

from typing import NamedTuple, Optional, Sequence, Tuple


class Option(NamedTuple):
    id: str
    label: str
    detail: str = ""


PERSONAS: Tuple[Option, ...] = (
    Option("growth", "Growth PM", "activation, conversion, and retention loops"),
    Option("core", "Core Product PM", "daily usage, clarity, and customer trust"),
    Option("new", "New Product PM", "0-1, Path to MVP, massive market size"),
)

ARCHETYPES: Tuple[Option, ...] = (
    Option("data-revenue", "Data & Revenue", "They are data-obsessed and care about ARR above all else."),
    Option("ux-quality", "User Experience", "They care about the user experience and hate technical debt or clunky UI."),
    Option("vision-strategy", "Long Term Scalability", "They care about long-term strategy and building scalable features."),
)

OUTCOMES: Tuple[Option, ...] = (
    Option("speed", "Close more deals", "deals closed"),
    Option("precision", "Increase Deal Size", "average contract value"),
    Option("coverage", "Keep a Customer", "renewal rate"),
)


def find_option(options: Sequence[Option], option_id: Optional[str]) -> Optional[Option]:
    if not option_id:
        return None
    for option in options:
        if option.id == option_id:
            return option
    return None


def resolve_label(options: Sequence[Option], value: Optional[str]) -> str:
    """Map an option id to its label; free text (or an unknown id) passes through trimmed."""
    option = find_option(options, value)
    if option is not None:
        return option.label
    return (value or "").strip()


def persona_label(value: Optional[str]) -> str:
    """Personas and archetypes share the persona slot in the request."""
    option = find_option(PERSONAS, value) or find_option(ARCHETYPES, value)
    if option is not None:
        return option.label
    return (value or "").strip()


def outcome_label(value: Optional[str]) -> str:
    return resolve_label(OUTCOMES, value)
