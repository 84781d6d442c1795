import pytest

from whisperer.catalog import ARCHETYPES, OUTCOMES, PERSONAS, outcome_label, persona_label
from whisperer.errors import ValidationError
from whisperer.models import GenerationRequest, normalize_length


def test_catalog_labels():
    assert persona_label("growth") == "Growth PM"
    assert persona_label("data-revenue") == "Data & Revenue"
    assert persona_label("  Platform PM ") == "Platform PM"
    assert outcome_label("coverage") == "Keep a Customer"
    assert outcome_label(None) == ""
    assert len({o.id for o in PERSONAS + ARCHETYPES + OUTCOMES}) == 9


@pytest.mark.parametrize("value,expected", [
    ("ultra", "ultra"), ("standard", "standard"), ("short", "standard"), (None, "standard"), (3, "standard"),
])
def test_normalize_length(value, expected):
    assert normalize_length(value) == expected


def test_from_payload_resolves_ids():
    request = GenerationRequest.from_payload({
        "feature": "bulk invoice export",
        "personaArchetype": "ux-quality",
        "personaNote": "Hates clunky UI.",
        "outcome": "precision",
        "evidence": "Jane Doe",
        "length": "ultra",
    })
    assert request.persona_label == "User Experience"
    assert request.outcome_label == "Increase Deal Size"
    assert request.persona_note == "Hates clunky UI."
    assert request.evidence == "Jane Doe"
    assert request.is_ultra
    assert not request.image_present


def test_persona_wins_over_archetype():
    request = GenerationRequest.from_payload({"feature": "abc", "persona": "core", "personaArchetype": "ux-quality"})
    assert request.persona_label == "Core Product PM"


def test_non_string_fields_are_ignored():
    request = GenerationRequest.from_payload({"feature": "abc", "problem": ["x"], "evidence": 42})
    assert request.problem == ""
    assert request.evidence == ""


@pytest.mark.parametrize("payload", [None, [], {}, {"feature": 123}, {"feature": " ab "}])
def test_invalid_payloads(payload):
    with pytest.raises(ValidationError):
        GenerationRequest.from_payload(payload)


def test_validation_can_be_skipped():
    assert GenerationRequest.from_payload({"feature": ""}, validate=False).feature == ""
