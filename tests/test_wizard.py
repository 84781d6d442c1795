from whisperer.wizard import (
    RESULT_STEP,
    WizardForm,
    can_continue,
    next_step,
    previous_step,
    progress_label,
    reset,
    to_payload,
)


def test_defaults():
    form = WizardForm()
    assert form.persona_archetype == "data-revenue"
    assert form.outcome == "speed"
    assert form.length == "short"


def test_feature_and_problem_gate_progress():
    form = WizardForm(feature=" ab ")
    assert not can_continue(0, form)
    assert next_step(0, form) == 0

    form = form.update(feature="bulk invoice export")
    assert next_step(0, form) == 1
    assert next_step(1, form) == 1
    assert next_step(1, form.update(problem="one at a time")) == 2


def test_choice_steps():
    form = WizardForm(feature="abc", problem="xyz")
    assert can_continue(2, form)
    assert not can_continue(2, form.update(persona_archetype=" "))
    assert not can_continue(3, form.update(outcome=""))
    assert can_continue(RESULT_STEP, WizardForm())


def test_navigation_clamps():
    form = WizardForm(feature="abc", problem="xyz")
    assert next_step(RESULT_STEP, form) == RESULT_STEP
    assert previous_step(0) == 0
    assert previous_step(3) == 2
    assert reset() == 0


def test_progress_label():
    assert progress_label(0) == "Feature"
    assert progress_label(2) == "PM context"
    assert progress_label(99) == "Argument"


def test_payload_keys():
    payload = to_payload(WizardForm(feature="bulk invoice export", image_name="s.png"))
    assert payload["feature"] == "bulk invoice export"
    assert payload["personaNote"].startswith("They are data-obsessed")
    assert payload["personaArchetype"] == "data-revenue"
    assert payload["imageName"] == "s.png"
    assert set(payload) >= {"problem", "persona", "outcome", "evidence", "length", "imageDataUrl"}
