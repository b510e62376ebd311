"""Step-by-step analysis wizard as a finite state machine.

Eight states mirror the order in which the pipeline stages are presented
to a user. The FSM only validates navigation; WizardSession does the
stage work before firing each transition.
"""

from __future__ import annotations

from statemachine import State, StateMachine

# (state value, display label) in wizard order
WIZARD_STEPS: tuple[tuple[str, str], ...] = (
    ("store_story", "Store Story"),
    ("find_character", "Find Character"),
    ("extract_actions", "Extract Actions"),
    ("build_traits", "Build Traits"),
    ("get_claims", "Get Claims"),
    ("compare", "Compare"),
    ("final_decision", "Final Decision"),
    ("explain", "Explain"),
)


class AnalysisWizardSM(StateMachine):
    """Eight-state wizard with forward, backward and restart navigation.

    States follow WIZARD_STEPS. ``next`` moves one step forward, ``back``
    one step backward (not available on the first step or once the
    explanation is shown), ``restart`` returns to the first step from
    anywhere.

    No state has ``final=True`` so that ``restart`` stays legal from
    ``explain``.
    """

    store_story = State("Store Story", initial=True, value="store_story")
    find_character = State("Find Character", value="find_character")
    extract_actions = State("Extract Actions", value="extract_actions")
    build_traits = State("Build Traits", value="build_traits")
    get_claims = State("Get Claims", value="get_claims")
    compare = State("Compare", value="compare")
    final_decision = State("Final Decision", value="final_decision")
    explain = State("Explain", value="explain")

    next = (
        store_story.to(find_character)
        | find_character.to(extract_actions)
        | extract_actions.to(build_traits)
        | build_traits.to(get_claims)
        | get_claims.to(compare)
        | compare.to(final_decision)
        | final_decision.to(explain)
    )
    back = (
        find_character.to(store_story)
        | extract_actions.to(find_character)
        | build_traits.to(extract_actions)
        | get_claims.to(build_traits)
        | compare.to(get_claims)
        | final_decision.to(compare)
    )
    restart = (
        store_story.to(store_story)
        | find_character.to(store_story)
        | extract_actions.to(store_story)
        | build_traits.to(store_story)
        | get_claims.to(store_story)
        | compare.to(store_story)
        | final_decision.to(store_story)
        | explain.to(store_story)
    )


def step_number(state_value: str) -> int:
    """1-based position of a state value in WIZARD_STEPS."""
    for idx, (value, _label) in enumerate(WIZARD_STEPS, 1):
        if value == state_value:
            return idx
    raise ValueError(f"Unknown wizard state: {state_value!r}")


def create_wizard(step: int = 1) -> AnalysisWizardSM:
    """Create a wizard FSM positioned at a 1-based step.

    Args:
        step: Step number between 1 and 8.

    Returns:
        An AnalysisWizardSM at the requested step.

    Raises:
        ValueError: If *step* is out of range.
    """
    if not 1 <= step <= len(WIZARD_STEPS):
        raise ValueError(f"step must be between 1 and {len(WIZARD_STEPS)}, got {step}")
    return AnalysisWizardSM(start_value=WIZARD_STEPS[step - 1][0])
