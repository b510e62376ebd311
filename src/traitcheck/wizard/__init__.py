"""Interactive step-by-step wizard around the analysis pipeline."""

from traitcheck.wizard.fsm import WIZARD_STEPS, AnalysisWizardSM, create_wizard
from traitcheck.wizard.session import WizardInputError, WizardSession

__all__ = [
    "WIZARD_STEPS",
    "AnalysisWizardSM",
    "WizardInputError",
    "WizardSession",
    "create_wizard",
]
