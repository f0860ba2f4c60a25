"""
Onboarding Use Cases

Progress tracking over the fixed club setup checklist.
"""

from .auto_update_onboarding_use_case import AutoUpdateOnboardingUseCase
from .get_onboarding_status_use_case import GetOnboardingStatusUseCase
from .initialize_onboarding_status_use_case import InitializeOnboardingStatusUseCase
from .update_onboarding_step_use_case import UpdateOnboardingStepUseCase

__all__ = [
    "GetOnboardingStatusUseCase",
    "UpdateOnboardingStepUseCase",
    "InitializeOnboardingStatusUseCase",
    "AutoUpdateOnboardingUseCase",
]
