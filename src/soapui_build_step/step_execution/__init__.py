"""Step execution domain exports."""

from .soapui_step_use_case import (
    StepExecutionError,
    execute_test_step,
    execute_test_step_request,
)
from .step_contracts import StepRequest

__all__ = [
    "StepRequest",
    "StepExecutionError",
    "execute_test_step",
    "execute_test_step_request",
]
