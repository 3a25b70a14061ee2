"""Engine invocation entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RunResult:
    """Verdict reported by the test engine for one completed run."""

    exit_code: int
    total_test_cases: int = 0
    failed_test_cases: tuple[str, ...] = ()
    failed_assertions: int = 0


@dataclass(frozen=True)
class InvocationResult:
    """Outcome of calling the engine: a run result or a contained error."""

    run_result: RunResult | None
    error_message: str | None

    @property
    def completed(self) -> bool:
        return self.run_result is not None

    @staticmethod
    def finished(run_result: RunResult) -> InvocationResult:
        return InvocationResult(run_result=run_result, error_message=None)

    @staticmethod
    def failed(error: BaseException) -> InvocationResult:
        return InvocationResult(run_result=None, error_message=str(error) or type(error).__name__)
