"""Single synchronous call into the test engine."""

from __future__ import annotations

import logging

from soapui_build_step.engine_environment import EngineEnvironment
from soapui_build_step.run_configuration import RunConfiguration

from .invocation_outcomes import InvocationResult
from .testrunner_engine import Engine

LOGGER = logging.getLogger(__name__)


def invoke_engine(
    engine: Engine, configuration: RunConfiguration, environment: EngineEnvironment
) -> InvocationResult:
    """Run the engine once and contain anything it raises.

    There is no retry and no timeout: the call blocks until the engine returns.
    """
    try:
        run_result = engine.run(configuration, environment)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        LOGGER.debug("Detailed errors", exc_info=True)
        return InvocationResult.failed(exc)
    return InvocationResult.finished(run_result)
