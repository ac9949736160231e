"""AI flow that solves a math problem and explains it step by step."""

import json
from typing import Any, Dict, Optional, Union

import pydantic

from trackademic.base_flow import Flow
from trackademic.common.http_utils import strip_code_fences
from trackademic.common.prompts import get_solve_math_prompt
from trackademic.config import SolverConfig
from trackademic.errors import TrackademicError, UpstreamError, ValidationError
from trackademic.model.solution import SolveMathInput, SolveMathOutput
from trackademic.solver.backends import BackendCallable, RawResponse, create_backend


class SolveMathFlow(Flow):
    """
    Single request/response flow around a generative model.

    Every call renders the prompt, sends exactly one backend request and
    validates the answer against `SolveMathOutput`. There is no retry,
    fallback or caching: identical inputs issue fresh requests, and
    `ValidationError` / `UpstreamError` reach the caller unchanged.
    """

    def __init__(
        self,
        config: Optional[Union[SolverConfig, Dict[str, Any]]] = None,
        backend: Optional[BackendCallable] = None,
    ):
        """Initialize the flow.

        Args:
            config: Solver configuration, defaults are used when omitted.
            backend: Async callable `prompt -> raw response`. Built from the
                configuration when omitted.
        """
        if config is None:
            config = SolverConfig()
        elif isinstance(config, dict):
            config = SolverConfig(**config)
        super().__init__(config, name="SolveMathFlow")
        self.backend = backend or create_backend(config)

    @staticmethod
    def _validate_input(input_data: Union[SolveMathInput, Dict[str, Any], str]) -> SolveMathInput:
        if isinstance(input_data, SolveMathInput):
            return input_data
        if isinstance(input_data, str):
            input_data = {"equation": input_data}
        try:
            return SolveMathInput(**input_data)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid math problem: {e}") from e

    def _parse_output(self, raw: RawResponse) -> SolveMathOutput:
        if isinstance(raw, str):
            try:
                raw = json.loads(strip_code_fences(raw))
            except json.JSONDecodeError as e:
                self.logger.error(f"Backend response is not JSON: {raw[:200]}")
                raise ValidationError(f"Backend response is not valid JSON: {e}") from e

        if not isinstance(raw, dict):
            raise ValidationError(f"Backend response must be a JSON object, got {type(raw).__name__}")

        try:
            return SolveMathOutput(**raw)
        except pydantic.ValidationError as e:
            self.logger.error(f"Backend response does not match the solution schema: {e}")
            raise ValidationError(f"Backend response does not match the solution schema: {e}") from e

    async def execute(self, input_data: Union[SolveMathInput, Dict[str, Any], str]) -> SolveMathOutput:
        """Solve one problem.

        Args:
            input_data: `SolveMathInput`, `{"equation": ...}` or the bare
                problem string.

        Returns:
            The final answer and the ordered derivation steps.

        Raises:
            ValidationError: blank input, or a response missing
                `solution`/`steps`.
            UpstreamError: the backend call failed.
        """
        problem = self._validate_input(input_data)
        prompt = get_solve_math_prompt(problem.equation)

        self.logger.info(f"Solving: {problem.equation[:100]}")
        try:
            raw = await self.backend(prompt)
        except TrackademicError:
            raise
        except Exception as e:
            self.logger.error(f"Backend call failed: {e!r}")
            raise UpstreamError(f"Backend call failed: {e!r}") from e
        output = self._parse_output(raw)

        if self.debug:
            self.logger.info(f"Solution: {output.solution} ({len(output.steps)} steps)")
        return output


async def solve_math(
    equation: str,
    backend: Optional[BackendCallable] = None,
    config: Optional[SolverConfig] = None,
) -> SolveMathOutput:
    """Solve `equation` with a one-off `SolveMathFlow`."""
    flow = SolveMathFlow(config=config, backend=backend)
    return await flow(equation)
