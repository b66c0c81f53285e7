"""Entry point for the loginllama runner.

Usage:
    python -m loginllama < input.json > output.json

Reads a :class:`~loginllama.schema.RunnerInput` document from stdin, runs
the check and writes a :class:`~loginllama.schema.RunnerOutput` document to
stdout.

Exit codes:
    0: Success
    1: Failure (error details in JSON output)
"""

from __future__ import annotations

import asyncio
import sys

from loginllama.client import LoginLlama
from loginllama.exceptions import TransportError
from loginllama.result import CheckResult
from loginllama.schema import RunnerInput, RunnerOutput
from loginllama.transport import Transport


async def run(input_data: RunnerInput, transport: Transport | None = None) -> RunnerOutput:
    """Execute one runner request and wrap the outcome."""
    client = LoginLlama(input_data.api_key, transport=transport)
    action = {
        "check": client.check,
        "success": client.report_success,
        "failure": client.report_failure,
    }[input_data.action]

    try:
        result = await action(input_data.identity_key, input_data.options)
    except TransportError as e:
        return RunnerOutput(
            success=False,
            error=str(e),
            error_type=type(e).__name__,
            status_code=e.status_code,
        )
    except Exception as e:
        return RunnerOutput(success=False, error=str(e), error_type=type(e).__name__)

    if isinstance(result, CheckResult):
        result = result.to_dict()
    return RunnerOutput(success=True, result=result)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        input_data = RunnerInput.model_validate_json(sys.stdin.read())
        output = asyncio.run(run(input_data))
    except Exception as e:
        # Always emit valid JSON, even on unexpected errors
        output = RunnerOutput(success=False, error=str(e), error_type=type(e).__name__)

    print(output.model_dump_json())
    return 0 if output.success else 1


if __name__ == "__main__":
    sys.exit(main())
