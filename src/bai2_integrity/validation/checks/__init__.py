"""Validation stages base interface.

This module defines the protocol (interface) that all validation stages must implement.
Each stage is responsible for one pass over the parsed tree (structure, business
rules, data quality, metrics, recommendations) and appends its findings to the
shared ValidationReport.

To implement a new stage:

1. Create a new file in this directory (e.g., `my_stage.py`)
2. Define a class that implements the ValidationStage protocol
3. Implement `check_id` and `run()`
4. Add the stage to the ALL_STAGES list in registry.py at the right position

Example:
    ```python
    # checks/my_stage.py
    from bai2_integrity.core.utils import iter_accounts, location
    from ..config import ValidationPolicy
    from ..models import ValidationReport

    class MyStage:
        check_id = "my_stage"

        def run(self, bai_file, report: ValidationReport, policy: ValidationPolicy) -> None:
            for g, a, account in iter_accounts(bai_file):
                if account.currency_code is None:
                    report.add_warning(f"{location(g, a)}: Missing currency code")
    ```

Anticipated conditions are recorded as errors or warnings; stages raise only
on unexpected faults (e.g., a tree node lacking an expected attribute), which
the registry turns into a single "Validation failed" error.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..config import ValidationPolicy
from ..models import ValidationReport


class ValidationStage(Protocol):
    """Protocol defining the interface for validation stages.

    Use duck typing (Protocol) for flexibility - no need to inherit from a base class.

    Attributes:
        check_id: Unique identifier of the stage (e.g., "structure").
    """

    check_id: str

    def run(self, bai_file: Any, report: ValidationReport, policy: ValidationPolicy) -> None:
        """Run the stage and append findings to ``report``.

        Args:
            bai_file: Parsed file exposing ``groups`` (read-only).
            report: Accumulator shared by all stages of the run.
            policy: Validation options.
        """
        ...


__all__ = ["ValidationStage"]
