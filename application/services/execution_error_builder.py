# application/services/execution_error_builder.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from application.executor.step_executor import ExecutionResult, WorkflowStatus


@dataclass(frozen=True)
class ExecutionErrorDetail:
    code: str
    message: str
    step: Optional[str]


@dataclass(frozen=True)
class StepReportLine:
    step: str
    status: str
    detail: str = ""

    def render(self) -> str:
        return f"  {self.step:<24} {self.status}" + (f"  {self.detail}" if self.detail else "")


class ExecutionErrorBuilder:
    def build_from_result(self, result: ExecutionResult) -> Optional[ExecutionErrorDetail]:
        if result.status != WorkflowStatus.HALTED:
            return None
        error = result.halt_error
        return ExecutionErrorDetail(
            code=type(error).__name__ if error is not None else "step_failed",
            message=str(error) if error is not None else "Step execution failed",
            step=result.halted_step,
        )

    def build_from_exception(self, exc: BaseException) -> ExecutionErrorDetail:
        return ExecutionErrorDetail(code=type(exc).__name__, message=str(exc), step=None)

    def report_lines(self, result: ExecutionResult) -> List[StepReportLine]:
        lines: List[StepReportLine] = []
        for name, outcome in result.outcomes.items():
            if outcome.ok:
                lines.append(StepReportLine(step=name, status="Success", detail=outcome.message or ""))
            else:
                lines.append(StepReportLine(step=name, status="Failed", detail=outcome.error_message or ""))
        return lines
