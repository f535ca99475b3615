"""Student Grade Evaluator: four period grades, one average, pass or fail."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from rich.console import Console
from rich.text import Text

from activity_system.ui.tui.config import THEME
from activity_system.ui.tui.display import create_header, create_line
from activity_system.utils.decorators import log_execution
from activity_system.validation.validator import InputValidator

GRADING_PERIODS: Tuple[str, ...] = ("Prelim", "Midterm", "PreFinal", "Final")
PASSING_GRADE = 80
MIN_GRADE = 0
MAX_GRADE = 100

PASSED_REMARK = "PASADO KA BOI!!"
FAILED_REMARK = "BAGSAK KA BOI!!"


@dataclass(frozen=True)
class GradeReport:
    grades: Tuple[Tuple[str, float], ...]
    average: float
    passing_grade: float = PASSING_GRADE

    @property
    def passed(self) -> bool:
        return self.average >= self.passing_grade

    @property
    def remark(self) -> str:
        return PASSED_REMARK if self.passed else FAILED_REMARK


def evaluate_grades(grades: Mapping[str, float], passing_grade: float = PASSING_GRADE) -> GradeReport:
    """Average the period grades and compare against the passing grade."""
    if not grades:
        raise ValueError("At least one grade is required")
    average = sum(grades.values()) / len(grades)
    return GradeReport(grades=tuple(grades.items()), average=average, passing_grade=passing_grade)


class GradeEvaluatorActivity:
    title = "Student Grade Evaluator"

    def __init__(self, validator: InputValidator, console: Console, line_width: int = 45):
        self.validator = validator
        self.console = console
        self.line_width = line_width

    @log_execution("grade_evaluator")
    def run(self) -> GradeReport:
        self.console.print(create_header(self.title))

        grades = {}
        for period in GRADING_PERIODS:
            grades[period] = self.validator.read_range(f"Enter {period} Grade: ", MIN_GRADE, MAX_GRADE)

        report = evaluate_grades(grades)

        self.console.print(create_line(self.line_width))
        self.console.print(f"Passing grade: {PASSING_GRADE}")
        self.console.print(f"Your average: {report.average:g}")
        self.console.print("REMARKS: ")
        style = THEME.success if report.passed else THEME.error
        self.console.print(Text(f">>> ===== {report.remark} ===== <<<", style=f"{style} bold"))
        self.console.print(create_line(self.line_width))

        self.validator.pause()
        return report
