"""Virtual Student Info: a static profile card."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from rich.console import Console
from rich.table import Table

from activity_system.ui.tui.config import THEME
from activity_system.ui.tui.display import create_header
from activity_system.utils.decorators import log_execution
from activity_system.validation.validator import InputValidator


@dataclass(frozen=True)
class StudentProfile:
    name: str = "Alberto Jr Deniros"
    section_and_course: str = "BSCS 1-A"
    age: int = 23
    gender: str = "MALE"
    coding_devices: str = "Desktop Computer"

    def rows(self) -> List[Tuple[str, str]]:
        return [
            ("Name", self.name),
            ("Section and Course", self.section_and_course),
            ("AGE", str(self.age)),
            ("GENDER", self.gender),
            ("CODING DEVICES", self.coding_devices),
        ]


class StudentInfoActivity:
    title = "Virtual Student Info"

    def __init__(self, validator: InputValidator, console: Console, profile: StudentProfile = None):
        self.validator = validator
        self.console = console
        self.profile = profile or StudentProfile()

    @log_execution("student_info")
    def run(self) -> None:
        self.console.print(create_header(self.title))

        table = Table(box=None, show_header=False, padding=(0, 1, 0, 0))
        table.add_column("Field", style=f"{THEME.primary} bold")
        table.add_column("Value", style=THEME.neutral)
        for field_name, value in self.profile.rows():
            table.add_row(f"{field_name}:", value)
        self.console.print(table)

        self.validator.pause()
