"""A list of student records with a printable table."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_HEADER = "Regd. No.   Name  Branch   marks"


@dataclass(frozen=True)
class Student:
    regd_no: int
    name: str
    branch: str
    marks: int


class StudentList:
    """Student records kept in insertion order."""

    def __init__(self, students: Iterable[Student] = ()) -> None:
        self._students: deque[Student] = deque(students)

    def append(self, student: Student) -> None:
        self._students.append(student)

    def prepend(self, student: Student) -> None:
        self._students.appendleft(student)

    def format_table(self) -> str:
        """Render the records as a table, one line per student."""
        lines = [] if self._students else ["Empty List"]
        lines.append(_HEADER)
        lines.extend(
            f"{s.regd_no}        {s.name}    {s.branch}      {s.marks}" for s in self._students
        )
        return "\n".join(lines) + "\n"

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)