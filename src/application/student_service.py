import logging
from typing import Callable, List, Optional

from src.domain.models import Student

logger = logging.getLogger(__name__)

# (lower bound, grade) checked from the top down
GRADE_BOUNDARIES = [(90, "A"), (80, "B"), (70, "C"), (60, "D")]
FAILING_GRADE = "F"


class StudentResultProcessor:
    """Collects student scores and turns them into letter-graded results."""

    def __init__(self):
        self.students: List[Student] = []

    def add_student(self, student: Student) -> None:
        self.students.append(student)

    @staticmethod
    def get_grade(score: float) -> str:
        for lower_bound, grade in GRADE_BOUNDARIES:
            if score >= lower_bound:
                return grade
        return FAILING_GRADE

    def describe_results(self) -> List[str]:
        return [
            f"{s.name} ({s.age} years) - Score: {s.score:g} - Grade: {self.get_grade(s.score)}"
            for s in self.students
        ]

    def save_results(self, output_file: str) -> None:
        """
        Writes one result line per student to output_file, replacing its contents.

        Raises:
            OSError: if the file cannot be written.
        """
        with open(output_file, "w", encoding="utf-8") as f:
            for line in self.describe_results():
                f.write(line + "\n")
        logger.info(f"Results saved to '{output_file}'.")


def _prompt(read: Callable[[str], str], write: Callable[[str], None], label: str, parse: Callable[[str], object]):
    """Asks until the answer parses. Propagates EOFError when input runs out."""
    while True:
        raw = read(label)
        try:
            return parse(raw.strip())
        except ValueError:
            write(f"'{raw.strip()}' is not a valid value, please try again.")


def collect_students(
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
    processor: Optional[StudentResultProcessor] = None,
) -> StudentResultProcessor:
    """
    Interactive front end: reads a student count, then name, age and score
    for each student. Invalid numbers are asked for again rather than
    aborting the run; running out of input keeps the students read so far.
    """
    read = read or input
    write = write or print
    processor = processor if processor is not None else StudentResultProcessor()

    try:
        count = _prompt(read, write, "Enter the number of students: ", int)
        for i in range(count):
            write(f"\nStudent {i + 1}:")
            name = read("Name: ").strip()
            age = _prompt(read, write, "Age: ", int)
            score = _prompt(read, write, "Score: ", float)
            processor.add_student(Student(name=name, age=age, score=score))
    except EOFError:
        logger.warning(f"Input ended early; collected {len(processor.students)} students.")

    return processor
