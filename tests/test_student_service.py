import os
import tempfile
import unittest

from src.application.student_service import StudentResultProcessor, collect_students
from src.domain.models import Student


def _scripted_input(answers):
    """Returns an input() replacement that raises EOFError once the answers run out."""
    remaining = list(answers)

    def read(prompt: str = "") -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


class TestStudentResultProcessor(unittest.TestCase):
    def test_grade_boundaries(self) -> None:
        cases = {95: "A", 90: "A", 89.9: "B", 80: "B", 75: "C", 60: "D", 59.5: "F", 0: "F"}
        for score, grade in cases.items():
            with self.subTest(score=score):
                self.assertEqual(StudentResultProcessor.get_grade(score), grade)

    def test_describe_and_save_results(self) -> None:
        processor = StudentResultProcessor()
        processor.add_student(Student(name="Esi", age=20, score=91.5))
        processor.add_student(Student(name="Yaw", age=22, score=58))

        lines = processor.describe_results()
        self.assertEqual(lines[0], "Esi (20 years) - Score: 91.5 - Grade: A")
        self.assertEqual(lines[1], "Yaw (22 years) - Score: 58 - Grade: F")

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "results.txt")
            processor.save_results(path)
            with open(path, encoding="utf-8") as f:
                self.assertEqual(f.read().splitlines(), lines)


class TestCollectStudents(unittest.TestCase):
    def test_reads_each_student(self) -> None:
        read = _scripted_input(["2", "Esi", "20", "91.5", "Yaw", "22", "70"])
        output = []

        processor = collect_students(read, output.append)

        self.assertEqual([s.name for s in processor.students], ["Esi", "Yaw"])
        self.assertEqual(processor.students[1].score, 70.0)

    def test_invalid_number_is_asked_again(self) -> None:
        read = _scripted_input(["one", "1", "Esi", "twenty", "20", "high", "88"])
        output = []

        processor = collect_students(read, output.append)

        self.assertEqual(processor.students, [Student(name="Esi", age=20, score=88)])
        self.assertEqual(sum("not a valid value" in line for line in output), 3)

    def test_end_of_input_keeps_collected_students(self) -> None:
        read = _scripted_input(["3", "Esi", "20", "91"])

        with self.assertLogs("src.application.student_service", level="WARNING"):
            processor = collect_students(read, lambda line: None)

        self.assertEqual(len(processor.students), 1)
