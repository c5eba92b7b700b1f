import json
import os
import tempfile
import unittest

from fastapi.testclient import TestClient

from student_records.database import RecordStore
from student_records.main import create_app


def make_student(student_id: int, name: str, roll_number: str, grade: str = "B",
                 course: str = "Computer Science", **extra) -> dict:
    student = {
        "id": student_id,
        "name": name,
        "rollNumber": roll_number,
        "age": 20,
        "grade": grade,
        "email": f"{roll_number.lower()}@example.com",
        "phone": "N/A",
        "course": course,
        "createdAt": "2024-01-01T00:00:00.000Z",
    }
    student.update(extra)
    return student


class ApiTestCase(unittest.TestCase):
    """Runs each test against a fresh app backed by a temporary data file"""

    students: list[dict] = []

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_file = os.path.join(self._tmp.name, "students.json")
        self.store = RecordStore(self.data_file, [dict(s) for s in self.students])
        self.store.persist()
        self.app = create_app(self.store)
        self.client = TestClient(self.app)

    def tearDown(self):
        self.client.close()
        self._tmp.cleanup()

    def read_data_file(self) -> list[dict]:
        with open(self.data_file, "r", encoding="utf-8") as f:
            return json.load(f)
