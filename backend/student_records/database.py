# backend/student_records/database.py
import json
import os
from datetime import datetime, timezone
from typing import Iterator

from student_records import config


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T10:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def sample_students() -> list[dict]:
    """Records written to a fresh data file"""
    created_at = utc_timestamp()
    return [
        {
            "id": 1,
            "name": "Ali Ahmed",
            "rollNumber": "ST001",
            "age": 20,
            "grade": "A",
            "email": "ali.ahmed@example.com",
            "phone": "0300-1234567",
            "course": "Computer Science",
            "createdAt": created_at,
        },
        {
            "id": 2,
            "name": "Sara Khan",
            "rollNumber": "ST002",
            "age": 22,
            "grade": "A+",
            "email": "sara.khan@example.com",
            "phone": "0312-7654321",
            "course": "Software Engineering",
            "createdAt": created_at,
        },
    ]


class RecordStore:
    """In-memory student records mirrored to a single JSON document.

    The list held here is the only object mutated while a request runs;
    callers must call persist() after every change.
    """

    def __init__(self, path: str = None, students: list[dict] | None = None):
        self.path = path or config.DATA_FILE
        self.students: list[dict] = list(students) if students is not None else []

    # ==================== FILE SYNC ====================
    def load(self) -> list[dict]:
        """Read the data file, seeding sample records if it is missing or unreadable"""
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)

        try:
            if os.path.exists(self.path):
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if isinstance(data, list):
                    self.students = data
                    return self.students
        except (OSError, ValueError) as e:
            print(f"⚠️ Could not read {self.path}: {e}")

        print("📝 Creating new data file...")
        self.students = sample_students()
        self.persist()
        return self.students

    def persist(self) -> None:
        """Overwrite the data file with the full collection"""
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.students, f, indent=2, ensure_ascii=False)

    # ==================== LOOKUPS ====================
    def index_of(self, student_id: int) -> int:
        for idx, student in enumerate(self.students):
            if student.get("id") == student_id:
                return idx
        return -1

    def find(self, student_id: int) -> dict | None:
        idx = self.index_of(student_id)
        return self.students[idx] if idx != -1 else None

    def roll_number_exists(self, roll_number: str) -> bool:
        return any(s.get("rollNumber") == roll_number for s in self.students)

    def next_id(self) -> int:
        ids = [s["id"] for s in self.students if isinstance(s.get("id"), int)]
        return max(ids) + 1 if ids else 1

    # ==================== MUTATIONS ====================
    def add(self, student: dict) -> dict:
        self.students.append(student)
        return student

    def replace(self, index: int, student: dict) -> dict:
        self.students[index] = student
        return student

    def remove(self, index: int) -> dict:
        return self.students.pop(index)

    def __len__(self) -> int:
        return len(self.students)

    def __iter__(self) -> Iterator[dict]:
        return iter(self.students)
