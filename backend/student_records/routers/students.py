# backend/student_records/routers/students.py
from fastapi import APIRouter, Body, Depends, Query

from student_records import config
from student_records.database import RecordStore, utc_timestamp
from student_records.dependencies import get_store
from student_records.errors import ConflictError, NotFoundError, RecordValidationError
from student_records.models.students import StudentCreate
from student_records.utils.responses import envelope

router = APIRouter(prefix="/students", tags=["Students"])

# Fields update never overwrites
PROTECTED_FIELDS = ("id", "createdAt")


def _text(value) -> str:
    return "" if value is None else str(value)


def filter_students(students, search: str | None = None, course: str | None = None,
                    grade: str | None = None) -> list[dict]:
    """AND-combined filters. search/course are case-insensitive substrings, grade is exact."""
    results = list(students)

    # Search by name or roll number
    if search:
        needle = search.lower()
        results = [
            s for s in results
            if needle in _text(s.get("name")).lower()
            or needle in _text(s.get("rollNumber")).lower()
        ]

    if course:
        needle = course.lower()
        results = [s for s in results if needle in _text(s.get("course")).lower()]

    if grade:
        results = [s for s in results if s.get("grade") == grade]

    return results


def parse_student_id(raw: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise NotFoundError("Student not found")


def _locate(store: RecordStore, raw_id: str) -> int:
    idx = store.index_of(parse_student_id(raw_id))
    if idx == -1:
        raise NotFoundError("Student not found")
    return idx


# ==================== LIST STUDENTS ====================
@router.get("")
async def list_students(
    search: str | None = Query(None),
    course: str | None = Query(None),
    grade: str | None = Query(None),
    store: RecordStore = Depends(get_store),
):
    """List students matching the optional filters"""
    results = filter_students(store, search, course, grade)
    return envelope(data=results, count=len(results))


# ==================== GET STUDENT ====================
@router.get("/{student_id}")
async def get_student(student_id: str, store: RecordStore = Depends(get_store)):
    """Get single student"""
    idx = _locate(store, student_id)
    return envelope(data=store.students[idx])


# ==================== ADD STUDENT ====================
@router.post("", status_code=201)
async def add_student(data: StudentCreate, store: RecordStore = Depends(get_store)):
    """Add new student"""
    if data.missing_fields():
        raise RecordValidationError("All fields are required except phone")

    # Check duplicate roll number
    if store.roll_number_exists(data.roll_number):
        raise ConflictError("Roll number already exists")

    student = {
        "id": store.next_id(),
        "name": data.name,
        "rollNumber": data.roll_number,
        "age": data.age,
        "grade": data.grade,
        "email": data.email,
        "phone": data.phone or config.DEFAULT_PHONE,
        "course": data.course,
        "createdAt": utc_timestamp(),
    }

    store.add(student)
    store.persist()

    return envelope(data=student, message="Student added successfully")


# ==================== UPDATE STUDENT ====================
@router.put("/{student_id}")
async def update_student(
    student_id: str,
    payload: dict | None = Body(None),
    store: RecordStore = Depends(get_store),
):
    """Merge supplied fields over the stored record"""
    idx = _locate(store, student_id)
    existing = store.students[idx]

    updated = {**existing, **(payload or {})}
    for field in PROTECTED_FIELDS:
        if field in existing:
            updated[field] = existing[field]
        else:
            updated.pop(field, None)

    store.replace(idx, updated)
    store.persist()

    return envelope(data=updated, message="Student updated successfully")


# ==================== DELETE STUDENT ====================
@router.delete("/{student_id}")
async def delete_student(student_id: str, store: RecordStore = Depends(get_store)):
    """Remove a student"""
    idx = _locate(store, student_id)
    deleted = store.remove(idx)
    store.persist()

    return envelope(data=deleted, message="Student deleted successfully")
