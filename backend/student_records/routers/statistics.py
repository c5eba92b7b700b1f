# backend/student_records/routers/statistics.py
from collections import Counter

from fastapi import APIRouter, Depends

from student_records.database import RecordStore
from student_records.dependencies import get_store
from student_records.models.students import StatisticsOut
from student_records.utils.responses import envelope

router = APIRouter(prefix="/statistics", tags=["Statistics"])


def compute_statistics(students) -> StatisticsOut:
    students = list(students)
    grades = Counter(s.get("grade") for s in students)
    return StatisticsOut(
        totalStudents=len(students),
        totalCourses=len({s.get("course") for s in students}),
        gradeDistribution={str(grade): count for grade, count in grades.items()},
    )


@router.get("")
async def get_statistics(store: RecordStore = Depends(get_store)):
    """Aggregate counts, computed on every call"""
    return envelope(data=compute_statistics(store).model_dump())
