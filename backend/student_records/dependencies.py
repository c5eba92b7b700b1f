# backend/student_records/dependencies.py
from fastapi import Request

from student_records.database import RecordStore


async def get_store(request: Request) -> RecordStore:
    """Record store attached to the running application"""
    return request.app.state.store
