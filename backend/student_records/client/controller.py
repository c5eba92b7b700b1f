# backend/student_records/client/controller.py
from typing import Any, Callable

import requests
from pydantic import BaseModel, Field

from student_records import config
from student_records.client.api import StudentsApi
from student_records.client.debounce import Debouncer
from student_records.client.render import EMPTY_STATISTICS, render_page

# Network failures plus bodies that are not JSON
CLIENT_ERRORS = (requests.RequestException, ValueError)


class PageState(BaseModel):
    search: str = ""
    course: str = ""
    grade: str = ""
    students: list[dict[str, Any]] = Field(default_factory=list)
    count: int = 0
    statistics: dict[str, Any] = Field(default_factory=lambda: dict(EMPTY_STATISTICS))
    loading: bool = False
    error: str | None = None
    create_form: dict[str, Any] = Field(default_factory=dict)
    editing: dict[str, Any] | None = None
    # last notification, shown above the list
    message: str | None = None


def _ask(message: str) -> bool:
    return input(f"{message} [y/N] ").strip().lower() in ("y", "yes")


class StudentsPage:
    """Client-side page controller: explicit state, API calls, re-render on demand."""

    def __init__(
        self,
        api: StudentsApi | None = None,
        notify: Callable[[str], None] = print,
        confirm: Callable[[str], bool] = _ask,
        debounce_seconds: float = config.SEARCH_DEBOUNCE_MS / 1000,
    ):
        self.api = api or StudentsApi()
        self.notify = notify
        self.confirm = confirm
        self.state = PageState()
        self.search_debouncer = Debouncer(debounce_seconds)

    def _alert(self, text: str) -> None:
        self.state.message = text
        self.notify(text)

    def start(self) -> None:
        self.load_students()
        self.load_statistics()

    # ==================== LOADING ====================
    def load_students(self) -> None:
        self.state.loading = True
        try:
            result = self.api.list_students(self.state.search, self.state.course, self.state.grade)
            if not result.get("success"):
                raise ValueError(result.get("message", "Unknown error"))
            self.state.students = result.get("data", [])
            self.state.count = result.get("count", len(self.state.students))
            self.state.error = None
        except CLIENT_ERRORS as e:
            print(f"❌ Error loading students: {e}")
            self.state.error = "Error loading students. Please try again."
        finally:
            self.state.loading = False

    def load_statistics(self) -> None:
        try:
            result = self.api.statistics()
            if result.get("success"):
                self.state.statistics = result["data"]
        except CLIENT_ERRORS as e:
            print(f"❌ Error loading statistics: {e}")

    def refresh(self) -> None:
        self.load_students()
        self.load_statistics()

    # ==================== FILTERS ====================
    def on_search_input(self, text: str) -> None:
        self.state.search = text
        self.search_debouncer.call(self.load_students)

    def on_course_change(self, value: str) -> None:
        self.state.course = value
        self.load_students()

    def on_grade_change(self, value: str) -> None:
        self.state.grade = value
        self.load_students()

    def clear_filters(self) -> None:
        self.search_debouncer.cancel()
        self.state.search = self.state.course = self.state.grade = ""
        self.load_students()

    # ==================== CREATE ====================
    def submit_create(self, form: dict) -> bool:
        self.state.create_form = dict(form)
        try:
            result = self.api.create_student(form)
        except CLIENT_ERRORS as e:
            print(f"❌ Error: {e}")
            self._alert("Error adding student. Please try again.")
            return False

        if not result.get("success"):
            self._alert(f"Error: {result.get('message')}")
            return False

        self._alert("Student added successfully!")
        self.state.create_form = {}
        self.refresh()
        return True

    # ==================== EDIT ====================
    def open_editor(self, student_id: int) -> bool:
        try:
            result = self.api.get_student(student_id)
        except CLIENT_ERRORS as e:
            print(f"❌ Error loading student: {e}")
            self._alert("Error loading student data.")
            return False

        if not result.get("success"):
            self._alert(f"Error: {result.get('message')}")
            return False

        self.state.editing = result["data"]
        return True

    def close_editor(self) -> None:
        self.state.editing = None

    def submit_edit(self, form: dict) -> bool:
        if self.state.editing is None:
            return False

        student_id = self.state.editing["id"]
        payload = {key: value for key, value in form.items() if key not in ("id", "rollNumber")}
        if "age" in payload:
            try:
                payload["age"] = int(payload["age"])
            except (TypeError, ValueError):
                self._alert("Error: Age must be a number")
                return False

        try:
            result = self.api.update_student(student_id, payload)
        except CLIENT_ERRORS as e:
            print(f"❌ Error: {e}")
            self._alert("Error updating student. Please try again.")
            return False

        if not result.get("success"):
            self._alert(f"Error: {result.get('message')}")
            return False

        self._alert("Student updated successfully!")
        self.close_editor()
        self.refresh()
        return True

    # ==================== DELETE ====================
    def delete_student(self, student_id: int) -> bool:
        if not self.confirm("Are you sure you want to delete this student?"):
            return False

        try:
            result = self.api.delete_student(student_id)
        except CLIENT_ERRORS as e:
            print(f"❌ Error: {e}")
            self._alert("Error deleting student. Please try again.")
            return False

        if not result.get("success"):
            self._alert(f"Error: {result.get('message')}")
            return False

        self._alert("Student deleted successfully!")
        self.refresh()
        return True

    # ==================== RENDER ====================
    def render(self) -> str:
        state = self.state
        return render_page(
            state.students,
            state.statistics,
            {"search": state.search, "course": state.course, "grade": state.grade},
            state.count,
            error=state.error,
            message=state.message,
            loading=state.loading,
            interactive=True,
            create_form=state.create_form,
            editing=state.editing,
        )
