# backend/student_records/client/render.py
import os

from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

GRADE_OPTIONS = ["A+", "A", "B+", "B", "C+", "C", "D", "F"]

FORM_FIELDS = [
    ("name", "Full Name"),
    ("rollNumber", "Roll Number"),
    ("age", "Age"),
    ("grade", "Grade"),
    ("email", "Email"),
    ("phone", "Phone"),
    ("course", "Course"),
]

EMPTY_STATISTICS = {"totalStudents": 0, "totalCourses": 0, "gradeDistribution": {}}


def grade_class(grade) -> str:
    """CSS class for a grade badge: A+ -> grade-A-plus"""
    return "grade-" + str(grade or "").replace("+", "-plus")


env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters["grade_class"] = grade_class


def render_cards(students: list[dict], error: str | None = None) -> str:
    """Student cards, or the empty-state message when there are none"""
    return env.get_template("_students.html").render(students=students, error=error)


def render_page(
    students: list[dict],
    statistics: dict | None = None,
    filters: dict | None = None,
    count: int | None = None,
    *,
    error: str | None = None,
    message: str | None = None,
    loading: bool = False,
    interactive: bool = False,
    create_form: dict | None = None,
    editing: dict | None = None,
) -> str:
    filters = {key: (filters or {}).get(key) or "" for key in ("search", "course", "grade")}
    return env.get_template("index.html").render(
        students=students,
        statistics=statistics or EMPTY_STATISTICS,
        filters=filters,
        count=len(students) if count is None else count,
        error=error,
        message=message,
        loading=loading,
        interactive=interactive,
        create_form=create_form or {},
        editing=editing,
        grade_options=GRADE_OPTIONS,
        form_fields=FORM_FIELDS,
    )
