from student_records.client.api import StudentsApi
from student_records.client.controller import PageState, StudentsPage
from student_records.client.debounce import Debouncer
from student_records.client.render import render_cards, render_page

__all__ = ["StudentsApi", "StudentsPage", "PageState", "Debouncer", "render_cards", "render_page"]
