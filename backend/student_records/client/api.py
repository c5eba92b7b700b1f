# backend/student_records/client/api.py
import requests

from student_records import config

API_BASE = "/api/students"
STATISTICS_PATH = "/api/statistics"


class StudentsApi:
    """Thin HTTP client for the student records API.

    Every call returns the decoded envelope. Connection failures raise
    requests.RequestException and unreadable bodies raise ValueError;
    callers decide how to surface them.
    """

    def __init__(self, base_url: str = None, session=None, timeout: float = None):
        self.base_url = (config.API_BASE_URL if base_url is None else base_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = config.REQUEST_TIMEOUT if timeout is None else timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(self, method: str, path: str, **kwargs) -> dict:
        response = self.session.request(method, self._url(path), timeout=self.timeout, **kwargs)
        return response.json()

    def list_students(self, search: str = "", course: str = "", grade: str = "") -> dict:
        params = {key: value for key, value in
                  (("search", search), ("course", course), ("grade", grade)) if value}
        return self._request("GET", API_BASE, params=params)

    def get_student(self, student_id: int) -> dict:
        return self._request("GET", f"{API_BASE}/{student_id}")

    def create_student(self, payload: dict) -> dict:
        return self._request("POST", API_BASE, json=payload)

    def update_student(self, student_id: int, payload: dict) -> dict:
        return self._request("PUT", f"{API_BASE}/{student_id}", json=payload)

    def delete_student(self, student_id: int) -> dict:
        return self._request("DELETE", f"{API_BASE}/{student_id}")

    def statistics(self) -> dict:
        return self._request("GET", STATISTICS_PATH)
