import unittest

from student_records.routers.statistics import compute_statistics
from tests.support import ApiTestCase, make_student


class TestStatisticsApi(ApiTestCase):
    students = [
        make_student(1, "Ali Ahmed", "ST001", grade="A", course="Computer Science"),
        make_student(2, "Sara Khan", "ST002", grade="A+", course="Software Engineering"),
        make_student(3, "Omar Farooq", "ST003", grade="A", course="Computer Science"),
        make_student(4, "Hina Shah", "ST004", grade="B", course="computer science"),
    ]

    def test_statistics(self):
        response = self.client.get("/api/statistics")

        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(data["totalStudents"], 4)
        # distinct strings, so case variants count separately
        self.assertEqual(data["totalCourses"], 3)
        self.assertEqual(data["gradeDistribution"], {"A": 2, "A+": 1, "B": 1})
        self.assertEqual(sum(data["gradeDistribution"].values()), data["totalStudents"])

    def test_statistics_follow_mutations(self):
        self.client.delete("/api/students/2")
        self.client.post("/api/students", json={
            "name": "New", "rollNumber": "ST010", "age": 19,
            "grade": "C", "email": "new@example.com", "course": "Physics",
        })

        data = self.client.get("/api/statistics").json()["data"]
        self.assertEqual(data["totalStudents"], 4)
        self.assertEqual(data["totalCourses"], 3)
        self.assertNotIn("A+", data["gradeDistribution"])
        self.assertEqual(data["gradeDistribution"]["C"], 1)


class TestComputeStatistics(unittest.TestCase):
    def test_empty(self):
        stats = compute_statistics([])
        self.assertEqual(stats.totalStudents, 0)
        self.assertEqual(stats.totalCourses, 0)
        self.assertEqual(stats.gradeDistribution, {})


if __name__ == "__main__":
    unittest.main()
