import json
import os
import tempfile
import unittest

from student_records.database import RecordStore, utc_timestamp


class TestRecordStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "data", "students.json")

    def tearDown(self):
        self._tmp.cleanup()

    def test_load_seeds_missing_file(self):
        store = RecordStore(self.path)
        students = store.load()

        self.assertEqual([s["rollNumber"] for s in students], ["ST001", "ST002"])
        self.assertTrue(os.path.exists(self.path))
        with open(self.path, encoding="utf-8") as f:
            self.assertEqual(len(json.load(f)), 2)

    def test_load_seeds_unparsable_file(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("{not json")

        students = RecordStore(self.path).load()
        self.assertEqual(len(students), 2)
        self.assertEqual(students[0]["name"], "Ali Ahmed")

    def test_load_seeds_when_document_is_not_a_list(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({"students": []}, f)

        self.assertEqual(len(RecordStore(self.path).load()), 2)

    def test_load_reads_existing_records(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([{"id": 7, "name": "Zed", "rollNumber": "Z7"}], f)

        store = RecordStore(self.path)
        store.load()
        self.assertEqual(len(store), 1)
        self.assertEqual(store.find(7)["name"], "Zed")

    def test_load_keeps_empty_list(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("[]")

        self.assertEqual(RecordStore(self.path).load(), [])

    def test_persist_writes_pretty_json(self):
        os.makedirs(os.path.dirname(self.path))
        store = RecordStore(self.path, [{"id": 1, "name": "A"}])
        store.persist()

        with open(self.path, encoding="utf-8") as f:
            text = f.read()
        self.assertEqual(json.loads(text), [{"id": 1, "name": "A"}])
        self.assertIn('\n  {\n    "id": 1', text)

    def test_next_id(self):
        store = RecordStore(self.path)
        self.assertEqual(store.next_id(), 1)

        store.students = [{"id": 3}, {"id": 9}, {"id": 4}]
        self.assertEqual(store.next_id(), 10)

    def test_lookups_and_mutations(self):
        store = RecordStore(self.path, [{"id": 1, "rollNumber": "R1"}, {"id": 2, "rollNumber": "R2"}])

        self.assertEqual(store.index_of(2), 1)
        self.assertEqual(store.index_of(5), -1)
        self.assertIsNone(store.find(5))
        self.assertTrue(store.roll_number_exists("R1"))
        self.assertFalse(store.roll_number_exists("r1"))

        removed = store.remove(0)
        self.assertEqual(removed["id"], 1)
        self.assertEqual([s["id"] for s in store], [2])

    def test_utc_timestamp_format(self):
        stamp = utc_timestamp()
        self.assertTrue(stamp.endswith("Z"))
        self.assertRegex(stamp, r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


if __name__ == "__main__":
    unittest.main()
