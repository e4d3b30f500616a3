import os
import tempfile
import unittest
from dataclasses import dataclass

from serialcheck import FixtureStore, field_verifier, verify_fixtures, write_fixture


@dataclass
class JobDetail:
    key: str
    durable: bool


class JobDetailSubject:
    def get_target_object(self):
        return JobDetail(key="reports.nightly", durable=True)

    def get_versions(self):
        return ["1.0", "1.1"]

    def verify_match(self, target, reconstructed):
        self.assertion_count = getattr(self, "assertion_count", 0) + 1
        field_verifier()(target, reconstructed)


class SmokeTest(unittest.TestCase):
    def test_generate_then_verify(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            store = FixtureStore(os.path.join(temp_dir, "fixtures"))
            subject = JobDetailSubject()

            for version in subject.get_versions():
                write_fixture(subject, version, store)

            result = verify_fixtures(
                subject.get_target_object,
                subject.get_versions(),
                subject.verify_match,
                store,
            )
            self.assertTrue(result.is_pass())
            self.assertEqual(2, subject.assertion_count)
            self.assertEqual(["1.0", "1.1"], store.available_versions(JobDetail))


if __name__ == "__main__":
    unittest.main()
