#!/usr/bin/env python3
"""
Unit tests for the marketplace repositories.

Sessions are mocked; statements are compiled with the PostgreSQL dialect
to check filters, ordering and the match upsert clause.
"""

import unittest
import uuid
from unittest.mock import MagicMock

from sqlalchemy.dialects import postgresql

from database.models import Job, Profile
from database.repositories import (
    ApplicationRepository,
    CandidateRepository,
    EmployerRepository,
    JobRepository,
    MatchRepository,
)
from database.repositories.base import to_uuid


def _sql(mock_db):
    stmt = mock_db.execute.call_args.args[0]
    return str(stmt.compile(dialect=postgresql.dialect()))


class TestToUuid(unittest.TestCase):

    def test_valid_values(self):
        value = uuid.uuid4()
        self.assertEqual(to_uuid(value), value)
        self.assertEqual(to_uuid(str(value)), value)

    def test_invalid_values(self):
        self.assertIsNone(to_uuid("not-a-uuid"))
        self.assertIsNone(to_uuid(None))
        self.assertIsNone(to_uuid(""))


class TestJobRepository(unittest.TestCase):

    def setUp(self):
        self.mock_db = MagicMock()
        self.repo = JobRepository(self.mock_db)

    def test_get_active_jobs(self):
        job = Job(id=uuid.uuid4(), title="Engineer")
        self.mock_db.execute.return_value.scalars.return_value.all.return_value = [job]

        result = self.repo.get_active_jobs(limit=10)

        self.assertEqual(result, [job])
        sql = _sql(self.mock_db)
        self.assertIn("jobs.active IS true", sql)
        self.assertIn("ORDER BY jobs.created_at DESC", sql)
        self.assertIn("LIMIT", sql)

    def test_get_by_id_invalid_uuid_skips_query(self):
        self.assertIsNone(self.repo.get_by_id("job-1"))
        self.mock_db.execute.assert_not_called()

    def test_get_by_id(self):
        job = Job(id=uuid.uuid4(), title="Engineer")
        self.mock_db.execute.return_value.scalar_one_or_none.return_value = job

        self.assertIs(self.repo.get_by_id(str(job.id)), job)

    def test_get_by_employer_filters_job(self):
        self.mock_db.execute.return_value.scalars.return_value.all.return_value = []

        self.repo.get_by_employer(uuid.uuid4(), job_id=uuid.uuid4())

        sql = _sql(self.mock_db)
        self.assertIn("jobs.employer_id =", sql)
        self.assertIn("jobs.id =", sql)

    def test_get_by_employer_invalid_job_id(self):
        self.assertEqual(self.repo.get_by_employer(uuid.uuid4(), job_id="bad"), [])
        self.mock_db.execute.assert_not_called()


class TestEmployerRepository(unittest.TestCase):

    def test_invalid_id(self):
        mock_db = MagicMock()
        self.assertIsNone(EmployerRepository(mock_db).get_by_id("nope"))
        mock_db.execute.assert_not_called()


class TestCandidateRepository(unittest.TestCase):

    def setUp(self):
        self.mock_db = MagicMock()
        self.repo = CandidateRepository(self.mock_db)

    def test_get_profile(self):
        profile = Profile(id=uuid.uuid4(), role="candidate")
        self.mock_db.execute.return_value.scalar_one_or_none.return_value = profile

        self.assertIs(self.repo.get_profile(str(profile.id)), profile)

    def test_get_profile_invalid_id(self):
        self.assertIsNone(self.repo.get_profile("user-1"))
        self.mock_db.execute.assert_not_called()

    def test_get_visible_candidates(self):
        self.mock_db.execute.return_value.scalars.return_value.all.return_value = []

        self.repo.get_visible_candidates(limit=25)

        sql = _sql(self.mock_db)
        self.assertIn("JOIN candidate_profiles", sql)
        self.assertIn("profiles.role =", sql)
        self.assertIn("candidate_profiles.visible IS true", sql)
        self.assertIn("ORDER BY candidate_profiles.updated_at DESC", sql)


class TestApplicationRepository(unittest.TestCase):

    def setUp(self):
        self.mock_db = MagicMock()
        self.repo = ApplicationRepository(self.mock_db)

    def test_get_for_candidate_newest_first(self):
        self.mock_db.execute.return_value.scalars.return_value.all.return_value = []

        self.repo.get_for_candidate(uuid.uuid4())

        self.assertIn("ORDER BY applications.created_at DESC", _sql(self.mock_db))

    def test_get_for_jobs_with_status(self):
        self.mock_db.execute.return_value.scalars.return_value.all.return_value = []

        self.repo.get_for_jobs([uuid.uuid4(), "bad-id"], status="pending")

        sql = _sql(self.mock_db)
        self.assertIn("applications.job_id IN", sql)
        self.assertIn("applications.status =", sql)

    def test_get_for_jobs_without_valid_ids(self):
        self.assertEqual(self.repo.get_for_jobs(["bad-id"]), [])
        self.mock_db.execute.assert_not_called()


class TestMatchRepository(unittest.TestCase):

    def setUp(self):
        self.mock_db = MagicMock()
        self.repo = MatchRepository(self.mock_db)

    def test_upsert_on_job_candidate_pair(self):
        rows = [{
            'job_id': str(uuid.uuid4()),
            'candidate_id': str(uuid.uuid4()),
            'match_score': 88,
            'explanation': "Strong overlap",
            'top_missing_skills': ["Go"],
        }]

        stored = self.repo.upsert_matches(rows)

        self.assertEqual(stored, 1)
        sql = _sql(self.mock_db)
        self.assertIn("INSERT INTO matches", sql)
        self.assertIn("ON CONFLICT (job_id, candidate_id) DO UPDATE", sql)
        self.assertIn("match_score = excluded.match_score", sql)
        self.assertIn("explanation = excluded.explanation", sql)
        self.assertIn("top_missing_skills = excluded.top_missing_skills", sql)

    def test_invalid_ids_are_skipped(self):
        rows = [
            {'job_id': "job-1", 'candidate_id': str(uuid.uuid4()), 'match_score': 50},
            {'job_id': str(uuid.uuid4()), 'candidate_id': str(uuid.uuid4()), 'match_score': 70},
        ]

        self.assertEqual(self.repo.upsert_matches(rows), 1)
        self.mock_db.execute.assert_called_once()

    def test_nothing_to_store(self):
        self.assertEqual(self.repo.upsert_matches([]), 0)
        self.mock_db.execute.assert_not_called()


if __name__ == '__main__':
    unittest.main()
