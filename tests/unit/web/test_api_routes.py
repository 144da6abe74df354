#!/usr/bin/env python3
"""
API tests for the hirematch routes.

Dependencies are overridden with a mocked repository and an AppContext
built without an LLM key, so every analysis is heuristic.
"""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from core.app_context import AppContext
from core.config_loader import AppConfig
from web.backend.app import app
from web.backend.dependencies import get_app_context, get_repository
from tests.mocks.marketplace_mocks import (
    make_application_row,
    make_employer_row,
    make_job_row,
    make_profile_row,
    make_repository,
)


class ApiTestCase(unittest.TestCase):

    def setUp(self):
        self.repo = make_repository()
        self.context = AppContext.build(AppConfig())
        app.dependency_overrides[get_repository] = lambda: self.repo
        app.dependency_overrides[get_app_context] = lambda: self.context
        self.client = TestClient(app, raise_server_exceptions=False)

    def tearDown(self):
        app.dependency_overrides.clear()

    def assert_error(self, response, status_code, error_type):
        self.assertEqual(response.status_code, status_code)
        body = response.json()
        self.assertFalse(body["success"])
        self.assertEqual(body["type"], error_type)
        return body


class TestCandidateRoutes(ApiTestCase):

    def test_recommendations(self):
        profile = make_profile_row(skills=["Python"])
        self.repo.candidates.get_profile.return_value = profile
        self.repo.jobs.get_active_jobs.return_value = [make_job_row(skills=["python"], title="Backend")]

        response = self.client.get(f"/api/candidates/{profile.id}/recommendations?limit=3")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["mode"], "heuristic")
        self.assertEqual(body["count"], 1)
        self.assertEqual(body["recommendations"][0]["job"]["title"], "Backend")
        self.assertEqual(body["recommendations"][0]["match_score"], 100)

    def test_unknown_candidate(self):
        response = self.client.get("/api/candidates/missing/recommendations")

        self.assert_error(response, 404, "CandidateNotFoundException")

    def test_limit_validated(self):
        response = self.client.get("/api/candidates/someone/recommendations?limit=0")

        body = self.assert_error(response, 422, "ValidationError")
        self.assertEqual(body["error"][0]["loc"], ["query", "limit"])

    def test_mode_validated(self):
        response = self.client.get("/api/candidates/someone/recommendations?mode=magic")

        self.assert_error(response, 422, "ValidationError")

    def test_stats(self):
        profile = make_profile_row(with_record=False)
        self.repo.candidates.get_profile.return_value = profile
        self.repo.applications.get_for_candidate.return_value = [make_application_row(make_job_row(), profile)]

        response = self.client.get(f"/api/candidates/{profile.id}/stats")

        self.assertEqual(response.status_code, 200)
        stats = response.json()["stats"]
        self.assertEqual(stats["total_applications"], 1)
        self.assertEqual(stats["active_applications"], 1)
        self.assertFalse(stats["has_profile"])

    def test_unexpected_error(self):
        self.repo.candidates.get_profile.side_effect = RuntimeError("db exploded")

        response = self.client.get("/api/candidates/someone/stats")

        body = self.assert_error(response, 500, "InternalError")
        self.assertEqual(body["error"], "Internal server error")


class TestJobRoutes(ApiTestCase):

    def test_rank_candidates(self):
        job = make_job_row(skills=["python"])
        self.repo.jobs.get_by_id.return_value = job
        self.repo.candidates.get_visible_candidates.return_value = [make_profile_row(skills=["Python"])]

        response = self.client.get(f"/api/jobs/{job.id}/candidates?limit=10")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["job_id"], str(job.id))
        self.assertEqual(body["total_processed"], 1)
        self.assertEqual(body["count"], 1)

    def test_unknown_job(self):
        response = self.client.get("/api/jobs/missing/candidates")

        self.assert_error(response, 404, "JobNotFoundException")

    def test_limit_upper_bound(self):
        response = self.client.get("/api/jobs/any/candidates?limit=101")

        self.assert_error(response, 422, "ValidationError")


class TestEmployerRoutes(ApiTestCase):

    def test_list_applications(self):
        employer = make_employer_row()
        job = make_job_row(employer=employer)
        self.repo.employers.get_by_id.return_value = employer
        self.repo.jobs.get_by_employer.return_value = [job]
        self.repo.applications.get_for_jobs.return_value = [make_application_row(job, make_profile_row())]

        response = self.client.get(f"/api/employers/{employer.id}/applications?sort=date")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["employer_id"], str(employer.id))
        self.assertEqual(body["count"], 1)

    def test_unknown_employer(self):
        response = self.client.get("/api/employers/missing/applications")

        self.assert_error(response, 404, "EmployerNotFoundException")

    def test_invalid_sort(self):
        response = self.client.get("/api/employers/any/applications?sort=name")

        self.assert_error(response, 422, "ValidationError")


class TestMatchingRoutes(ApiTestCase):

    def test_analyze_without_llm_uses_heuristic(self):
        payload = {
            "candidate": {"candidate_id": "c1", "skills": ["React"], "work_type": ["remote"]},
            "job": {"id": "j1", "title": "Frontend", "skills_required": ["react", "css"], "remote": True},
        }

        response = self.client.post("/api/match/analyze", json=payload)

        self.assertEqual(response.status_code, 200)
        analysis = response.json()["analysis"]
        self.assertEqual(analysis["source"], "heuristic")
        self.assertEqual(analysis["score"], 65)
        self.assertIn("Matches 1/2 required skills", analysis["strengths"])

    def test_analyze_requires_job(self):
        response = self.client.post("/api/match/analyze", json={"candidate": {}})

        self.assert_error(response, 422, "ValidationError")


class TestHealth(ApiTestCase):

    @patch("web.backend.app.check_database", return_value=True)
    def test_healthy(self, _):
        body = self.client.get("/health").json()

        self.assertEqual(body["status"], "healthy")
        self.assertEqual(body["database"], "ok")

    @patch("web.backend.app.check_database", return_value=False)
    def test_degraded(self, _):
        body = self.client.get("/health").json()

        self.assertEqual(body["status"], "degraded")
        self.assertEqual(body["database"], "unreachable")


if __name__ == '__main__':
    unittest.main()
