#!/usr/bin/env python3
"""
Unit tests for RecommendationService.

The repository is mocked with transient ORM rows; ranking runs through
the real RankingPipeline with heuristic scoring unless noted.
"""

import threading
import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

from core.config_loader import MatchingConfig, RankingConfig, RankingMode
from core.ranking import RankingPipeline
from core.scorer.hybrid import HybridScorer
from core.scorer.models import MatchResult, ScoredJob
from database.mappers import job_to_posting
from web.backend.exceptions import CandidateNotFoundException
from web.backend.services.recommendation_service import RecommendationService
from tests.mocks.scoring_mocks import FakeHybridScorer
from tests.mocks.marketplace_mocks import (
    make_application_row,
    make_job_row,
    make_profile_row,
    make_repository,
)


class RecommendationServiceTestCase(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.repo = make_repository()
        self.config = MatchingConfig()
        self.service = RecommendationService(self.repo, RankingPipeline(HybridScorer()), self.config)

        self.profile = make_profile_row(skills=["React", "Node.js"])
        self.strong = make_job_row(skills=["react", "node.js"], title="Full Stack")
        self.weak = make_job_row(
            skills=["cobol"], remote=False, title="Mainframe",
            created_at=datetime.now(timezone.utc) - timedelta(days=40),
        )
        self.partial = make_job_row(skills=["react", "java"], title="Frontend")

        self.repo.candidates.get_profile.return_value = self.profile
        self.repo.jobs.get_active_jobs.return_value = [self.weak, self.partial, self.strong]


class TestRecommendJobs(RecommendationServiceTestCase):

    async def test_ranked_best_first_and_filtered(self):
        response = await self.service.recommend_jobs(str(self.profile.id))

        self.assertTrue(response.success)
        self.assertTrue(response.has_profile)
        self.assertEqual(response.mode, "heuristic")
        titles = [r.job.title for r in response.recommendations]
        self.assertEqual(titles, ["Full Stack", "Frontend"])
        self.assertEqual(response.recommendations[0].match_score, 100)
        self.assertEqual(response.recommendations[1].match_score, 75)
        self.assertEqual(response.count, 2)
        self.repo.jobs.get_active_jobs.assert_called_once_with(limit=self.config.job_pool_size)

    async def test_limit_applied(self):
        response = await self.service.recommend_jobs(str(self.profile.id), limit=1)

        self.assertEqual([r.job.title for r in response.recommendations], ["Full Stack"])

    async def test_application_state_attached(self):
        older = make_application_row(
            self.strong, self.profile, status="pending",
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        newer = make_application_row(
            self.strong, self.profile, status="shortlisted",
            created_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
        )
        self.repo.applications.get_for_candidate.return_value = [newer, older]

        response = await self.service.recommend_jobs(str(self.profile.id))

        applied, not_applied = response.recommendations
        self.assertTrue(applied.has_applied)
        self.assertEqual(applied.application_id, str(newer.id))
        self.assertEqual(applied.application_status, "shortlisted")
        self.assertEqual(applied.applied_at, "2024-02-01T00:00:00+00:00")
        self.assertFalse(not_applied.has_applied)
        self.assertIsNone(not_applied.application_status)

    async def test_without_candidate_record_returns_recent_jobs(self):
        self.repo.candidates.get_profile.return_value = make_profile_row(with_record=False)
        self.repo.jobs.get_active_jobs.return_value = [self.weak, self.partial]

        response = await self.service.recommend_jobs("user", limit=3)

        self.assertFalse(response.has_profile)
        self.assertEqual([r.match_score for r in response.recommendations], [50, 50])
        self.assertEqual([r.job.title for r in response.recommendations], ["Mainframe", "Frontend"])
        self.assertIsNone(response.recommendations[0].match_analysis)
        self.repo.jobs.get_active_jobs.assert_called_once_with(limit=3)

    async def test_unknown_candidate_raises(self):
        self.repo.candidates.get_profile.return_value = None

        with self.assertRaises(CandidateNotFoundException):
            await self.service.recommend_jobs("missing")

    async def test_repository_calls_run_off_event_loop(self):
        loop_thread = threading.get_ident()
        threads = []
        self.repo.jobs.get_active_jobs.side_effect = lambda **_: threads.append(threading.get_ident()) or [self.strong]
        self.repo.matches.upsert_matches.side_effect = lambda rows: threads.append(threading.get_ident()) or len(rows)
        scorer = FakeHybridScorer(lambda job_id, _: 90)
        service = RecommendationService(
            self.repo,
            RankingPipeline(scorer, ranking_config=RankingConfig(batch_pause_seconds=0)),
            self.config,
        )

        await service.recommend_jobs(str(self.profile.id), mode=RankingMode.AI)

        self.assertEqual(len(threads), 2)
        self.assertNotIn(loop_thread, threads)

    async def test_heuristic_results_not_persisted(self):
        await self.service.recommend_jobs(str(self.profile.id))

        self.repo.matches.upsert_matches.assert_not_called()

    async def test_ai_results_persisted(self):
        posting = job_to_posting(self.strong)
        analysis = MatchResult(score=91, reasoning="Great fit", gaps=["a", "b", "c", "d", "e", "f"], source="ai")
        pipeline = MagicMock()
        pipeline.rank_jobs_for_candidate = AsyncMock(
            return_value=[ScoredJob(job=posting, match_score=91, match_analysis=analysis)]
        )
        service = RecommendationService(self.repo, pipeline, self.config)

        response = await service.recommend_jobs(str(self.profile.id), mode=RankingMode.AI)

        self.assertEqual(response.mode, "ai")
        self.assertEqual(response.recommendations[0].match_analysis.source, "ai")
        rows = self.repo.matches.upsert_matches.call_args.args[0]
        self.assertEqual(rows, [{
            'job_id': posting.id,
            'candidate_id': str(self.profile.id),
            'match_score': 91,
            'explanation': "Great fit",
            'top_missing_skills': ["a", "b", "c", "d", "e"],
        }])

    async def test_persistence_can_be_disabled(self):
        self.config.persist_matches = False
        pipeline = MagicMock()
        pipeline.rank_jobs_for_candidate = AsyncMock(return_value=[])
        service = RecommendationService(self.repo, pipeline, self.config)

        await service.recommend_jobs(str(self.profile.id), mode=RankingMode.AI)

        self.repo.matches.upsert_matches.assert_not_called()


class TestCandidateStats(RecommendationServiceTestCase):

    def test_counts(self):
        self.repo.applications.get_for_candidate.return_value = [
            make_application_row(self.strong, self.profile, status="pending"),
            make_application_row(self.partial, self.profile, status="rejected"),
            make_application_row(self.weak, self.profile, status="interview"),
        ]

        stats = self.service.candidate_stats(str(self.profile.id))

        self.assertEqual(stats.total_applications, 3)
        self.assertEqual(stats.active_applications, 2)
        self.assertEqual(stats.skill_matched_jobs, 2)
        self.assertTrue(stats.has_profile)

    def test_without_candidate_record(self):
        self.repo.candidates.get_profile.return_value = make_profile_row(with_record=False)

        stats = self.service.candidate_stats("user")

        self.assertEqual(stats.skill_matched_jobs, 0)
        self.assertFalse(stats.has_profile)
        self.repo.jobs.get_active_jobs.assert_not_called()

    def test_unknown_candidate_raises(self):
        self.repo.candidates.get_profile.return_value = None

        with self.assertRaises(CandidateNotFoundException):
            self.service.candidate_stats("missing")


if __name__ == '__main__':
    unittest.main()
