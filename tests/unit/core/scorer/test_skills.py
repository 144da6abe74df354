import unittest

from core.scorer.skills import (
    skills_overlap,
    matching_candidate_skills,
    covered_required_skills,
    missing_required_skills,
    has_any_overlap,
)


class TestSkillsOverlap(unittest.TestCase):

    def test_substring_either_direction(self):
        self.assertTrue(skills_overlap("React", "react.js"))
        self.assertTrue(skills_overlap("Node.js", "node"))

    def test_case_insensitive(self):
        self.assertTrue(skills_overlap("PYTHON", "python"))

    def test_unrelated_skills(self):
        self.assertFalse(skills_overlap("Go", "Rust"))


class TestSkillLists(unittest.TestCase):

    def setUp(self):
        self.candidate = ["TypeScript", "React", "Docker"]
        self.required = ["react", "kubernetes", "typescript"]

    def test_matching_candidate_skills_keeps_candidate_order(self):
        self.assertEqual(
            matching_candidate_skills(self.candidate, self.required),
            ["TypeScript", "React"]
        )

    def test_covered_required_skills_keeps_job_order(self):
        self.assertEqual(
            covered_required_skills(self.candidate, self.required),
            ["react", "typescript"]
        )

    def test_missing_required_skills(self):
        self.assertEqual(missing_required_skills(self.candidate, self.required), ["kubernetes"])

    def test_has_any_overlap(self):
        self.assertTrue(has_any_overlap(self.candidate, self.required))
        self.assertFalse(has_any_overlap(["Excel"], self.required))
        self.assertFalse(has_any_overlap([], self.required))
        self.assertFalse(has_any_overlap(self.candidate, []))


if __name__ == '__main__':
    unittest.main()
