"""Business logic services."""

from .recommendation_service import RecommendationService
from .candidate_matching_service import CandidateMatchingService
from .application_service import ApplicationService
