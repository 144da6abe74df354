"""API route handlers."""

from .candidates import router as candidates_router
from .jobs import router as jobs_router
from .employers import router as employers_router
from .matching import router as matching_router
