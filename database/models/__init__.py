from .base import Base
from .profile import Profile, CandidateProfileRecord
from .employer import Employer
from .job import Job
from .application import Application, ACTIVE_APPLICATION_STATUSES
from .match import Match

__all__ = [
    'Base',
    'Profile',
    'CandidateProfileRecord',
    'Employer',
    'Job',
    'Application',
    'ACTIVE_APPLICATION_STATUSES',
    'Match',
]
