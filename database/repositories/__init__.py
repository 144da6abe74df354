from database.repositories.base import BaseRepository
from database.repositories.job import JobRepository, EmployerRepository
from database.repositories.candidate import CandidateRepository
from database.repositories.application import ApplicationRepository
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'JobRepository',
    'EmployerRepository',
    'CandidateRepository',
    'ApplicationRepository',
    'MatchRepository',
]
