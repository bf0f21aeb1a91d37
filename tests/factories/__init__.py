"""Test factories for generating test data.

    from tests.factories import ProjectFactory, VoteFactory
"""

from tests.factories.base import BaseFactory, utc_now
from tests.factories.project import ProjectFactory, VoteFactory, fake_voter_id

__all__ = [
    "BaseFactory",
    "utc_now",
    "ProjectFactory",
    "VoteFactory",
    "fake_voter_id",
]
