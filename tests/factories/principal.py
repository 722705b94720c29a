"""Principal factory for tests."""

from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory

from vetstudy.core.auth.schemas import Principal


class PrincipalFactory(ModelFactory):
    """Factory for creating test Principal instances."""

    __model__ = Principal

    @classmethod
    def user_id(cls) -> str:
        """Generate a unique user id."""
        return f"user-{uuid4().hex[:8]}"

    @classmethod
    def practice_id(cls) -> str:
        """Every staff member belongs to the same test practice."""
        return "practice-test"
