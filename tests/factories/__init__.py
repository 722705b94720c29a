"""Test factories."""

from tests.factories.principal import PrincipalFactory


__all__ = ["PrincipalFactory"]
