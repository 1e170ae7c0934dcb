"""
Pytest configuration and fixtures for fieldcheck tests

This module provides shared fixtures for unit and integration tests.
"""
import pytest

from fieldcheck.core.rules import RuleEngine, RuleRegistry


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that exercise one module in isolation"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that go through files and the CLI"
    )


# =======================
# ENGINE FIXTURES
# =======================

@pytest.fixture(scope="function")
def registry() -> RuleRegistry:
    """
    Fresh, unfrozen registry holding the built-in rules

    Tests that register rules use this instead of the process-wide registry,
    which is frozen once any default validation has run.
    """
    return RuleRegistry.with_builtins()


@pytest.fixture(scope="function")
def engine(registry) -> RuleEngine:
    """Engine over a fresh built-in registry"""
    return RuleEngine(registry)


@pytest.fixture(scope="session")
def signup_constraints() -> dict[str, str]:
    """Constraints of the signup form used across scenarios"""
    return {
        "Username": "required,min=3,max=20",
        "Email": "required,email",
    }


# =======================
# FILE FIXTURES
# =======================

CONSTRAINTS_YAML = """
schemas:
  signup:
    Username: "required,min=3,max=20"
    Email: "required,email"

  profile:
    Age:
      - required
      - min: 13
      - max: 130
    Plan:
      - oneof: [free, pro, team]
    Address.City: "max=10"
    Nickname:
"""


@pytest.fixture(scope="function")
def constraints_file(tmp_path):
    """
    Write a constraint YAML file with a signup and a profile schema

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to the YAML file
    """
    path = tmp_path / "constraints.yaml"
    path.write_text(CONSTRAINTS_YAML)
    return path
