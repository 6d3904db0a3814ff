"""Test fixtures for field check."""

import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from fieldcheck import FieldType, get_matcher
from fieldcheck.logic.validators import RULES


@pytest.fixture
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def matcher():
    return get_matcher()


@pytest.fixture
def default_rules():
    """A mutable copy of the default rule table."""
    return dict(RULES)


@pytest.fixture
def all_field_types():
    return list(FieldType)
