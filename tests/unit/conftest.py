"""Test configuration and fixtures.

Provides:
- Python path setup for imports
- Settings isolation between tests
- Sample containers
"""

import sys
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from nullsafe.domain.optional import Optional  # noqa: E402
from nullsafe.domain.optional_array import OptionalArray  # noqa: E402
from nullsafe.shared.config import reset_settings  # noqa: E402


# ============================================================================
# Settings Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings and NULLSAFE_* variables around each test."""
    for key in ("NULLSAFE_LOG_LEVEL", "NULLSAFE_LOG_GUARD_FAILURES"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


# ============================================================================
# Sample Containers
# ============================================================================


@pytest.fixture
def present() -> Optional[str]:
    """Present Optional holding a string."""
    return Optional.of("value")


@pytest.fixture
def empty() -> Optional[str]:
    """Empty Optional."""
    return Optional.empty()


@pytest.fixture
def words() -> OptionalArray[str]:
    """Present OptionalArray of strings with distinct lengths."""
    return OptionalArray.of_array(["a", "bb", "ccc"])


@pytest.fixture
def callback() -> MagicMock:
    """Mock usable as consumer, supplier or action."""
    return MagicMock()
