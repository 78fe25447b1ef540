# tests/conftest.py
"""Shared test fixtures.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/core/test_reader_properties.py
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from itemstream.contracts import CheckpointContext
from itemstream.plugins.adapters.sequence import SequenceSourceAdapter

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def ctx() -> CheckpointContext:
    """Empty checkpoint context."""
    return CheckpointContext()


@pytest.fixture
def letters() -> SequenceSourceAdapter:
    """Sequence adapter over a, b, c, d."""
    return SequenceSourceAdapter.of("a", "b", "c", "d")


@pytest.fixture
def orders_jsonl(tmp_path: Path) -> Path:
    """JSONL file with three orders."""
    path = tmp_path / "orders.jsonl"
    path.write_text(
        '{"id": 1, "sku": "A-1"}\n'
        '{"id": 2, "sku": "B-2"}\n'
        "\n"
        '{"id": 3, "sku": "C-3"}\n'
    )
    return path


@pytest.fixture
def orders_csv(tmp_path: Path) -> Path:
    """CSV file with three orders."""
    path = tmp_path / "orders.csv"
    path.write_text("id,sku\n1,A-1\n2,B-2\n3,C-3\n")
    return path
