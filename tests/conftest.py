from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def manifest_path() -> Path:
    """Manifest with one server, two databases, a failover group and an unsupported kind."""
    return FIXTURES_DIR / "sql_resources.yaml"
