from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(warden_environment: Path) -> Path:
    return warden_environment
