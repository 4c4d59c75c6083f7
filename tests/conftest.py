import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import nameguess
sys.path.insert(0, str(Path(__file__).parent.parent))

from nameguess import NameParser


@pytest.fixture(scope="session")
def parser():
    """One parser with the packaged tables, shared across the session."""
    return NameParser()
