"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bijoy_transliterator.config import ConversionOptions, Direction
from bijoy_transliterator.core import Transliterator
from tests.fixtures import (
    BIJOY_SENTENCE,
    UNICODE_SENTENCE,
    build_docx,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Option Fixtures
# ============================================================================


@pytest.fixture
def to_unicode():
    """Bijoy -> Unicode with font detection only."""
    return ConversionOptions(direction=Direction.BIJOY_TO_UNICODE)


@pytest.fixture
def to_unicode_forced():
    """Bijoy -> Unicode with the script classifier enabled."""
    return ConversionOptions(direction=Direction.BIJOY_TO_UNICODE, force_convert=True)


@pytest.fixture
def to_bijoy():
    """Unicode -> Bijoy."""
    return ConversionOptions(direction=Direction.UNICODE_TO_BIJOY)


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "out"


@pytest.fixture
def engine(output_dir):
    """Create a Bijoy -> Unicode engine writing into a temp directory."""
    return Transliterator(output_dir=str(output_dir))


@pytest.fixture
def bijoy_engine(output_dir):
    """Create a Unicode -> Bijoy engine writing into a temp directory."""
    return Transliterator(
        output_dir=str(output_dir),
        options=ConversionOptions(direction=Direction.UNICODE_TO_BIJOY),
    )


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def legacy_docx(tmp_path):
    """A document with one SutonnyMJ paragraph and one Calibri paragraph."""
    path = tmp_path / "legacy.docx"
    build_docx(path, [
        [(BIJOY_SENTENCE, "SutonnyMJ")],
        [("Annual report", "Calibri")],
    ])
    return path


@pytest.fixture
def unicode_docx(tmp_path):
    """A document with mixed Unicode Bengali and English runs."""
    path = tmp_path / "unicode.docx"
    build_docx(path, [
        [(UNICODE_SENTENCE, None)],
        [("এটি একটি Test case।", None)],
        [("Annual report", "Calibri")],
    ])
    return path


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text(BIJOY_SENTENCE + "\n", encoding="utf-8")
    return path


@pytest.fixture
def mixed_dir(tmp_path, text_file, legacy_docx):
    """A directory holding a text file, a .docx and an unsupported file."""
    (tmp_path / "image.png").write_bytes(b"\x89PNG\r\n")
    return tmp_path
