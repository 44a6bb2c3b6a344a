import copy
import tempfile
from pathlib import Path

import pytest

from sitekeeper.db import Database

ACME_VALUES = {
    "name": "Acme",
    "url": "https://acme.io",
    "description": "A test site for acme products.",
    "category": "SaaS",
    "status": "active",
    "offers": {
        "pricing": {"type": "free"},
        "features": ["X"],
        "targetAudience": ["Y"],
        "uniqueSellingPoints": ["Z"],
    },
    "articleSpecs": {
        "contentTypes": ["Blog"],
        "wordCountRange": {"min": 500, "max": 1000},
        "toneOfVoice": ["Casual"],
        "requiredSections": ["Intro"],
        "seoRequirements": {
            "metaDescription": False,
            "keywords": False,
            "headingStructure": False,
        },
        "submissionGuidelines": "Write clearly and simply.",
    },
}


@pytest.fixture
def acme_values() -> dict:
    """A valid set of form values for a free SaaS website."""
    return copy.deepcopy(ACME_VALUES)


@pytest.fixture
def db():
    """Create a temporary database for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = Path(tmpdir) / "test.db"
        database = Database(db_path)
        yield database
        database.close()
