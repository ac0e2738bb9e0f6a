from __future__ import annotations

import pytest

from pep440_ranges import Version

# ascending PEP 440 order, no two entries equal
ORDERED_VERSIONS = (
    "0.9",
    "1.0.dev456",
    "1.0a1",
    "1.0a2.dev456",
    "1.0a12.dev456",
    "1.0a12",
    "1.0b1.dev456",
    "1.0b2",
    "1.0b2.post345.dev456",
    "1.0b2.post345",
    "1.0b2-346",
    "1.0c1.dev456",
    "1.0c1",
    "1.0rc2",
    "1.0c3",
    "1.0",
    "1.0+abc",
    "1.0+abc.5",
    "1.0+abc.7",
    "1.0+5",
    "1.0.post456.dev34",
    "1.0.post456",
    "1.0.15",
    "1.1.dev1",
    "2.0",
    "1!0.1",
)


@pytest.fixture(scope="session")
def ordered_versions() -> list[Version]:
    return [Version.from_string(text) for text in ORDERED_VERSIONS]
