"""Shared test fixtures for anchor-facets."""

import pytest

from anchor_facets.assembler import CheckinTextAssembler
from anchor_facets.detector import FacetDetector


@pytest.fixture
def detector():
    """Create a FacetDetector with the default detectors and configuration."""
    return FacetDetector()


@pytest.fixture
def assembler():
    """Create a CheckinTextAssembler with the default budget."""
    return CheckinTextAssembler()
