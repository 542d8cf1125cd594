"""
Shared pytest fixtures for the scarcentral test suite.
======================================================
Provides reusable, valid scar and process keyword arguments so each test
only needs to override the field under test.
"""

import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Ensure the project root is importable
# ---------------------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from scarcentral.constructors import make_scar


# ═══════════════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════════════


@pytest.fixture
def scar_fields():
    """Keyword arguments for a valid Pan-Cancer radiotherapy DNA scar."""
    return {
        "process": "Radiotherapy",
        "scar_name": "High Indel Burden",
        "marker_of": "Radiation Induced Damage",
        "disease_specificity": "Pan-Cancer",
        "diseases": "cancer",
        "modality": "DNA",
        "measurement": "INDEL / SBS ratio",
        "description": "Higher number of INDELS. Driven by an increased burden of deletions, not insertions.",
        "experiment": "Analysis of 12 radiation-associated tumors compared to radiation-naive tumors",
        "paper_url": "https://www.nature.com/articles/ncomms12605",
        "specificity": "Low",
        "specificity_tooltip": "Also observed in BRCA1/BRCA2 breast cancer.",
        "sensitivity": "Moderate",
        "sensitivity_tooltip": "All radiation tumors had values exceeding the median for their cancer type.",
        "tool_name": "raDNA",
        "tool_url": "https://github.com/selkamand/radna",
    }


@pytest.fixture
def rna_scar_fields(scar_fields):
    """Keyword arguments for a valid disease-specific radiotherapy RNA scar."""
    fields = dict(scar_fields)
    fields.update(
        scar_name="Glioblastoma Expression Signature",
        marker_of="Radiation Induced Glioblastoma",
        disease_specificity="Disease Specific",
        diseases=["glioblastoma"],
        modality="RNA",
        measurement="Proportion of RIG-associated genes overexpressed",
        specificity="Unknown",
        sensitivity="Unknown",
        tool_name="RIG",
        tool_url="https://github.com/CCICB/rig",
    )
    return fields


@pytest.fixture
def dna_scar(scar_fields):
    return make_scar(**scar_fields)


@pytest.fixture
def rna_scar(rna_scar_fields):
    return make_scar(**rna_scar_fields)


@pytest.fixture
def process_fields():
    """Keyword arguments for a valid Radiotherapy process with no scars."""
    return {
        "name": "Radiotherapy",
        "description": "Damage caused by ionizing radiation therapy",
        "process_class": "exogenous",
        "icon": "faRadiation",
        "flip_vertical": False,
        "flip_horizontal": True,
        "scars": [],
    }
