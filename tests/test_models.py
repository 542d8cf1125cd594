"""
Tests for scarcentral Pydantic models.
======================================
Validates enums, the ValidationError taxonomy, immutability of records,
and the derived modality fields of Process.
"""

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from scarcentral.constructors import make_scar
from scarcentral.models import (
    NO_TOOL_AVAILABLE,
    Confidence,
    DiseaseSpecificity,
    Modality,
    Process,
    ProcessClass,
    Scar,
    ValidationError,
    ValidationErrorKind,
)


# ═══════════════════════════════════════════════════════════════════════════
# Enum Tests
# ═══════════════════════════════════════════════════════════════════════════


class TestEnums:
    """Verify the closed vocabularies used by scars and processes."""

    def test_modality_values(self):
        assert {m.value for m in Modality} == {"DNA", "RNA", "Methylation"}

    def test_disease_specificity_values(self):
        assert {d.value for d in DiseaseSpecificity} == {"Pan-Cancer", "Disease Specific"}

    def test_confidence_values(self):
        assert {c.value for c in Confidence} == {"High", "Moderate", "Low", "Unknown"}

    def test_process_class_values(self):
        assert {c.value for c in ProcessClass} == {"endogenous", "exogenous"}

    def test_members_compare_equal_to_literals(self):
        assert Modality.METHYLATION == "Methylation"
        assert DiseaseSpecificity.PAN_CANCER == "Pan-Cancer"


# ═══════════════════════════════════════════════════════════════════════════
# ValidationError Tests
# ═══════════════════════════════════════════════════════════════════════════


class TestValidationError:

    def test_is_value_error(self):
        err = ValidationError("modality", ValidationErrorKind.INVALID_CHOICE, "bad modality", "Protein")
        assert isinstance(err, ValueError)

    def test_carries_field_kind_and_value(self):
        err = ValidationError("modality", ValidationErrorKind.INVALID_CHOICE, "bad modality", "Protein")
        assert err.field == "modality"
        assert err.kind is ValidationErrorKind.INVALID_CHOICE
        assert err.value == "Protein"
        assert str(err) == "bad modality"

    def test_repr_names_field(self):
        err = ValidationError("scars", ValidationErrorKind.CROSS_REFERENCE, "mismatch")
        assert "scars" in repr(err)
        assert "cross_reference" in repr(err)


# ═══════════════════════════════════════════════════════════════════════════
# Scar Tests
# ═══════════════════════════════════════════════════════════════════════════


class TestScar:

    def test_frozen(self, dna_scar):
        with pytest.raises(PydanticValidationError):
            dna_scar.scar_name = "Renamed"

    def test_has_tool(self, dna_scar):
        assert dna_scar.has_tool is True

    def test_no_tool(self, scar_fields):
        scar_fields.pop("tool_name")
        scar_fields.pop("tool_url")
        scar = make_scar(**scar_fields)
        assert scar.tool_name == NO_TOOL_AVAILABLE
        assert scar.has_tool is False

    def test_equal_scars_hash_alike(self, scar_fields):
        assert make_scar(**scar_fields) == make_scar(**scar_fields)
        assert hash(make_scar(**scar_fields)) == hash(make_scar(**scar_fields))

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"diseases": ()}, "at least one disease"),
            ({"diseases": ("breast cancer",)}, "must be 'cancer'"),
            ({"process": "InvalidProcess"}, "is not a valid process"),
        ],
    )
    def test_direct_construction_enforces_domain_rules(self, scar_fields, overrides, message):
        fields = dict(scar_fields, diseases=("cancer",))
        fields.update(overrides)
        with pytest.raises(ValueError, match=message):
            Scar(**fields)


# ═══════════════════════════════════════════════════════════════════════════
# Process Tests
# ═══════════════════════════════════════════════════════════════════════════


def _process(scars):
    return Process(
        name="Radiotherapy",
        description="Damage caused by ionizing radiation therapy",
        icon="faRadiation",
        process_class=ProcessClass.EXOGENOUS,
        flip_vertical=False,
        flip_horizontal=True,
        scars=scars,
    )


class TestProcess:

    def test_empty_scars_derive_nothing(self):
        process = _process(())
        assert process.modalities == ()
        assert (process.dna, process.rna, process.meth) == (False, False, False)
        assert process.scar_count == 0

    def test_modalities_first_occurrence_order(self, dna_scar, rna_scar):
        process = _process((rna_scar, dna_scar, rna_scar))
        assert process.modalities == (Modality.RNA, Modality.DNA)
        assert process.dna is True
        assert process.rna is True
        assert process.meth is False

    def test_derived_fields_cannot_be_set(self, dna_scar):
        process = _process((dna_scar,))
        with pytest.raises((AttributeError, PydanticValidationError)):
            process.dna = False

    def test_frozen(self):
        process = _process(())
        with pytest.raises(PydanticValidationError):
            process.name = "Smoking"

    def test_class_alias(self):
        process = Process.model_validate({
            "name": "Smoking",
            "description": "Tobacco carcinogens",
            "icon": "faSmoking",
            "class": "exogenous",
            "flip_vertical": False,
            "flip_horizontal": False,
        })
        assert process.process_class is ProcessClass.EXOGENOUS

    def test_dump_includes_derived_fields(self, dna_scar):
        data = _process((dna_scar,)).model_dump(by_alias=True)
        assert data["class"] == ProcessClass.EXOGENOUS
        assert data["dna"] is True
        assert data["rna"] is False
        assert data["meth"] is False
        assert list(data["modalities"]) == [Modality.DNA]
        assert len(data["scars"]) == 1
