"""
scarcentral - Pydantic Models
==============================
Enums, the validation error taxonomy, and the immutable Scar and Process
records that make up the scarcentral catalogue.
"""

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from scarcentral.registry import is_valid_process


NO_TOOL_AVAILABLE = "No tool available"


# ═══════════════════════════════════════════════════════════════════════════
#  Enums
# ═══════════════════════════════════════════════════════════════════════════


class DiseaseSpecificity(str, Enum):
    """Whether a scar is observed across cancers or in specific diseases."""
    PAN_CANCER = "Pan-Cancer"
    DISEASE_SPECIFIC = "Disease Specific"


class Modality(str, Enum):
    """Biological data type in which a scar is detected."""
    DNA = "DNA"
    RNA = "RNA"
    METHYLATION = "Methylation"


class Confidence(str, Enum):
    """Qualitative rating used for scar specificity and sensitivity."""
    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"
    UNKNOWN = "Unknown"


class ProcessClass(str, Enum):
    """Origin of a tumorigenic process."""
    ENDOGENOUS = "endogenous"
    EXOGENOUS = "exogenous"


class ValidationErrorKind(str, Enum):
    INVALID_CHOICE = "invalid_choice"
    MISSING = "missing"
    INVALID_TYPE = "invalid_type"
    CROSS_REFERENCE = "cross_reference"


# ═══════════════════════════════════════════════════════════════════════════
#  Errors
# ═══════════════════════════════════════════════════════════════════════════


class ValidationError(ValueError):
    """Raised when a scar or process record fails construction.

    Attributes:
        field: Name of the offending field.
        kind: Which rule failed (see ``ValidationErrorKind``).
        value: The rejected value, if any.
    """

    def __init__(
        self,
        field: str,
        kind: ValidationErrorKind,
        message: str,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.kind = kind
        self.value = value

    def __repr__(self) -> str:
        return f"ValidationError(field={self.field!r}, kind={self.kind.value!r}, message={str(self)!r})"


# ═══════════════════════════════════════════════════════════════════════════
#  Domain Models
# ═══════════════════════════════════════════════════════════════════════════


class Scar(BaseModel):
    """Detectable molecular pattern left behind by a tumorigenic process."""
    process: str
    scar_name: str
    marker_of: str
    disease_specificity: DiseaseSpecificity
    diseases: Tuple[str, ...]
    modality: Modality
    measurement: str
    description: str
    experiment: str
    paper_url: str
    specificity: Confidence
    specificity_tooltip: str
    sensitivity: Confidence
    sensitivity_tooltip: str
    tool_name: str = NO_TOOL_AVAILABLE
    tool_url: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_domain_rules(self) -> "Scar":
        if not is_valid_process(self.process):
            raise ValidationError(
                "process",
                ValidationErrorKind.INVALID_CHOICE,
                f"[{self.process}] is not a valid process. See `list_valid_processes()` for valid options",
                self.process,
            )
        if not self.diseases:
            raise ValidationError(
                "diseases", ValidationErrorKind.MISSING, "`diseases` must name at least one disease"
            )
        if self.disease_specificity is DiseaseSpecificity.PAN_CANCER and self.diseases != ("cancer",):
            raise ValidationError(
                "diseases",
                ValidationErrorKind.INVALID_CHOICE,
                "When `disease_specificity = 'Pan-Cancer'` then `diseases` argument must be 'cancer'",
                self.diseases,
            )
        return self

    @property
    def has_tool(self) -> bool:
        return self.tool_name != NO_TOOL_AVAILABLE


class Process(BaseModel):
    """Tumorigenic mechanism together with the scars it produces.

    ``modalities``, ``dna``, ``rna`` and ``meth`` are derived from ``scars``
    on access and cannot be set directly.
    """
    name: str
    description: str
    icon: str
    process_class: ProcessClass = Field(..., alias="class")
    flip_vertical: bool
    flip_horizontal: bool
    scars: Tuple[Scar, ...] = ()

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @computed_field
    @property
    def modalities(self) -> Tuple[Modality, ...]:
        seen = []
        for scar in self.scars:
            if scar.modality not in seen:
                seen.append(scar.modality)
        return tuple(seen)

    @computed_field
    @property
    def dna(self) -> bool:
        return Modality.DNA in self.modalities

    @computed_field
    @property
    def rna(self) -> bool:
        return Modality.RNA in self.modalities

    @computed_field
    @property
    def meth(self) -> bool:
        return Modality.METHYLATION in self.modalities

    @property
    def scar_count(self) -> int:
        return len(self.scars)
