"""Validating constructors for scar and process records.

``make_scar`` and ``make_process`` are the only supported way to build
catalogue records. Each rule is checked in a fixed order and the first
failure raises :class:`scarcentral.models.ValidationError`; no partially
valid record is ever returned.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Sequence, Type, Union

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
from scarcentral.registry import is_valid_process

logger = logging.getLogger(__name__)

PAN_CANCER_DISEASES = ("cancer",)
_SCAR_FIELDS = frozenset(Scar.model_fields)


# ---------------------------------------------------------------------------
# Field checks
# ---------------------------------------------------------------------------

def _require_string(field: str, value: Any) -> str:
    if value is None:
        raise ValidationError(field, ValidationErrorKind.MISSING, f"`{field}` is required")
    if not isinstance(value, str):
        raise ValidationError(
            field,
            ValidationErrorKind.INVALID_TYPE,
            f"`{field}` must be a string, not {type(value).__name__}",
            value,
        )
    return value


def _require_choice(field: str, value: Any, choices: Type[Any], message: Optional[str] = None):
    if value is None:
        raise ValidationError(field, ValidationErrorKind.MISSING, f"`{field}` is required")
    try:
        return choices(value)
    except (ValueError, TypeError):
        options = ", ".join(f"'{c.value}'" for c in choices)
        raise ValidationError(
            field,
            ValidationErrorKind.INVALID_CHOICE,
            message or f"`{field}` must be one of {options}, not [{value}]",
            value,
        ) from None


def _require_flag(field: str, value: Any) -> bool:
    if value is None:
        raise ValidationError(field, ValidationErrorKind.MISSING, f"`{field}` is required")
    if not isinstance(value, bool):
        raise ValidationError(
            field,
            ValidationErrorKind.INVALID_TYPE,
            f"`{field}` must be a boolean flag, not {type(value).__name__}",
            value,
        )
    return value


def _require_process(field: str, value: Any) -> str:
    _require_string(field, value)
    if not is_valid_process(value):
        raise ValidationError(
            field,
            ValidationErrorKind.INVALID_CHOICE,
            f"[{value}] is not a valid process. See `list_valid_processes()` for valid options",
            value,
        )
    return value


def _normalise_diseases(value: Any) -> tuple:
    if value is None:
        raise ValidationError("diseases", ValidationErrorKind.MISSING, "`diseases` is required")
    if isinstance(value, str):
        diseases = (value,)
    elif isinstance(value, Mapping):
        raise ValidationError(
            "diseases",
            ValidationErrorKind.INVALID_TYPE,
            "`diseases` must be a string or a sequence of strings",
            value,
        )
    else:
        try:
            diseases = tuple(value)
        except TypeError:
            raise ValidationError(
                "diseases",
                ValidationErrorKind.INVALID_TYPE,
                f"`diseases` must be a string or a sequence of strings, not {type(value).__name__}",
                value,
            ) from None

    if not diseases:
        raise ValidationError(
            "diseases", ValidationErrorKind.MISSING, "`diseases` must name at least one disease", value
        )
    for disease in diseases:
        if not isinstance(disease, str):
            raise ValidationError(
                "diseases",
                ValidationErrorKind.INVALID_TYPE,
                f"every entry of `diseases` must be a string, got {type(disease).__name__}",
                value,
            )
    return diseases


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def make_scar(
    process: Optional[str] = None,
    scar_name: Optional[str] = None,
    marker_of: Optional[str] = None,
    disease_specificity: Optional[str] = None,
    diseases: Union[str, Sequence[str], None] = None,
    modality: Optional[str] = None,
    measurement: Optional[str] = None,
    description: Optional[str] = None,
    experiment: Optional[str] = None,
    paper_url: Optional[str] = None,
    specificity: Optional[str] = None,
    specificity_tooltip: Optional[str] = None,
    sensitivity: Optional[str] = None,
    sensitivity_tooltip: Optional[str] = None,
    tool_name: Optional[str] = None,
    tool_url: Optional[str] = None,
) -> Scar:
    """
    Create a scar left behind by a tumorigenic process.

    Parameters
    ----------
    process : str
        Process responsible for the scar. Must be listed by
        ``list_valid_processes()``.
    scar_name : str
        Name of the scar.
    marker_of : str
        What the scar is a biomarker of.
    disease_specificity : str
        ``"Pan-Cancer"`` or ``"Disease Specific"``.
    diseases : str or sequence of str
        Diseases linked to the scar. Must be exactly ``"cancer"`` for
        Pan-Cancer scars.
    modality : str
        ``"DNA"``, ``"RNA"`` or ``"Methylation"``.
    measurement, description, experiment, paper_url : str
        Free-text evidence fields. ``paper_url`` is not format checked.
    specificity, sensitivity : str
        ``"High"``, ``"Moderate"``, ``"Low"`` or ``"Unknown"``.
    specificity_tooltip, sensitivity_tooltip : str
        How each rating was inferred. May be empty but not omitted.
    tool_name : str, optional
        Detection tool; defaults to ``"No tool available"``.
    tool_url : str, optional
        Detection tool URL; left as ``None`` when omitted.

    Returns
    -------
    Scar

    Raises
    ------
    ValidationError
        On the first field that fails validation.
    """
    process = _require_process("process", process)
    scar_name = _require_string("scar_name", scar_name)
    marker_of = _require_string("marker_of", marker_of)

    disease_specificity = _require_choice(
        "disease_specificity",
        disease_specificity,
        DiseaseSpecificity,
        message=(
            "`disease_specificity` must be either 'Pan-Cancer' or 'Disease Specific', "
            f"not [{disease_specificity}]"
        ),
    )

    diseases = _normalise_diseases(diseases)
    if disease_specificity is DiseaseSpecificity.PAN_CANCER and diseases != PAN_CANCER_DISEASES:
        raise ValidationError(
            "diseases",
            ValidationErrorKind.INVALID_CHOICE,
            "When `disease_specificity = 'Pan-Cancer'` then `diseases` argument must be 'cancer', "
            f"not [{', '.join(diseases)}]",
            diseases,
        )

    modality = _require_choice("modality", modality, Modality)

    measurement = _require_string("measurement", measurement)
    description = _require_string("description", description)
    experiment = _require_string("experiment", experiment)
    paper_url = _require_string("paper_url", paper_url)

    specificity = _require_choice("specificity", specificity, Confidence)
    specificity_tooltip = _require_string("specificity_tooltip", specificity_tooltip)
    sensitivity = _require_choice("sensitivity", sensitivity, Confidence)
    sensitivity_tooltip = _require_string("sensitivity_tooltip", sensitivity_tooltip)

    if tool_url is not None:
        _require_string("tool_url", tool_url)
    if tool_name is None:
        tool_name = NO_TOOL_AVAILABLE
    else:
        _require_string("tool_name", tool_name)

    scar = Scar(
        process=process,
        scar_name=scar_name,
        marker_of=marker_of,
        disease_specificity=disease_specificity,
        diseases=diseases,
        modality=modality,
        measurement=measurement,
        description=description,
        experiment=experiment,
        paper_url=paper_url,
        specificity=specificity,
        specificity_tooltip=specificity_tooltip,
        sensitivity=sensitivity,
        sensitivity_tooltip=sensitivity_tooltip,
        tool_name=tool_name,
        tool_url=tool_url,
    )
    logger.debug("Built scar %r for process %s (%s)", scar_name, process, modality.value)
    return scar


def _coerce_scar(index: int, item: Any) -> Scar:
    """Re-validate a Scar, or a mapping with Scar fields, through ``make_scar``.

    Scar instances are checked again since ``model_copy`` and direct
    construction can bypass the constructor rules.
    """
    if isinstance(item, Scar):
        return make_scar(**{field: getattr(item, field) for field in _SCAR_FIELDS})
    if isinstance(item, Mapping):
        unknown = set(item) - _SCAR_FIELDS
        if unknown:
            raise ValidationError(
                "scars",
                ValidationErrorKind.INVALID_TYPE,
                f"scars[{index}] has unknown scar fields: {', '.join(sorted(map(str, unknown)))}",
                item,
            )
        return make_scar(**item)
    raise ValidationError(
        "scars",
        ValidationErrorKind.INVALID_TYPE,
        f"scars[{index}] is not a scar (got {type(item).__name__})",
        item,
    )


def make_process(
    name: Optional[str] = None,
    description: Optional[str] = None,
    process_class: Optional[str] = None,
    icon: Optional[str] = None,
    flip_vertical: Optional[bool] = None,
    flip_horizontal: Optional[bool] = None,
    scars: Optional[Sequence[Any]] = None,
) -> Process:
    """
    Create a tumorigenic process that owns a list of scars.

    Every scar must name this process in its ``process`` field. The
    ``modalities``, ``dna``, ``rna`` and ``meth`` fields of the result are
    derived from the scars.

    Raises
    ------
    ValidationError
        On the first field that fails validation, or when a scar belongs
        to a different process.
    """
    name = _require_process("name", name)
    description = _require_string("description", description)
    icon = _require_string("icon", icon)
    flip_vertical = _require_flag("flip_vertical", flip_vertical)
    flip_horizontal = _require_flag("flip_horizontal", flip_horizontal)

    if scars is None:
        raise ValidationError("scars", ValidationErrorKind.MISSING, "`scars` is required")
    if not isinstance(scars, (list, tuple)):
        raise ValidationError(
            "scars",
            ValidationErrorKind.INVALID_TYPE,
            f"`scars` must be a list of scars, not {type(scars).__name__}",
            scars,
        )

    process_class = _require_choice("class", process_class, ProcessClass)

    owned = tuple(_coerce_scar(i, item) for i, item in enumerate(scars))
    for scar in owned:
        if scar.process != name:
            raise ValidationError(
                "scars",
                ValidationErrorKind.CROSS_REFERENCE,
                f"Scar [{scar.scar_name}] cannot be added as a scar of process [{name}] since the "
                f"scar's 'process' property is [{scar.process}] instead of [{name}]",
                scar,
            )

    process = Process(
        name=name,
        description=description,
        icon=icon,
        process_class=process_class,
        flip_vertical=flip_vertical,
        flip_horizontal=flip_horizontal,
        scars=owned,
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Built process %s with %d scars (modalities: %s)",
            name,
            len(owned),
            ", ".join(m.value for m in process.modalities) or "none",
        )
    return process
