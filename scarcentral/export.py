"""
Export module for the scarcentral catalogue.

Turns the catalogue into plain data: a JSON document (returned as a dict or
written to disk) and a Markdown overview for review.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from config.settings import settings
from scarcentral.catalogue import build_catalogue
from scarcentral.models import Process
from scarcentral.utils.text import strip_newlines

logger = logging.getLogger(__name__)

SCAR_TABLE_COLUMNS = (
    "Scar",
    "Modality",
    "Marker of",
    "Diseases",
    "Specificity",
    "Sensitivity",
    "Tool",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _resolve(catalogue: Optional[Sequence[Process]]) -> Sequence[Process]:
    return build_catalogue() if catalogue is None else catalogue


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _cell(value: Any) -> str:
    """Flatten a value into a single Markdown table cell."""
    return strip_newlines(str(value)).replace("|", "\\|")


# ===================================================================
# 1. Plain records
# ===================================================================

def catalogue_to_records(catalogue: Optional[Sequence[Process]] = None) -> List[Dict[str, Any]]:
    """Dump every process, including scars and derived fields, to JSON-safe dicts."""
    return [process.model_dump(mode="json", by_alias=True) for process in _resolve(catalogue)]


# ===================================================================
# 2. JSON Export
# ===================================================================

def export_json(catalogue: Optional[Sequence[Process]] = None) -> dict:
    """
    Build a JSON-serialisable document for the catalogue.

    Returns
    -------
    dict
        ``{"meta": {...}, "processes": [...]}``
    """
    processes = _resolve(catalogue)
    records = catalogue_to_records(processes)

    export = {
        "meta": {
            "format": settings.EXPORT_FORMAT_NAME,
            "version": settings.EXPORT_FORMAT_VERSION,
            "generated_at": _timestamp(),
            "process_count": len(records),
            "scar_count": sum(len(r["scars"]) for r in records),
        },
        "processes": records,
    }

    logger.info(
        "Exported JSON catalogue with %d processes, %d scars",
        export["meta"]["process_count"],
        export["meta"]["scar_count"],
    )
    return export


def write_json(
    filepath: Union[str, Path, None] = None,
    overwrite: bool = False,
    catalogue: Optional[Sequence[Process]] = None,
) -> Path:
    """
    Write the JSON catalogue to ``filepath``.

    Parameters
    ----------
    filepath : str or Path, optional
        Destination; defaults to ``settings.export_json_path``.
    overwrite : bool
        Replace an existing file. When False an existing file is an error.

    Returns
    -------
    Path
        The path written.

    Raises
    ------
    FileExistsError
        If the file exists and ``overwrite`` is False.
    """
    path = Path(filepath) if filepath is not None else settings.export_json_path
    if path.exists() and not overwrite:
        raise FileExistsError(f"File [{path}] already exists. To overwrite set overwrite=True")

    document = export_json(catalogue)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Writing json file to %s", path)
    path.write_text(json.dumps(document, indent=settings.JSON_INDENT, ensure_ascii=False), encoding="utf-8")
    return path


# ===================================================================
# 3. Markdown Export
# ===================================================================

def export_markdown(
    catalogue: Optional[Sequence[Process]] = None,
    title: Optional[str] = None,
) -> str:
    """
    Generate a Markdown overview of the catalogue: one section per
    process with its description, class, modalities and a scar table.
    """
    processes = _resolve(catalogue)
    lines: List[str] = [
        f"# {title or 'scarcentral Catalogue'}",
        "",
        f"**Generated:** {_timestamp()}  ",
        f"**Processes:** {len(processes)}  ",
        f"**Scars:** {sum(p.scar_count for p in processes)}",
        "",
    ]

    for process in processes:
        modalities = ", ".join(m.value for m in process.modalities) or "None"
        lines.extend([
            f"## {process.name}",
            "",
            strip_newlines(process.description),
            "",
            f"- **Class:** {process.process_class.value}",
            f"- **Modalities:** {modalities}",
            "",
        ])

        if not process.scars:
            lines.extend(["_No curated scars yet._", ""])
            continue

        lines.append("| " + " | ".join(SCAR_TABLE_COLUMNS) + " |")
        lines.append("|" + "---|" * len(SCAR_TABLE_COLUMNS))
        for scar in process.scars:
            tool = f"[{scar.tool_name}]({scar.tool_url})" if scar.tool_url else scar.tool_name
            row = [
                scar.scar_name,
                scar.modality.value,
                scar.marker_of,
                ", ".join(scar.diseases),
                scar.specificity.value,
                scar.sensitivity.value,
                tool,
            ]
            lines.append("| " + " | ".join(_cell(v) for v in row) + " |")
        lines.append("")

    logger.info("Exported Markdown catalogue with %d processes", len(processes))
    return "\n".join(lines)
