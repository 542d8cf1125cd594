"""Registry of canonical tumorigenic process names.

Every scar and process in the catalogue must name one of these processes.
The tuple is fixed at import time and never mutated.
"""

from typing import List


VALID_PROCESSES = (
    "Radiotherapy",
    "Recombination",
    "Methyltransferase Dysfunction",
    "Spliceosome Dysfunction",
    "Ultraviolet Radiation",
    "Mismatch Repair Deficiency",
    "Polymerase Proofreading Deficiency",
    "Homologous Repair Deficiency",
    "APOBEC hyperactivity",
    "Chemotherapy",
    "Smoking",
    "Viruses",
    "Defective Base Excision Repair",
    "Leaky Checkpoints",
    "ADAR activity",
    "NHEJ repair",
    "TOP2A loss",
    "Sequencing",
)

_VALID_PROCESS_SET = frozenset(VALID_PROCESSES)


def list_valid_processes() -> List[str]:
    """Return the canonical tumorigenic process names, in registry order."""
    return list(VALID_PROCESSES)


def is_valid_process(name) -> bool:
    return isinstance(name, str) and name in _VALID_PROCESS_SET
