"""scarcentral catalogue: curated tumorigenic processes and their scars.

The catalogue is hand-authored literal data. Every record passes through
``make_process`` / ``make_scar`` so a typo in a process name or an enum
value fails at build time rather than in downstream consumers.

Two entries differ from the source dataset: the CpG flanking scar's
``marker_of`` reads "DNMT3A R882H" (source: "DNMT3A R88H"), and the
Spliceosome Dysfunction description replaces text duplicated from
Polymerase Proofreading Deficiency.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from scarcentral.constructors import make_process, make_scar
from scarcentral.models import Modality, Process, Scar

logger = logging.getLogger(__name__)

Catalogue = Tuple[Process, ...]

_RADNA_URL = "https://github.com/selkamand/radna"
_RADIATION_PAPER = "https://www.nature.com/articles/ncomms12605"
_RADIATION_EXPERIMENT = (
    "Analysis of 12 radiation-associated tumours from 3 cancer types "
    "compared to radiation-naive tumours"
)
_NOT_EVALUATED = "Yet to be systematically evaluated"


# ═══════════════════════════════════════════════════════════════════════
# 1. RADIOTHERAPY
# ═══════════════════════════════════════════════════════════════════════

def _radiotherapy() -> Process:
    return make_process(
        name="Radiotherapy",
        description="Damage caused by ionizing radiation therapy, typically seen in post-treatment tumors.",
        process_class="exogenous",
        icon="faRadiation",
        flip_vertical=False,
        flip_horizontal=True,
        scars=[
            make_scar(
                scar_name="High Indel Burden",
                process="Radiotherapy",
                marker_of="Radiation Induced Damage",
                disease_specificity="Pan-Cancer",
                diseases="cancer",
                modality="DNA",
                measurement="INDEL / SBS ratio",
                description="Higher number of INDELS. Driven by an increased burden of deletions, not insertions.",
                experiment=_RADIATION_EXPERIMENT,
                paper_url=_RADIATION_PAPER,
                specificity="Low",
                specificity_tooltip="Also observed in BRCA1/BRCA2 breast cancer",
                sensitivity="Moderate",
                sensitivity_tooltip="All radiation tumours had values exceeding the median for their cancer type",
                tool_name="raDNA",
                tool_url=_RADNA_URL,
            ),
            make_scar(
                scar_name="High Deletion Burden",
                process="Radiotherapy",
                marker_of="Radiation Induced Damage",
                disease_specificity="Pan-Cancer",
                diseases="cancer",
                modality="DNA",
                measurement="Deletion / Insertion ratio",
                description="Higher number of small deletions (1-100bp) particularly in regions of microhomology.",
                experiment=_RADIATION_EXPERIMENT,
                paper_url=_RADIATION_PAPER,
                specificity="Low",
                specificity_tooltip="Also observed in BRCA1/BRCA2 breast cancer",
                sensitivity="Moderate",
                sensitivity_tooltip="11/12 tumours had values exceeding the median for their cancer type",
                tool_name="raDNA",
                tool_url=_RADNA_URL,
            ),
            make_scar(
                scar_name="Topography Agnostic Deletions",
                process="Radiotherapy",
                marker_of="Radiation Induced Damage",
                disease_specificity="Pan-Cancer",
                diseases="cancer",
                modality="DNA",
                measurement="Genome-wide deletion distribution and topographical features",
                description=(
                    "Radiation induced deletions appear uniformly across the genome regardless "
                    "of replication timing and chromatin structure."
                ),
                experiment=_RADIATION_EXPERIMENT,
                paper_url=_RADIATION_PAPER,
                specificity="High",
                specificity_tooltip="No other mutagenic process has this level of indifference to DNA topography",
                sensitivity="Unknown",
                sensitivity_tooltip="",
                tool_name="raDNA",
                tool_url=_RADNA_URL,
            ),
            make_scar(
                scar_name="Increased Balanced Inversions",
                process="Radiotherapy",
                marker_of="Radiation Induced Damage",
                disease_specificity="Pan-Cancer",
                diseases="cancer",
                modality="DNA",
                measurement="Any balanced inversions present",
                description=(
                    "Balanced inversions, a rare type of rearrangement, were present in 92% (11/12) "
                    "radiation-associated tumours but only 15% of radiation naive tumours."
                ),
                experiment=_RADIATION_EXPERIMENT,
                paper_url=_RADIATION_PAPER,
                specificity="Low",
                specificity_tooltip="Present in 58% of BRCA1/2-deficient breast tumours",
                sensitivity="High",
                sensitivity_tooltip=(
                    "Present in 92% (11/12) radiation-associated tumours but only 15% of "
                    "radiation-naive tumours"
                ),
                tool_name="raDNA",
                tool_url=_RADNA_URL,
            ),
            make_scar(
                scar_name="Clonal Deletions",
                process="Radiotherapy",
                marker_of="Radiation Induced Cancer",
                disease_specificity="Pan-Cancer",
                diseases="cancer",
                modality="DNA",
                measurement="Clonal/Subclonal ratio of Deletions to Insertions",
                description="Radiation Induced Cancers have early and clonal radiation-induced mutations.",
                experiment=_RADIATION_EXPERIMENT,
                paper_url=_RADIATION_PAPER,
                specificity="Low",
                specificity_tooltip="Clonal radiation-induced mutations are not unique to non-radiation induced cancer.",
                sensitivity="High",
                sensitivity_tooltip=(
                    "Deletions were significantly increased compared with insertions amongst clonal mutations."
                ),
                tool_name="raDNA",
                tool_url=_RADNA_URL,
            ),
            make_scar(
                scar_name="Glioblastoma Expression Signature",
                process="Radiotherapy",
                marker_of="Radiation Induced Glioblastoma",
                disease_specificity="Disease Specific",
                diseases="glioblastoma",
                modality="RNA",
                measurement="Proportion of RIG-associated genes overexpressed",
                description=(
                    "Paediatric glioblastomas were shown to have a pattern of expression distinct "
                    "from those that spontaneously arise."
                ),
                experiment=(
                    "Gene expression microarray profiling of 5 paediatric radiation-induced "
                    "glioblastomas compared to spontaneous tumours"
                ),
                paper_url="https://doi.org/10.1097/nen.0b013e3181257190",
                specificity="Unknown",
                specificity_tooltip=_NOT_EVALUATED,
                sensitivity="Unknown",
                sensitivity_tooltip=_NOT_EVALUATED,
                tool_name="RIG",
                tool_url="https://github.com/CCICB/rig",
            ),
        ],
    )


# ═══════════════════════════════════════════════════════════════════════
# 2. METHYLTRANSFERASE DYSFUNCTION
# ═══════════════════════════════════════════════════════════════════════

def _methyltransferase_dysfunction() -> Process:
    return make_process(
        name="Methyltransferase Dysfunction",
        description="Global methylation disrupted by DNMT3A dysfunction. Common in Leukaemia.",
        process_class="endogenous",
        icon="faTimeline",
        flip_vertical=False,
        flip_horizontal=False,
        scars=[
            make_scar(
                scar_name="CpG Flanking Sequence Preferences",
                process="Methyltransferase Dysfunction",
                marker_of="DNMT3A R882H",
                disease_specificity="Pan-Cancer",
                diseases="cancer",
                modality="Methylation",
                measurement="Proportion of methylated CpGs in R882/WT preferred contexts",
                description="DNMT3A R882H and similar mutations change the CpG flanking sequence preferences.",
                experiment=(
                    "Libraries containing CpG in 10nt random context were exposed to mutant/WT "
                    "methyltransferases then bisulfite sequenced."
                ),
                paper_url="https://doi.org/10.1093/nar/gkz911",
                specificity="Unknown",
                specificity_tooltip=_NOT_EVALUATED,
                sensitivity="Unknown",
                sensitivity_tooltip=_NOT_EVALUATED,
            ),
            make_scar(
                scar_name="Hemimethylation Burden",
                process="Methyltransferase Dysfunction",
                marker_of="Low DNMT1 activity",
                disease_specificity="Pan-Cancer",
                diseases="cancer",
                modality="Methylation",
                measurement="Proportion of CpGs which are hemimethylated",
                description="DNMT1 maintenance methyltransferase should decrease hemimethylation.",
                experiment="",
                paper_url="",
                specificity="Unknown",
                specificity_tooltip=_NOT_EVALUATED,
                sensitivity="Unknown",
                sensitivity_tooltip=_NOT_EVALUATED,
            ),
        ],
    )


# ═══════════════════════════════════════════════════════════════════════
# 3. PROCESSES AWAITING CURATED SCARS
# ═══════════════════════════════════════════════════════════════════════

def _mismatch_repair_deficiency() -> Process:
    return make_process(
        name="Mismatch Repair Deficiency",
        description="Failure to repair small mutations leads to their accumulation in the tumour genome",
        process_class="endogenous",
        icon="faShieldHalved",
        flip_vertical=False,
        flip_horizontal=False,
        scars=[],
    )


def _polymerase_proofreading_deficiency() -> Process:
    return make_process(
        name="Polymerase Proofreading Deficiency",
        description=(
            "Impaired proofreading of DNA polymerases, particularly Pol ε and Pol δ. "
            "This deficiency significantly impacts the fidelity of DNA replication."
        ),
        process_class="endogenous",
        icon="faShieldHalved",
        flip_vertical=False,
        flip_horizontal=False,
        scars=[],
    )


def _spliceosome_dysfunction() -> Process:
    return make_process(
        name="Spliceosome Dysfunction",
        description=(
            "Somatic mutations in core splicing factors (e.g. SF3B1, SRSF2, U2AF1) "
            "cause widespread aberrant mRNA splicing."
        ),
        process_class="endogenous",
        icon="faShieldHalved",
        flip_vertical=False,
        flip_horizontal=False,
        scars=[],
    )


_PROCESS_BUILDERS = (
    _radiotherapy,
    _methyltransferase_dysfunction,
    _mismatch_repair_deficiency,
    _polymerase_proofreading_deficiency,
    _spliceosome_dysfunction,
)


def build_catalogue() -> Catalogue:
    """
    Build the full scarcentral dataset.

    Returns
    -------
    tuple of Process
        Every curated tumorigenic process, in display order, each carrying
        its validated scars. Calling this twice yields equal results.
    """
    catalogue = tuple(builder() for builder in _PROCESS_BUILDERS)
    logger.info(
        "Built scarcentral catalogue: %d processes, %d scars",
        len(catalogue),
        sum(p.scar_count for p in catalogue),
    )
    return catalogue


# ═══════════════════════════════════════════════════════════════════════
# Lookup helpers
# ═══════════════════════════════════════════════════════════════════════

def get_process(name: str, catalogue: Optional[Sequence[Process]] = None) -> Optional[Process]:
    """Return the process called ``name`` (case-insensitive), or None."""
    if not isinstance(name, str):
        return None
    if catalogue is None:
        catalogue = build_catalogue()
    wanted = name.strip().lower()
    for process in catalogue:
        if process.name.lower() == wanted:
            return process
    return None


def scars_by_modality(modality, catalogue: Optional[Sequence[Process]] = None) -> List[Scar]:
    """Return every scar observed in ``modality``, in catalogue order."""
    modality = Modality(modality)
    if catalogue is None:
        catalogue = build_catalogue()
    return [scar for process in catalogue for scar in process.scars if scar.modality is modality]


def process_summary(process: Process) -> str:
    """Return a short banner describing a process and its scars."""
    rule = "=" * 46
    modalities = ", ".join(m.value for m in process.modalities)
    lines = [
        rule,
        f"Process: {process.name}",
        rule,
        f"Description: {process.description}",
        "",
        f"Scars: {process.scar_count}",
        f"Modalities: {modalities}",
    ]
    return "\n".join(lines)
