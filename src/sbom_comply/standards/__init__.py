"""Built-in compliance standards."""

from sbom_comply.standards.ntia import NtiaStandard
from sbom_comply.standards.bsi import BsiStandard
from sbom_comply.standards.bsi_v2 import BsiV2Standard
from sbom_comply.standards.oct import OctStandard
from sbom_comply.standards.fsct import FsctStandard

BUILTIN_STANDARDS = (NtiaStandard, BsiStandard, BsiV2Standard, OctStandard, FsctStandard)

__all__ = [
    "BUILTIN_STANDARDS",
    "NtiaStandard",
    "BsiStandard",
    "BsiV2Standard",
    "OctStandard",
    "FsctStandard",
]
