"""Host compiler capabilities, probed once and then read by rewriter."""

from .capabilities import HAS_SIMPLE_DECL_MACRO_CFG, Capabilities
from .persistence import (
    CAPABILITIES_FILENAME,
    CapabilitiesRecord,
    load_capabilities,
    load_capabilities_record,
    save_capabilities_record,
)

__all__ = [
    "CAPABILITIES_FILENAME",
    "HAS_SIMPLE_DECL_MACRO_CFG",
    "Capabilities",
    "CapabilitiesRecord",
    "load_capabilities",
    "load_capabilities_record",
    "save_capabilities_record",
]
