"""Services module - Diff computation layer"""

from .config_manager import ConfigManager
from .diff_engine import (
    DiffEngine,
    calculate_inline_diff,
    calculate_side_by_side_diff,
    calculate_unified_diff,
    generate_patch,
    render_unified_text,
)
from .sequence_differ import SequenceDiffer

__all__ = [
    "ConfigManager",
    "DiffEngine",
    "SequenceDiffer",
    "calculate_inline_diff",
    "calculate_side_by_side_diff",
    "calculate_unified_diff",
    "generate_patch",
    "render_unified_text",
]
