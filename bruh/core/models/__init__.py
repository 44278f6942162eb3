"""
Domain models — Pydantic types for bruh.

All models are re-exported here for convenient access:

    from bruh.core.models import BruhConfig, ToolDescriptor, ToolReceipt
"""

from bruh.core.models.config import (
    AddCheatConfig,
    AIConfig,
    BranchConfig,
    BruhConfig,
    PRConfig,
)
from bruh.core.models.receipt import ScanReport, ToolReceipt
from bruh.core.models.tool import ExitPolicy, ScanOptions, ToolDescriptor

__all__ = [
    # config.py
    "AIConfig",
    "AddCheatConfig",
    "BranchConfig",
    "BruhConfig",
    # tool.py
    "ExitPolicy",
    "PRConfig",
    "ScanOptions",
    # receipt.py
    "ScanReport",
    "ToolDescriptor",
    "ToolReceipt",
]
