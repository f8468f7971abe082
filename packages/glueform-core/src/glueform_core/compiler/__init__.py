"""Compiler module for glueform.

This module exports the compiler and its result models:
- GlueCompiler: compiles ``custom.Glue`` into CloudFormation resources
- CompileResult: everything a compile wrote to the template
- JobSectionResult, ConnectionSectionResult, TriggerSectionResult:
  per-section results
"""

from __future__ import annotations

from glueform_core.compiler.compiler import GlueCompiler, ensure_unique_logical_ids
from glueform_core.compiler.models import (
    CompileResult,
    ConnectionSectionResult,
    JobSectionResult,
    TriggerSectionResult,
)

__all__: list[str] = [
    "GlueCompiler",
    "ensure_unique_logical_ids",
    "CompileResult",
    "JobSectionResult",
    "ConnectionSectionResult",
    "TriggerSectionResult",
]
