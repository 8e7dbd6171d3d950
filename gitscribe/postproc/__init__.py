"""Post-processing helpers for CLI responses."""

from .fences import FENCE, strip_code_fence

__all__ = ["FENCE", "strip_code_fence"]
