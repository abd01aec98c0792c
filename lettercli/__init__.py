"""
lettercli: big-letter terminal banners with gradients and drop shadows.

Minimal init to avoid import-time cycles.

Do NOT import cli/interactive here.
Keep side effects out of package import.
"""

__version__ = "0.1.0"
__all__: list[str] = ["__version__"]
