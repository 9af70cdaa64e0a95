"""Building blocks for an eBPF-based runtime monitoring agent."""

__version__ = "0.1.0"
__all__ = ["__version__"]