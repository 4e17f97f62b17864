"""Interactive command console for a small sampler, with PCM device listing."""

__version__ = "1.0.0"
__all__ = ["__version__"]