"""Terminal job board matching hirers with applicants by skill, stored in text files."""

__version__ = "0.1.0"
__all__ = ["__version__"]