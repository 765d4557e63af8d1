"""AI commit message generator that splits oversized diffs to fit the model budget."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("splitnote")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
