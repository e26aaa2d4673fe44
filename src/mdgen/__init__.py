"""mdgen package root."""

from mdgen.engine import EngineOptions, MarkerSyntax, run_commands
from mdgen.exceptions import MdgenError

__all__ = ["__version__", "EngineOptions", "MarkerSyntax", "MdgenError", "run_commands"]

__version__ = "0.1.0"
