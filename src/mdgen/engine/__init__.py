from mdgen.engine.applier import apply_commands, collect_commands, run_commands
from mdgen.engine.executor import COMMAND_HANDLERS, ExecutionContext, execute_command
from mdgen.engine.messages import Diagnostic, DiagnosticKind, has_errors
from mdgen.engine.options import EngineOptions
from mdgen.engine.scanner import Command, MarkerSyntax, scan_commands
from mdgen.engine.toc import TocEntry, generate_table_of_contents

__all__ = [
    "COMMAND_HANDLERS",
    "Command",
    "Diagnostic",
    "DiagnosticKind",
    "EngineOptions",
    "ExecutionContext",
    "MarkerSyntax",
    "TocEntry",
    "apply_commands",
    "collect_commands",
    "execute_command",
    "generate_table_of_contents",
    "has_errors",
    "run_commands",
    "scan_commands",
]
