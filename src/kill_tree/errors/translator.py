"""Translate technical errors to user-friendly messages."""

import re
from dataclasses import dataclass
from typing import List

from rich.markup import escape


@dataclass
class UserFriendlyError:
    """User-friendly error representation."""
    original_error: Exception
    title: str
    explanation: str
    actions: List[str]
    show_technical: bool = True


class ErrorTranslator:
    """Translate technical errors to user-friendly messages."""

    ERROR_PATTERNS = {
        # Reserved / out of range root PID
        r"InvalidProcessIdError": {
            "title": "Process id cannot be targeted",
            "explanation": "The process id is reserved by the operating system or outside the range it can hand out. Nothing was killed.",
            "actions": [
                "Double-check the process id (ps / Task Manager)",
                "Never target the kernel, init or System processes",
            ],
        },

        r"InvalidSignalNameError": {
            "title": "Unknown signal",
            "explanation": "The signal name is not defined on this platform. Nothing was killed.",
            "actions": [
                "Use a full signal name such as SIGTERM, SIGINT or SIGKILL",
                "List available signals: kill -l",
            ],
        },

        # Must precede the generic OS error pattern
        r"Operation not permitted|Access is denied|Permission denied": {
            "title": "Permission denied",
            "explanation": "A process in the tree belongs to another user or is protected. Processes killed before it stay killed.",
            "actions": [
                "Re-run as the owning user or with elevated privileges",
                "Re-run the command; the tree is re-scanned from scratch",
            ],
        },

        r"ProcessOSError|InvalidCastError": {
            "title": "Operating system call failed",
            "explanation": "Killing or listing processes failed for a reason other than the process already being gone.",
            "actions": [
                "Re-run the command; the tree is re-scanned from scratch",
                "Run with --log-level DEBUG for details",
            ],
        },

        r"TaskJoinError": {
            "title": "Concurrent kill task failed",
            "explanation": "A background kill task crashed or was cancelled.",
            "actions": [
                "Re-run without --concurrent",
                "Run with --log-level DEBUG for details",
            ],
        },

        r"UnsupportedPlatformError": {
            "title": "Unsupported platform",
            "explanation": "kill-tree supports Linux, macOS and Windows only.",
            "actions": [
                "Run on a supported operating system",
            ],
            "show_technical": False,
        },

        # Config errors
        r"ValidationError|YAMLError|ScannerError|ParserError|ConstructorError|config.*must contain": {
            "title": "Invalid configuration",
            "explanation": "The configuration file or environment contains an invalid value or malformed YAML.",
            "actions": [
                "Check keys: only 'signal' and 'include_target' are allowed",
                "Check KILL_TREE_* environment variables",
            ],
        },
    }

    def translate(self, error: Exception) -> UserFriendlyError:
        """Convert exception to user-friendly format."""
        error_str = str(error)
        error_type = type(error).__name__
        full_error = f"{error_type}: {error_str}"

        # Try to match error patterns
        for pattern, translation in self.ERROR_PATTERNS.items():
            if re.search(pattern, full_error, re.IGNORECASE):
                return UserFriendlyError(
                    original_error=error,
                    title=translation["title"],
                    explanation=translation["explanation"],
                    actions=translation["actions"],
                    show_technical=translation.get("show_technical", True),
                )

        # Fallback for unknown errors
        return UserFriendlyError(
            original_error=error,
            title="Unexpected error",
            explanation=str(error),
            actions=[
                "Run with --log-level DEBUG for details",
                "Report the issue with the debug output attached",
            ],
            show_technical=False,
        )

    def format_for_cli(self, friendly_error: UserFriendlyError) -> str:
        """Format error for CLI display."""
        output = f"[bold red]{friendly_error.title}[/]\n\n"
        output += f"{escape(friendly_error.explanation)}\n\n"

        # Actions
        output += "[bold]How to fix:[/]\n"
        for i, action in enumerate(friendly_error.actions, 1):
            output += f"  {i}. {action}\n"

        # Technical details (if needed)
        if friendly_error.show_technical:
            output += f"\n[dim]Technical details:[/]\n[dim]{escape(str(friendly_error.original_error))}[/]"

        return output
