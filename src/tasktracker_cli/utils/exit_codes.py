"""
Exit codes for Task Tracker CLI.

Handled outcomes (including "task not found" and rejected input) exit with
SUCCESS; only failures the command could not recover from are nonzero.
"""

# Success, including reported outcomes such as "not found"
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid command-line usage (raised by typer/click itself)
ERROR_INVALID_ARGS = 2

# The task file could not be created or written
ERROR_STORAGE = 3


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_STORAGE: "ERROR_STORAGE",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid command-line usage",
        ERROR_STORAGE: "The task file could not be created or written",
    }
    return descriptions.get(code, "Unknown error")
