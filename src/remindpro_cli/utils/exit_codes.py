"""
Exit codes for RemindPro CLI.

Semantic exit codes so scripts can tell what went wrong.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Storage could not be read or written
ERROR_STORAGE = 4

# Resource not found
ERROR_NOT_FOUND = 5


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_STORAGE: "ERROR_STORAGE",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
    }
    return code_names.get(code, f"UNKNOWN({code})")
