"""Repository interfaces for RemindPro.

This package contains abstract base classes (ABCs) that define the contracts
for storage operations. These are the "Ports" in the Hexagonal Architecture.

Implementations (Adapters) are in:
- remindpro_cli.adapters.memory (in-process storage)
- remindpro_cli.adapters.json_file (single JSON document)
"""

from .repository import CategoryRepository, ReminderRepository

__all__ = [
    "ReminderRepository",
    "CategoryRepository",
]
