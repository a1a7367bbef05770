"""Console point-of-sale and back-office tools for a sandwich shop."""

__version__ = "0.1.0"
__all__ = [
    "admins",
    "cli",
    "clients",
    "employees",
    "finance",
    "inventory",
    "models",
    "ordering",
    "persistence",
    "screens",
]