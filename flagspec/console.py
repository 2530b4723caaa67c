# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for flagspec output."""
from rich.console import Console

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)
