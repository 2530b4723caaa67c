# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package logger for flagspec."""
import logging

logger: logging.Logger = logging.getLogger("flagspec")
