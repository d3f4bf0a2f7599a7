# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger for Optline."""
import logging

logger = logging.getLogger("optline")
