# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for argkit."""
import logging

logger: logging.Logger = logging.getLogger("argkit")
