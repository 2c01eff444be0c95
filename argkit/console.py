# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for argkit output."""
from rich.console import Console

from argkit.themes import get_theme

console = Console(color_system="truecolor", theme=get_theme())
