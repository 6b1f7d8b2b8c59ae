"""Building blocks for a modal, AI-assisted terminal code editor: buffer, explorer,
palette, jump labels, styling, configuration, memory and workflow helpers."""

__version__ = "0.1.0"