"""Interactive PRD wizard: feature description in, PRD markdown and prd.json out."""

__version__ = "0.1.0"
