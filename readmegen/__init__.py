"""Generate README files from a project's manifest and source layout."""

from .analyzer import analyze_project
from .models import CustomSection, GenerationOutcome, ProjectMetadata
from .postproc.markers import extract_sections, inject_sections
from .rendering import render

__version__ = "1.0.0"

__all__ = [
    "CustomSection",
    "GenerationOutcome",
    "ProjectMetadata",
    "analyze_project",
    "extract_sections",
    "inject_sections",
    "render",
]
