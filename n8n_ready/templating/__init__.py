"""Project templates and scaffolding."""

from .engine import TemplateEngine
from .scaffold import ProjectScaffolder, ScaffoldError, render_readme

__all__ = ["TemplateEngine", "ProjectScaffolder", "ScaffoldError", "render_readme"]
