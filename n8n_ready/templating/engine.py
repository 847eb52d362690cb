"""
Template rendering engine.

Fills {{placeholder}} markers in text templates.
"""

import re
from typing import Dict


class TemplateEngine:
    """
    Renders text templates with simple string substitution.

    Unknown placeholders are left in place so a missing value is visible
    in the output instead of silently disappearing.
    """

    # Pattern for matching {{placeholder}} syntax
    PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")

    def render(self, template: str, values: Dict[str, str]) -> str:
        """
        Render a template with the given values.

        Args:
            template: Text with {{placeholder}} markers
            values: Substitution map

        Returns:
            Rendered text
        """
        def replace_match(match):
            key = match.group(1)
            if key not in values:
                return match.group(0)
            return str(values[key])

        return self.PLACEHOLDER_PATTERN.sub(replace_match, template)
