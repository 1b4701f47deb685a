"""Pure rendering functions: ranked recommendations -> text or HTML strings.

All renderers follow the same pattern:
  - Input: Recommendations (from analysis/) plus display context
  - Output: str
  - No side effects, no I/O, no Prefect decorators

Used by cli.py.

Public API:
  - recommendations: format_recommendations_table, build_recommendations_html

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function::

       from lifer_planner.renderers import render_template

       def build_mywidget_html(recs: list[Recommendation]) -> str:
           rows = [...]
           return render_template("mywidget.html.j2", rows=rows)

2. Create a Jinja2 template in ``templates/{name}.html.j2``.
   Fragments have no <html>/<body> tags; ``base.html.j2`` wraps them.

3. Add tests: call your build function with sample data and assert
   the returned HTML contains expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
