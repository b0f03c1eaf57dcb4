"""Jinja2 template rendering for module generation.

Provides the TemplateRenderer class which loads Jinja2 templates from the
bundled ``modgen/templates/`` directory (or a configured override) and renders
them with a module's naming context.  Rendering always happens in memory;
only a fully rendered file is ever written to disk, and an existing file is
never overwritten.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .errors import AlreadyExistsError, TemplateReadError, TemplateSyntaxError, WriteError
from .naming import pluralize, to_camel_case, to_kebab_case, to_pascal_case, to_snake_case


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for generated modules.

    Templates are ``.j2`` files addressed by their path relative to the
    template directory (e.g. ``"module/handler.go.j2"``).  Undefined context
    variables are errors rather than silently rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register naming filters
        self.env.filters["pascal_case"] = to_pascal_case
        self.env.filters["camel_case"] = to_camel_case
        self.env.filters["snake_case"] = to_snake_case
        self.env.filters["kebab_case"] = to_kebab_case
        self.env.filters["plural"] = pluralize

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory.
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.

        Raises:
            TemplateReadError: The template does not exist or cannot be read.
            TemplateSyntaxError: The template cannot be parsed, or refers to
                a variable missing from *context*.
        """
        source = self.template_dir / template_path
        try:
            template = self.env.get_template(template_path)
        except jinja2.TemplateNotFound as exc:
            raise TemplateReadError(f"template not found: {source}", source) from exc
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateSyntaxError(
                f"parse template {source} (line {exc.lineno}): {exc.message}", source
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateReadError(f"read template {source}: {exc}", source) from exc

        try:
            return template.render(**context)
        except jinja2.TemplateError as exc:
            raise TemplateSyntaxError(f"render template {source}: {exc}", source) from exc

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to a new file at *output_path*.

        Parent directories are created automatically.  The file is rendered
        completely before it is created, so a rendering failure leaves
        nothing behind.

        Raises:
            AlreadyExistsError: *output_path* already exists.
            TemplateReadError, TemplateSyntaxError: See :meth:`render`.
            WriteError: The directory or the file could not be written.
        """
        out = Path(output_path)
        if out.exists():
            raise AlreadyExistsError(out)
        content = self.render(template_path, context)
        _write_new_file(out, content)
        return out


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_new_file(path: Path, content: str) -> None:
    """Create parent dirs and write *content* to a file that must not exist yet."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(f"create directory {path.parent}: {exc}", path) from exc

    try:
        with path.open("x", encoding="utf-8") as handle:
            handle.write(content)
    except FileExistsError as exc:
        raise AlreadyExistsError(path) from exc
    except OSError as exc:
        raise WriteError(f"write {path}: {exc}", path) from exc
