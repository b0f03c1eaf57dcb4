"""Marker-anchored registration of generated modules.

New modules are wired into two hand-maintained aggregator files, the router
and the DI container, by inserting rendered fragments directly in front of
literal marker comments.  The marker stays in place after every insertion, so
later modules are appended at the same anchor in generation order.

No Go parser is involved.  Instead each insertion checks that the marker
occurs exactly once before and after the edit.
"""

from __future__ import annotations

from pathlib import Path

from .config import GeneratorConfig
from .errors import (
    DuplicateMarkerError,
    GeneratorError,
    MarkerIntegrityError,
    MarkerNotFoundError,
    RegistrationError,
)
from .models import ModuleSpec, RegistrationResult
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Low-level insertion
# ---------------------------------------------------------------------------


def insert_before_marker(text: str, marker: str, fragment: str, path: str | Path = "<text>") -> str:
    """Return *text* with *fragment* inserted immediately before *marker*.

    *fragment* is written without base indentation; every line after the
    first is indented with the whitespace that precedes the marker on its
    line, and the marker is re-indented the same way afterwards.  When code
    precedes the marker on its line, the fragment starts on a new line and
    the code line's own indentation is used.  Text before the insertion
    point and from the marker onward is left untouched.

    Raises:
        MarkerNotFoundError: *marker* does not occur in *text*.
        DuplicateMarkerError: *marker* occurs more than once.
        MarkerIntegrityError: the fragment itself contains *marker*.
    """
    count = text.count(marker)
    if count == 0:
        raise MarkerNotFoundError(marker, path)
    if count > 1:
        raise DuplicateMarkerError(marker, path, count)

    index = text.index(marker)
    line_start = text.rfind("\n", 0, index) + 1
    prefix = text[line_start:index]
    newline = "\r\n" if "\r\n" in text else "\n"
    if prefix.strip():
        # Marker trails code: the fragment and the marker move to new lines
        # indented like the code line.
        indent = prefix[: len(prefix) - len(prefix.lstrip())]
        insertion = newline + indent + _indent_fragment(fragment, indent, newline)
    else:
        indent = prefix
        insertion = _indent_fragment(fragment, indent, newline)

    updated = text[:index] + insertion + text[index:]
    if updated.count(marker) != 1:
        raise MarkerIntegrityError(marker, path)
    return updated


def register_fragment(path: Path, marker: str, fragment: str) -> None:
    """Insert *fragment* before *marker* in the file at *path*, in place."""
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            original = handle.read()
    except OSError as exc:
        raise RegistrationError(f"read {path}: {exc}", path) from exc

    updated = insert_before_marker(original, marker, fragment, path)

    try:
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(updated)
    except OSError as exc:
        raise RegistrationError(f"write {path}: {exc}", path) from exc


def _indent_fragment(fragment: str, indent: str, newline: str) -> str:
    if fragment.endswith("\n"):
        fragment = fragment[:-1]
    lines = fragment.split("\n")
    indented = [lines[0]] + [indent + line if line.strip() else "" for line in lines[1:]]
    return newline.join(indented) + newline + indent


# ---------------------------------------------------------------------------
# Registrar
# ---------------------------------------------------------------------------


class ModuleRegistrar:
    """Registers a generated module in the router and the DI container.

    Each public ``register_*`` method is one independent, best-effort step:
    it never raises, and reports its outcome as a ``RegistrationResult``.
    """

    def __init__(self, config: GeneratorConfig, renderer: TemplateRenderer) -> None:
        self.config = config
        self.renderer = renderer

    def register_route(self, spec: ModuleSpec) -> RegistrationResult:
        """Add the module's CRUD route group to the router."""
        path = self.config.router_path
        errors = self._apply(
            spec,
            path,
            [("register/route.go.j2", self.config.markers.route)],
        )
        return _result("route", path, errors, f"route group /{spec.plural_name} registered")

    def register_service(self, spec: ModuleSpec) -> RegistrationResult:
        """Add the service field and its initialization to the container.

        The two insertions are attempted independently; a failure in either
        fails the step.
        """
        path = self.config.container_path
        errors = self._apply(
            spec,
            path,
            [
                ("register/service_field.go.j2", self.config.markers.service_field),
                ("register/service_init.go.j2", self.config.markers.service_init),
            ],
        )
        return _result("service", path, errors, f"{spec.pascal_name}Service registered")

    def register_migration(self, spec: ModuleSpec) -> RegistrationResult:
        """Append the module's persistence model to the auto-migration list."""
        path = self.config.container_path
        errors = self._apply(
            spec,
            path,
            [("register/model_migrate.go.j2", self.config.markers.model_migrate)],
        )
        return _result("migration", path, errors, f"{spec.pascal_name}Model migration registered")

    def _apply(
        self,
        spec: ModuleSpec,
        path: Path,
        insertions: list[tuple[str, str]],
    ) -> list[str]:
        context = spec.as_context()
        errors: list[str] = []
        for template_path, marker in insertions:
            try:
                fragment = self.renderer.render(template_path, context)
                register_fragment(path, marker, fragment)
            except GeneratorError as exc:
                errors.append(str(exc))
        return errors


def _result(step: str, path: Path, errors: list[str], ok_message: str) -> RegistrationResult:
    if errors:
        return RegistrationResult(step=step, target=str(path), ok=False, message="; ".join(errors))
    return RegistrationResult(step=step, target=str(path), ok=True, message=ok_message)
