"""Exception taxonomy for the module generator.

Rendering-phase errors (:class:`AlreadyExistsError`, :class:`TemplateReadError`,
:class:`TemplateSyntaxError`, :class:`WriteError`) abort the whole run.
:class:`RegistrationError` and its subclasses are caught per registration
step and reported as warnings.
"""

from __future__ import annotations

from pathlib import Path


class GeneratorError(Exception):
    """Base class for every error raised by ``modgen``.

    Attributes:
        path: The file the error relates to, if any.
    """

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class UsageError(GeneratorError):
    """Required input is missing or blank (e.g. no module name)."""


# ---------------------------------------------------------------------------
# Rendering phase
# ---------------------------------------------------------------------------


class AlreadyExistsError(GeneratorError):
    """A target file already exists and would be overwritten."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"file already exists: {path}", path)


class TemplateReadError(GeneratorError):
    """A template could not be found or read."""


class TemplateSyntaxError(GeneratorError):
    """A template could not be parsed or rendered."""


class WriteError(GeneratorError):
    """A directory or output file could not be created."""


# ---------------------------------------------------------------------------
# Registration phase
# ---------------------------------------------------------------------------


class RegistrationError(GeneratorError):
    """A fragment could not be inserted into an aggregator file."""


class MarkerNotFoundError(RegistrationError):
    """The marker string does not occur in the target file."""

    def __init__(self, marker: str, path: str | Path) -> None:
        self.marker = marker
        super().__init__(f"marker not found in {path}: {marker!r}", path)


class DuplicateMarkerError(RegistrationError):
    """The marker string occurs more than once in the target file."""

    def __init__(self, marker: str, path: str | Path, count: int) -> None:
        self.marker = marker
        self.count = count
        super().__init__(
            f"marker occurs {count} times in {path} (expected once): {marker!r}", path
        )


class MarkerIntegrityError(RegistrationError):
    """The marker is no longer unique after the fragment was inserted."""

    def __init__(self, marker: str, path: str | Path) -> None:
        self.marker = marker
        super().__init__(
            f"inserting the fragment would break marker uniqueness in {path}: {marker!r}",
            path,
        )
