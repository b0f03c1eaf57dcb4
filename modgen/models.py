"""Pydantic models shared by the generator pipeline.

``ModuleSpec`` is the per-run description of the module being generated.
``RegistrationResult`` and ``GenerationReport`` describe what a run did.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .errors import UsageError
from .naming import (
    pluralize,
    split_words,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)


class ModuleSpec(BaseModel):
    """The module to generate.

    ``raw_name`` is the identifier exactly as the caller typed it and is used
    for word splitting, so ``OrderItem`` yields ``order_item``.  ``name`` is
    its lowercase form.  Every derived name is a property so it is always
    recomputed from the same input.
    """

    raw_name: str = Field(..., description="Module identifier as supplied (e.g. 'order')")
    display_name: str = Field(default="", description="Human-readable label used in comments")
    module_path: str = Field(default="", description="Go module path of the host project")

    @field_validator("raw_name")
    @classmethod
    def require_name(cls, value: str) -> str:
        # pydantic wraps only ValueError and AssertionError; UsageError propagates unchanged.
        value = value.strip()
        if not value:
            raise UsageError("module name must not be empty")
        if not split_words(value):
            raise UsageError(f"module name {value!r} contains no word characters")
        return value

    def model_post_init(self, __context: Any) -> None:
        if not self.display_name:
            self.display_name = self.raw_name

    # -- Derived names -----------------------------------------------------

    @property
    def name(self) -> str:
        return self.raw_name.lower()

    @property
    def pascal_name(self) -> str:
        return to_pascal_case(self.raw_name)

    @property
    def camel_name(self) -> str:
        return to_camel_case(self.raw_name)

    @property
    def snake_name(self) -> str:
        return to_snake_case(self.raw_name)

    @property
    def kebab_name(self) -> str:
        return to_kebab_case(self.raw_name)

    @property
    def plural_name(self) -> str:
        return pluralize(self.name)

    def as_context(self) -> dict[str, str]:
        """Return the Jinja2 template context for this module."""
        return {
            "name": self.name,
            "pascal_name": self.pascal_name,
            "camel_name": self.camel_name,
            "snake_name": self.snake_name,
            "kebab_name": self.kebab_name,
            "plural_name": self.plural_name,
            "display_name": self.display_name,
            "module_path": self.module_path,
        }


class RegistrationResult(BaseModel):
    """Outcome of one best-effort registration step."""

    step: str
    target: str
    ok: bool
    message: str = ""


class GenerationReport(BaseModel):
    """Everything one generator run produced."""

    module: str
    created_files: list[str] = Field(default_factory=list)
    registrations: list[RegistrationResult] = Field(default_factory=list)

    @property
    def warnings(self) -> list[RegistrationResult]:
        """Registration steps that must be completed by hand."""
        return [r for r in self.registrations if not r.ok]

    @property
    def success(self) -> bool:
        return not self.warnings
