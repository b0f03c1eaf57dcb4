"""Generator configuration.

Typed configuration for a generation run.  Pydantic v2 models validate at
construction time and can be loaded from JSON or built from environment
variables.  The defaults describe the layout of the Go DDD scaffold the
generator was written for; every path is relative to ``project_root``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_MODULE_PATH = "go-ddd-scaffold"

_BUNDLED_TEMPLATE_DIR = Path(__file__).parent / "templates"


class MarkerConfig(BaseModel):
    """Literal marker comments that anchor generated fragments.

    Each marker must occur exactly once in its aggregator file.
    """

    route: str = Field(
        default="// GEN:ROUTE_REGISTER - Code generator appends routes here, do not remove"
    )
    service_field: str = Field(
        default="// GEN:SERVICE_REGISTER - Code generator appends services here, do not remove"
    )
    service_init: str = Field(
        default="// GEN:SERVICE_INIT - Code generator appends initialization here, do not remove"
    )
    model_migrate: str = Field(
        default="// GEN:MODEL_MIGRATE - Code generator appends models here, do not remove"
    )


class GeneratorConfig(BaseModel):
    """Where the generator reads templates from and writes code to."""

    project_root: Path = Field(default=Path("."))
    template_dir: Path = Field(default=_BUNDLED_TEMPLATE_DIR)
    manifest_file: str = Field(default="go.mod", description="Manifest declaring the module path")
    default_module_path: str = Field(default=DEFAULT_MODULE_PATH)
    router_file: str = Field(default="internal/interfaces/http/router/router.go")
    container_file: str = Field(default="internal/container/container.go")
    markers: MarkerConfig = Field(default_factory=MarkerConfig)

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def router_path(self) -> Path:
        """Router assembly file that receives route groups."""
        return self.project_root / self.router_file

    @property
    def container_path(self) -> Path:
        """DI container file that receives services and migration models."""
        return self.project_root / self.container_file

    @property
    def manifest_path(self) -> Path:
        return self.project_root / self.manifest_file

    # ------------------------------------------------------------------
    # Module path detection
    # ------------------------------------------------------------------

    def detect_module_path(self) -> str:
        """Return the ``module <path>`` declared in the project manifest.

        Falls back to ``default_module_path`` when the manifest is missing,
        unreadable, or has no ``module`` line.
        """
        try:
            content = self.manifest_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return self.default_module_path

        for line in content.splitlines():
            if line.startswith("module "):
                module_path = line[len("module "):].strip()
                if module_path:
                    return module_path
        return self.default_module_path

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a configuration from a JSON file.

        Relative ``project_root`` values are kept as written, i.e. they are
        resolved against the current working directory.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            MODGEN_PROJECT_ROOT, MODGEN_TEMPLATE_DIR, MODGEN_MANIFEST_FILE,
            MODGEN_ROUTER_FILE, MODGEN_CONTAINER_FILE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("MODGEN_PROJECT_ROOT"):
            kwargs["project_root"] = Path(os.environ["MODGEN_PROJECT_ROOT"])
        if os.environ.get("MODGEN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["MODGEN_TEMPLATE_DIR"])
        if os.environ.get("MODGEN_MANIFEST_FILE"):
            kwargs["manifest_file"] = os.environ["MODGEN_MANIFEST_FILE"]
        if os.environ.get("MODGEN_ROUTER_FILE"):
            kwargs["router_file"] = os.environ["MODGEN_ROUTER_FILE"]
        if os.environ.get("MODGEN_CONTAINER_FILE"):
            kwargs["container_file"] = os.environ["MODGEN_CONTAINER_FILE"]
        return cls(**kwargs)
