"""Main module-generation orchestrator.

Takes a ``ModuleSpec`` and generates one CRUD module inside an existing Go
DDD project: seven source files rendered from templates, followed by three
best-effort registration steps in the router and the DI container.

The run is a fixed pipeline with no retries and no rollback::

    render files (abort on first error)
      -> register route -> register service -> register migration
      -> report
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from .config import GeneratorConfig
from .errors import AlreadyExistsError
from .models import GenerationReport, ModuleSpec
from .registrar import ModuleRegistrar
from .templates import TemplateRenderer
from .utils import print_info, print_warning


# ---------------------------------------------------------------------------
# File plan: template -> target path (relative to the project root)
# ---------------------------------------------------------------------------

MODULE_FILES: list[tuple[str, str]] = [
    ("module/domain_entity.go.j2", "internal/domain/{snake_name}/entity.go"),
    ("module/domain_repository.go.j2", "internal/domain/{snake_name}/repository.go"),
    ("module/infra_model.go.j2", "internal/infrastructure/persistence/database/{snake_name}_model.go"),
    ("module/infra_repo.go.j2", "internal/infrastructure/persistence/database/{snake_name}_repo.go"),
    ("module/app_dto.go.j2", "internal/application/dto/{snake_name}_dto.go"),
    ("module/app_service.go.j2", "internal/application/service/{snake_name}_service.go"),
    ("module/handler.go.j2", "internal/interfaces/http/handler/{snake_name}_handler.go"),
]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ModuleGenerator:
    """Generates and registers one DDD module.

    Attributes:
        config: Where templates live and where the host project's
            aggregator files are.
        renderer: Jinja2 renderer shared by file generation and registration.
        registrar: Performs the marker-anchored insertions.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer(config.template_dir)
        self.registrar = ModuleRegistrar(config, self.renderer)

    # -- Public API --------------------------------------------------------

    def plan(self, spec: ModuleSpec) -> list[tuple[str, Path]]:
        """Return the ``(template, absolute target path)`` pairs for *spec*."""
        return [
            (template, self.config.project_root / target.format(snake_name=spec.snake_name))
            for template, target in MODULE_FILES
        ]

    def generate(self, spec: ModuleSpec) -> GenerationReport:
        """Run the whole pipeline for *spec*.

        Raises:
            AlreadyExistsError: A target file exists; nothing is written.
            TemplateReadError, TemplateSyntaxError, WriteError: Rendering
                failed.  Files written earlier in the run are kept.
        """
        report = GenerationReport(module=spec.pascal_name)

        self.render_files(spec, report)

        for step in (
            self.registrar.register_route,
            self.registrar.register_service,
            self.registrar.register_migration,
        ):
            result = step(spec)
            report.registrations.append(result)
            if result.ok:
                print_info(f"  [green]+[/green] {escape(result.message)}")
            else:
                print_warning(
                    f"  ! failed to register {result.step}: {escape(result.message)} (please add manually)"
                )

        return report

    def render_files(self, spec: ModuleSpec, report: GenerationReport) -> None:
        """Render the module's seven source files into the project."""
        plan = self.plan(spec)
        for _, target in plan:
            if target.exists():
                raise AlreadyExistsError(target)

        context = spec.as_context()
        for template, target in plan:
            self.renderer.render_to_file(template, target, context)
            relative = self._relative(target)
            report.created_files.append(relative)
            print_info(f"  [green]+[/green] {escape(relative)}")

    # -- Helpers -----------------------------------------------------------

    def _relative(self, path: Path) -> str:
        try:
            return path.relative_to(self.config.project_root).as_posix()
        except ValueError:
            return path.as_posix()
