"""modgen -- scaffolds DDD CRUD modules into a Go web service.

Renders entity, repository, persistence model, repository implementation,
DTO, application service and HTTP handler files from Jinja2 templates, then
registers the new module in the router and the DI container by inserting
fragments before marker comments.

Quick usage::

    from modgen import GeneratorConfig, ModuleGenerator, ModuleSpec

    config = GeneratorConfig(project_root=Path("./service"))
    spec = ModuleSpec(raw_name="order", display_name="Order",
                      module_path=config.detect_module_path())
    report = ModuleGenerator(config).generate(spec)
"""

from modgen.config import GeneratorConfig, MarkerConfig
from modgen.generator import ModuleGenerator
from modgen.models import GenerationReport, ModuleSpec, RegistrationResult
from modgen.templates import TemplateRenderer

__all__ = [
    "GenerationReport",
    "GeneratorConfig",
    "MarkerConfig",
    "ModuleGenerator",
    "ModuleSpec",
    "RegistrationResult",
    "TemplateRenderer",
]
