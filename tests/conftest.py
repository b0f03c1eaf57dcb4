"""Shared pytest fixtures for the modgen test suite.

Provides:
- A minimal Go host project (``go.mod``, router and container files carrying
  the generator's marker comments) in a temporary directory
- A ``GeneratorConfig`` rooted at that project
- The default ``ModuleSpec`` for an ``order`` module
"""

from __future__ import annotations

from pathlib import Path

import pytest

from modgen.config import GeneratorConfig
from modgen.models import ModuleSpec


# ---------------------------------------------------------------------------
# Host project sources
# ---------------------------------------------------------------------------

GO_MOD = """\
module github.com/acme/shop

go 1.22

require github.com/gin-gonic/gin v1.10.0
"""

ROUTER_GO = """\
package router

import (
	"github.com/acme/shop/internal/container"
	"github.com/acme/shop/internal/interfaces/http/handler"

	"github.com/gin-gonic/gin"
)

// Setup initializes the HTTP router
func Setup(c *container.Container) *gin.Engine {
	r := gin.New()

	v1 := r.Group("/api/v1")
	{
		authorized := v1.Group("")
		authorized.Use(handler.AuthMiddleware(&c.Config.JWT))
		{
			// Example module
			exampleHandler := handler.NewExampleHandler(c.ExampleService)
			examples := authorized.Group("/examples")
			{
				examples.GET("", exampleHandler.List)
			}

			// GEN:ROUTE_REGISTER - Code generator appends routes here, do not remove
		}
	}

	return r
}
"""

CONTAINER_GO = """\
package container

import (
	"github.com/acme/shop/internal/application/service"
	"github.com/acme/shop/internal/infrastructure/persistence/database"
)

// Container manages dependency injection
type Container struct {
	DB *database.DB

	// Application services
	ExampleService *service.ExampleAppService
	// GEN:SERVICE_REGISTER - Code generator appends services here, do not remove
}

// New creates and initializes the container
func New(db *database.DB) (*Container, error) {
	c := &Container{DB: db}

	if err := db.AutoMigrate(
		&database.UserModel{},
		&database.ExampleModel{},
		// GEN:MODEL_MIGRATE - Code generator appends models here, do not remove
	); err != nil {
		return nil, err
	}

	exampleRepo := database.NewExampleRepository(db)

	c.ExampleService = service.NewExampleAppService(exampleRepo)
	// GEN:SERVICE_INIT - Code generator appends initialization here, do not remove

	return c, nil
}
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def go_project(tmp_path: Path) -> Path:
    """Temporary Go project with go.mod, router.go and container.go."""
    root = tmp_path / "shop"
    router = root / "internal" / "interfaces" / "http" / "router" / "router.go"
    container = root / "internal" / "container" / "container.go"
    router.parent.mkdir(parents=True)
    container.parent.mkdir(parents=True)
    (root / "go.mod").write_text(GO_MOD, encoding="utf-8")
    router.write_text(ROUTER_GO, encoding="utf-8")
    container.write_text(CONTAINER_GO, encoding="utf-8")
    yield root


@pytest.fixture
def config(go_project: Path) -> GeneratorConfig:
    """GeneratorConfig rooted at the temporary Go project."""
    return GeneratorConfig(project_root=go_project)


@pytest.fixture
def order_spec() -> ModuleSpec:
    return ModuleSpec(raw_name="order", display_name="Order", module_path="github.com/acme/shop")
