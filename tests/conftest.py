"""Shared pytest fixtures for the modgen test suite.

Provides reusable fixtures for:
- Sample route and Swagger registry files
- A temporary Express project with both registries in place
- Generator configuration pointing at that project
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from modgen.config import GeneratorConfig
from modgen.naming import Identifiers, derive_identifiers


# ---------------------------------------------------------------------------
# Registry file contents
# ---------------------------------------------------------------------------

ROUTES_TS = textwrap.dedent("""\
    import { Router } from "express";
    import authRoute from "./app/modules/auth/auth.route";
    import userRoute from "./app/modules/user/user.route";

    const appRouter = Router();

    const moduleRoutes = [
        { path: "/auth", route: authRoute },
        { path: "/user", route: userRoute },
    ];

    moduleRoutes.forEach((route) => appRouter.use(route.path, route.route));

    export default appRouter;
""")

SWAGGER_OPTIONS_TS = textwrap.dedent("""\
    import path from "path";
    import { configs } from "./app/configs";
    import { authSwaggerDocs } from "./app/modules/auth/auth.swagger";
    import { userSwaggerDocs } from "./app/modules/user/user.swagger";


    export const swaggerOptions = {
        definition: {
            openapi: "3.0.0",
            info: {
                title: "API Doc",
                version: "1.0.0",
                description: "Express API with auto-generated Swagger docs",
            },
            paths: {
                ...authSwaggerDocs,
                ...userSwaggerDocs,
            },
            servers: [
                { url: "http://localhost:5000" },
            ],
            components: {
                securitySchemes: {
                    AuthorizationToken: {
                        type: "apiKey",
                        in: "header",
                        name: "Authorization",
                    },
                },
            },
        },
        apis: [path.join(__dirname, "./**/*.ts")],
    };
""")


@pytest.fixture
def routes_text() -> str:
    """Text of a typical ``src/routes.ts`` with two modules wired in."""
    return ROUTES_TS


@pytest.fixture
def swagger_text() -> str:
    """Text of a typical ``src/swaggerOptions.ts`` with two doc spreads."""
    return SWAGGER_OPTIONS_TS


# ---------------------------------------------------------------------------
# Projects & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Temporary project root containing both registry files."""
    project = tmp_path / "api"
    src = project / "src"
    (src / "app" / "modules").mkdir(parents=True)
    (src / "routes.ts").write_text(ROUTES_TS, encoding="utf-8")
    (src / "swaggerOptions.ts").write_text(SWAGGER_OPTIONS_TS, encoding="utf-8")
    yield project


@pytest.fixture
def bare_project(tmp_path: Path) -> Path:
    """Temporary project root without any registry files."""
    project = tmp_path / "bare"
    project.mkdir()
    yield project


@pytest.fixture
def project_config(tmp_project: Path) -> GeneratorConfig:
    """Default configuration rooted at ``tmp_project``."""
    return GeneratorConfig(project_root=tmp_project)


@pytest.fixture
def user_profile() -> Identifiers:
    """Identifiers for the ``userProfile`` module."""
    return derive_identifiers("userProfile")
