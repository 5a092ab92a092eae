"""routescribe — generate a typed API client from backend route declarations.

Scans JavaScript/TypeScript backends (Express, Fastify, Koa, Hono,
Elysia, AdonisJS, NestJS) for route declarations, infers one client
method per route grouped by resource, and writes an axios client.

Basic usage::

    from routescribe import GenerateConfig, generate_api

    generate_api(GenerateConfig(framework="express", output_format="ts"))

The engine also works on in-memory text::

    from routescribe import build_structure, extract_routes

    routes = extract_routes('router.get("/users/:id", show)', "express")
    structure = build_structure(routes)
    structure["users"][0].name  # "getByUserId"
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Framework",
    "GenerateConfig",
    "GenerationResult",
    "HttpVerb",
    "MethodEntry",
    "OutputFormat",
    "RouteRecord",
    "RouteScribeError",
    "Structure",
    "UnsupportedFramework",
    "build_structure",
    "extract_routes",
    "generate_api",
    "render_client",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routescribe`` fast while providing a clean top-level API.
    """
    if name in ("GenerateConfig", "OutputFormat"):
        from routescribe import config as _config

        return getattr(_config, name)

    if name == "Framework":
        from routescribe.frameworks import Framework

        return Framework

    if name in ("HttpVerb", "MethodEntry", "RouteRecord"):
        from routescribe.routing import route as _route

        return getattr(_route, name)

    if name == "extract_routes":
        from routescribe.extraction import extract_routes

        return extract_routes

    if name in ("Structure", "build_structure"):
        from routescribe import structure as _structure

        return getattr(_structure, name)

    if name == "render_client":
        from routescribe.templating import render_client

        return render_client

    if name in ("GenerationResult", "generate_api"):
        from routescribe import generate as _generate

        return getattr(_generate, name)

    if name in ("ConfigurationError", "RouteScribeError", "UnsupportedFramework"):
        from routescribe import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
