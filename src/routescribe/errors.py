"""routescribe exception hierarchy.

Shared across configuration, extraction, and the CLI so every module
raises and catches the same types.

Only configuration problems are errors. Source text that does not look
like a route declaration is never an error: the extractor simply
produces fewer routes.
"""

from dataclasses import dataclass


class RouteScribeError(Exception):
    """Base for all routescribe-specific errors."""


class ConfigurationError(RouteScribeError):
    """Raised when generation settings are invalid.

    Typically raised while building a ``GenerateConfig`` or when the
    scan root does not exist.
    """


@dataclass(frozen=True, slots=True)
class UnsupportedFramework(ConfigurationError):  # noqa: N818
    """The framework identifier is not one of the supported names.

    A caller contract violation: reported immediately, never recovered.
    """

    name: str
    supported: tuple[str, ...] = ()

    def __str__(self) -> str:
        if self.supported:
            return (
                f"Unsupported framework {self.name!r}. "
                f"Supported: {', '.join(self.supported)}"
            )
        return f"Unsupported framework {self.name!r}"
