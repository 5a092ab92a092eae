"""Generation configuration.

GenerateConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from routescribe.errors import ConfigurationError
from routescribe.frameworks import Framework


class OutputFormat(Enum):
    """Language of the generated client file."""

    TS = "ts"
    JS = "js"

    @classmethod
    def parse(cls, value: "str | OutputFormat") -> "OutputFormat":
        """Resolve ``"ts"``/``"js"`` (any case), raising ``ConfigurationError`` otherwise."""
        if isinstance(value, OutputFormat):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            msg = f"Unknown output format {value!r}; expected 'ts' or 'js'"
            raise ConfigurationError(msg) from None


@dataclass(frozen=True, slots=True)
class GenerateConfig:
    """Settings for one generation run. Immutable after creation.

    Strings are accepted for ``framework`` and ``output_format``::

        config = GenerateConfig(framework="nestjs", output_format="js", root="backend")
    """

    framework: Framework = Framework.EXPRESS
    output_format: OutputFormat = OutputFormat.TS

    # Discovery
    root: str | Path = "."
    extensions: tuple[str, ...] = (".js", ".ts")
    exclude_dirs: tuple[str, ...] = ("node_modules", "dist", "tests")

    # Concurrent file reads and extraction
    max_workers: int = 8

    log_level: str = "warning"

    def __post_init__(self) -> None:
        object.__setattr__(self, "framework", Framework.parse(self.framework))
        object.__setattr__(self, "output_format", OutputFormat.parse(self.output_format))
        if self.max_workers < 1:
            msg = f"max_workers must be at least 1, got {self.max_workers}"
            raise ConfigurationError(msg)

    @property
    def output_name(self) -> str:
        return f"api.{self.output_format.value}"

    @property
    def output_path(self) -> Path:
        return Path(self.root) / self.output_name
