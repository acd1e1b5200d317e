"""
User defaults for book options.

Loads an INI file whose ``[options]`` section holds ``key = value`` pairs
and applies them to a ``BookOptions`` store through ``set``, so every value
is validated against the schema exactly like any other write.

Configuration file priority:
1. BOOKOPTIONS_CONFIG environment variable path
2. XDG config directory: ~/.config/bookoptions/bookoptions.ini
3. Home directory: ~/.bookoptions.ini
4. Current directory: ./bookoptions.ini
"""

import logging
import os
from configparser import ConfigParser, Error as ConfigParserError
from pathlib import Path

from platformdirs import user_config_dir

from .console import console
from .options import BookOptions
from .schema.core import OptionDefinition
from .schema.parser import schema_entries
from .shared.errors import BookOptionsError, ConfigError

logger = logging.getLogger(__name__)

SECTION = "options"
ENV_VAR = "BOOKOPTIONS_CONFIG"


def _generate_config_template_from_schema() -> str:
    """Generate a commented configuration template directly from schema."""
    lines = [
        "# bookoptions user defaults",
        "# Values set here override the built-in defaults for every book",
        "# Uncomment a line to change its value",
        "",
        f"[{SECTION}]",
    ]

    for entry in schema_entries():
        if not isinstance(entry, OptionDefinition):
            lines.append("")
            lines.append(f"## {entry.title.strip()}")
            continue
        lines.append(f"# {entry.comment.strip()} ({entry.option_type.display_name})")
        lines.append(f"# {entry.key} = {entry.default or ''}".rstrip())

    return "\n".join(lines).rstrip() + "\n"


class UserConfig:
    """Locates and applies the user defaults file."""

    def __init__(self):
        self.config = ConfigParser(interpolation=None)
        self.config.optionxform = str  # option keys are case-sensitive
        self.config_path: Path | None = None

    def get_config_paths(self) -> list[Path]:
        """Return configuration file paths in priority order."""
        paths = []

        env_config = os.environ.get(ENV_VAR)
        if env_config:
            paths.append(Path(env_config))

        paths.append(self.get_default_config_path())
        paths.append(Path.home() / ".bookoptions.ini")
        paths.append(Path("./bookoptions.ini"))

        return paths

    def get_default_config_path(self) -> Path:
        """Get the default configuration file path (XDG config directory)."""
        return Path(user_config_dir("bookoptions", "bookoptions")) / "bookoptions.ini"

    def find_config_file(self) -> Path | None:
        """Find the first existing configuration file."""
        for path in self.get_config_paths():
            if path.exists() and path.is_file():
                return path
        return None

    def load_config(self, verbose: bool = False) -> bool:
        """
        Load configuration from file.

        Returns:
            bool: True if config file was found and loaded, False otherwise.
        """
        config_path = self.find_config_file()
        if not config_path:
            if verbose:
                console.print("[dim]No configuration file found, using defaults[/dim]")
            return False

        try:
            self.config.read(config_path, encoding="utf-8")
        except (ConfigParserError, UnicodeDecodeError) as e:
            raise ConfigError(
                f"Error reading configuration file {config_path}: {e}", details={"path": str(config_path)}
            ) from e

        self.config_path = config_path
        logger.info("Loaded user defaults from %s", config_path)
        if verbose:
            console.print(f"[dim]Loaded configuration from: {config_path}[/dim]")
        return True

    def pairs(self) -> list[tuple[str, str]]:
        """Return the ``key = value`` pairs of the options section, in file order."""
        if not self.config.has_section(SECTION):
            return []
        return list(self.config.items(SECTION, raw=True))

    def apply(self, options: BookOptions) -> list[str]:
        """
        Apply loaded pairs to ``options``.

        Returns:
            List[str]: Keys that were applied.

        Raises:
            ConfigError: If any pair was rejected. Valid pairs are still applied.
        """
        applied = []
        errors = []
        for key, value in self.pairs():
            try:
                options.set(key, value)
            except BookOptionsError as e:
                errors.append(str(e))
                continue
            applied.append(key)

        if errors:
            raise ConfigError(
                "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in errors),
                details={"path": str(self.config_path), "errors": errors},
            )
        return applied

    def create_default_config(self, path: Path | None = None) -> Path:
        """
        Create a default configuration file.

        Args:
            path: Path to create config file. If None, uses default location.

        Returns:
            Path: The path where the config file was created.
        """
        if path is None:
            path = self.get_default_config_path()

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(_generate_config_template_from_schema())

        return path


def load_user_defaults(options: BookOptions, verbose: bool = False) -> UserConfig:
    """
    Load the user defaults file, if any, and apply it to ``options``.

    Raises:
        ConfigError: If the file is malformed or holds invalid values
    """
    config = UserConfig()
    if config.load_config(verbose=verbose):
        config.apply(options)
    return config
