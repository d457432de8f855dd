import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from party.model import Category, Visitor

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigError(ValueError):
    """Raised when a party configuration cannot be turned into a PartyConfig."""


@dataclass
class PartyConfig:
    just_nice: bool = False
    greeting: str = "Hello, {name}!"
    log_level: str = "WARNING"
    guests: dict[Category, list[Visitor]] = field(
        default_factory=lambda: {category: [] for category in Category}
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PartyConfig":
        """Build a PartyConfig from the ``[party]`` table of a ``party.toml``.

        Keys named after a category (``nice``, ``not_nice``) hold arrays of
        ``{name, surname}`` tables. Any other array-of-tables key is rejected,
        as is a category key holding anything but an array.
        """
        guests: dict[Category, list[Visitor]] = {category: [] for category in Category}
        settings: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(value, list):
                try:
                    category = Category.parse(key)
                except ValueError as e:
                    raise ConfigError(str(e)) from e
                guests[category] = _parse_visitors(category, value)
                continue
            try:
                category = Category.parse(key)
            except ValueError:
                settings[key] = value
                continue
            raise ConfigError(f"{category.value} must be an array of tables, got {value!r}")

        just_nice = settings.get("just_nice", False)
        if not isinstance(just_nice, bool):
            raise ConfigError(f"just_nice must be a boolean, got {just_nice!r}")

        greeting = str(settings.get("greeting", cls.greeting))
        try:
            greeting.format(name="")
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            raise ConfigError(f"greeting is not a valid template: {greeting!r} ({e!r})") from e

        log_level = str(settings.get("log_level", cls.log_level)).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        return cls(
            just_nice=just_nice,
            greeting=greeting,
            log_level=log_level,
            guests=guests,
        )


def _parse_visitors(category: Category, entries: list[Any]) -> list[Visitor]:
    visitors = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigError(f"{category.value}[{i}] must be a table, got {entry!r}")
        try:
            visitors.append(Visitor(**entry))
        except ValidationError as e:
            raise ConfigError(f"{category.value}[{i}] is not a valid visitor: {e}") from e
    return visitors


def load_party_toml(path: str | None = None) -> dict[str, Any]:
    """Load a ``party.toml`` configuration file.

    Searches (in order):
    1. The explicit ``path`` argument.
    2. ``$PARTY_CONFIG`` environment variable.
    3. ``party.toml`` in the current working directory.

    Returns an empty dict (plus environment overrides) if no file is found.

    Environment variables prefixed with ``PARTY_`` override TOML values (e.g.
    ``PARTY_JUST_NICE=1``).
    """
    candidates = [
        path,
        os.getenv("PARTY_CONFIG"),
        "party.toml",
    ]
    for candidate in candidates:
        if candidate and os.path.exists(candidate):
            try:
                with open(candidate, "rb") as fh:
                    data = tomllib.load(fh)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"{candidate}: {e}") from e
            result: dict[str, Any] = data.get("party", {})
            _apply_env_overrides(result)
            return result

    if path:
        raise ConfigError(f"Config file not found: {path}")

    result = {}
    _apply_env_overrides(result)
    return result


def _apply_env_overrides(cfg: dict[str, Any]) -> None:
    """Apply ``PARTY_*`` environment variables on top of cfg dict (in-place)."""
    _BOOL_KEYS = {"just_nice"}

    for env_key, env_val in os.environ.items():
        if not env_key.startswith("PARTY_") or env_key == "PARTY_CONFIG":
            continue
        cfg_key = env_key[len("PARTY_"):].lower()
        if cfg_key in _BOOL_KEYS:
            cfg[cfg_key] = env_val.lower() in ("1", "true", "yes")
        else:
            cfg[cfg_key] = env_val


def load_config(path: str | None = None) -> PartyConfig:
    return PartyConfig.from_dict(load_party_toml(path))
