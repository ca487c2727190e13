"""Config parser use case for casefold."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

from casefold.domain.exceptions import CasefoldConfigError

if TYPE_CHECKING:
    from casefold.domain.settings import CasefoldSettings

# Keys accepted inside the casefold block
_KNOWN_KEYS = frozenset({"mode", "root", "exclude", "header_name", "enabled"})


class ConfigParser:
    """Parses casefold YAML configuration to settings.

    Accepts either a document with a top-level 'casefold' mapping or the
    mapping itself:

        casefold:
          mode: fold
          exclude:
            - /api/CaseSensitive/*
            - /downloads/*.ZIP
    """

    def parse(self, yaml_str: str) -> "CasefoldSettings":
        """Parse casefold YAML config to settings.

        Args:
            yaml_str: YAML string representing casefold configuration

        Returns:
            CasefoldSettings domain object

        Raises:
            CasefoldConfigError: If YAML is invalid or contains unknown keys
        """
        try:
            config = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise CasefoldConfigError(f"Invalid YAML: {e}") from e

        if config is None:
            config = {}

        if not isinstance(config, dict):
            raise CasefoldConfigError("Config must be a dictionary")

        if "casefold" in config:
            config = config["casefold"] or {}
            if not isinstance(config, dict):
                raise CasefoldConfigError("casefold section must be a dictionary")

        return self.parse_mapping(config)

    def parse_mapping(self, config: dict[str, Any]) -> "CasefoldSettings":
        """Build settings from an already-loaded casefold mapping.

        Args:
            config: Mapping with snake_case keys

        Returns:
            CasefoldSettings domain object

        Raises:
            CasefoldConfigError: If the mapping contains unknown keys or
                invalid values
        """
        unknown = set(config) - _KNOWN_KEYS
        if unknown:
            raise CasefoldConfigError(
                f"Unknown casefold settings: {', '.join(sorted(map(str, unknown)))}"
            )

        # Import here to avoid circular dependency
        from casefold.factories import load_settings

        return load_settings(**config)
