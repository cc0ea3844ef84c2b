"""Parser for stone.yaml recipes."""

from __future__ import annotations

from pathlib import Path

import yaml

from ent.recipes.monitoring import Monitoring, MonitoringError
from ent.recipes.parser import (
    InvalidMonitoringError,
    InvalidRecipeError,
    ParserRegistration,
    Recipe,
    RecipeParser,
    StrPath,
)


def _read_or_empty(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError:
        return ""


class StoneParser(RecipeParser):
    """Parses a stone recipe and an adjacent monitoring.yaml, if any."""

    def parse(self, recipe: StrPath) -> Recipe:
        path = Path(recipe)
        try:
            document = yaml.safe_load(_read_or_empty(path))
        except yaml.YAMLError as exc:
            raise InvalidRecipeError(str(path)) from exc

        if not isinstance(document, dict):
            raise InvalidRecipeError(str(path))
        name, version = document.get("name"), document.get("version")
        if not isinstance(name, str) or not isinstance(version, str):
            raise InvalidRecipeError(str(path))

        monitor = path.with_name("monitoring.yaml")
        monitoring = None
        if monitor.exists():
            try:
                monitoring = Monitoring.from_str(_read_or_empty(monitor))
            except MonitoringError as exc:
                raise InvalidMonitoringError(exc, str(monitor)) from exc

        return Recipe(name=name, version=version, monitoring=monitoring)


REGISTRATION = ParserRegistration(
    name="stone_recipe",
    parser=StoneParser,
    patterns=("*/stone.yaml",),
)