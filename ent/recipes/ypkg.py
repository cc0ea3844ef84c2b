"""Parser for package.yml recipes."""

from __future__ import annotations

from pathlib import Path

import yaml

from ent.recipes.monitoring import Monitoring, MonitoringError
from ent.recipes.parser import (
    InvalidRecipeError,
    ParserRegistration,
    Recipe,
    RecipeParser,
    StrPath,
)

_MONITOR_NAMES = ("monitoring.yaml", "monitoring.yml")


class YpkgParser(RecipeParser):
    """Parses a package.yml recipe and an adjacent monitoring file, if any."""

    def parse(self, recipe: StrPath) -> Recipe:
        path = Path(recipe)
        try:
            document = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise InvalidRecipeError(str(path)) from exc

        if not isinstance(document, dict):
            raise InvalidRecipeError(str(path))
        name, version = document.get("name"), document.get("version")
        if not isinstance(name, str) or not isinstance(version, str):
            raise InvalidRecipeError(str(path))

        monitor = next(
            (p for p in (path.with_name(n) for n in _MONITOR_NAMES) if p.exists()),
            None,
        )
        monitoring = None
        if monitor is not None:
            try:
                text = monitor.read_text(encoding="utf-8")
            except OSError as exc:
                raise InvalidRecipeError(str(monitor)) from exc
            try:
                monitoring = Monitoring.from_str(text)
            except MonitoringError:
                monitoring = None

        return Recipe(name=name, version=version, monitoring=monitoring)


REGISTRATION = ParserRegistration(
    name="ypkg_recipe",
    parser=YpkgParser,
    patterns=("*/package.yml",),
)