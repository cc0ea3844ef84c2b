"""Recipe model, parser interface and parser registrations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from fnmatch import fnmatchcase
from os import PathLike
from pathlib import PurePath
from typing import Callable, Optional, Union

from ent.recipes.monitoring import Monitoring, MonitoringError

StrPath = Union[str, "PathLike[str]"]


@dataclass
class Recipe:
    """Source recipe details."""

    name: str
    version: str
    monitoring: Optional[Monitoring] = None


class RecipeError(Exception):
    """Base class for recipe parsing errors."""


class InvalidRecipeError(RecipeError):
    """The recipe file could not be read or understood."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Recipe is invalid {path}")
        self.path = path


class InvalidMonitoringError(RecipeError):
    """The monitoring file next to a recipe is invalid."""

    def __init__(self, error: MonitoringError, path: str) -> None:
        super().__init__(f"Monitoring data '{path}' is invalid")
        self.error = error
        self.path = path


class UnsupportedRecipeError(RecipeError):
    """The recipe format is not supported."""

    def __init__(self) -> None:
        super().__init__("Recipe is unsupported")


class RecipeParser(ABC):
    """Interface every recipe parser implements."""

    @abstractmethod
    def parse(self, recipe: StrPath) -> Recipe:
        """Parse the recipe at the given path."""


@dataclass(frozen=True)
class ParserRegistration:
    """A named parser factory and the path patterns it handles."""

    name: str
    parser: Callable[[], RecipeParser]
    patterns: tuple[str, ...]

    def matches(self, path: StrPath) -> bool:
        """Whether the path matches any of this parser's patterns."""
        text = PurePath(path).as_posix()
        return any(fnmatchcase(text, pattern) for pattern in self.patterns)