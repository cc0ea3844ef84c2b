"""Command-line tool for working with recipe trees."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

import httpx
import semver
from termcolor import colored
from tqdm import tqdm

from ent.data.summit import BuildStatus, Task, TaskEnumerateResponse
from ent.data.updates import VersionResponse, get_latest_version
from ent.recipes import stone
from ent.recipes.parser import ParserRegistration, Recipe, RecipeError, StrPath

VCS_DELIMITERS = ("+git", "+vcs", "+mur")
DEFAULT_REGISTRATIONS: tuple[ParserRegistration, ...] = (stone.REGISTRATION,)
TASKS_URL = "https://dash.serpentos.com/api/v1/tasks/enumerate"
BUILD_PAGES = range(4)
MAX_CONCURRENT_REQUESTS = 32

_ID_WIDTH = 8
_PKG_WIDTH = 50
_DEFAULT_ARCH_WIDTH = 10
_STATUS_WIDTH = 10
_MAX_BUILD_ID = 50

_STATUS_COLORS = {
    BuildStatus.NEW: "cyan",
    BuildStatus.FAILED: "red",
    BuildStatus.BUILDING: "yellow",
    BuildStatus.PUBLISHING: "blue",
    BuildStatus.COMPLETED: "green",
    BuildStatus.BLOCKED: "red",
}

_FAILURES = (RecipeError, OSError, httpx.HTTPError, ValueError, KeyError, TypeError)


@dataclass(frozen=True)
class RequiredUpdate:
    """A recipe whose upstream version differs from the packaged one."""

    source: str
    current_version: str
    latest_version: str


def _bold(text: str) -> str:
    return colored(text, attrs=["bold"])


def scan_dir(root: StrPath, registrations: Sequence[ParserRegistration]) -> list[Recipe]:
    """Recursively parse every file under root that a registration matches."""
    with os.scandir(root) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)

    recipes: list[Recipe] = []
    for entry in ordered:
        path = Path(entry.path)
        if path.is_dir():
            recipes.extend(scan_dir(path, registrations))
        else:
            recipes.extend(
                registration.parser().parse(path)
                for registration in registrations
                if registration.matches(path)
            )
    return recipes


def scan_recipes(
    root: StrPath, registrations: Optional[Iterable[ParserRegistration]] = None
) -> list[Recipe]:
    """Scan a recipe tree with the given parsers, one per parser name."""
    chosen = DEFAULT_REGISTRATIONS if registrations is None else registrations
    unique = list({registration.name: registration for registration in chosen}.values())
    return scan_dir(root, unique)


def split_before_delimiters(text: str, delimiters: Iterable[str]) -> str:
    """The part of text before the earliest occurrence of any delimiter."""
    positions = [pos for pos in (text.find(d) for d in delimiters) if pos >= 0]
    return text[: min(positions)] if positions else text


def required_update(recipe: Recipe, response: VersionResponse) -> Optional[RequiredUpdate]:
    """The update a recipe needs according to upstream, or None."""
    next_version = response.preferred_version()
    if next_version is None:
        return None
    current = split_before_delimiters(recipe.version, VCS_DELIMITERS)
    if next_version == current:
        return None
    return RequiredUpdate(source=recipe.name, current_version=current, latest_version=next_version)


def latest_version_color(current: str, latest: str) -> str:
    """Colour name for the latest version, judged by semantic versioning."""
    try:
        current_version = semver.Version.parse(current)
        latest_version = semver.Version.parse(latest)
    except ValueError:
        return "red"
    if current_version >= latest_version:
        return "dark_grey"
    if latest_version.major > current_version.major:
        return "red"
    return "yellow"


def format_updates(updates: Iterable[RequiredUpdate]) -> str:
    """Render the update table, sorted by source name."""
    ordered = sorted(updates, key=lambda update: update.source)
    source_width = max((len(u.source) for u in ordered), default=0)
    current_width = max((len(u.current_version) for u in ordered), default=0)
    latest_width = max((len(u.latest_version) for u in ordered), default=0)
    widths = (source_width, current_width, latest_width)

    lines = [
        "",
        f"Total packages to update: {colored(str(len(ordered)), 'yellow')}",
        "",
        " ".join(_bold(title.ljust(width)) for title, width in zip(("Package", "Current", "Latest"), widths)),
        " ".join("-" * width for width in widths),
    ]
    for update in ordered:
        color = latest_version_color(update.current_version, update.latest_version)
        lines.append(
            " ".join(
                (
                    colored(update.source.ljust(source_width), "cyan"),
                    colored(update.current_version.ljust(current_width), "green"),
                    colored(update.latest_version.ljust(latest_width), color),
                )
            )
        )
    return "\n".join(lines)


def format_task(task: Task, id_width: int, pkg_width: int, arch_width: int) -> str:
    """Render one build task as a table row."""
    build_id = task.build_id.split("/")[-1]
    if len(build_id) > _MAX_BUILD_ID:
        build_id = build_id[: _MAX_BUILD_ID - 3] + "..."
    status = task.status.name.capitalize()
    return " ".join(
        (
            _bold(str(task.id).rjust(id_width)),
            colored(build_id.ljust(pkg_width), "cyan"),
            task.architecture.ljust(arch_width),
            colored(status, _STATUS_COLORS[task.status], attrs=["bold"]),
        )
    )


def format_builds(tasks: Iterable[Task]) -> str:
    """Render the build table: building first, then new, then the rest."""
    tasks = list(tasks)
    arch_width = max((len(t.architecture) for t in tasks), default=_DEFAULT_ARCH_WIDTH)
    widths = (_ID_WIDTH, _PKG_WIDTH, arch_width, _STATUS_WIDTH)

    header = " ".join(
        (
            _bold("ID".rjust(_ID_WIDTH)),
            _bold("Package".ljust(_PKG_WIDTH)),
            _bold("Arch".ljust(arch_width)),
            _bold("Status".ljust(_STATUS_WIDTH)),
        )
    )
    lines = ["", header, " ".join("-" * width for width in widths)]

    building = [t for t in tasks if t.status is BuildStatus.BUILDING]
    new = [t for t in tasks if t.status is BuildStatus.NEW]
    rest = [t for t in tasks if t.status not in (BuildStatus.BUILDING, BuildStatus.NEW)]
    lines.extend(format_task(t, _ID_WIDTH, _PKG_WIDTH, arch_width) for t in building + new + rest)
    return "\n".join(lines)


async def check_updates(root: StrPath) -> list[RequiredUpdate]:
    """Compare recipes under root with upstream versions and print the result."""
    recipes = scan_recipes(root)
    semaphore = asyncio.Semaphore(MAX_CONCURRENT_REQUESTS)

    async with httpx.AsyncClient() as client:
        with tqdm(total=len(recipes), leave=False, unit="recipe") as bar:

            async def check(recipe: Recipe) -> Optional[RequiredUpdate]:
                async with semaphore:
                    bar.set_postfix_str(recipe.name)
                    monitoring = recipe.monitoring
                    result = None
                    if monitoring is not None and monitoring.project_id != 0:
                        response = await get_latest_version(monitoring.project_id, client)
                        result = required_update(recipe, response)
                    bar.update(1)
                    return result

            results = await asyncio.gather(*(check(recipe) for recipe in recipes))

    updates = sorted((u for u in results if u is not None), key=lambda u: u.source)
    print(format_updates(updates))
    return updates


async def list_builds() -> list[Task]:
    """Fetch recent build tasks from the dashboard and print them."""
    tasks: list[Task] = []
    async with httpx.AsyncClient() as client:
        for page in BUILD_PAGES:
            response = await client.get(TASKS_URL, params={"pageNumber": page})
            tasks.extend(TaskEnumerateResponse.from_dict(response.json()).items)
    print(format_builds(tasks))
    return tasks


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ent", description="A simple CLI tool for working with recipe trees"
    )
    commands = parser.add_subparsers(dest="command", required=True)
    check = commands.add_parser("check", help="Check for updates")
    check_commands = check.add_subparsers(dest="check_command", required=True)
    check_commands.add_parser("updates", help="Check for updates")
    commands.add_parser("builds", help="List recent builds from the build dashboard")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "check":
            print("Checking for updates...")
            asyncio.run(check_updates("."))
        else:
            asyncio.run(list_builds())
    except _FAILURES as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())