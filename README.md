# ent

`ent` is a command-line tool for working with a tree of package recipes.
It finds recipes that have fallen behind their upstream releases, and it
lists the builds known to the build dashboard.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `ent check updates`

Walks the current directory recursively, in name order, and parses every
`stone.yaml` recipe it finds. For each recipe with a `monitoring.yaml` next to
it that gives a non-zero release id, the upstream versions are fetched from
the release-monitoring service, at most 32 requests at a time, with a
progress bar shown while they run.

The upstream version is picked in this order: the first stable version, then
the reported latest version, then the first version listed. VCS suffixes
(`+git`, `+vcs`, `+mur`) are cut from the local version before comparing. Every
recipe whose version differs is shown in a table sorted by name. The new
version is coloured yellow for a minor or patch bump, red for a major bump or
when either version is not semver, and grey when the local version is already
the same or newer.

### `ent builds`

Fetches the first four pages of tasks from the build dashboard and prints
them: tasks that are building first, then new ones, then the rest. Build ids
are shortened to their last path component and cut to 50 characters.

On a recipe, network or data error, both commands print `Error: ...` to
standard error and exit with status 1.

## Recipe formats

- `stone.yaml`, read by `ent.recipes.stone.StoneParser`. It takes the
  top-level `name` and `version`. An invalid adjacent `monitoring.yaml` raises
  `InvalidMonitoringError`.
- `package.yml`, read by `ent.recipes.ypkg.YpkgParser`. It takes `name` and
  `version`, and looks for `monitoring.yaml` then `monitoring.yml`. An
  unparsable monitoring file is ignored.

The command line uses only the stone parser. Both parsers are available for
library use through their `REGISTRATION` values.

A monitoring file looks like this:

```yaml
releases:
  id: 1234
security:
  cpe:
    - vendor: "vendor"
      product: "product"
```

## Library use

```python
from ent.cli import scan_recipes, split_before_delimiters
from ent.recipes import stone, ypkg
from ent.recipes.monitoring import Monitoring

recipes = scan_recipes(".", [stone.REGISTRATION, ypkg.REGISTRATION])
monitoring = Monitoring.from_str("releases:\n  id: 42\n")
assert monitoring.project_id == 42
assert split_before_delimiters("1.2.3+git20240101", ("+git",)) == "1.2.3"
```

Other pieces:

- `ent.data.updates.get_latest_version(project_id, client=None)` is a
  coroutine that returns a `VersionResponse`, whose `preferred_version()`
  applies the order described above.
- `ent.data.summit` holds `Task`, `TaskEnumerateResponse` and `BuildStatus`.
  Unknown status codes map to `FAILED`.
- `ent.data.nvd` holds dataclasses for NVD CVE JSON feeds (`CveData` and the
  types it contains), each with `from_dict` and `to_dict`.
- `ent.cli.format_updates` and `ent.cli.format_builds` render the tables as
  strings.

## What it does not do

There is no security check. The CVE data types can be loaded and dumped, but
nothing matches them against recipes. There is also no local cache and no
command to refresh one. Every run fetches its data afresh.