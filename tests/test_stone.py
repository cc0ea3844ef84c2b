import pytest

from ent.recipes.parser import InvalidMonitoringError, InvalidRecipeError
from ent.recipes.stone import REGISTRATION, StoneParser

RECIPE = """\
name        : nano
version     : 8.0.1
release     : 3
summary     : Small editor
"""


def _write(directory, name, text):
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_parses_name_and_version(tmp_path):
    recipe = StoneParser().parse(_write(tmp_path, "stone.yaml", RECIPE))
    assert recipe.name == "nano"
    assert recipe.version == "8.0.1"
    assert recipe.monitoring is None


def test_reads_adjacent_monitoring(tmp_path):
    _write(tmp_path, "monitoring.yaml", "releases:\n  id: 2046\n")
    recipe = StoneParser().parse(_write(tmp_path, "stone.yaml", RECIPE))
    assert recipe.monitoring.project_id == 2046


def test_invalid_monitoring_raises(tmp_path):
    monitor = _write(tmp_path, "monitoring.yaml", "releases: [broken")
    with pytest.raises(InvalidMonitoringError) as info:
        StoneParser().parse(_write(tmp_path, "stone.yaml", RECIPE))
    assert info.value.path == str(monitor)


def test_missing_file_is_invalid_recipe(tmp_path):
    missing = tmp_path / "stone.yaml"
    with pytest.raises(InvalidRecipeError) as info:
        StoneParser().parse(missing)
    assert info.value.path == str(missing)


@pytest.mark.parametrize("text", ["name: nano\n", "- a\n", "name: [x\n", "name: nano\nversion: 2.0\n"])
def test_malformed_recipe_raises(tmp_path, text):
    with pytest.raises(InvalidRecipeError):
        StoneParser().parse(_write(tmp_path, "stone.yaml", text))


def test_registration(tmp_path):
    path = _write(tmp_path, "stone.yaml", RECIPE)
    assert REGISTRATION.name == "stone_recipe"
    assert REGISTRATION.matches(path)
    assert not REGISTRATION.matches(tmp_path / "package.yml")
    assert REGISTRATION.parser().parse(path).name == "nano"