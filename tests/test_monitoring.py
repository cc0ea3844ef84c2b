import pytest

from ent.recipes.monitoring import CpeID, Monitoring, MonitoringError

DOCUMENT = """\
releases:
  id: 1234
security:
  cpe:
    - vendor: "vendor"
      product: "product"
"""


def test_parses_documented_example():
    monitoring = Monitoring.from_str(DOCUMENT)
    assert monitoring.project_id == 1234
    assert monitoring.cpes == [CpeID(vendor="vendor", product="product")]


def test_empty_document_uses_defaults():
    monitoring = Monitoring.from_str("")
    assert monitoring.project_id == 0
    assert monitoring.cpes == []


def test_missing_sections_use_defaults():
    monitoring = Monitoring.from_str("releases:\nsecurity:\n  cpe:\n")
    assert monitoring.project_id == 0
    assert monitoring.cpes == []


def test_unknown_keys_are_ignored():
    monitoring = Monitoring.from_str("releases:\n  id: 9\n  rss: feed\nextra: 1\n")
    assert monitoring.project_id == 9


def test_invalid_yaml_raises():
    with pytest.raises(MonitoringError) as info:
        Monitoring.from_str("releases: [unclosed")
    assert str(info.value) == "Error parsing monitoring YAML"


@pytest.mark.parametrize(
    "text",
    [
        "releases:\n  id: not-a-number\n",
        "releases: 5\n",
        "security:\n  cpe: nope\n",
        "security:\n  cpe:\n    - vendor: v\n",
        "- a\n- b\n",
    ],
)
def test_wrong_shapes_raise(text):
    with pytest.raises(MonitoringError):
        Monitoring.from_str(text)