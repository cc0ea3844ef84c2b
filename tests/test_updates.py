import httpx
import pytest
import respx

from ent.data.updates import VERSIONS_URL, VersionResponse, get_latest_version


def test_from_dict_defaults():
    response = VersionResponse.from_dict({"latest_version": None})
    assert response.latest_version is None
    assert response.stable_versions == []
    assert response.versions == []


def test_preferred_version_prefers_stable():
    response = VersionResponse.from_dict(
        {"latest_version": "2.0rc1", "stable_versions": ["1.9", "1.8"], "versions": ["2.0rc1", "1.9"]}
    )
    assert response.preferred_version() == "1.9"


def test_preferred_version_falls_back_to_latest():
    response = VersionResponse.from_dict({"latest_version": "2.0rc1", "versions": ["0.1"]})
    assert response.preferred_version() == "2.0rc1"


def test_preferred_version_falls_back_to_first_version():
    response = VersionResponse.from_dict({"versions": ["0.3", "0.2"]})
    assert response.preferred_version() == "0.3"


def test_preferred_version_none_when_empty():
    assert VersionResponse.from_dict({}).preferred_version() is None


def test_from_dict_rejects_wrong_types():
    with pytest.raises(ValueError):
        VersionResponse.from_dict({"versions": "1.0"})
    with pytest.raises(ValueError):
        VersionResponse.from_dict({"latest_version": 3})


@pytest.mark.asyncio
async def test_get_latest_version_with_client():
    with respx.mock:
        route = respx.get(VERSIONS_URL, params={"project_id": "1234"}).mock(
            return_value=httpx.Response(
                200, json={"latest_version": "5.1", "stable_versions": ["5.0"], "versions": ["5.1", "5.0"]}
            )
        )
        async with httpx.AsyncClient() as client:
            response = await get_latest_version(1234, client)
    assert route.called
    assert response.latest_version == "5.1"
    assert response.preferred_version() == "5.0"


@pytest.mark.asyncio
async def test_get_latest_version_without_client():
    with respx.mock:
        route = respx.get(VERSIONS_URL, params={"project_id": "7"}).mock(
            return_value=httpx.Response(200, json={"versions": ["0.9"]})
        )
        response = await get_latest_version(7)
    assert route.call_count == 1
    assert response.versions == ["0.9"]