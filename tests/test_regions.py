import pytest
import responses

from linodeapi.client import APIError, Client
from linodeapi.regions import Region, RegionResolvers, get_region, list_regions

BASE = "https://api.example.com/v4"

REGION = {
    "id": "us-east",
    "country": "us",
    "capabilities": ["Linodes", "Block Storage"],
    "status": "ok",
    "resolvers": {"ipv4": "192.0.2.1", "ipv6": "2001:db8::1"},
    "label": "Newark, NJ",
}


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    c = Client(token="token", base_url=BASE)
    c.set_poll_delay(0)
    return c


def _page(items):
    return {"data": items, "page": 1, "pages": 1, "results": len(items)}


def test_from_dict():
    region = Region.from_dict(REGION)
    assert region.id == "us-east"
    assert region.capabilities == ["Linodes", "Block Storage"]
    assert region.resolvers == RegionResolvers(ipv4="192.0.2.1", ipv6="2001:db8::1")


def test_from_dict_missing_resolvers():
    region = Region.from_dict({"id": "x"})
    assert region.resolvers == RegionResolvers()
    assert region.capabilities == []


def test_list_regions_is_cached(mocked, client):
    mocked.add(responses.GET, f"{BASE}/regions", json=_page([REGION]))
    first = list_regions(client)
    second = list_regions(client)
    assert [r.id for r in first] == ["us-east"]
    assert second == first
    assert len(mocked.calls) == 1


def test_list_regions_cache_survives_zero_global_expiration(mocked, client):
    mocked.add(responses.GET, f"{BASE}/regions", json=_page([REGION]))
    client.set_global_cache_expiration(0)
    first = list_regions(client)
    second = list_regions(client)
    assert [r.id for r in first] == ["us-east"]
    assert second == first
    assert len(mocked.calls) == 1


def test_list_regions_after_invalidation(mocked, client):
    mocked.add(responses.GET, f"{BASE}/regions", json=_page([REGION]))
    results = [list_regions(client)]
    client.invalidate_cache()
    results.append(list_regions(client))
    client.invalidate_cache_endpoint("/regions")
    results.append(list_regions(client))
    client.use_cache(False)
    results.append(list_regions(client))
    assert [[r.label for r in result] for result in results] == [["Newark, NJ"]] * 4
    assert len(mocked.calls) == 4


def test_get_region_is_cached(mocked, client):
    mocked.add(responses.GET, f"{BASE}/regions/us-east", json=REGION)
    region = get_region(client, "us-east")
    again = get_region(client, "us-east")
    assert region.label == "Newark, NJ"
    assert again == region
    assert len(mocked.calls) == 1


def test_get_region_missing(mocked, client):
    mocked.add(responses.GET, f"{BASE}/regions/nowhere", status=404,
               json={"errors": [{"reason": "Not found"}]})
    with pytest.raises(APIError) as excinfo:
        get_region(client, "nowhere")
    assert excinfo.value.code == 404