import json

import pytest
import responses

from linodeapi.client import Client
from linodeapi.tags import (
    Tag,
    TagCreateOptions,
    TaggedObject,
    create_tag,
    delete_tag,
    list_tagged_objects,
    list_tags,
    sorted_objects,
)
from linodeapi.volumes import Volume

BASE = "https://api.linode.com/v4"


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def client():
    return Client(token="token")


def test_tag_create_options_roundtrip():
    tag = Tag(label="blue")
    assert tag.create_options().to_dict() == {"label": "blue"}


def test_create_options_include_ids():
    opts = TagCreateOptions(label="blue", linodes=[1, 2], volumes=[3])
    assert opts.to_dict() == {"label": "blue", "linodes": [1, 2], "volumes": [3]}


def test_tagged_volume_is_decoded():
    obj = TaggedObject.from_dict({"type": "volume", "data": {"id": 7, "label": "v"}})
    assert isinstance(obj.data, Volume)
    assert obj.data.id == 7
    assert obj.raw_data == {"id": 7, "label": "v"}


def test_sorted_objects_groups_by_type():
    objects = [
        TaggedObject.from_dict({"type": "volume", "data": {"id": 7}}),
        TaggedObject.from_dict({"type": "linode", "data": {"id": 8}}),
        TaggedObject.from_dict({"type": "domain", "data": {"id": 9}}),
        TaggedObject.from_dict({"type": "other", "data": {"id": 10}}),
    ]
    grouped = sorted_objects(objects)
    assert [v.id for v in grouped.volumes] == [7]
    assert grouped.instances == [{"id": 8}]
    assert grouped.domains == [{"id": 9}]
    assert grouped.lke_clusters == []
    assert grouped.nodebalancers == []


def test_sorted_objects_rejects_mismatched_volume():
    bad = TaggedObject(type="volume", data={"id": 1})
    with pytest.raises(ValueError, match='Type was "volume"'):
        sorted_objects([bad])


def test_sorted_objects_rejects_mismatched_linode():
    bad = TaggedObject(type="linode", data=Volume(id=1))
    with pytest.raises(ValueError, match='Type was "linode"'):
        sorted_objects([bad])


def test_list_tags(mocked, client):
    mocked.add(
        responses.GET,
        f"{BASE}/tags",
        json={"data": [{"label": "a"}, {"label": "b"}], "page": 1, "pages": 1, "results": 2},
    )
    assert list_tags(client) == [Tag("a"), Tag("b")]


def test_list_tagged_objects(mocked, client):
    mocked.add(
        responses.GET,
        f"{BASE}/tags/blue",
        json={
            "data": [{"type": "volume", "data": {"id": 4, "label": "vol"}}],
            "page": 1,
            "pages": 1,
            "results": 1,
        },
    )
    objects = list_tagged_objects(client, "blue")
    assert len(objects) == 1
    assert objects[0].data.label == "vol"


def test_create_and_delete_tag(mocked, client):
    mocked.add(responses.POST, f"{BASE}/tags", json={"label": "blue"})
    mocked.add(responses.DELETE, f"{BASE}/tags/blue", json={})
    tag = create_tag(client, TagCreateOptions(label="blue", domains=[5]))
    assert tag == Tag("blue")
    assert json.loads(mocked.calls[0].request.body) == {"label": "blue", "domains": [5]}
    delete_tag(client, "blue")
    assert mocked.calls[1].request.method == "DELETE"