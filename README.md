# linodeapi

A Python client for the Linode API v4. A single `Client` handles HTTP
access, pagination, retries and response caching; each resource area is a
module of plain functions that take the client as their first argument.

## Installation

```
pip install linodeapi
```

To run the test suite, install the test extra:

```
pip install "linodeapi[test]"
pytest
```

## Getting started

```python
from linodeapi.client import Client, ListOptions
from linodeapi.regions import list_regions, get_region
from linodeapi.volumes import create_volume, VolumeCreateOptions, VolumeStatus
from linodeapi.waitfor import wait_for_volume_status

client = Client(token="token")

for region in list_regions(client, None):
    print(region.id, region.country, region.status)

volume = create_volume(client, VolumeCreateOptions(label="data", region="us-east", size=20))
volume = wait_for_volume_status(client, volume.id, VolumeStatus.ACTIVE, 300)
print(volume.filesystem_path)
```

`Client` also takes `base_url` (default `https://api.linode.com/v4`),
`user_agent` and an existing `requests.Session`.

## What is covered

| Module | Contents |
| --- | --- |
| `linodeapi.client` | `Client`, `ListOptions`, `APIError`, `parse_time`, `generate_list_cache_url`, the retry conditions and `respect_retry_after` |
| `linodeapi.regions` | `Region`, `RegionResolvers`, `list_regions`, `get_region` (cached) |
| `linodeapi.linode_types` | `LinodeType`, `LinodePrice`, `LinodeTypeClass`, `list_types`, `get_type` (cached) |
| `linodeapi.support` | `Ticket`, `TicketEntity`, `TicketStatus`, `list_tickets`, `get_ticket` |
| `linodeapi.tokens` | `Token`, `TokenCreateOptions`, `TokenUpdateOptions`, `list_tokens`, `get_token`, `create_token`, `update_token`, `delete_token` |
| `linodeapi.stackscripts` | `Stackscript`, `StackscriptUDF`, `StackscriptCreateOptions`, `StackscriptUpdateOptions` and list/get/create/update/delete functions |
| `linodeapi.vlans` | `VLAN`, `list_vlans` |
| `linodeapi.volumes` | `Volume`, `VolumeStatus`, the option classes, and list/get/create/update/attach/detach/clone/resize/delete functions |
| `linodeapi.tags` | `Tag`, `TagCreateOptions`, `TaggedObject`, `SortedObjects`, `sorted_objects`, `list_tags`, `list_tagged_objects`, `create_tag`, `delete_tag` |
| `linodeapi.polling` | `poll`, `WaitTimeoutError` |
| `linodeapi.waitfor` | `wait_for_volume_status`, `wait_for_volume_linode_id` |

Timestamps from the API are returned as timezone-aware UTC `datetime`
objects. Enum-valued fields (statuses, type classes) fall back to the plain
string when the API returns a value the enum does not know.

## Listing and pagination

List functions take a `ListOptions` or `None`. Without a page number every
page is fetched and the results are joined; with one, only that page comes
back. Afterwards the options object holds the `pages` and `results` counts
reported by the API. A filter is a JSON string, sent in the `X-Filter`
header:

```python
from linodeapi.stackscripts import list_stackscripts

mine = list_stackscripts(client, ListOptions(filter='{"mine": true}'))
```

## Tagged objects

`list_tagged_objects` returns `TaggedObject` items. Volumes are decoded into
`Volume`; instances, LKE clusters, domains and NodeBalancers keep their raw
dictionaries. `sorted_objects` groups a list of them by kind and raises
`ValueError` when an object's data does not match its type.

## Caching

Region and type lookups are cached with their own expiry of one minute.
Other entries added with `Client.add_cached_response` and no expiry of their
own use the global expiration (15 minutes by default), which
`set_global_cache_expiration` changes. The cache can be managed on the
client:

```python
client.invalidate_cache_endpoint("/regions")  # drop cached region lists
client.invalidate_cache()                     # drop everything
client.use_cache(False)                       # stop reading and writing the cache
```

## Retries

Requests are retried (up to 1000 times) when the API answers "Linode busy."
with a 400, a 408, a 429, a bare HTML 400 page from nginx, or a 503 that is
not part of scheduled maintenance (a 503 carrying an `X-Maintenance-Mode`
header is not retried). Connection errors that mention a GOAWAY are retried
too. A `Retry-After` header sets the wait between attempts; otherwise the
poll delay is used (3000 ms by default, changed with
`Client.set_poll_delay`). Add your own rules with
`Client.add_retry_condition`; a condition is called with the response (or
`None`) and the exception (or `None`).

## Waiting

`wait_for_volume_status` and `wait_for_volume_linode_id` poll a volume at
the client's poll interval until it reaches the wanted state. Pass `None` as
the instance id to wait for the volume to be detached. Both are built on
`polling.poll`, which can be used for any other resource.

## Errors

Failed requests raise `APIError`, which carries the HTTP status in `code`,
the API's reasons in `reasons`, and prints as `[code] message`. Network
errors that are not retried propagate as `requests` exceptions. Waiting
helpers raise `WaitTimeoutError` (a `TimeoutError`) when their time runs out.

## What this package does not do

It covers only the resource areas listed above. There is no support for
instances, disks, configs, images, domains, NodeBalancers, LKE clusters,
managed databases, account users or events, and no waiting helpers for
anything other than volumes. It has no command-line interface.