"""Wait for volumes to reach a wanted state."""

from __future__ import annotations

from enum import Enum

from .client import Client
from .polling import poll
from .volumes import Volume, VolumeStatus, get_volume


def _describe(value: object) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def wait_for_volume_status(
    client: Client, volume_id: int, status: VolumeStatus | str, timeout_seconds: float
) -> Volume:
    """Poll a volume until it has the given status.

    Raises WaitTimeoutError when the status is not reached within
    timeout_seconds; API errors propagate unchanged.
    """
    return poll(
        lambda: get_volume(client, volume_id),
        lambda volume: volume.status == status,
        timeout_seconds,
        client.poll_interval,
        f"Volume {volume_id} status {_describe(status)}",
    )


def wait_for_volume_linode_id(
    client: Client, volume_id: int, linode_id: int | None, timeout_seconds: float
) -> Volume:
    """Poll a volume until it is attached to linode_id, or detached when that is None.

    An active instance does not attach or detach a volume at once, so the
    volume's instance id has to be polled. Raises WaitTimeoutError on timeout.
    """

    def attached_as_wanted(volume: Volume) -> bool:
        if linode_id is None or volume.linode_id is None:
            return linode_id is None and volume.linode_id is None
        return volume.linode_id == linode_id

    return poll(
        lambda: get_volume(client, volume_id),
        attached_as_wanted,
        timeout_seconds,
        client.poll_interval,
        f"Volume {volume_id} to have Instance {linode_id}",
    )