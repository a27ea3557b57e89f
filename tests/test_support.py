from datetime import datetime, timezone

import pytest
import responses

from linodeapi.client import APIError, Client, ListOptions
from linodeapi.support import Ticket, TicketEntity, TicketStatus, get_ticket, list_tickets

BASE = "https://api.example.com/v4"

TICKET = {
    "id": 11111,
    "attachments": [],
    "closed": None,
    "description": "Something is wrong",
    "entity": {"id": 10400, "label": "linode123", "type": "linode", "url": "/v4/linode/instances/10400"},
    "gravatar_id": "placeholder",
    "opened": "2018-01-01T00:01:01",
    "opened_by": "someone",
    "status": "open",
    "summary": "Help",
    "updated": "2018-01-02T00:01:01",
    "updated_by": "someone",
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


def test_from_dict():
    ticket = Ticket.from_dict(TICKET)
    assert ticket.status is TicketStatus.OPEN
    assert ticket.closed is None
    assert ticket.opened == datetime(2018, 1, 1, 0, 1, 1, tzinfo=timezone.utc)
    assert ticket.entity == TicketEntity(
        id=10400, label="linode123", type="linode", url="/v4/linode/instances/10400"
    )


def test_from_dict_without_entity():
    ticket = Ticket.from_dict({"id": 1, "status": "closed", "entity": None})
    assert ticket.entity is None
    assert ticket.status is TicketStatus.CLOSED
    assert ticket.attachments == []


def test_get_ticket(mocked, client):
    mocked.add(responses.GET, f"{BASE}/support/tickets/11111", json=TICKET)
    ticket = get_ticket(client, 11111)
    assert ticket.id == 11111
    assert ticket.summary == "Help"


def test_get_ticket_missing(mocked, client):
    mocked.add(responses.GET, f"{BASE}/support/tickets/1", status=404,
               json={"errors": [{"reason": "Not found"}]})
    with pytest.raises(APIError) as excinfo:
        get_ticket(client, 1)
    assert excinfo.value.code == 404


def test_list_tickets(mocked, client):
    second = dict(TICKET, id=22222, status="new")
    mocked.add(responses.GET, f"{BASE}/support/tickets",
               json={"data": [TICKET, second], "page": 1, "pages": 1, "results": 2})
    options = ListOptions()
    tickets = list_tickets(client, options)
    assert [t.id for t in tickets] == [11111, 22222]
    assert tickets[1].status is TicketStatus.NEW
    assert options.results == 2


def test_status_values():
    assert TicketStatus("new") is TicketStatus.NEW
    assert TicketStatus("open") is TicketStatus.OPEN
    with pytest.raises(ValueError):
        TicketStatus("pending")