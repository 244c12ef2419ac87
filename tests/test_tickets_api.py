import re
import uuid
from datetime import timedelta

import pytest
from django.utils import timezone

from tickets.exceptions import TicketNumberConflict
from tickets.models import Ticket, TicketUpdate
from tickets.numbering import current_year
from tickets.services import TicketChanges, TicketService

from .conftest import authenticate

pytestmark = pytest.mark.django_db

NEW_TICKET = {
	"subject": "Printer down",
	"description": "Won't power on",
	"category": "Hardware",
	"customerEmail": "a@b.com",
	"customerName": "Ann",
}


# ---------- public ----------

def test_create_ticket(api_client):
	res = api_client.post("/api/tickets", NEW_TICKET, format="json")

	assert res.status_code == 201
	body = res.json()
	assert body["status"] == "Open"
	assert body["priority"] == "Medium"
	assert body["customerName"] == "Ann"
	assert body["customerEmail"] == "a@b.com"
	assert body["assignedTo"] is None
	assert re.fullmatch(rf"TKT-{current_year()}-\d{{4,}}", body["ticketNumber"])
	assert Ticket.objects.filter(pk=body["id"]).exists()


def test_create_ticket_ignores_credentials(api_client):
	api_client.credentials(HTTP_AUTHORIZATION="Bearer not-a-real-token")
	res = api_client.post("/api/tickets", {**NEW_TICKET, "priority": "High"}, format="json")

	assert res.status_code == 201
	assert res.json()["priority"] == "High"


def test_create_ticket_validation(api_client):
	res = api_client.post(
		"/api/tickets",
		{"subject": "", "description": "Broken", "customerEmail": "not-an-email", "priority": "Eventually"},
		format="json",
	)

	assert res.status_code == 400
	errors = res.json()
	assert {"subject", "category", "customerName", "customerEmail", "priority"} <= set(errors)
	assert Ticket.objects.count() == 0


def test_create_ticket_number_conflict(api_client, monkeypatch):
	def conflict(self, **kwargs):
		raise TicketNumberConflict()

	monkeypatch.setattr(TicketService, "create_ticket", conflict)

	res = api_client.post("/api/tickets", NEW_TICKET, format="json")
	assert res.status_code == 409


def test_lookup_by_number(api_client, make_ticket, technician):
	ticket = make_ticket()
	now = timezone.now()
	TicketUpdate.objects.create(ticket=ticket, message="older", created_by=technician, created_at=now - timedelta(hours=1))
	TicketUpdate.objects.create(ticket=ticket, message="newer", created_by=technician, created_at=now)

	res = api_client.get(f"/api/tickets/ticket/{ticket.ticket_number}")

	assert res.status_code == 200
	body = res.json()
	assert body["id"] == str(ticket.id)
	assert [u["message"] for u in body["updates"]] == ["newer", "older"]
	assert body["updates"][0]["createdBy"] == str(technician.id)


def test_lookup_by_unknown_number(api_client):
	res = api_client.get("/api/tickets/ticket/TKT-1999-0001")
	assert res.status_code == 404


# ---------- authorization gate ----------

@pytest.mark.parametrize("method,path", [
	("get", "/api/tickets"),
	("get", "/api/tickets/technicians"),
	("get", f"/api/tickets/{uuid.uuid4()}"),
	("patch", f"/api/tickets/{uuid.uuid4()}"),
	("get", f"/api/tickets/{uuid.uuid4()}/updates"),
	("post", f"/api/tickets/{uuid.uuid4()}/updates"),
])
def test_staff_routes_require_credentials(api_client, method, path):
	res = getattr(api_client, method)(path, format="json")
	assert res.status_code == 401


def test_staff_routes_reject_invalid_token(api_client):
	api_client.credentials(HTTP_AUTHORIZATION="Bearer not-a-real-token")
	assert api_client.get("/api/tickets").status_code == 401


def test_staff_routes_reject_other_roles(api_client, outsider):
	client = authenticate(api_client, outsider)

	assert client.get("/api/tickets").status_code == 403
	assert client.get("/api/tickets/technicians").status_code == 403


def test_admin_has_staff_access(admin_client):
	assert admin_client.get("/api/tickets").status_code == 200


# ---------- staff ----------

def test_list_tickets(staff_client, service, make_ticket):
	for i in range(12):
		make_ticket(subject=f"Open {i}")
	closed = make_ticket(subject="Closed")
	service.update_ticket(closed.id, TicketChanges(status="Closed"))

	res = staff_client.get("/api/tickets", {"status": "Open", "page": 2, "limit": 10})

	assert res.status_code == 200
	body = res.json()
	assert len(body["tickets"]) == 2
	assert all(t["status"] == "Open" for t in body["tickets"])
	assert body["pagination"] == {"page": 2, "limit": 10, "total": 12, "pages": 2}


def test_list_tickets_defaults(staff_client, make_ticket):
	make_ticket()
	body = staff_client.get("/api/tickets").json()
	assert body["pagination"] == {"page": 1, "limit": 20, "total": 1, "pages": 1}


@pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"page": "two"}, {"limit": 1000}])
def test_list_tickets_bad_paging(staff_client, params):
	assert staff_client.get("/api/tickets", params).status_code == 400


def test_technicians(staff_client, technician, admin_account):
	res = staff_client.get("/api/tickets/technicians")

	assert res.status_code == 200
	assert res.json() == [{"id": str(technician.id), "name": technician.name, "email": technician.email}]


def test_get_ticket(staff_client, make_ticket):
	ticket = make_ticket()

	res = staff_client.get(f"/api/tickets/{ticket.id}")

	assert res.status_code == 200
	assert res.json()["ticketNumber"] == ticket.ticket_number
	assert res.json()["updates"] == []


@pytest.mark.parametrize("ticket_id", [uuid.uuid4(), "garbage"])
def test_get_unknown_ticket(staff_client, ticket_id):
	assert staff_client.get(f"/api/tickets/{ticket_id}").status_code == 404


def test_patch_priority_only(staff_client, make_ticket, technician):
	ticket = make_ticket()
	Ticket.objects.filter(pk=ticket.pk).update(status="In Progress", assigned_to=technician)

	res = staff_client.patch(f"/api/tickets/{ticket.id}", {"priority": "High"}, format="json")

	assert res.status_code == 200
	body = res.json()
	assert body["priority"] == "High"
	assert body["status"] == "In Progress"
	assert body["assignedTo"] == str(technician.id)


def test_patch_assign_and_clear(staff_client, make_ticket, technician):
	ticket = make_ticket()

	res = staff_client.patch(f"/api/tickets/{ticket.id}", {"assignedTo": str(technician.id)}, format="json")
	assert res.json()["assignedTo"] == str(technician.id)

	res = staff_client.patch(f"/api/tickets/{ticket.id}", {"assignedTo": ""}, format="json")
	assert res.status_code == 200
	assert res.json()["assignedTo"] is None
	ticket.refresh_from_db()
	assert ticket.assigned_to is None


def test_patch_null_clears_assignment(staff_client, make_ticket, technician):
	ticket = make_ticket()
	Ticket.objects.filter(pk=ticket.pk).update(assigned_to=technician)

	res = staff_client.patch(f"/api/tickets/{ticket.id}", {"assignedTo": None}, format="json")
	assert res.json()["assignedTo"] is None


@pytest.mark.parametrize("payload", [
	{"assignedTo": str(uuid.uuid4())},
	{"assignedTo": "nobody"},
	{"status": "Sleeping"},
	{"priority": "Eventually"},
])
def test_patch_validation(staff_client, make_ticket, payload):
	res = staff_client.patch(f"/api/tickets/{make_ticket().id}", payload, format="json")
	assert res.status_code == 400


def test_patch_cannot_assign_outsider(staff_client, make_ticket, outsider):
	res = staff_client.patch(f"/api/tickets/{make_ticket().id}", {"assignedTo": str(outsider.id)}, format="json")
	assert res.status_code == 400


def test_patch_unknown_ticket(staff_client):
	res = staff_client.patch(f"/api/tickets/{uuid.uuid4()}", {"priority": "Low"}, format="json")
	assert res.status_code == 404


def test_add_update_with_status(staff_client, make_ticket, technician):
	ticket = make_ticket()

	res = staff_client.post(
		f"/api/tickets/{ticket.id}/updates",
		{"message": "Swapped the power supply", "status": "Resolved"},
		format="json",
	)

	assert res.status_code == 201
	body = res.json()
	assert body["ticketId"] == str(ticket.id)
	assert body["createdBy"] == str(technician.id)
	assert body["status"] == "Resolved"
	ticket.refresh_from_db()
	assert ticket.status == "Resolved"


def test_add_update_without_status(staff_client, make_ticket):
	ticket = make_ticket()

	res = staff_client.post(f"/api/tickets/{ticket.id}/updates", {"message": "Waiting on parts"}, format="json")

	assert res.status_code == 201
	assert res.json()["status"] is None
	ticket.refresh_from_db()
	assert ticket.status == "Open"


def test_add_update_requires_message(staff_client, make_ticket):
	res = staff_client.post(f"/api/tickets/{make_ticket().id}/updates", {"message": "  "}, format="json")

	assert res.status_code == 400
	assert "message" in res.json()


def test_add_update_unknown_ticket(staff_client):
	res = staff_client.post(f"/api/tickets/{uuid.uuid4()}/updates", {"message": "Hello"}, format="json")
	assert res.status_code == 404


def test_list_updates(staff_client, make_ticket, technician):
	ticket = make_ticket()
	now = timezone.now()
	TicketUpdate.objects.create(ticket=ticket, message="first", created_by=technician, created_at=now - timedelta(minutes=1))
	TicketUpdate.objects.create(ticket=ticket, message="second", created_by=technician, created_at=now)

	res = staff_client.get(f"/api/tickets/{ticket.id}/updates")

	assert res.status_code == 200
	assert [u["message"] for u in res.json()] == ["second", "first"]


# ---------- failures ----------

def test_unexpected_errors_are_generic(staff_client, monkeypatch):
	def explode(self, **kwargs):
		raise RuntimeError("database password is hunter2")

	monkeypatch.setattr(TicketService, "list_tickets", explode)

	res = staff_client.get("/api/tickets")

	assert res.status_code == 500
	assert res.json() == {"error": "Internal server error"}
	assert b"hunter2" not in res.content


def test_health(api_client):
	res = api_client.get("/health")
	assert res.status_code == 200
	assert res.json()["status"] == "healthy"
