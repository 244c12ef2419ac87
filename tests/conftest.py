import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from users.models import User
from tickets.services import TicketService

PASSWORD = "correct-horse-battery"


def authenticate(client, user):
	token = RefreshToken.for_user(user).access_token
	client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
	return client


@pytest.fixture
def api_client():
	return APIClient()


@pytest.fixture
def admin_account(db):
	return User.objects.create_user(
		email="admin@ticketing.com", password=PASSWORD, name="Admin User", role=User.Role.ADMIN
	)


@pytest.fixture
def technician(db):
	return User.objects.create_user(
		email="tech@ticketing.com", password=PASSWORD, name="John Technician", role=User.Role.TECHNICIAN
	)


@pytest.fixture
def outsider(db):
	# Authenticated account whose role is not part of the support staff
	return User.objects.create_user(
		email="someone@example.com", password=PASSWORD, name="Someone", role="Customer"
	)


@pytest.fixture
def staff_client(technician):
	return authenticate(APIClient(), technician)


@pytest.fixture
def admin_client(admin_account):
	return authenticate(APIClient(), admin_account)


@pytest.fixture
def service(db):
	return TicketService()


@pytest.fixture
def make_ticket(service):
	def _make(**overrides):
		data = {
			"subject": "Printer down",
			"description": "Won't power on",
			"category": "Hardware",
			"customer_name": "Ann",
			"customer_email": "a@b.com",
		}
		data.update(overrides)
		return service.create_ticket(**data)
	return _make
