from rest_framework import status
from rest_framework.exceptions import APIException


class TicketNumberConflict(APIException):
	"""Every attempt to allocate a ticket number collided with a concurrent insert."""
	status_code = status.HTTP_409_CONFLICT
	default_detail = "Could not allocate a ticket number, please retry."
	default_code = "ticket_number_conflict"
