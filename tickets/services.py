# tickets/services.py
"""
Ticket operations used by the API views.

``TicketService`` is bound to one database alias and does all of its reads and
writes through it, so callers (views, tests, management commands) decide which
storage it talks to. Errors are raised as DRF exceptions: they carry their HTTP
status with them and the project exception handler renders them.
"""
from __future__ import annotations
import logging
import math
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.db.models import Prefetch
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from .exceptions import TicketNumberConflict
from .models import Ticket, TicketUpdate
from .numbering import next_ticket_number

User = get_user_model()
log = logging.getLogger(__name__)


class _Unset:
	def __repr__(self):
		return "UNSET"

	def __bool__(self):
		return False


# Marks a field the caller did not send, as opposed to one sent as null
UNSET = _Unset()


@dataclass
class TicketChanges:
	"""
	Partial update of a ticket.

	``status`` / ``priority``: falsy means keep the current value.
	``assigned_to``: ``UNSET`` keeps the assignee, ``None`` clears it,
	a user assigns the ticket to them.
	"""
	status: Optional[str] = None
	priority: Optional[str] = None
	assigned_to: Any = UNSET


@dataclass
class TicketPage:
	tickets: List[Ticket]
	page: int
	limit: int
	total: int

	@property
	def pages(self) -> int:
		return math.ceil(self.total / self.limit)

	def pagination(self) -> Dict[str, int]:
		return {
			"page": self.page,
			"limit": self.limit,
			"total": self.total,
			"pages": self.pages,
		}


def _require(fields: Dict[str, Optional[str]]) -> None:
	errors = {
		name: ["This field may not be blank."]
		for name, value in fields.items()
		if not (value or "").strip()
	}
	if errors:
		raise ValidationError(errors)


def _check_choice(field: str, value: Optional[str], choices) -> None:
	if value and value not in choices.values:
		raise ValidationError({field: [f'"{value}" is not a valid choice.']})


def _ticket_pk(ticket_id) -> uuid.UUID:
	try:
		return ticket_id if isinstance(ticket_id, uuid.UUID) else uuid.UUID(str(ticket_id))
	except ValueError:
		raise NotFound("Ticket not found")


class TicketService:
	def __init__(self, using: str = DEFAULT_DB_ALIAS, number_attempts: Optional[int] = None):
		self.using = using
		self.number_attempts = number_attempts or settings.TICKET_NUMBER_ATTEMPTS

	# ---------- queries ----------

	def _tickets(self):
		return Ticket.objects.using(self.using)

	def _with_updates(self):
		return self._tickets().prefetch_related(
			Prefetch("updates", queryset=TicketUpdate.objects.using(self.using).order_by("-created_at"))
		)

	def _get(self, ticket_id) -> Ticket:
		ticket = self._tickets().filter(pk=_ticket_pk(ticket_id)).first()
		if ticket is None:
			raise NotFound("Ticket not found")
		return ticket

	# ---------- public ----------

	def create_ticket(
		self,
		*,
		subject: str,
		description: str,
		category: str,
		customer_name: str,
		customer_email: str,
		priority: Optional[str] = None,
	) -> Ticket:
		_require({
			"subject": subject,
			"description": description,
			"category": category,
			"customerName": customer_name,
			"customerEmail": customer_email,
		})
		priority = priority or Ticket.Priority.MEDIUM
		_check_choice("priority", priority, Ticket.Priority)

		for attempt in range(1, self.number_attempts + 1):
			created_at = timezone.now()
			ticket_number = next_ticket_number(timezone.localtime(created_at).year, using=self.using)
			ticket = Ticket(
				ticket_number=ticket_number,
				subject=subject.strip(),
				description=description.strip(),
				category=category.strip(),
				priority=priority,
				status=Ticket.Status.OPEN,
				customer_name=customer_name.strip(),
				customer_email=customer_email.strip(),
				created_at=created_at,
			)
			try:
				# Savepoint, so a collision does not poison an enclosing transaction
				with transaction.atomic(using=self.using):
					ticket.save(using=self.using, force_insert=True)
			except IntegrityError:
				log.warning(
					"Ticket number %s already taken (attempt %d/%d)",
					ticket_number, attempt, self.number_attempts,
				)
				continue

			log.info("Created ticket %s (%s)", ticket.ticket_number, ticket.priority)
			return ticket

		log.error("Gave up allocating a ticket number after %d attempts", self.number_attempts)
		raise TicketNumberConflict()

	def get_ticket_by_number(self, ticket_number: str) -> Ticket:
		ticket = self._with_updates().filter(ticket_number=ticket_number).first()
		if ticket is None:
			raise NotFound("Ticket not found")
		return ticket

	def get_ticket_by_id(self, ticket_id) -> Ticket:
		ticket = self._with_updates().filter(pk=_ticket_pk(ticket_id)).first()
		if ticket is None:
			raise NotFound("Ticket not found")
		return ticket

	def list_tickets(
		self,
		*,
		status: Optional[str] = None,
		priority: Optional[str] = None,
		category: Optional[str] = None,
		page: int = 1,
		limit: int = 20,
	) -> TicketPage:
		if page < 1:
			raise ValidationError({"page": ["Ensure this value is greater than or equal to 1."]})
		if limit < 1:
			raise ValidationError({"limit": ["Ensure this value is greater than or equal to 1."]})

		qs = self._tickets()
		if status:
			qs = qs.filter(status=status)
		if priority:
			qs = qs.filter(priority=priority)
		if category:
			qs = qs.filter(category=category)

		total = qs.count()
		skip = (page - 1) * limit
		tickets = list(qs.order_by("-created_at")[skip:skip + limit])
		return TicketPage(tickets=tickets, page=page, limit=limit, total=total)

	def update_ticket(self, ticket_id, changes: TicketChanges) -> Ticket:
		_check_choice("status", changes.status, Ticket.Status)
		_check_choice("priority", changes.priority, Ticket.Priority)
		assignee = changes.assigned_to
		if assignee is not UNSET and assignee is not None and not getattr(assignee, "is_support_staff", False):
			raise ValidationError({"assignedTo": ["Tickets can only be assigned to staff members."]})

		ticket = self._get(ticket_id)
		update_fields = []

		if changes.status:
			ticket.status = changes.status
			update_fields.append("status")
		if changes.priority:
			ticket.priority = changes.priority
			update_fields.append("priority")
		if assignee is not UNSET:
			ticket.assigned_to = assignee
			update_fields.append("assigned_to")

		if update_fields:
			update_fields.append("updated_at")
			ticket.save(using=self.using, update_fields=update_fields)
			log.info(
				"Ticket %s updated: %s",
				ticket.ticket_number,
				", ".join(f for f in update_fields if f != "updated_at"),
			)
		return ticket

	def add_ticket_update(
		self,
		ticket_id,
		*,
		message: str,
		author,
		status: Optional[str] = None,
	) -> TicketUpdate:
		_require({"message": message})
		_check_choice("status", status, Ticket.Status)
		pk = _ticket_pk(ticket_id)

		with transaction.atomic(using=self.using):
			# Row lock keeps the ticket status in step with the newest update
			ticket = self._tickets().select_for_update().filter(pk=pk).first()
			if ticket is None:
				raise NotFound("Ticket not found")

			update = TicketUpdate(
				ticket=ticket,
				message=message.strip(),
				status=status or None,
				created_by=author,
			)
			update.save(using=self.using, force_insert=True)

			if status:
				self._tickets().filter(pk=pk).update(status=status, updated_at=timezone.now())

		if status:
			log.info("Ticket %s moved to %s by %s", ticket.ticket_number, status, author.email)
		return update

	def list_ticket_updates(self, ticket_id) -> List[TicketUpdate]:
		try:
			pk = _ticket_pk(ticket_id)
		except NotFound:
			return []
		return list(
			TicketUpdate.objects.using(self.using)
			.filter(ticket_id=pk)
			.order_by("-created_at")
		)

	def list_technicians(self):
		return list(User.objects.db_manager(self.using).technicians())
