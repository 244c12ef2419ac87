import uuid
from django.conf import settings
from django.db import models
from django.utils import timezone


class Ticket(models.Model):
	class Status(models.TextChoices):
		OPEN = 'Open', 'Open'
		IN_PROGRESS = 'In Progress', 'In Progress'
		RESOLVED = 'Resolved', 'Resolved'
		CLOSED = 'Closed', 'Closed'

	class Priority(models.TextChoices):
		LOW = 'Low', 'Low'
		MEDIUM = 'Medium', 'Medium'
		HIGH = 'High', 'High'
		URGENT = 'Urgent', 'Urgent'

	id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
	ticket_number = models.CharField(max_length=32, unique=True, editable=False)  # TKT-2025-0001
	subject = models.CharField(max_length=200)
	description = models.TextField()
	category = models.CharField(max_length=100)
	priority = models.CharField(max_length=20, choices=Priority.choices, default=Priority.MEDIUM)
	status = models.CharField(max_length=20, choices=Status.choices, default=Status.OPEN)
	customer_name = models.CharField(max_length=200)
	customer_email = models.EmailField()
	assigned_to = models.ForeignKey(
		settings.AUTH_USER_MODEL,
		null=True,
		blank=True,
		on_delete=models.SET_NULL,
		related_name='assigned_tickets',
	)
	# Not auto_now_add: the number generator counts on this column and callers may backfill it
	created_at = models.DateTimeField(default=timezone.now, db_index=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:
		ordering = ['-created_at']
		indexes = [
			models.Index(fields=['status'], name='tickets_status_idx'),
			models.Index(fields=['priority'], name='tickets_priority_idx'),
			models.Index(fields=['category'], name='tickets_category_idx'),
		]

	def __str__(self):
		return f"{self.ticket_number} - {self.subject}"


class TicketUpdate(models.Model):
	"""Append-only note on a ticket, optionally carrying a status change."""
	id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
	ticket = models.ForeignKey(Ticket, on_delete=models.CASCADE, related_name='updates')
	message = models.TextField()
	status = models.CharField(max_length=20, choices=Ticket.Status.choices, null=True, blank=True)
	created_by = models.ForeignKey(
		settings.AUTH_USER_MODEL,
		on_delete=models.PROTECT,
		related_name='ticket_updates',
	)
	created_at = models.DateTimeField(default=timezone.now, db_index=True)

	class Meta:
		ordering = ['-created_at']

	def save(self, *args, **kwargs):
		if not self._state.adding:
			raise ValueError("Ticket updates are append-only and cannot be modified.")
		return super().save(*args, **kwargs)

	def __str__(self):
		return f"Update on {self.ticket_id} at {self.created_at:%Y-%m-%d %H:%M}"
