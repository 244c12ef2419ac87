# tickets/numbering.py
"""
Human readable ticket numbers: ``TKT-<year>-<sequence>``.

The sequence restarts at 0001 every calendar year and is derived from how many
tickets were created in that year so far. Counting and inserting are separate
statements, so two concurrent creations can compute the same number; the
unique constraint on ``Ticket.ticket_number`` rejects the loser and
``TicketService.create_ticket`` regenerates.

Past 9999 tickets in a year the sequence simply grows to five digits.
"""
from __future__ import annotations
from datetime import datetime
from typing import Optional, Tuple

from django.db import DEFAULT_DB_ALIAS
from django.utils import timezone

PREFIX = "TKT"
SEQUENCE_WIDTH = 4


def format_ticket_number(year: int, sequence: int) -> str:
	return f"{PREFIX}-{year}-{sequence:0{SEQUENCE_WIDTH}d}"


def year_bounds(year: int) -> Tuple[datetime, datetime]:
	"""Half-open ``[Jan 1 year, Jan 1 year+1)`` in the project time zone."""
	tz = timezone.get_current_timezone()
	return (
		timezone.make_aware(datetime(year, 1, 1), tz),
		timezone.make_aware(datetime(year + 1, 1, 1), tz),
	)


def current_year() -> int:
	return timezone.localtime(timezone.now()).year


def next_ticket_number(year: Optional[int] = None, using: str = DEFAULT_DB_ALIAS) -> str:
	from .models import Ticket

	if year is None:
		year = current_year()
	start, end = year_bounds(year)
	count = (
		Ticket.objects.using(using)
		.filter(created_at__gte=start, created_at__lt=end)
		.count()
	)
	return format_ticket_number(year, count + 1)
