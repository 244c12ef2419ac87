from django.contrib import admin
from .models import Ticket, TicketUpdate


class TicketUpdateInline(admin.TabularInline):
	model = TicketUpdate
	extra = 0
	fields = ("created_at", "created_by", "status", "message")
	readonly_fields = fields
	can_delete = False

	def has_add_permission(self, request, obj=None):
		return False


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
	list_display = ("ticket_number", "subject", "category", "priority", "status", "assigned_to", "created_at")
	list_filter = ("status", "priority", "category", "created_at")
	search_fields = ("ticket_number", "subject", "customer_name", "customer_email")
	ordering = ("-created_at",)
	readonly_fields = ("ticket_number", "created_at", "updated_at")
	autocomplete_fields = ("assigned_to",)
	inlines = [TicketUpdateInline]

	# Tickets are opened through the intake endpoint and never deleted;
	# the yearly sequence is derived from the row count
	def has_add_permission(self, request):
		return False

	def has_delete_permission(self, request, obj=None):
		return False


@admin.register(TicketUpdate)
class TicketUpdateAdmin(admin.ModelAdmin):
	list_display = ("ticket", "status", "created_by", "created_at")
	list_filter = ("status", "created_at")
	search_fields = ("ticket__ticket_number", "message")
	ordering = ("-created_at",)

	# Append-only: rows are written through the API, never edited here
	def has_add_permission(self, request):
		return False

	def has_change_permission(self, request, obj=None):
		return False

	def has_delete_permission(self, request, obj=None):
		return False
