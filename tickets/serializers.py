from django.conf import settings
from django.contrib.auth import get_user_model
from rest_framework import serializers

from users.models import STAFF_ROLES
from .models import Ticket, TicketUpdate

User = get_user_model()


# --------- Requests ---------

class TicketCreateSerializer(serializers.Serializer):
	subject = serializers.CharField(max_length=200)
	description = serializers.CharField()
	category = serializers.CharField(max_length=100)
	priority = serializers.ChoiceField(
		choices=Ticket.Priority.choices, required=False, allow_blank=True, allow_null=True
	)
	customerName = serializers.CharField(source="customer_name", max_length=200)
	customerEmail = serializers.EmailField(source="customer_email")


class TicketPatchSerializer(serializers.Serializer):
	status = serializers.ChoiceField(choices=Ticket.Status.choices, required=False, allow_blank=True)
	priority = serializers.ChoiceField(choices=Ticket.Priority.choices, required=False, allow_blank=True)
	# "" and null both clear the assignment; leaving the key out keeps it
	assignedTo = serializers.PrimaryKeyRelatedField(
		source="assigned_to",
		queryset=User.objects.filter(role__in=STAFF_ROLES),
		pk_field=serializers.UUIDField(),
		required=False,
		allow_null=True,
	)


class TicketUpdateCreateSerializer(serializers.Serializer):
	message = serializers.CharField()
	status = serializers.ChoiceField(
		choices=Ticket.Status.choices, required=False, allow_blank=True, allow_null=True
	)


class TicketListQuerySerializer(serializers.Serializer):
	status = serializers.CharField(required=False, allow_blank=True)
	priority = serializers.CharField(required=False, allow_blank=True)
	category = serializers.CharField(required=False, allow_blank=True)
	page = serializers.IntegerField(min_value=1, default=1)
	limit = serializers.IntegerField(
		min_value=1,
		max_value=settings.TICKETS_MAX_PAGE_SIZE,
		default=settings.TICKETS_DEFAULT_PAGE_SIZE,
	)


# --------- Responses ---------

class TicketUpdateSerializer(serializers.ModelSerializer):
	ticketId = serializers.UUIDField(source="ticket_id", read_only=True)
	createdBy = serializers.UUIDField(source="created_by_id", read_only=True)
	createdAt = serializers.DateTimeField(source="created_at", read_only=True)

	class Meta:
		model = TicketUpdate
		fields = ["id", "ticketId", "message", "status", "createdBy", "createdAt"]
		read_only_fields = ["id", "message", "status"]


class TicketSerializer(serializers.ModelSerializer):
	ticketNumber = serializers.CharField(source="ticket_number", read_only=True)
	customerName = serializers.CharField(source="customer_name", read_only=True)
	customerEmail = serializers.EmailField(source="customer_email", read_only=True)
	assignedTo = serializers.PrimaryKeyRelatedField(source="assigned_to", read_only=True)
	createdAt = serializers.DateTimeField(source="created_at", read_only=True)
	updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

	class Meta:
		model = Ticket
		fields = [
			"id",
			"ticketNumber",
			"subject",
			"description",
			"category",
			"priority",
			"status",
			"customerName",
			"customerEmail",
			"assignedTo",
			"createdAt",
			"updatedAt",
		]
		read_only_fields = ["id", "subject", "description", "category", "priority", "status"]


class TicketDetailSerializer(TicketSerializer):
	updates = TicketUpdateSerializer(many=True, read_only=True)

	class Meta(TicketSerializer.Meta):
		fields = TicketSerializer.Meta.fields + ["updates"]
