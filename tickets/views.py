# tickets/views.py
from django.conf import settings
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter

from users.permissions import IsStaffRole
from users.serializers import TechnicianSerializer
from .serializers import (
	TicketCreateSerializer,
	TicketDetailSerializer,
	TicketListQuerySerializer,
	TicketPatchSerializer,
	TicketSerializer,
	TicketUpdateCreateSerializer,
	TicketUpdateSerializer,
)
from .services import TicketChanges, TicketService, UNSET


def _service() -> TicketService:
	return TicketService(using=settings.TICKETS_DB_ALIAS)


class TicketCollectionView(APIView):
	"""
	POST is the public intake form, GET is the staff queue.

	The public branch runs without authenticators so a stale header on a
	customer request is ignored instead of rejected.
	"""

	def get_authenticators(self):
		if self.request.method == "POST":
			return []
		return super().get_authenticators()

	def get_permissions(self):
		if self.request.method == "POST":
			return [AllowAny()]
		return [IsStaffRole()]

	@extend_schema(
		parameters=[
			OpenApiParameter("status", str, description="Exact status match"),
			OpenApiParameter("priority", str, description="Exact priority match"),
			OpenApiParameter("category", str, description="Exact category match"),
			OpenApiParameter("page", int, description="1-based page number"),
			OpenApiParameter("limit", int, description="Page size"),
		],
		responses={200: {"type": "object", "properties": {
			"tickets": {"type": "array", "items": {"type": "object"}},
			"pagination": {"type": "object", "properties": {
				"page": {"type": "integer"},
				"limit": {"type": "integer"},
				"total": {"type": "integer"},
				"pages": {"type": "integer"},
			}},
		}}},
		description="List tickets, newest first (staff)",
		tags=["Tickets"]
	)
	def get(self, request):
		query = TicketListQuerySerializer(data=request.query_params)
		query.is_valid(raise_exception=True)

		result = _service().list_tickets(**query.validated_data)
		return Response({
			"tickets": TicketSerializer(result.tickets, many=True).data,
			"pagination": result.pagination(),
		})

	@extend_schema(
		request=TicketCreateSerializer,
		responses={201: TicketSerializer},
		description="Open a support ticket (public)",
		tags=["Tickets"]
	)
	def post(self, request):
		serializer = TicketCreateSerializer(data=request.data)
		serializer.is_valid(raise_exception=True)

		ticket = _service().create_ticket(**serializer.validated_data)
		return Response(TicketSerializer(ticket).data, status=status.HTTP_201_CREATED)


@extend_schema(
	responses={200: TicketDetailSerializer},
	description="Look up a ticket and its updates by ticket number (public)",
	tags=["Tickets"]
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def ticket_by_number(request, ticket_number):
	ticket = _service().get_ticket_by_number(ticket_number)
	return Response(TicketDetailSerializer(ticket).data)


@extend_schema(
	responses={200: TechnicianSerializer(many=True)},
	description="Technicians tickets can be assigned to (staff)",
	tags=["Tickets"]
)
@api_view(["GET"])
@permission_classes([IsStaffRole])
def technicians(request):
	return Response(TechnicianSerializer(_service().list_technicians(), many=True).data)


@extend_schema(
	methods=["GET"],
	responses={200: TicketDetailSerializer},
	description="Ticket with its updates (staff)",
	tags=["Tickets"]
)
@extend_schema(
	methods=["PATCH"],
	request=TicketPatchSerializer,
	responses={200: TicketSerializer},
	description="Change status, priority or assignee; omitted fields are left alone (staff)",
	tags=["Tickets"]
)
@api_view(["GET", "PATCH"])
@permission_classes([IsStaffRole])
def ticket_detail(request, ticket_id):
	service = _service()

	if request.method == "GET":
		return Response(TicketDetailSerializer(service.get_ticket_by_id(ticket_id)).data)

	# PATCH
	serializer = TicketPatchSerializer(data=request.data, partial=True)
	serializer.is_valid(raise_exception=True)
	data = serializer.validated_data

	changes = TicketChanges(
		status=data.get("status") or None,
		priority=data.get("priority") or None,
		assigned_to=data["assigned_to"] if "assigned_to" in data else UNSET,
	)
	ticket = service.update_ticket(ticket_id, changes)
	return Response(TicketSerializer(ticket).data)


@extend_schema(
	methods=["GET"],
	responses={200: TicketUpdateSerializer(many=True)},
	description="Updates of a ticket, newest first (staff)",
	tags=["Tickets"]
)
@extend_schema(
	methods=["POST"],
	request=TicketUpdateCreateSerializer,
	responses={201: TicketUpdateSerializer},
	description="Annotate a ticket; a status in the body also moves the ticket (staff)",
	tags=["Tickets"]
)
@api_view(["GET", "POST"])
@permission_classes([IsStaffRole])
def ticket_updates(request, ticket_id):
	service = _service()

	if request.method == "GET":
		return Response(TicketUpdateSerializer(service.list_ticket_updates(ticket_id), many=True).data)

	# POST
	serializer = TicketUpdateCreateSerializer(data=request.data)
	serializer.is_valid(raise_exception=True)

	update = service.add_ticket_update(
		ticket_id,
		message=serializer.validated_data["message"],
		status=serializer.validated_data.get("status") or None,
		author=request.user,
	)
	return Response(TicketUpdateSerializer(update).data, status=status.HTTP_201_CREATED)
