from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from . import __version__


@extend_schema(
	responses={200: {"type": "object", "properties": {
		"status": {"type": "string"},
		"service": {"type": "string"},
		"version": {"type": "string"},
	}}},
	description="Liveness probe",
	tags=["Health"]
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
	return Response({
		"status": "healthy",
		"service": "helpdesk-api",
		"version": __version__,
	})
