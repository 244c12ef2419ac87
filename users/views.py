import logging

from django.contrib.auth import authenticate
from django.utils.timezone import now

from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema

from .serializers import LoginSerializer, UserSerializer

log = logging.getLogger(__name__)


# ---------- helpers ----------

def tokens_for(user):
	r = RefreshToken.for_user(user)
	r["role"] = user.role
	return {"access": str(r.access_token), "refresh": str(r)}


# ---------- views ----------

@extend_schema(
	request=LoginSerializer,
	responses={200: {"type": "object", "properties": {
		"user": {"type": "object"},
		"tokens": {"type": "object", "properties": {
			"access": {"type": "string"},
			"refresh": {"type": "string"},
		}},
	}}},
	description="Exchange staff email + password for a bearer token pair",
	tags=["Auth"]
)
@api_view(["POST"])
@authentication_classes([])
@permission_classes([AllowAny])
def login(request):
	serializer = LoginSerializer(data=request.data)
	if not serializer.is_valid():
		return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

	email = serializer.validated_data["email"]
	user = authenticate(request=request, email=email, password=serializer.validated_data["password"])
	if not user or not user.is_active:
		log.warning("Failed login for %s", email)
		return Response({"detail": "Invalid credentials"}, status=status.HTTP_401_UNAUTHORIZED)

	user.last_login = now()
	user.save(update_fields=["last_login"])
	log.info("User %s logged in", user.email)

	return Response({
		"user": UserSerializer(user).data,
		"tokens": tokens_for(user),
	})


@extend_schema(
	responses={200: UserSerializer},
	description="Current authenticated user",
	tags=["Auth"]
)
@api_view(["GET"])
@permission_classes([IsAuthenticated])
def me(request):
	return Response(UserSerializer(request.user).data)
