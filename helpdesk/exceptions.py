import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

log = logging.getLogger(__name__)


def api_exception_handler(exc, context):
	"""
	DRF exception handler.

	Known API errors keep DRF's body (field-level dict for validation errors,
	``{"detail": ...}`` otherwise). Anything else is logged with its traceback
	and answered with a generic 500 so internals never reach the client.
	"""
	response = exception_handler(exc, context)
	if response is not None:
		return response

	request = context.get("request")
	log.error(
		"Unhandled error on %s %s",
		getattr(request, "method", "-"),
		getattr(request, "path", "-"),
		exc_info=exc,
	)
	return Response(
		{"error": "Internal server error"},
		status=status.HTTP_500_INTERNAL_SERVER_ERROR,
	)
