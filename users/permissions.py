from rest_framework.permissions import BasePermission

from .models import STAFF_ROLES


class HasRole(BasePermission):
	"""
	Allow access only to active users whose role is in ``allowed_roles``.

	Anonymous requests are refused too; DRF turns that into a 401 as long as
	the view has an authenticator, while a role mismatch stays a 403.
	"""
	allowed_roles = ()
	message = "You do not have permission to access this resource."

	def has_permission(self, request, view):
		user = request.user
		if not user or not user.is_authenticated:
			return False
		return user.is_active and getattr(user, "role", None) in self.allowed_roles


class IsStaffRole(HasRole):
	"""Admins and technicians."""
	allowed_roles = STAFF_ROLES

