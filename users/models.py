from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils import timezone
import uuid


class UserManager(BaseUserManager):
	def create_user(self, email, password=None, **extra_fields):
		if not email:
			raise ValueError('The Email field is required')
		email = self.normalize_email(email)
		user = self.model(email=email, **extra_fields)
		user.set_password(password)
		user.save(using=self._db)
		return user

	def create_superuser(self, email, password=None, **extra_fields):
		extra_fields.setdefault('role', User.Role.ADMIN)
		extra_fields.setdefault('is_staff', True)
		extra_fields.setdefault('is_superuser', True)
		return self.create_user(email, password, **extra_fields)

	def technicians(self):
		return self.filter(role=User.Role.TECHNICIAN)


class User(AbstractBaseUser, PermissionsMixin):
	class Role(models.TextChoices):
		ADMIN = 'Admin', 'Admin'
		TECHNICIAN = 'Technician', 'Technician'

	id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
	email = models.EmailField(unique=True)
	name = models.CharField(max_length=150)
	role = models.CharField(max_length=20, choices=Role.choices, default=Role.TECHNICIAN)
	is_active = models.BooleanField(default=True)
	is_staff = models.BooleanField(default=False, help_text="Can log into the Django admin site.")
	date_joined = models.DateTimeField(default=timezone.now, editable=False)

	objects = UserManager()

	USERNAME_FIELD = 'email'
	REQUIRED_FIELDS = ['name']

	class Meta:
		ordering = ['name']

	def __str__(self):
		return f"{self.name} <{self.email}> ({self.role})"

	@property
	def is_support_staff(self) -> bool:
		return self.role in STAFF_ROLES


STAFF_ROLES = (User.Role.ADMIN, User.Role.TECHNICIAN)
