from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserCreationForm as BaseUserCreationForm, UserChangeForm as BaseUserChangeForm
from .models import User


class UserCreationForm(BaseUserCreationForm):
	class Meta:
		model = User
		fields = ('email', 'name', 'role')


class UserChangeForm(BaseUserChangeForm):
	class Meta:
		model = User
		fields = '__all__'


class UserAdmin(BaseUserAdmin):
	model = User
	form = UserChangeForm
	add_form = UserCreationForm
	list_display = ('email', 'name', 'role', 'is_staff', 'is_active', 'date_joined')
	list_filter = ('role', 'is_staff', 'is_active')
	search_fields = ('email', 'name')
	ordering = ('-date_joined',)
	readonly_fields = ('date_joined', 'last_login')

	fieldsets = (
		(None, {'fields': ('email', 'password')}),
		('Profile', {'fields': ('name', 'role')}),
		('Important dates', {'fields': ('last_login', 'date_joined')}),
		('Permissions', {'fields': ('is_staff', 'is_active', 'is_superuser', 'groups', 'user_permissions')}),
	)
	add_fieldsets = (
		(None, {
			'classes': ('wide',),
			'fields': ('email', 'name', 'role', 'password1', 'password2', 'is_staff', 'is_active'),
		}),
	)


admin.site.register(User, UserAdmin)
