from rest_framework import serializers
from .models import User


class LoginSerializer(serializers.Serializer):
	email = serializers.EmailField()
	password = serializers.CharField(trim_whitespace=False)


class UserSerializer(serializers.ModelSerializer):
	createdOn = serializers.DateTimeField(source='date_joined', read_only=True)

	class Meta:
		model = User
		fields = ['id', 'email', 'name', 'role', 'createdOn']
		read_only_fields = fields


class TechnicianSerializer(serializers.ModelSerializer):
	class Meta:
		model = User
		fields = ['id', 'name', 'email']
		read_only_fields = fields
