from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from .views import login, me

urlpatterns = [
	path("login", login, name="login"),
	path("token/refresh", TokenRefreshView.as_view(), name="token_refresh"),
	path("me", me, name="me"),
]
