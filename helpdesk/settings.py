from pathlib import Path
from datetime import timedelta
import os
from dotenv import load_dotenv
import dj_database_url

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")  # load once

ENV = os.getenv("DJANGO_ENV", "development").lower()  # "development" | "production" | "staging"
DEBUG_ENV = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")

# Force DEBUG off if ENV=production (even if someone sets DEBUG=true by accident)
DEBUG = False if ENV == "production" else DEBUG_ENV

DJANGO_ENV = ENV

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY")

if not SECRET_KEY:
	if ENV == "production":
		raise ValueError("DJANGO_SECRET_KEY must be set in production")
	SECRET_KEY = "helpdesk-insecure-development-key"

AUTH_USER_MODEL = 'users.User'

INSTALLED_APPS = [
	'django.contrib.admin',
	'django.contrib.auth',
	'django.contrib.contenttypes',
	'django.contrib.sessions',
	'django.contrib.messages',
	'django.contrib.staticfiles',
	'corsheaders',
	'rest_framework',
	'drf_spectacular',
	'users',
	'tickets',
]

MIDDLEWARE = [
	"corsheaders.middleware.CorsMiddleware",
	"django.middleware.security.SecurityMiddleware",
	"whitenoise.middleware.WhiteNoiseMiddleware",
	"django.contrib.sessions.middleware.SessionMiddleware",
	"django.middleware.common.CommonMiddleware",
	"django.middleware.csrf.CsrfViewMiddleware",
	"django.contrib.auth.middleware.AuthenticationMiddleware",
	"django.contrib.messages.middleware.MessageMiddleware",
	"django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# The support widget runs on other origins; leave empty to allow any origin in development
CORS_ALLOWED_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",") if o.strip()]
CORS_ALLOW_ALL_ORIGINS = not CORS_ALLOWED_ORIGINS and DEBUG

CORS_ALLOW_METHODS = [
	"GET",
	"POST",
	"PATCH",
	"OPTIONS",
]

CORS_ALLOW_HEADERS = [
	"content-type",
	"authorization",
]

ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h.strip()]

REST_FRAMEWORK = {
	'DEFAULT_AUTHENTICATION_CLASSES': (
		'rest_framework_simplejwt.authentication.JWTAuthentication',
	),
	"DEFAULT_PERMISSION_CLASSES": (
		"rest_framework.permissions.IsAuthenticated",
	),
	"DEFAULT_RENDERER_CLASSES": (
		"rest_framework.renderers.JSONRenderer",
	),
	"DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
	"EXCEPTION_HANDLER": "helpdesk.exceptions.api_exception_handler",
}

SIMPLE_JWT = {
	"ACCESS_TOKEN_LIFETIME": timedelta(minutes=int(os.getenv("JWT_ACCESS_MINUTES", "60"))),
	"REFRESH_TOKEN_LIFETIME": timedelta(days=int(os.getenv("JWT_REFRESH_DAYS", "7"))),
	"AUTH_HEADER_TYPES": ("Bearer",),
}

SPECTACULAR_SETTINGS = {
	"TITLE": "Helpdesk API",
	"DESCRIPTION": "Customer support ticketing: public ticket intake and staff triage.",
	"VERSION": "1.0.0",
}

ROOT_URLCONF = 'helpdesk.urls'

TEMPLATES = [
	{
		'BACKEND': 'django.template.backends.django.DjangoTemplates',
		'DIRS': [],
		'APP_DIRS': True,
		'OPTIONS': {
			'context_processors': [
				'django.template.context_processors.request',
				'django.contrib.auth.context_processors.auth',
				'django.contrib.messages.context_processors.messages',
			],
		},
	},
]

WSGI_APPLICATION = 'helpdesk.wsgi.application'

# Database
if ENV == "production":
	DATABASES = {
		"default": dj_database_url.config(
			default=os.getenv("DATABASE_URL"),
			conn_max_age=600,
			ssl_require=True
		)
	}
else:
	DATABASES = {
		"default": dj_database_url.config(
			default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}",
		)
	}

# Password validation
# https://docs.djangoproject.com/en/5.2/ref/settings/#auth-password-validators

AUTH_PASSWORD_VALIDATORS = [
	{
		'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
	},
	{
		'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
	},
	{
		'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
	},
	{
		'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
	},
]

# Internationalization
# https://docs.djangoproject.com/en/5.2/topics/i18n/

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "/static/"

STATIC_ROOT = BASE_DIR / "staticfiles"

STORAGES = {
	"default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
	"staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# Default primary key field type
# https://docs.djangoproject.com/en/5.2/ref/settings/#default-auto-field

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
	"version": 1,
	"disable_existing_loggers": False,
	"formatters": {
		"default": {
			"format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
		},
	},
	"handlers": {
		"console": {
			"class": "logging.StreamHandler",
			"formatter": "default",
		},
	},
	"root": {
		"handlers": ["console"],
		"level": LOG_LEVEL,
	},
	"loggers": {
		"django": {
			"handlers": ["console"],
			"level": os.getenv("DJANGO_LOG_LEVEL", "WARNING").upper(),
			"propagate": False,
		},
	},
}

# --- Tickets ---
# Insert attempts before a ticket number collision is reported to the caller
TICKET_NUMBER_ATTEMPTS = int(os.getenv("TICKET_NUMBER_ATTEMPTS", "3"))
TICKETS_DEFAULT_PAGE_SIZE = 20
TICKETS_MAX_PAGE_SIZE = int(os.getenv("TICKETS_MAX_PAGE_SIZE", "100"))
TICKETS_DB_ALIAS = os.getenv("TICKETS_DB_ALIAS", "default")
