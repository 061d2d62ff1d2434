import os
import sys
from decimal import Decimal
from pathlib import Path
from dotenv import load_dotenv
from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent
# Try root project .env (one directory up from BASE_DIR) first, then local
root_env = (BASE_DIR.parent / '.env')
local_env = (BASE_DIR / '.env')
if root_env.exists():
    load_dotenv(root_env)
elif local_env.exists():
    load_dotenv(local_env)

# ---------------------------------------------------------------------------
# SECRET KEY HANDLING
# Prefer DJANGO_SECRET_KEY, fall back to SECRET_KEY for broader compatibility.
# In production (DEBUG=False) we require a non-default, non-empty key.
# ---------------------------------------------------------------------------
_candidate_key = (
    os.getenv('DJANGO_SECRET_KEY')
    or os.getenv('SECRET_KEY')
    or ''
)

SECRET_KEY = _candidate_key if _candidate_key else 'dev-secret-key'
DEBUG = os.getenv('DEBUG', 'True') == 'True'
ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', '*').split(',')

if (not SECRET_KEY or SECRET_KEY == 'dev-secret-key') and not DEBUG:
    raise ImproperlyConfigured(
        'SECRET_KEY is missing or using insecure default. Set DJANGO_SECRET_KEY or SECRET_KEY env var.'
    )

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'drf_spectacular',
    'apps.common',
    'apps.catalog',
    'apps.carts',
    'apps.shipping',
    'apps.orders',
    'apps.documents',
]

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    # The storefront is anonymous; the cart is bound to the Django session.
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
    'EXCEPTION_HANDLER': 'apps.api.exceptions.global_exception_handler',
}

SPECTACULAR_SETTINGS = {
    'TITLE': 'Rental Storefront API',
    'DESCRIPTION': 'Rental equipment storefront: catalog, session cart, shipping quotes, orders and documents.',
    'VERSION': '1.0.0',
    'SERVE_INCLUDE_SCHEMA': False,
    'COMPONENT_SPLIT_REQUEST': True,
    'SCHEMA_PATH_PREFIX': r'/api',
    'SERVE_PERMISSIONS': [],
}

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'storefront.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'storefront.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': os.getenv('POSTGRES_DB', 'storefront'),
        'USER': os.getenv('POSTGRES_USER', 'storefront'),
        'PASSWORD': os.getenv('POSTGRES_PASSWORD', 'storefront'),
        'HOST': os.getenv('POSTGRES_HOST', 'db'),
        'PORT': os.getenv('POSTGRES_PORT', '5432'),
    }
}

"""Caching configuration.
The product list is cached in Redis. Cache outages are ignored so the
catalog keeps serving straight from the database."""
REDIS_URL = os.getenv('REDIS_URL', 'redis://redis:6379/1')
CACHE_TTL = int(os.getenv('CACHE_TTL', '300'))  # seconds

CACHES = {
    'default': {
        'BACKEND': 'django_redis.cache.RedisCache',
        'LOCATION': REDIS_URL,
        'OPTIONS': {
            'CLIENT_CLASS': 'django_redis.client.DefaultClient',
            'IGNORE_EXCEPTIONS': True,
        },
        'KEY_PREFIX': os.getenv('CACHE_KEY_PREFIX', 'storefront'),
        'TIMEOUT': CACHE_TTL,
    }
}

# Use SQLite for tests to simplify CI/dev without Postgres
USING_PYTEST = (
    os.getenv('PYTEST_CURRENT_TEST') is not None
    or any(os.path.basename(arg).startswith('pytest') for arg in sys.argv)
    or os.path.basename(os.path.dirname(sys.argv[0])) == 'pytest'
)

if 'test' in sys.argv or USING_PYTEST:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
            'LOCATION': 'storefront-test-cache',
            'TIMEOUT': 60,
        }
    }

# Cart sessions outlive browser restarts.
SESSION_ENGINE = 'django.contrib.sessions.backends.db'
SESSION_COOKIE_AGE = int(os.getenv('SESSION_COOKIE_AGE', str(60 * 60 * 24 * 14)))

# ---------------------------------------------------------------------------
# Storefront integrations
# ---------------------------------------------------------------------------
STOREFRONT_CURRENCY = os.getenv('STOREFRONT_CURRENCY', 'usd')
STOREFRONT_PUBLIC_URL = os.getenv('STOREFRONT_PUBLIC_URL', 'http://localhost:5173').rstrip('/')
STOREFRONT_CONTACT_EMAIL = os.getenv('STOREFRONT_CONTACT_EMAIL', 'contact@company.com')

GOOGLE_MAPS_API_KEY = os.getenv('GOOGLE_MAPS_API_KEY', '')
GEOCODING_URL = os.getenv(
    'GEOCODING_URL', 'https://maps.googleapis.com/maps/api/geocode/json'
)
GEOCODING_TIMEOUT = float(os.getenv('GEOCODING_TIMEOUT', '5'))

SHIPPING_DEFAULT_REGION = os.getenv('SHIPPING_DEFAULT_REGION', 'CA')
SHIPPING_DEFAULT_SHIPPING_COST = Decimal(os.getenv('SHIPPING_DEFAULT_SHIPPING_COST', '75.00'))
SHIPPING_DEFAULT_COLLECTION_COST = Decimal(os.getenv('SHIPPING_DEFAULT_COLLECTION_COST', '75.00'))

STRIPE_SECRET_KEY = os.getenv('STRIPE_SECRET_KEY', '')
STRIPE_SUCCESS_URL = os.getenv(
    'STRIPE_SUCCESS_URL',
    f'{STOREFRONT_PUBLIC_URL}/payment-success?session_id={{CHECKOUT_SESSION_ID}}',
)
STRIPE_CANCEL_URL = os.getenv('STRIPE_CANCEL_URL', f'{STOREFRONT_PUBLIC_URL}/checkout')

HTMLCSSTOIMAGE_API_KEY = os.getenv('HTMLCSSTOIMAGE_API_KEY', '')
HTMLCSSTOIMAGE_URL = os.getenv('HTMLCSSTOIMAGE_URL', 'https://hcti.io/v1/image')
PDF_SERVICE_TIMEOUT = float(os.getenv('PDF_SERVICE_TIMEOUT', '20'))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {'format': '%(asctime)s %(levelname)s %(name)s %(message)s'},
    },
    'handlers': {
        'console': {'class': 'logging.StreamHandler', 'formatter': 'plain'},
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': os.getenv('APP_LOG_LEVEL', 'INFO'),
        },
    },
}

AUTH_PASSWORD_VALIDATORS = []

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = os.getenv('STATIC_ROOT', str(BASE_DIR / 'staticfiles'))
STATICFILES_DIRS = [BASE_DIR / 'static'] if (BASE_DIR / 'static').exists() else []
OPENAPI_STATIC_JSON = 'schema/openapi.json'
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
