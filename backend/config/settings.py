"""
Django settings for the sweep service.
Every value can be overridden through the environment.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'insecure-development-key')
DEBUG = os.getenv('DJANGO_DEBUG', 'False').lower() == 'true'
ALLOWED_HOSTS = [h for h in os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost').split(',') if h]

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'config',
    'accounts',
    'sweeps',
]

MIDDLEWARE = []
ROOT_URLCONF = 'config.urls'

# PostgreSQL when configured, SQLite otherwise
if os.getenv('POSTGRES_DB'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.getenv('POSTGRES_DB'),
            'USER': os.getenv('POSTGRES_USER', 'postgres'),
            'PASSWORD': os.getenv('POSTGRES_PASSWORD', ''),
            'HOST': os.getenv('POSTGRES_HOST', 'localhost'),
            'PORT': os.getenv('POSTGRES_PORT', '5432'),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.getenv('SQLITE_PATH', str(BASE_DIR / 'db.sqlite3')),
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
USE_TZ = True
TIME_ZONE = 'UTC'

# Sweep engine
SWEEP_ENGINE_ENABLED = os.getenv('SWEEP_ENGINE_ENABLED', 'True').lower() == 'true'
SWEEP_COLLECT_THRESHOLD = os.getenv('SWEEP_COLLECT_THRESHOLD', '0.001')
SWEEP_TRANSFER_FEE = os.getenv('SWEEP_TRANSFER_FEE', '0.0005')
SWEEP_CYCLE_INTERVAL_SECONDS = int(os.getenv('SWEEP_CYCLE_INTERVAL_SECONDS', '3600'))
SWEEP_MASTER_WALLET_PRIVATE_KEY = os.getenv('SWEEP_MASTER_WALLET_PRIVATE_KEY', '')

# Chain access (BNB Smart Chain by default)
SWEEP_RPC_URL = os.getenv('SWEEP_RPC_URL', 'https://bsc-dataseed.binance.org/')
SWEEP_CHAIN_ID = int(os.getenv('SWEEP_CHAIN_ID', '56'))
SWEEP_RPC_TIMEOUT_SECONDS = int(os.getenv('SWEEP_RPC_TIMEOUT_SECONDS', '30'))
SWEEP_RECEIPT_TIMEOUT_SECONDS = int(os.getenv('SWEEP_RECEIPT_TIMEOUT_SECONDS', '180'))
RPC_POOL_CONNECTIONS = int(os.getenv('RPC_POOL_CONNECTIONS', '10'))
RPC_POOL_MAXSIZE = int(os.getenv('RPC_POOL_MAXSIZE', '10'))

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'web3': {
            'level': 'WARNING',
        },
        'urllib3': {
            'level': 'WARNING',
        },
    },
}
