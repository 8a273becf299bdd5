"""
Django settings for the ingress resolver.
"""
import os
import random
import string


def randstr(k):
    return ''.join(random.choices(string.ascii_lowercase + string.digits, k=k))


BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# A boolean that turns on/off debug mode.
# https://docs.djangoproject.com/en/4.2/ref/settings/#debug
DEBUG = os.environ.get('INGRESS_DEBUG', 'false').lower() == "true"

# The resolver serves no requests, the key only satisfies Django's settings checks
SECRET_KEY = os.environ.get('INGRESS_SECRET_KEY', randstr(64))

INSTALLED_APPS = [
    'ingress.apps.AppConfig',
]

# the resolver owns no persistent state
DATABASES = {}

TIME_ZONE = os.environ.get('TZ', 'UTC')
USE_TZ = True

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'root': {'level': 'DEBUG' if DEBUG else 'WARN'},
    'formatters': {
        'verbose': {
            'format': '%(levelname)s %(asctime)s %(module)s %(process)d %(thread)d %(message)s'
        },
        'simple': {
            'format': '%(levelname)s %(message)s'
        },
    },
    'handlers': {
        'null': {
            'level': 'DEBUG',
            'class': 'logging.NullHandler',
        },
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'simple'
        }
    },
    'loggers': {
        'ingress': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': True,
        },
        'scheduler': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': True,
        },
    }
}

# Info messages carry a verbosity level, higher levels are only logged when
# INGRESS_LOG_VERBOSITY is at least as high.
INGRESS_LOG_VERBOSITY = int(os.environ.get('INGRESS_LOG_VERBOSITY', 0))

# kind of the routing resource as printed on diagnostics, e.g. ingress 'default/app'
INGRESS_SOURCE_KIND = os.environ.get('INGRESS_SOURCE_KIND', 'ingress')

# kubernetes api server used to read pods and secrets
SCHEDULER_URL = "https://{}:{}".format(
    os.environ.get('KUBERNETES_SERVICE_HOST', 'kubernetes.default'),
    os.environ.get('KUBERNETES_SERVICE_PORT', '443'),
)

K8S_API_VERIFY_TLS = os.environ.get('K8S_API_VERIFY_TLS', 'true').lower() == "true"
K8S_API_TOKEN_FILE = os.environ.get(
    'K8S_API_TOKEN_FILE', '/var/run/secrets/kubernetes.io/serviceaccount/token')
K8S_API_CA_FILE = os.environ.get(
    'K8S_API_CA_FILE', '/var/run/secrets/kubernetes.io/serviceaccount/ca.crt')
