from ingress.settings.production import *  # noqa

# A boolean that turns on/off debug mode.
# https://docs.djangoproject.com/en/4.2/ref/settings/#debug
DEBUG = True

SECRET_KEY = 'ingress-unittest'

# every verbosity gated message is visible to the tests
INGRESS_LOG_VERBOSITY = 3
INGRESS_SOURCE_KIND = 'ingress'

# scheduler for testing
SCHEDULER_URL = 'http://test-scheduler.example.com'
K8S_API_VERIFY_TLS = False
K8S_API_TOKEN_FILE = '/nonexistent/serviceaccount/token'

LOGGING['loggers']['ingress']['handlers'] = ['null']  # noqa: F405
LOGGING['loggers']['ingress']['level'] = 'DEBUG'  # noqa: F405
LOGGING['loggers']['scheduler']['handlers'] = ['null']  # noqa: F405
