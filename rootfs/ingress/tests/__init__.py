import logging

from django.test import SimpleTestCase

from ingress.annotations import BackendData
from ingress.exceptions import (
    InvalidTargetRef, PodNotFound, SecretKeyNotFound, SecretNotFound
)
from ingress.logger import Logger
from ingress.registry import Registry
from ingress.types import Backend, BackendAnnotations, Endpoint, Pod, Source

DIAGNOSTICS_LOGGER = 'ingress.diagnostics'
LEVEL_NAMES = {
    logging.ERROR: 'ERROR',
    logging.WARNING: 'WARN',
    logging.INFO: 'INFO',
}


class CaptureHandler(logging.Handler):
    """Keep every diagnostic as a 'LEVEL message' line."""

    def __init__(self):
        super(CaptureHandler, self).__init__(logging.DEBUG)
        self.lines = []

    def emit(self, record):
        level = LEVEL_NAMES.get(record.levelno, record.levelname)
        verbosity = getattr(record, 'verbosity', None)
        if verbosity is not None:
            level = '{}-V({})'.format(level, verbosity)
        self.lines.append('{} {}'.format(level, record.getMessage()))


class FakeCache(object):
    """Cluster state cache serving pods and secrets from dicts."""

    def __init__(self, pods=None, secrets=None):
        # target ref -> labels, secret name -> {key: bytes}
        self.pods = pods or {}
        self.secrets = secrets or {}

    def get_pod(self, target_ref):
        if not target_ref:
            raise InvalidTargetRef()
        if target_ref not in self.pods:
            raise PodNotFound(target_ref)
        namespace, _, name = target_ref.rpartition('/')
        return Pod(namespace=namespace or 'default', name=name, labels=self.pods[target_ref])

    def get_secret_content(self, secret_name, key):
        if secret_name not in self.secrets:
            raise SecretNotFound(secret_name)
        if key not in self.secrets[secret_name]:
            raise SecretKeyNotFound(secret_name, key)
        return self.secrets[secret_name][key]


class TestCase(SimpleTestCase):
    """Resolver tests with a fresh registry, a fake cache and captured diagnostics."""

    def setUp(self):
        self.registry = Registry()
        self.cache = FakeCache()
        self.logger = Logger()
        self.handler = CaptureHandler()
        diagnostics = logging.getLogger(DIAGNOSTICS_LOGGER)
        self._level = diagnostics.level
        diagnostics.setLevel(logging.DEBUG)
        diagnostics.addHandler(self.handler)

    def tearDown(self):
        diagnostics = logging.getLogger(DIAGNOSTICS_LOGGER)
        diagnostics.removeHandler(self.handler)
        diagnostics.setLevel(self._level)

    def create_backend_data(self, namespace='default', name='app', endpoints=None, **ann):
        source = Source(namespace=namespace, name=name)
        backend = Backend(id=Registry.backend_id(namespace, name, 8080),
                          namespace=namespace, name=name, port='8080',
                          endpoints=endpoints or [])
        return BackendData(BackendAnnotations(source=source, **ann), backend)

    @staticmethod
    def build_endpoints(targets):
        """
        Build endpoints from a comma separated list of target refs, an optional
        ``=weight`` suffix overrides the default weight of 1.
        """
        endpoints = []
        if not targets:
            return endpoints
        for target in targets.split(','):
            target, _, weight = target.partition('=')
            endpoints.append(Endpoint(
                ip='172.17.0.11', port=8080, weight=int(weight) if weight else 1,
                target_ref=target))
        return endpoints

    def clear_logging(self):
        self.handler.lines = []

    def assertLogging(self, expected=''):
        expected = [line.strip() for line in expected.strip().splitlines() if line.strip()]
        self.assertEqual(self.handler.lines, expected)
