"""
Unit tests for the cluster state cache, the Kubernetes API is mocked.
"""
import base64

import requests_mock
from django.conf import settings
from django.test import SimpleTestCase

from ingress.annotations import Updater
from ingress.cache import Cache
from ingress.exceptions import (
    CacheError, InvalidTargetRef, PodNotFound, SecretKeyNotFound, SecretNotFound
)
from ingress.registry import Registry
from ingress.types import Backend, BackendAnnotations, Endpoint, Source

API = settings.SCHEDULER_URL + '/api/v1'


def b64(value):
    return base64.b64encode(value).decode('ascii')


@requests_mock.Mocker()
class CacheTest(SimpleTestCase):
    """Tests pods and secrets lookups"""

    def setUp(self):
        self.cache = Cache()

    def test_get_pod(self, mock_requests):
        mock_requests.get(API + '/namespaces/default/pods/app-v1', json={
            'kind': 'Pod',
            'metadata': {'name': 'app-v1', 'namespace': 'default', 'labels': {'v': '1'}},
        })
        pod = self.cache.get_pod('default/app-v1')
        self.assertEqual(pod.name, 'app-v1')
        self.assertEqual(pod.namespace, 'default')
        self.assertEqual(pod.labels, {'v': '1'})
        # served from the snapshot
        self.assertEqual(self.cache.get_pod('default/app-v1'), pod)
        self.assertEqual(mock_requests.call_count, 1)

    def test_get_pod_without_labels(self, mock_requests):
        mock_requests.get(API + '/namespaces/default/pods/app', json={
            'kind': 'Pod', 'metadata': {'name': 'app', 'namespace': 'default'}})
        self.assertEqual(self.cache.get_pod('default/app').labels, {})

    def test_pod_not_found(self, mock_requests):
        mock_requests.get(API + '/namespaces/default/pods/gone', status_code=404,
                          reason='Not Found')
        with self.assertRaises(PodNotFound, msg="pod not found: 'default/gone'"):
            self.cache.get_pod('default/gone')
        with self.assertRaises(PodNotFound):
            self.cache.get_pod('default/gone')
        self.assertEqual(mock_requests.call_count, 1)
        self.cache.clear()
        with self.assertRaises(PodNotFound):
            self.cache.get_pod('default/gone')
        self.assertEqual(mock_requests.call_count, 2)

    def test_invalid_target_ref(self, mock_requests):
        with self.assertRaises(InvalidTargetRef) as ctx:
            self.cache.get_pod('')
        self.assertEqual(str(ctx.exception), 'endpoint does not reference a pod')
        with self.assertRaises(InvalidTargetRef):
            self.cache.get_pod('app-v1')
        self.assertFalse(mock_requests.called)

    def test_api_failure(self, mock_requests):
        mock_requests.get(API + '/namespaces/default/pods/app', status_code=500,
                          reason='Internal Server Error')
        with self.assertRaises(CacheError) as ctx:
            self.cache.get_pod('default/app')
        self.assertEqual(
            str(ctx.exception),
            'failed to get Pod "app" in Namespace "default": 500 Internal Server Error')
        # errors are not kept on the snapshot
        mock_requests.get(API + '/namespaces/default/pods/app', json={
            'metadata': {'name': 'app', 'labels': {'v': '2'}}})
        self.assertEqual(self.cache.get_pod('default/app').labels, {'v': '2'})

    def test_get_secret_content(self, mock_requests):
        mock_requests.get(API + '/namespaces/default/secrets/mypwd', json={
            'kind': 'Secret',
            'metadata': {'name': 'mypwd', 'namespace': 'default'},
            'data': {'auth': b64(b'usr1::clear1\nusr2:enc2')},
        })
        content = self.cache.get_secret_content('default/mypwd', 'auth')
        self.assertEqual(content, b'usr1::clear1\nusr2:enc2')
        with self.assertRaises(SecretKeyNotFound) as ctx:
            self.cache.get_secret_content('default/mypwd', 'other')
        self.assertEqual(str(ctx.exception),
                         "secret 'default/mypwd' does not have file/key 'other'")
        self.assertEqual(mock_requests.call_count, 1)

    def test_secret_not_found(self, mock_requests):
        mock_requests.get(API + '/namespaces/default/secrets/mypwd', status_code=404,
                          reason='Not Found')
        with self.assertRaises(SecretNotFound) as ctx:
            self.cache.get_secret_content('default/mypwd', 'auth')
        self.assertEqual(str(ctx.exception), "secret not found: 'default/mypwd'")

    def test_invalid_response(self, mock_requests):
        # a proxy answering in front of the API server
        mock_requests.get(API + '/namespaces/default/pods/app', text='<html>proxy error</html>')
        with self.assertRaises(CacheError) as ctx:
            self.cache.get_pod('default/app')
        self.assertEqual(str(ctx.exception), "invalid response reading 'default/app'")
        mock_requests.get(API + '/namespaces/default/pods/other', json=['not', 'a', 'pod'])
        with self.assertRaises(CacheError) as ctx:
            self.cache.get_pod('default/other')
        self.assertEqual(str(ctx.exception), "invalid response reading 'default/other'")

    def test_invalid_secret_content(self, mock_requests):
        mock_requests.get(API + '/namespaces/default/secrets/mypwd', json={
            'kind': 'Secret',
            'metadata': {'name': 'mypwd', 'namespace': 'default'},
            'data': {'auth': 'not*base64'},
        })
        with self.assertRaises(CacheError) as ctx:
            self.cache.get_secret_content('default/mypwd', 'auth')
        self.assertEqual(str(ctx.exception), "invalid content on secret 'default/mypwd'")

    def test_update_backend_on_invalid_response(self, mock_requests):
        mock_requests.get(API + '/namespaces/default/pods/app', text='<html>proxy error</html>')
        source = Source(namespace='default', name='app')
        backend = Backend(id=Registry.backend_id('default', 'app', 8080),
                          namespace='default', name='app', port='8080',
                          endpoints=[Endpoint(ip='172.17.0.11', port=8080, weight=1,
                                              target_ref='default/app')])
        ann = BackendAnnotations(source=source, blue_green_balance='v=1=50',
                                 waf='modsecurity')
        with self.assertLogs('ingress.diagnostics', level='WARNING') as logs:
            Updater(Registry(), self.cache).update_backend(backend, ann)
        self.assertEqual(logs.output, [
            "WARNING:ingress.diagnostics:endpoint '172.17.0.11:8080' on ingress 'default/app' "
            "was removed from balance: invalid response reading 'default/app'"])
        self.assertEqual(backend.endpoints[0].weight, 0)
        self.assertEqual(backend.waf, 'modsecurity')
