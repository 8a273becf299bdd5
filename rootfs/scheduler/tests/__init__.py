import requests_mock
from django.conf import settings
from django.test import SimpleTestCase

from scheduler import SchedulerClient

API = settings.SCHEDULER_URL + '/api/v1'


class TestCase(SimpleTestCase):
    """Scheduler tests against a mocked Kubernetes API"""

    def setUp(self):
        self.scheduler = SchedulerClient(settings.SCHEDULER_URL, settings.K8S_API_VERIFY_TLS)
        self.requests = requests_mock.Mocker()
        self.requests.start()
        self.addCleanup(self.requests.stop)
