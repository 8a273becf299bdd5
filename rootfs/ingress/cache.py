"""
Read only access to the cluster objects the resolvers depend on.
"""
import logging

from django.conf import settings

from ingress.exceptions import (
    CacheError, InvalidTargetRef, PodNotFound, SecretKeyNotFound, SecretNotFound
)
from ingress.types import Pod
from scheduler import KubeException, KubeHTTPException, SchedulerClient

logger = logging.getLogger(__name__)


class Cache(object):
    """
    Pods and secrets read from the Kubernetes API.

    Objects are fetched once and kept in a snapshot until `clear` is called, so a whole
    reconciliation pass sees the same state without further round trips.
    """

    def __init__(self, scheduler=None):
        if scheduler is None:
            scheduler = SchedulerClient(settings.SCHEDULER_URL, settings.K8S_API_VERIFY_TLS)
        self.scheduler = scheduler
        self._pods = {}
        self._secrets = {}

    def clear(self):
        self._pods.clear()
        self._secrets.clear()

    @staticmethod
    def split_name(name):
        namespace, sep, name = name.partition('/')
        if not sep or not namespace or not name:
            return None, None
        return namespace, name

    def get_pod(self, target_ref):
        """Return the pod an endpoint references as namespace/name."""
        if not target_ref:
            raise InvalidTargetRef()
        if target_ref not in self._pods:
            namespace, name = self.split_name(target_ref)
            if namespace is None:
                raise InvalidTargetRef(target_ref)
            data = self._fetch(self.scheduler.pod, namespace, name)
            self._pods[target_ref] = None if data is None else Pod(
                namespace=namespace, name=name, labels=self.scheduler.pod.labels(data))
        pod = self._pods[target_ref]
        if pod is None:
            raise PodNotFound(target_ref)
        return pod

    def get_secret_content(self, secret_name, key):
        """Return the decoded content of one key of a secret named as namespace/name."""
        if secret_name not in self._secrets:
            namespace, name = self.split_name(secret_name)
            if namespace is None:
                raise SecretNotFound(secret_name)
            data = self._fetch(self.scheduler.secret, namespace, name)
            try:
                self._secrets[secret_name] = (
                    None if data is None else self.scheduler.secret.decode(data))
            except ValueError as e:
                raise CacheError("invalid content on secret '{}'".format(secret_name)) from e
        content = self._secrets[secret_name]
        if content is None:
            raise SecretNotFound(secret_name)
        if key not in content:
            raise SecretKeyNotFound(secret_name, key)
        return content[key]

    @staticmethod
    def _fetch(resource, namespace, name):
        """Return the object as a dict, or None if it does not exist."""
        try:
            data = resource.get(namespace, name).json()
        except KubeHTTPException as e:
            if e.response.status_code == 404:
                return None
            logger.error("unable to read {}/{}: {}".format(namespace, name, e))
            raise CacheError(str(e)) from e
        except KubeException as e:
            raise CacheError(str(e)) from e
        except ValueError as e:
            # answered, but not with a kubernetes object
            logger.error("unable to decode {}/{}: {}".format(namespace, name, e))
            raise CacheError("invalid response reading '{}/{}'".format(namespace, name)) from e
        if not isinstance(data, dict):
            raise CacheError("invalid response reading '{}/{}'".format(namespace, name))
        return data
