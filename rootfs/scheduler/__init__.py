from collections import OrderedDict
import logging
import os
import requests
import requests.exceptions
from requests_toolbelt import user_agent
from urllib.parse import urljoin

from django.conf import settings

from ingress import __version__ as ingress_version
from scheduler.exceptions import KubeException, KubeHTTPException  # noqa


logger = logging.getLogger(__name__)
session = None


def get_k8s_session(k8s_api_verify_tls):
    global session
    if session is None:
        session = requests.Session()
        session.headers = {
            'Content-Type': 'application/json',
            'User-Agent': user_agent('Ingress Resolver', ingress_version)
        }
        # outside of a cluster there is no service account to mount
        if os.path.exists(settings.K8S_API_TOKEN_FILE):
            with open(settings.K8S_API_TOKEN_FILE) as token_file:
                session.headers['Authorization'] = 'Bearer ' + token_file.read()
        if k8s_api_verify_tls:
            session.verify = settings.K8S_API_CA_FILE
        else:
            session.verify = False
    return session


class KubeHTTPClient(object):
    api_version = 'v1'
    api_prefix = 'api'
    resource_mapping = OrderedDict()

    def __init__(self, url, k8s_api_verify_tls=True):
        self.url = url
        self.k8s_api_verify_tls = k8s_api_verify_tls
        self.session = get_k8s_session(self.k8s_api_verify_tls)

        # map the various k8s Resources to an internal property
        from scheduler.resources import Resource  # lazy load
        for res in Resource:
            name = str(res.__name__).lower()  # singular
            component = name + 's'  # make plural
            # check if component has already been processed
            if component in self.resource_mapping:
                continue

            # get past recursion problems in case of self reference
            self.resource_mapping[component] = ''
            self.resource_mapping[component] = res(self.url, self.k8s_api_verify_tls)
            # map singular Resource name to the plural one
            self.resource_mapping[name] = component
            if res.short_name is not None:
                # map short name to long name so a resource can be named po
                # but have the main object live at pods
                self.resource_mapping[str(res.short_name).lower()] = component

    def api(self, tmpl, *args):
        """Return a fully-qualified Kubernetes API URL from a string template with args."""
        return "/{}/{}".format(self.api_prefix, self.api_version) + tmpl.format(*args)

    def __getattr__(self, name):
        if name in self.resource_mapping:
            # resolve to final name if needed
            component = self.resource_mapping[name]
            if type(component) is not str:
                # already a component object
                return component

            return self.resource_mapping[component]

        return object.__getattribute__(self, name)

    @staticmethod
    def unhealthy(status_code):
        return not 200 <= status_code <= 299

    def http_get(self, path, **kwargs):
        """
        Make a GET request to the k8s server.
        """
        try:
            url = urljoin(self.url, path)
            response = self.session.get(url, **kwargs)
        except requests.exceptions.ConnectionError as err:
            # reraise as KubeException, but log stacktrace.
            message = "There was a problem retrieving data from " \
                      "the Kubernetes API server. URL: {}".format(url)
            logger.error(message)
            raise KubeException(message) from err

        return response


SchedulerClient = KubeHTTPClient
