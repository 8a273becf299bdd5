import logging

from ingress.annotations.affinity import build_backend_affinity
from ingress.annotations.auth import build_backend_auth_http
from ingress.annotations.bluegreen import build_backend_blue_green
from ingress.annotations.cors import build_backend_cors
from ingress.annotations.oauth import build_oauth
from ingress.annotations.policy import build_rewrite_url, build_waf, build_whitelist
from ingress.logger import Logger

logger = logging.getLogger(__name__)


class BackendData(object):
    """The directives of a route and the backend they are applied to."""

    def __init__(self, ann, backend):
        self.ann = ann
        self.backend = backend


class Updater(object):
    """
    Apply the backend directives of a route to its backend.

    Every builder runs once per route. A builder that fails logs the reason and leaves
    its part of the backend untouched, the remaining builders still run.
    """

    def __init__(self, registry, cache, logger=None):
        self.registry = registry
        self.cache = cache
        self.logger = logger or Logger()

    def update_backend(self, backend, ann):
        data = BackendData(ann, backend)
        logger.debug("updating backend %s from %s", backend.id, ann.source)
        build_backend_affinity(data, self.logger)
        build_backend_auth_http(data, self.registry, self.cache, self.logger)
        build_backend_blue_green(data, self.cache, self.logger)
        build_backend_cors(data, self.logger)
        build_oauth(data, self.registry, self.logger)
        build_rewrite_url(data, self.logger)
        build_waf(data, self.logger)
        build_whitelist(data, self.logger)
        return data
