import re

OAUTH_HEADER_RE = re.compile(r'[A-Za-z0-9-]+:[A-Za-z0-9_-]+')

OAUTH2_PROXY = "oauth2_proxy"
DEFAULT_URI_PREFIX = "/oauth2"
DEFAULT_HEADERS = "X-Auth-Request-Email:auth_response_email"


def build_oauth(data, registry, logger):
    ann = data.ann
    if not ann.oauth:
        return
    if ann.oauth != OAUTH2_PROXY:
        logger.warn("ignoring invalid oauth implementation '%s' on %s", ann.oauth, ann.source)
        return
    uri_prefix = (ann.oauth_uri_prefix or DEFAULT_URI_PREFIX).rstrip("/")
    namespace = ann.source.namespace
    backend = find_backend(registry, namespace, uri_prefix)
    if backend is None:
        logger.error("path '%s' was not found on namespace '%s'", uri_prefix, namespace)
        return
    headers, invalid = parse_headers(ann.oauth_headers or DEFAULT_HEADERS)
    for header in invalid:
        logger.warn("invalid header format '%s' on %s", header, ann.source)
    oauth = data.backend.oauth
    oauth.impl = ann.oauth
    oauth.backend_name = backend.id
    oauth.uri_prefix = uri_prefix
    oauth.headers = headers


def parse_headers(value):
    """Return the name:attribute pairs of a comma separated list and the malformed items."""
    headers, invalid = {}, []
    for header in value.split(","):
        if not header:
            continue
        if not OAUTH_HEADER_RE.fullmatch(header):
            invalid.append(header)
            continue
        name, attr = header.split(":")
        headers[name] = attr
    return headers, invalid


def find_backend(registry, namespace, uri_prefix):
    """Find the backend of the first path, on any host, matching the prefix."""
    for host in registry.hosts():
        for path in host.paths:
            if path.path.rstrip("/") == uri_prefix and path.backend.namespace == namespace:
                return path.backend
    return None
