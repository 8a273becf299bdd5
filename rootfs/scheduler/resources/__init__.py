from scheduler import KubeHTTPClient, get_k8s_session


class ResourceRegistry(type):
    """A registry of all defined Resources."""

    def __init__(cls, name, bases, attrs):
        if not hasattr(cls, 'plugins'):
            # This branch only executes when processing the mount point itself.
            cls.plugins = []
        elif not attrs.get('abstract', False):
            # This must be a plugin implementation, which should be registered.
            cls.plugins.append(cls)

    def __iter__(cls):
        return iter(cls.plugins)


class Resource(KubeHTTPClient, metaclass=ResourceRegistry):
    abstract = True
    short_name = None

    def __init__(self, url, k8s_api_verify_tls=True):
        # resources do not build a nested resource mapping of their own
        self.url = url
        self.k8s_api_verify_tls = k8s_api_verify_tls
        self.session = get_k8s_session(self.k8s_api_verify_tls)


# import the resource implementations so they end up in the registry
from scheduler.resources.pod import Pod  # noqa: E402,F401
from scheduler.resources.secret import Secret  # noqa: E402,F401
