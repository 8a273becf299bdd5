import logging

from ingress.types import Backend, Host, Userlist

logger = logging.getLogger(__name__)


class Registry(object):
    """
    Backends, hosts and userlists known on a reconciliation pass.

    The registry is shared by every route of a pass and is not thread safe, callers that
    resolve routes concurrently must serialize the access.
    """

    def __init__(self):
        self._backends = {}
        self._hosts = {}
        self._userlists = {}

    def clear(self):
        """Forget everything, used when a new reconciliation pass starts."""
        self._backends.clear()
        self._hosts.clear()
        self._userlists.clear()

    @staticmethod
    def backend_id(namespace, name, port):
        return "{}_{}_{}".format(namespace, name, port)

    def acquire_backend(self, namespace, name, port):
        backend = self.find_backend(namespace, name, port)
        if backend is None:
            backend_id = self.backend_id(namespace, name, port)
            backend = Backend(id=backend_id, namespace=namespace, name=name, port=str(port))
            self._backends[backend_id] = backend
            logger.debug("backend %s registered", backend_id)
        return backend

    def find_backend(self, namespace, name, port):
        return self._backends.get(self.backend_id(namespace, name, port))

    def backends(self):
        return list(self._backends.values())

    def acquire_host(self, hostname):
        host = self.find_host(hostname)
        if host is None:
            host = Host(hostname=hostname)
            self._hosts[hostname] = host
        return host

    def find_host(self, hostname):
        return self._hosts.get(hostname)

    def hosts(self):
        """Return the hosts in the order they were registered."""
        return list(self._hosts.values())

    def find_userlist(self, name):
        return self._userlists.get(name)

    def add_userlist(self, name, users):
        userlist = Userlist(name=name, users=list(users))
        self._userlists[name] = userlist
        return userlist

    def userlists(self):
        return sorted(self._userlists.values(), key=lambda userlist: userlist.name)
