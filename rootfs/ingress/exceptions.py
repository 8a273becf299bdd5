class CacheError(Exception):
    """A cluster object could not be read from the cache."""


class SecretNotFound(CacheError):
    def __init__(self, secret_name):
        self.secret_name = secret_name
        super(SecretNotFound, self).__init__("secret not found: '{}'".format(secret_name))


class SecretKeyNotFound(CacheError):
    def __init__(self, secret_name, key):
        self.secret_name = secret_name
        self.key = key
        super(SecretKeyNotFound, self).__init__(
            "secret '{}' does not have file/key '{}'".format(secret_name, key))


class PodNotFound(CacheError):
    def __init__(self, target_ref):
        self.target_ref = target_ref
        super(PodNotFound, self).__init__("pod not found: '{}'".format(target_ref))


class InvalidTargetRef(CacheError):
    def __init__(self, target_ref=""):
        self.target_ref = target_ref
        if target_ref:
            msg = "invalid pod reference: '{}'".format(target_ref)
        else:
            msg = "endpoint does not reference a pod"
        super(InvalidTargetRef, self).__init__(msg)
