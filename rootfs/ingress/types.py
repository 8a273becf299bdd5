"""
Typed values shared by the directive resolvers.

`BackendAnnotations` is the already parsed directive set of one route, `Backend` is the
configuration the resolvers fill in for the config renderer.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from django.conf import settings


@dataclass(frozen=True)
class Source:
    """The routing resource that declared a directive set, used on diagnostics only."""
    namespace: str
    name: str
    kind: Optional[str] = None

    def __str__(self):
        return "{} '{}/{}'".format(self.kind or settings.INGRESS_SOURCE_KIND,
                                   self.namespace, self.name)


@dataclass(frozen=True)
class BackendAnnotations:
    source: Source
    affinity: str = ""
    session_cookie_name: str = ""
    session_cookie_strategy: str = ""
    session_cookie_dynamic: bool = False
    auth_type: str = ""
    auth_secret: str = ""
    auth_realm: str = ""
    blue_green_balance: str = ""
    blue_green_deploy: str = ""
    blue_green_mode: str = ""
    cors_enable: bool = False
    cors_allow_origin: str = ""
    cors_allow_headers: str = ""
    cors_allow_methods: str = ""
    cors_allow_credentials: bool = False
    cors_max_age: int = 0
    cors_expose_headers: str = ""
    oauth: str = ""
    oauth_uri_prefix: str = ""
    oauth_headers: str = ""
    rewrite_target: str = ""
    waf: str = ""
    whitelist_source_range: str = ""


@dataclass
class Cookie:
    name: str = ""
    strategy: str = ""
    dynamic: bool = False


@dataclass
class UserlistConfig:
    name: str = ""
    realm: str = ""


@dataclass
class Cors:
    enabled: bool = False
    allow_origin: str = ""
    allow_headers: str = ""
    allow_methods: str = ""
    allow_credentials: bool = False
    max_age: int = 0
    expose_headers: str = ""


@dataclass
class OAuthConfig:
    impl: str = ""
    backend_name: str = ""
    uri_prefix: str = ""
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class Endpoint:
    ip: str
    port: int
    weight: int = 1
    # pod reference as namespace/name, empty if the endpoint is not backed by a pod
    target_ref: str = ""


@dataclass
class Backend:
    id: str
    namespace: str
    name: str
    port: str
    endpoints: List[Endpoint] = field(default_factory=list)
    cookie: Cookie = field(default_factory=Cookie)
    userlist: UserlistConfig = field(default_factory=UserlistConfig)
    cors: Cors = field(default_factory=Cors)
    oauth: OAuthConfig = field(default_factory=OAuthConfig)
    rewrite_url: str = ""
    waf: str = ""
    whitelist: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class User:
    name: str
    passwd: str
    encrypted: bool


@dataclass
class Userlist:
    name: str
    users: List[User] = field(default_factory=list)


@dataclass
class HostPath:
    path: str
    backend: Backend


@dataclass
class Host:
    hostname: str
    paths: List[HostPath] = field(default_factory=list)

    def add_path(self, backend, path):
        host_path = HostPath(path=path, backend=backend)
        self.paths.append(host_path)
        return host_path

    def find_path(self, path):
        for host_path in self.paths:
            if host_path.path == path:
                return host_path
        return None


@dataclass(frozen=True)
class Pod:
    namespace: str
    name: str
    labels: Dict[str, str] = field(default_factory=dict)
