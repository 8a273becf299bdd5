"""
HTTP basic authentication backed by a userlist read from a secret.
"""
from ingress.exceptions import CacheError
from ingress.types import User
from ingress.utils import full_qualified_name

AUTH_SECRET_KEY = "auth"
DEFAULT_REALM = "localhost"


def build_backend_auth_http(data, registry, cache, logger):
    ann = data.ann
    if ann.auth_type != "basic":
        if ann.auth_type:
            logger.error("unsupported authentication type on %s: %s", ann.source, ann.auth_type)
        return
    if not ann.auth_secret:
        logger.error("missing secret name on basic authentication on %s", ann.source)
        return
    secret_name = full_qualified_name(ann.source.namespace, ann.auth_secret)
    list_name = secret_name.replace("/", "_", 1)
    userlist = registry.find_userlist(list_name)
    if userlist is None:
        try:
            content = cache.get_secret_content(secret_name, AUTH_SECRET_KEY)
        except CacheError as e:
            logger.error("error reading basic authentication on %s: %s", ann.source, e)
            return
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError:
            logger.warn("secret '%s' declared on %s is not utf-8, invalid bytes were replaced",
                        secret_name, ann.source)
            content = content.decode("utf-8", errors="replace")
        users, errors = extract_userlist(content)
        for error in errors:
            logger.warn("ignoring malformed usr/passwd on secret '%s', declared on %s: %s",
                        secret_name, ann.source, error)
        userlist = registry.add_userlist(list_name, users)
        if not users:
            logger.warn("userlist on %s for basic authentication is empty", ann.source)
    data.backend.userlist.name = userlist.name
    realm = DEFAULT_REALM
    if '"' in ann.auth_realm:
        logger.warn("ignoring auth-realm with quotes on %s", ann.source)
    elif ann.auth_realm:
        realm = ann.auth_realm
    data.backend.userlist.realm = realm


def extract_userlist(content):
    """
    Parse one user per line, ``usr:encpwd`` or ``usr::clearpwd``.

    Returns the parsed users and a message for every malformed line, lines are numbered
    from 1 and empty lines are skipped.
    """
    users, errors = [], []
    for lineno, line in enumerate(content.split("\n"), start=1):
        if not line:
            continue
        username, sep, passwd = line.partition(":")
        if not sep:
            errors.append("missing password of user '{}' line {}".format(line, lineno))
            continue
        if not username:
            errors.append("missing username line {}".format(lineno))
            continue
        if passwd == "" or passwd == ":":
            errors.append("missing password of user '{}' line {}".format(username, lineno))
            continue
        if passwd.startswith(":"):
            users.append(User(name=username, passwd=passwd[1:], encrypted=False))
        else:
            users.append(User(name=username, passwd=passwd, encrypted=True))
    return users, errors
