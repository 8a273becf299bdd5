COOKIE_STRATEGIES = ("insert", "rewrite", "prefix")
DEFAULT_COOKIE_NAME = "INGRESSCOOKIE"
DEFAULT_COOKIE_STRATEGY = "insert"


def build_backend_affinity(data, logger):
    ann = data.ann
    if ann.affinity != "cookie":
        if ann.affinity:
            logger.error("unsupported affinity type on %s: %s", ann.source, ann.affinity)
        return
    name = ann.session_cookie_name or DEFAULT_COOKIE_NAME
    strategy = ann.session_cookie_strategy
    if strategy not in COOKIE_STRATEGIES:
        if strategy:
            logger.warn("invalid affinity cookie strategy '%s' on %s, using '%s' instead",
                        strategy, ann.source, DEFAULT_COOKIE_STRATEGY)
        strategy = DEFAULT_COOKIE_STRATEGY
    data.backend.cookie.name = name
    data.backend.cookie.strategy = strategy
    data.backend.cookie.dynamic = ann.session_cookie_dynamic
