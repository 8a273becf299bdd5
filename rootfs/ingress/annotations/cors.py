import re

# separators between tokens are a comma, a white space or both, tokens are never empty
_WS = r'[\t\n\f\r ]'
_SEP = r'(?:,{ws}?|{ws})'.format(ws=_WS)

CORS_ORIGIN_RE = re.compile(r'(?:https?://[A-Za-z0-9\-.]*(?::[0-9]+)?|\*)?')
CORS_METHODS_RE = re.compile(r'[A-Za-z]+(?:{sep}[A-Za-z]+)*{sep}?'.format(sep=_SEP))
CORS_HEADERS_RE = re.compile(r'[A-Za-z0-9\-_]+(?:{sep}[A-Za-z0-9\-_]+)*{sep}?'.format(sep=_SEP))

DEFAULT_ALLOW_ORIGIN = "*"
DEFAULT_ALLOW_HEADERS = (
    "DNT,X-CustomHeader,Keep-Alive,User-Agent,X-Requested-With,"
    "If-Modified-Since,Cache-Control,Content-Type,Authorization"
)
DEFAULT_ALLOW_METHODS = "GET, PUT, POST, DELETE, PATCH, OPTIONS"
DEFAULT_MAX_AGE = 86400


def build_backend_cors(data, logger):
    ann = data.ann
    if not ann.cors_enable:
        return
    cors = data.backend.cors
    cors.enabled = True
    if ann.cors_allow_origin and CORS_ORIGIN_RE.fullmatch(ann.cors_allow_origin):
        cors.allow_origin = ann.cors_allow_origin
    else:
        cors.allow_origin = DEFAULT_ALLOW_ORIGIN
    if CORS_HEADERS_RE.fullmatch(ann.cors_allow_headers):
        cors.allow_headers = ann.cors_allow_headers
    else:
        cors.allow_headers = DEFAULT_ALLOW_HEADERS
    if CORS_METHODS_RE.fullmatch(ann.cors_allow_methods):
        cors.allow_methods = ann.cors_allow_methods
    else:
        cors.allow_methods = DEFAULT_ALLOW_METHODS
    cors.allow_credentials = ann.cors_allow_credentials
    cors.max_age = ann.cors_max_age if ann.cors_max_age > 0 else DEFAULT_MAX_AGE
    if CORS_HEADERS_RE.fullmatch(ann.cors_expose_headers):
        cors.expose_headers = ann.cors_expose_headers
