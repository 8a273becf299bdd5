"""
Single value policies: rewrite target, WAF and source whitelist.
"""
import ipaddress
import re

from ingress.utils import split

REWRITE_URL_RE = re.compile(r'[^"\'\s]+')

WAF_MODSECURITY = "modsecurity"


def build_rewrite_url(data, logger):
    ann = data.ann
    if not ann.rewrite_target:
        return
    if not REWRITE_URL_RE.fullmatch(ann.rewrite_target):
        logger.warn("rewrite-target does not allow white spaces or single/double quotes on %s",
                    ann.source)
        return
    data.backend.rewrite_url = ann.rewrite_target


def build_waf(data, logger):
    ann = data.ann
    if not ann.waf:
        return
    if ann.waf != WAF_MODSECURITY:
        logger.warn("ignoring invalid WAF mode: %s", ann.waf)
        return
    data.backend.waf = ann.waf


def build_whitelist(data, logger):
    ann = data.ann
    if not ann.whitelist_source_range:
        return
    cidrs, invalid = filter_cidrs(split(ann.whitelist_source_range, ","))
    for cidr in invalid:
        logger.warn("skipping invalid cidr '%s' in whitelist config on %s", cidr, ann.source)
    data.backend.whitelist = cidrs


def is_cidr(value):
    """
    Check for an address/prefix pair, host bits may be set, e.g. 10.0.0.1/8.

    >>> is_cidr('10.0.0.0/8'), is_cidr('192.168.0/16'), is_cidr('10.0.0.1')
    (True, False, False)
    """
    _, sep, prefix = value.partition("/")
    if not sep or not prefix.isdigit() or not prefix.isascii():
        return False
    try:
        ipaddress.ip_network(value, strict=False)
    except ValueError:
        return False
    return True


def filter_cidrs(items):
    """Split items into the valid cidrs and the invalid ones, keeping their order."""
    cidrs, invalid = [], []
    for item in items:
        if is_cidr(item):
            cidrs.append(item)
        else:
            invalid.append(item)
    return cidrs, invalid
