"""
Blue/green traffic split between groups of pods sharing a label.

The balance directive declares ``label=value=weight`` groups. In ``pod`` mode every pod
of a group receives the declared weight. In ``deploy`` mode the declared weight is the
share of the whole group, so it is split between the group's endpoints, keeping the
ratio between groups and the 0..256 range the load balancer accepts.
"""
import math
from fractions import Fraction

from ingress.exceptions import CacheError
from ingress.utils import gcd, lcm, parse_int

MIN_WEIGHT = 0
MAX_WEIGHT = 256
MODE_POD = "pod"
MODE_DEPLOY = "deploy"


class DeployWeight(object):
    """One declared group of the balance directive and the endpoints matching it."""

    def __init__(self, label_name, label_value, weight):
        self.label_name = label_name
        self.label_value = label_value
        self.weight = weight
        self.endpoints = []

    def match(self, pod):
        return pod.labels.get(self.label_name) == self.label_value

    def __repr__(self):
        return "DeployWeight({}={}={})".format(self.label_name, self.label_value, self.weight)


class BalanceError(ValueError):
    pass


def parse_balance(balance):
    """
    Parse a comma separated list of ``label=value=weight``.

    Returns the declared groups, with weights still out of range, or raises BalanceError
    if any of the items is malformed.
    """
    deploy_weights = []
    for item in balance.split(","):
        fields = item.split("=")
        if len(fields) != 3:
            raise BalanceError("has an invalid weight format: {}".format(item))
        try:
            weight = parse_int(fields[2])
        except ValueError as e:
            raise BalanceError("has an invalid weight value: {}".format(e)) from e
        deploy_weights.append(DeployWeight(fields[0], fields[1], weight))
    return deploy_weights


def weight_factor(max_weight, gcd_weight):
    """
    How many times the highest reduced group weight exceeds the maximum weight.

    Values above 1 mean the reduced weights do not fit and need to be scaled down.
    """
    return Fraction(max_weight, gcd_weight) / MAX_WEIGHT


def proportional_weight(weight, factor, declared_weight):
    """
    Scale a reduced weight down by factor.

    Groups declared with a weight greater than zero never drop to zero, otherwise they
    would silently stop receiving traffic.
    """
    if factor <= 1:
        return weight
    scaled = math.floor(weight / factor)
    if scaled == 0 and declared_weight > 0:
        scaled = 1
    return scaled


def build_backend_blue_green(data, cache, logger):
    ann = data.ann
    balance = ann.blue_green_balance or ann.blue_green_deploy
    if not balance:
        return
    try:
        deploy_weights = parse_balance(balance)
    except BalanceError as e:
        logger.error("blue/green config on %s %s", ann.source, e)
        return
    for dw in deploy_weights:
        if dw.weight < MIN_WEIGHT or dw.weight > MAX_WEIGHT:
            weight = max(MIN_WEIGHT, min(dw.weight, MAX_WEIGHT))
            logger.warn("invalid weight '%d' on %s, using '%d' instead",
                        dw.weight, ann.source, weight)
            dw.weight = weight

    for ep in data.backend.endpoints:
        if ep.weight == 0:
            # draining endpoint, out of the blue/green calc
            continue
        has_label = False
        try:
            pod = cache.get_pod(ep.target_ref)
        except CacheError as e:
            logger.warn("endpoint '%s:%d' on %s was removed from balance: %s",
                        ep.ip, ep.port, ann.source, e)
        else:
            for dw in deploy_weights:
                if dw.match(pod):
                    # final weight in pod mode, deploy mode rewrites it below
                    ep.weight = dw.weight
                    dw.endpoints.append(ep)
                    has_label = True
        if not has_label:
            # stop sending new traffic without removing it from the backend
            ep.weight = 0

    for dw in deploy_weights:
        if not dw.endpoints:
            logger.info(3, "blue/green balance label '%s=%s' on %s does not reference any endpoint",
                        dw.label_name, dw.label_value, ann.source)

    mode = ann.blue_green_mode
    if mode == MODE_POD:
        return
    if mode and mode != MODE_DEPLOY:
        logger.warn("unsupported blue/green mode '%s' on %s, falling back to '%s'",
                    mode, ann.source, MODE_DEPLOY)
    rebalance(deploy_weights)


def rebalance(deploy_weights):
    """
    Split the weight of every group between its endpoints.

    Group weights are scaled to the lcm of the endpoint counts, so every endpoint of a
    group gets the same integer weight, and then reduced by their gcd.
    """
    lcm_count = 0
    for dw in deploy_weights:
        count = len(dw.endpoints)
        if count == 0:
            continue
        lcm_count = lcm(lcm_count, count) if lcm_count else count
    if lcm_count == 0:
        # no group references an endpoint
        return

    gcd_group_weight = 0
    max_weight = 0
    for dw in deploy_weights:
        count = len(dw.endpoints)
        if count == 0 or dw.weight == 0:
            continue
        group_weight = dw.weight * lcm_count // count
        gcd_group_weight = gcd(gcd_group_weight, group_weight)
        max_weight = max(max_weight, group_weight)
    if gcd_group_weight == 0:
        # all weights are zero, nothing to rebalance
        return

    factor = weight_factor(max_weight, gcd_group_weight)
    for dw in deploy_weights:
        for ep in dw.endpoints:
            weight = dw.weight * lcm_count // len(dw.endpoints) // gcd_group_weight
            ep.weight = proportional_weight(weight, factor, dw.weight)
