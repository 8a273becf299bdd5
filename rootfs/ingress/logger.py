import logging

from django.conf import settings


class Logger(object):
    """
    Diagnostics sink of the resolvers.

    Messages are formatted with %-style args. Info messages carry a verbosity level and
    are only logged if ``settings.INGRESS_LOG_VERBOSITY`` is at least that level.
    """

    def __init__(self, name='ingress.diagnostics'):
        self.logger = logging.getLogger(name)

    def error(self, msg, *args):
        self.logger.error(msg, *args)

    def warn(self, msg, *args):
        self.logger.warning(msg, *args)

    def info(self, verbosity, msg, *args):
        if settings.INGRESS_LOG_VERBOSITY >= verbosity:
            self.logger.info(msg, *args, extra={'verbosity': verbosity})
