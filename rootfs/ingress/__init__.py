"""
The **ingress** Django app resolves per-route backend directives into the typed backend
configuration consumed by the load balancer config renderer.
"""

__version__ = '0.8.0'
