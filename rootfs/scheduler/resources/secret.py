import base64

from scheduler.exceptions import KubeHTTPException
from scheduler.resources import Resource


class Secret(Resource):
    short_name = None

    def get(self, namespace, name):
        """
        Fetch a single Secret
        """
        url = self.api('/namespaces/{}/secrets/{}', namespace, name)
        response = self.http_get(url)
        if self.unhealthy(response.status_code):
            raise KubeHTTPException(
                response, 'get Secret "{}" in Namespace "{}"', name, namespace)

        return response

    @staticmethod
    def decode(secret):
        """Return the secret data with every value base64 decoded into bytes."""
        data = secret.get('data') or {}
        return {key: base64.b64decode(value) for key, value in data.items()}
