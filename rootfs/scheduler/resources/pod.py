from scheduler.exceptions import KubeHTTPException
from scheduler.resources import Resource


class Pod(Resource):
    short_name = 'po'

    def get(self, namespace, name):
        """
        Fetch a single Pod
        """
        url = self.api('/namespaces/{}/pods/{}', namespace, name)
        response = self.http_get(url)
        if self.unhealthy(response.status_code):
            raise KubeHTTPException(
                response, 'get Pod "{}" in Namespace "{}"', name, namespace)

        return response

    @staticmethod
    def labels(pod):
        return pod.get('metadata', {}).get('labels') or {}
