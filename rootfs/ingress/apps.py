from django import apps


class AppConfig(apps.AppConfig):
    name = 'ingress'
    verbose_name = 'Ingress backend directives'
