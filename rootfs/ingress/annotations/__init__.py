from .updater import BackendData, Updater  # noqa: F401
