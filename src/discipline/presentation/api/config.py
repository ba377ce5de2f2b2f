"""Settings as seen by the HTTP layer.

Routes depend on ``get_api_settings`` rather than on ``get_settings`` so a
test can swap the configuration through ``app.dependency_overrides``.
"""

from discipline_config.settings import Settings, get_settings


def get_api_settings() -> Settings:
    return get_settings()
