from django.apps import AppConfig
from django.test.signals import setting_changed


class CrawlerInfoConfig(AppConfig):
    """Configuration for the crawlerinfo Django app."""

    name = 'crawlerinfo'

    def ready(self) -> None:
        setting_changed.connect(_reset_config_cache)


def _reset_config_cache(*, setting: str, **kwargs) -> None:
    if setting.startswith('CRAWLERINFO_'):
        from .conf import clear_cache

        clear_cache()
