from django.apps import AppConfig


class WorkshopsConfig(AppConfig):
    name = 'workshops'

    def ready(self):
        """Fail at startup rather than on first render when settings are invalid."""
        from workshops.markdown.config import get_markdown_config

        get_markdown_config()
