from django.apps import AppConfig


class ApiConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'api'
    verbose_name = 'Teams & Access'

    def ready(self):
        """Build the records configuration handed to finders."""
        from .config import RecordsConfig
        self.records_config = RecordsConfig.from_settings()
