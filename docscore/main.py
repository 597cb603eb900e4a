from docscore.config.settings import Settings
from docscore.logging.logger import Log
from docscore.worker.request_handler import RequestHandler, build_request_handler


def create_handler(settings: Settings | None = None) -> RequestHandler:
    """Entry point: load settings -> configure logging -> build the handler."""
    settings = settings if settings is not None else Settings()
    Log.configure(settings.log_level)
    Log.info(f"docscore starting (env={settings.app_env})")
    return build_request_handler(settings)
