"""Run the API with uvicorn: ``python -m doctor_portal``."""
import uvicorn

from doctor_portal.config import get_settings
from doctor_portal.logging_config import get_logger, setup_structured_logging


def main():
    settings = get_settings()
    setup_structured_logging(settings.log_level, settings.log_json)
    get_logger(__name__).info("Doctors App listening on port", port=settings.port)
    uvicorn.run(
        "doctor_portal.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
