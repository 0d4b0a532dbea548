"""
Process entry point: settings → database connection → HTTP listener.

Missing configuration or a failed initial connection stops the process with
exit status 1 before any socket is bound.
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from employee_api.core.config import ConfigurationError, get_settings, require_database_url
from employee_api.core.logging_config import configure_logging
from employee_api.db.session import connect

logger = logging.getLogger("employee_api.server")


def main() -> None:
    configure_logging()

    try:
        settings = get_settings()
        database_url = require_database_url(settings)
    except ValidationError as exc:
        logger.critical("FATAL: invalid configuration:\n%s", exc)
        sys.exit(1)
    except ConfigurationError as exc:
        logger.critical("%s", exc)
        sys.exit(1)

    try:
        session_factory = connect(database_url)
    except Exception:
        logger.exception("Database connection error")
        logger.critical(
            "Verify that DATABASE_URL is correct and the network/firewall settings "
            "allow connections from this host."
        )
        sys.exit(1)

    from employee_api.main import app

    app.state.session_factory = session_factory
    logger.info("Server is running on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
