"""logregistry.logger
=====================
Mini-README: Internal diagnostics for the logregistry package itself. Exposes a factory
for module-specific loggers that sit under the ``logregistry`` namespace. A
``NullHandler`` is installed on the package logger and it does not propagate, so the
library's own diagnostics never reach the handlers it attaches to a host's loggers.
Hosts that want them can add a handler to the ``logregistry`` logger directly.
"""

import logging

PACKAGE_LOGGER_NAME = "logregistry"

_package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
_package_logger.addHandler(logging.NullHandler())
_package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a module-specific logger instance."""

    return logging.getLogger(name)
