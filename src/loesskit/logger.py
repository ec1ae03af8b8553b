"""Contains the name for the logger of LoessKit modules.

``loesskit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``INFO``: An indication that things are working as expected, e.g. the
    robustness iterations stopped early because the fit converged.
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. a local window in which
    every sample carried zero weight.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``loesskit.logger.loesskit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.INFO,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "loesskit"
loesskit_logger = logging.getLogger(logger_name)
