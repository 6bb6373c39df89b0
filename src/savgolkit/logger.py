"""Contains the name for the logger of SavGolKit modules.

``savgolkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Per-call details such as sequence length and window size.
* ``INFO``: An indication that things are working as expected, e.g. the
    smoothing radius was reduced to fit a short sequence.
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. a filter whose derivative
    order exceeds its polynomial degree.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``savgolkit.logger.savgolkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.INFO,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "savgolkit"
savgolkit_logger = logging.getLogger(logger_name)
