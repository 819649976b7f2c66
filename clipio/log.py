"""TRACE logging level for clipio.

clipio logs below DEBUG for the chattiest details: every ``which`` lookup
made while choosing a tool and the argv of every process it starts.  This
module registers that level under the name ``TRACE`` and gives every
``logging.Logger`` a ``trace()`` method for it.

The package imports this module first, so ``logger.trace(...)`` is available
in all clipio modules.  Enable it with ``logging.getLogger('clipio').setLevel(5)``.
"""

import logging

TRACE: int = 5


def _log_trace(self: logging.Logger, message: object, *args: object, **kwargs: object) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)  # type: ignore[attr-defined]


if logging.getLevelName(TRACE) != "TRACE":
    logging.addLevelName(TRACE, "TRACE")

if not hasattr(logging.Logger, "trace"):
    logging.Logger.trace = _log_trace  # type: ignore[attr-defined]
