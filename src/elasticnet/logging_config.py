"""
Logging Configuration
Sets up the 'elasticnet' logger (same console/file layout as the desktop app
this package grew out of).

The solver logs every k decay and the engine every batch at DEBUG, which
floods the console on long runs. `solver_level` and `engine_level` let the
two subsystems be tuned apart from the package level.
"""
import logging
import sys
from typing import Optional

SOLVER_LOGGER = "elasticnet.solvers"
ENGINE_LOGGER = "elasticnet.controller"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    solver_level: Optional[int] = None,
    engine_level: Optional[int] = None,
) -> None:
    """
    Configures the 'elasticnet' namespace logger.

    Args:
        level: Level of the package logger and its handlers.
        log_file: Optional path to save logs to a file.
        solver_level: Level of the solver loggers, None inherits `level`.
        engine_level: Level of the engine/client loggers, None inherits `level`.
    """
    logger = logging.getLogger("elasticnet")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    # Handlers let everything through, the loggers do the filtering
    handler_level = min(lvl for lvl in (level, solver_level, engine_level) if lvl is not None)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(handler_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(handler_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.getLogger(SOLVER_LOGGER).setLevel(solver_level if solver_level is not None else logging.NOTSET)
    logging.getLogger(ENGINE_LOGGER).setLevel(engine_level if engine_level is not None else logging.NOTSET)

    logger.info("Logging initialized.")


def reset_logging() -> None:
    """Remove the handlers and levels installed by `setup_logging`."""
    logger = logging.getLogger("elasticnet")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logging.getLogger(SOLVER_LOGGER).setLevel(logging.NOTSET)
    logging.getLogger(ENGINE_LOGGER).setLevel(logging.NOTSET)
