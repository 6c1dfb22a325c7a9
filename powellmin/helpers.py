# Copyright (c) 2023 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Internal helper functions used within powellmin to streamline the package."""

import logging
import inspect
import importlib
import coloredlogs


### Instantiate default logger upon import of this file so that it is always configured ###
# Instantiate the logger with default settings
logger = logging.getLogger('powellmin')
# Log output handlers can have their own logging levels, internal logger will collect all levels
logger.setLevel(logging.DEBUG)

# Change a few colours for the logging output, making message times appear in a mid-blue and the logger name in green
custom_field_styles = coloredlogs.DEFAULT_FIELD_STYLES
custom_field_styles['asctime']['color'] = 24
custom_field_styles['name']['color'] = 22
custom_level_styles = coloredlogs.DEFAULT_LEVEL_STYLES
custom_level_styles['info']['color'] = 'white'
# Install one default colourized stream handler set to level INFO; no log files by default
coloredlogs.install(level='INFO', logger=logger, fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                    level_styles=custom_level_styles, field_styles=custom_field_styles)


def configure_logger(logging_level: int = None,
                     file_handler: logging.FileHandler = None, stream_handler: logging.StreamHandler = None):
    """
    Configure the package logger based on the user's preference.

    Parameters
    ----------
    logging_level: int, optional
        The global logging level to set for the logger. If provided, the logger's level will be set to this
        value. Default is None.
    file_handler: logging.FileHandler, optional
        A custom file handler to be added to the logger. If provided, the default file handler (if exists) will be
        removed and the custom one will be added. Default is None.
    stream_handler: logging.StreamHandler, optional
        A custom stream handler to be added to the logger. If provided, the default stream handler (if exists) will
        be removed and the custom one will be added. Default is None.

    Notes
    -----
    This function assumes that the logger has one stream and one file handler maximum.

    Example
    -------
    # Silence the per-iteration progress messages of verbose Powell runs
    configure_logger(logging_level=logging.WARNING)
    """
    logger = logging.getLogger('powellmin')
    # If the user has provided a global logging level, set accordingly
    if logging_level:
        logger.setLevel(logging_level)

    # Identify any existing logging output handlers based on their types
    existing_stream_handler = None
    existing_file_handler = None
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            existing_stream_handler = handler
        elif isinstance(handler, logging.FileHandler):
            existing_file_handler = handler

    # If the user provided a custom stream handler, remove the default one, add the custom one
    if stream_handler:
        if existing_stream_handler:
            logger.removeHandler(existing_stream_handler)
        logger.addHandler(stream_handler)
    # If the user provided a custom file handler, remove the default one, add the custom one
    if file_handler:
        if existing_file_handler:
            logger.removeHandler(existing_file_handler)
        logger.addHandler(file_handler)


def _on_demand_import(module: str, pypi_name: str = None):
    try:
        mod = importlib.import_module(module)
        return mod
    except ImportError:
        # Module name and pypi package name do not always match, we want to tell the user the package to install
        if not pypi_name:
            pypi_name = module
        hint = f"Trying to use a feature that requires the optional {module} module. " \
               f"Please install package '{pypi_name}' first."

        class FailedImport:
            """By returning a class that raises an error when used, we can try to import modules at the top of each file
            and only raise errors if we try to use methods of modules that failed to import"""
            def __getattr__(self, attr):
                raise ImportError(hint)

        return FailedImport()


### Evaluation drivers ###
# The algorithms are written as generators that yield the points they need evaluated and receive the objective values
# back through 'send'. The drivers below are the only places where the objective function is actually called, which
# lets the same algorithm code serve both plain and awaitable objectives while keeping evaluations strictly sequential.

def _drive(steps, func) -> tuple:
    """
    Run an evaluation-requesting generator to completion using a plain objective function.

    Returns
    -------
    tuple
        The generator's return value and the number of objective evaluations performed
    """
    evals = 0
    try:
        x = next(steps)
        while True:
            fx = func(x)
            evals += 1
            x = steps.send(fx)
    except StopIteration as done:
        return done.value, evals


async def _drive_async(steps, func) -> tuple:
    """Asynchronous counterpart of _drive, awaits the objective value whenever the objective returns an awaitable."""
    evals = 0
    try:
        x = next(steps)
        while True:
            fx = func(x)
            if inspect.isawaitable(fx):
                fx = await fx
            evals += 1
            x = steps.send(fx)
    except StopIteration as done:
        return done.value, evals


def _remap_requests(steps, transform):
    """
    Wrap an evaluation-requesting generator so that each requested value is passed through 'transform' before being
    handed on. Used to turn requested step lengths along a direction into full points in the search space.
    """
    try:
        t = next(steps)
        while True:
            ft = yield transform(t)
            t = steps.send(ft)
    except StopIteration as done:
        return done.value
