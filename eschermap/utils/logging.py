#===============================================================================
#
#  Escher metabolic map rendering
#
#  Copyright (c) 2024  David Brooks
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
#===============================================================================

import json
import logging
import logging.config
from typing import Any, Callable, Optional

#===============================================================================

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger
import tqdm

#===============================================================================

from eschermap.settings import settings

#===============================================================================

LOGGER_NAME = 'eschermap'

# Message key used in JSON log records
JSON_MESSAGE_KEY = 'msg'

#===============================================================================

class RenameJSONRenderer:
    """
    Render an event as JSON with its event text under another key.
    """
    def __init__(self, to: str, serializer: Callable[..., str | bytes]=json.dumps, **dumps_kw: Any):
        self.__renamer = structlog.processors.EventRenamer(to)
        self.__json_renderer = structlog.processors.JSONRenderer(serializer, **dumps_kw)

    def __call__(self, logger: WrappedLogger, name: str, event_dict: EventDict) -> str | bytes:
        return self.__json_renderer(logger, name, self.__renamer(logger, name, event_dict))

#===============================================================================

def record_formatter(renderer: Processor) -> structlog.stdlib.ProcessorFormatter:
#================================================================================
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer
        ],
    )

def console_handler(level: int) -> logging.Handler:
#==================================================
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(record_formatter(structlog.dev.ConsoleRenderer(colors=True)))
    return handler

def json_file_handler(log_json_file, level: int) -> logging.FileHandler:
#=======================================================================
    handler = logging.FileHandler(log_json_file)
    handler.setLevel(level)
    handler.setFormatter(record_formatter(RenameJSONRenderer(JSON_MESSAGE_KEY)))
    return handler

#===============================================================================

def configure_logging(log_json_file=None, verbose=False, silent=False, debug=False) -> Optional[logging.FileHandler]:
#==================================================================================================================
    """
    Send ``eschermap`` messages to the console and, optionally, as JSON lines
    to ``log_json_file``.

    Calling this again replaces the handlers of the earlier call. The JSON
    file handler, if any, is returned so that callers can close it.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    settings['verbose'] = verbose and not silent
    settings['debug'] = debug

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'handlers': {
            'null': {
                'class': 'logging.NullHandler',
                'level': log_level
            }
        },
        'loggers': {
            '': {
                'handlers': ['null'],
                'level': log_level
            },
        }
    })

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(console_handler(logging.CRITICAL if silent else log_level))
    json_handler = None
    if log_json_file is not None:
        json_handler = json_file_handler(log_json_file, log_level)
        logger.addHandler(json_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return json_handler

#===============================================================================

log: structlog.BoundLogger = structlog.get_logger(LOGGER_NAME)

#===============================================================================

class ProgressBar:
    """
    A ``tqdm`` progress bar that is only shown in verbose mode.

    Use it as a context manager so the bar is closed when the work is done.
    """
    def __init__(self, *args, show=True, **kwargs):
        if show and settings.get('verbose', False):
            self.__progress_bar = tqdm.tqdm(*args, **kwargs)
        else:
            self.__progress_bar = None

    def __enter__(self) -> 'ProgressBar':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def shown(self) -> bool:
        return self.__progress_bar is not None

    def update(self, *args):
    #=======================
        if self.__progress_bar is not None:
            self.__progress_bar.update(*args)

    def close(self):
    #===============
        if self.__progress_bar is not None:
            self.__progress_bar.close()
            self.__progress_bar = None

#===============================================================================
