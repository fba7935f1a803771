"""Error stages, run in order by the app's error handler.

Each stage receives the raised error and ``next_stage``; it either returns a
response or forwards the error with ``next_stage(error)``.
"""
import logging  # Diagnostica degli errori

from flask import request  # Richiesta corrente (context-local)
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound  # Mancata corrispondenza di rotta/file

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "404 | The page does not exist!"
INTERNAL_ERROR_MESSAGE = "500 | Sorry, our application is experiencing a problem!"


def log_errors(error, next_stage):
    # Registra l'errore e passa sempre allo stadio successivo
    if isinstance(error, HTTPException):
        logger.warning("%s %s -> %s %s", request.method, request.path, error.code, error.name)
    else:
        logger.error("Unhandled error on %s %s", request.method, request.path, exc_info=error)
    return next_stage(error)


def respond_no_resource_found(error, next_stage):
    # Nessuna rotta o file statico corrispondente => 404
    if isinstance(error, (NotFound, MethodNotAllowed)):
        return NOT_FOUND_MESSAGE, 404
    return next_stage(error)


def respond_internal_error(error, next_stage):
    # Stadio finale: qualunque errore arrivato fin qui diventa un 500
    return INTERNAL_ERROR_MESSAGE, 500
