import logging  # Log di avvio ed errori su stdout
import sys  # Stream di output per il logging

from flask import Flask  # Import base per server web e rendering template
from flask_cors import CORS  # Abilita CORS per pagina e file statici
from werkzeug.exceptions import HTTPException, InternalServerError  # Errori HTTP standard
from werkzeug.serving import make_server  # Server WSGI single-thread

from controllers import error_controller, home_controller  # Controller iniettati in create_app

HOST = "0.0.0.0"  # Ascolta su tutte le interfacce
PORT = 3000  # Porta fissa del server web
PUBLIC_DIR = "public"  # Cartella dei file statici (css, immagini, ...)
VIEWS_DIR = "views"  # Cartella dei template Jinja2

logger = logging.getLogger(__name__)


def configure_logging(level=logging.INFO):
    """Send log records (startup line included) to standard output."""
    logging.basicConfig(
        level=level,
        stream=sys.stdout,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _end_of_chain(error):
    # Nessuno stadio ha risposto: l'eccezione HTTP e' gia' una risposta valida
    if isinstance(error, HTTPException):
        return error
    return InternalServerError(original_exception=error)


def run_error_chain(stages, error):
    """Run ``error`` through ``stages`` in order.

    Every stage is called as ``stage(error, next_stage)`` and either returns
    a response or hands the error on with ``next_stage(error)``.
    """

    def call(index, err):
        if index == len(stages):
            return _end_of_chain(err)
        return stages[index](err, lambda e: call(index + 1, e))

    return call(0, error)


def register_error_chain(app: Flask, controller) -> None:
    # Ordine di registrazione = ordine di esecuzione
    stages = (
        controller.log_errors,
        controller.respond_no_resource_found,
        controller.respond_internal_error,
    )

    def handle_error(error):
        return run_error_chain(stages, error)

    # Un handler per Exception riceve anche NotFound / MethodNotAllowed
    app.register_error_handler(Exception, handle_error)


def create_app(home=home_controller, errors=error_controller) -> Flask:
    """Build the Flask app: home route, static files from ``public/``, error chain."""
    app = Flask(
        __name__,
        static_folder=PUBLIC_DIR,  # I file in public/ sono serviti alla radice
        static_url_path="",
        template_folder=VIEWS_DIR,
    )
    CORS(app, send_wildcard=True)  # Abilita CORS sull'app con origine "*"

    # ---------- Web Endpoints ----------
    app.add_url_rule("/", "top", home.top, methods=["GET"])

    register_error_chain(app, errors)
    return app


def start_server(app: Flask, host: str = HOST, port: int = PORT):
    """Bind the listening socket and log the ready line; the caller serves."""
    server = make_server(host, port, app)  # Un solo socket, nessun reloader
    logger.info("server start http://localhost:%d/", server.server_port)
    return server


def main():
    configure_logging()
    server = start_server(create_app())
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("server stopped")
    finally:
        server.server_close()


if __name__ == '__main__':
    # Avvia il web server sulla porta 3000
    main()
