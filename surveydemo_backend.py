"""
Process entry point: build the app, start the DB bootstrap next to the
listener, and dispose of the connection pool on shutdown.

    python surveydemo_backend.py
    gunicorn surveydemo_backend:app
"""
import atexit
import logging
import signal
import sys

from surveydemo import create_app
from surveydemo.bootstrap import start_bootstrap
from surveydemo.extensions import db

logger = logging.getLogger(__name__)

app = create_app()


def dispose_pool():
    with app.app_context():
        db.engine.dispose()
    logger.info("Connection pool closed")


def _signal_handler(signum, frame):
    logger.info(f"Received {signal.Signals(signum).name}, shutting down")
    sys.exit(0)  # atexit runs dispose_pool


atexit.register(dispose_pool)

if app.config["BOOTSTRAP_MODE"] == "background":
    start_bootstrap(app)

if __name__ == '__main__':
    signal.signal(signal.SIGTERM, _signal_handler)
    signal.signal(signal.SIGINT, _signal_handler)

    port = app.config["PORT"]
    logger.info(f"API listening on :{port}")
    app.run(host="0.0.0.0", port=port, debug=False, threaded=True)
