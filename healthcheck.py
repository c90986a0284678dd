import argparse
import logging

from consul_notify.constants import APP_HOST, DEBUG_MODE, HEALTH_PORT
from consul_notify.controller import create_health_app


app = create_health_app()

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Liveness probe endpoint (GET /healthz).")
    parser.add_argument("--port", type=int, default=HEALTH_PORT)
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if DEBUG_MODE else logging.INFO)
    app.run(host=APP_HOST, port=args.port, debug=DEBUG_MODE, use_reloader=False)
