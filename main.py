import argparse
import logging
import sys

from consul_notify.constants import APP_HOST, APP_PORT, DEBUG_MODE, SLACK_WEBHOOK_URL
from consul_notify.controller import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Relay Consul watch check events to a Slack incoming webhook.",
    )
    parser.add_argument("--slackurl", "-slackurl", default=SLACK_WEBHOOK_URL,
                        help="A url to your slack incoming webhook. (Required, env SLACK_WEBHOOK_URL)")
    parser.add_argument("--port", "-port", type=int, default=APP_PORT,
                        help="A port for this app to listen on. (default: %(default)s)")
    parser.add_argument("--host", default=APP_HOST,
                        help="Address to bind. (default: %(default)s)")
    parser.add_argument("--debug", action="store_true", default=DEBUG_MODE,
                        help="Enable debug logging.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Sem URL de destino não há o que fazer: mostra o uso e sai
    if not args.slackurl:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(webhook_url=args.slackurl)
    # Falha ao abrir a porta é fatal (exceção sobe e encerra o processo)
    app.run(host=args.host, port=args.port, debug=args.debug, use_reloader=False)


if __name__ == '__main__':
    main()
