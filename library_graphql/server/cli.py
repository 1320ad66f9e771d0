import argparse
import logging
import os

import django
from django.conf import settings
from django.core.management import call_command

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="library-graphql",
        description="Serve the library schema with the Django development server.",
    )
    parser.add_argument(
        "port",
        nargs="?",
        type=int,
        help="port to listen on (default: LIBRARY_GRAPHQL_PORT or 4000)",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "library_graphql.server.settings")
    django.setup()

    port = args.port if args.port is not None else settings.PORT
    logger.info("Server ready at: http://localhost:%s/", port)
    call_command("runserver", f"0.0.0.0:{port}", use_reloader=False)
