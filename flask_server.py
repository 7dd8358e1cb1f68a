""" 
Runs the Task API with Flask's built-in server
"""

import logging
import sys

from taskapi import create_app

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    host, port = app.config["HOST"], app.config["PORT"]
    try:
        app.run(host=host, port=port, debug=False, use_reloader=False)
    except OSError as e:
        logger.error(f"Could not listen on {host}:{port}: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
