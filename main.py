"""
main.py — algotrace development server
=======================================
    python main.py

Serves the JSON API from algotrace.app on port 5000.  Configuration
comes from ALGOTRACE_* environment variables (ALGOTRACE_LOG_LEVEL,
ALGOTRACE_MAX_INPUT_SIZE, …).
"""

import logging

from algotrace.app import create_app

app = create_app()


if __name__ == "__main__":
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(debug=True, host="0.0.0.0", port=5000)
