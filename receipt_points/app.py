from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from .config import SERVICE_NAME, load_settings
from .logging import configure_logging
from .version import get_version_info

settings = load_settings()

configure_logging(
	service=SERVICE_NAME, json_mode=settings.json_logs, level=settings.log_level
)
log = logging.getLogger(__name__)


def serve(host: str, port: int) -> None:
	log.info(
		"Starting receipt-points server",
		extra={"host": host, "port": port, **get_version_info()},
	)
	# uvicorn owns SIGINT/SIGTERM and drains in-flight requests itself
	uvicorn.run(
		"receipt_points.main:app",
		host=host,
		port=port,
		log_config=None,
	)


def main() -> None:
	parser = argparse.ArgumentParser(
		prog=SERVICE_NAME,
		description="Receipt points HTTP service",
	)
	parser.add_argument(
		"--host",
		default=settings.host,
		help=f"bind address (default: {settings.host})",
	)
	parser.add_argument(
		"--port",
		type=int,
		default=settings.port,
		help=f"HTTP port (default: {settings.port})",
	)
	args = parser.parse_args()

	try:
		serve(host=args.host, port=args.port)
	except Exception as e:
		log.error("Server failed to start", extra={"error": str(e)})
		sys.exit(1)


if __name__ == "__main__":
	main()
