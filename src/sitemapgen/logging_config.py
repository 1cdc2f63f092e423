# SitemapGen — Logging configuration (rotating file + stdout)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import logging.handlers
import os

from .utils.io import ensure_dirs


def configure_logging(level: str = "INFO", log_dir: str = "logs") -> str:
	"""Configure root logger with a rotating file handler and stdout.

	Lines are tab-separated: time, level, logger, message. Returns the log file path.
	"""
	ensure_dirs(log_dir)
	log_path = os.path.join(log_dir, "sitemapgen.log")

	fmt = "%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s"

	root = logging.getLogger()
	root.setLevel(getattr(logging, level.upper(), logging.INFO))

	# Clear existing handlers in case of re-init
	for h in list(root.handlers):
		root.removeHandler(h)
		h.close()

	stream = logging.StreamHandler()
	stream.setFormatter(logging.Formatter(fmt))
	root.addHandler(stream)

	file_handler = logging.handlers.RotatingFileHandler(
		log_path, maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
	)
	file_handler.setFormatter(logging.Formatter(fmt))
	root.addHandler(file_handler)

	logging.getLogger(__name__).info("Logging %s and above to %s", logging.getLevelName(root.level), log_path)
	return log_path
