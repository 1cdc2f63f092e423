# SitemapGen — IO helpers (directories)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import os


def ensure_dirs(*paths: str) -> None:
	for p in paths:
		os.makedirs(p, exist_ok=True)
