from __future__ import annotations

import importlib.metadata
import os
import platform

from .config import SERVICE_NAME

# stamped into the image by the build; absent when running from a checkout
GIT_COMMIT = os.getenv("GIT_COMMIT", "unknown")


def package_version() -> str:
	try:
		return importlib.metadata.version(SERVICE_NAME)
	except importlib.metadata.PackageNotFoundError:
		return "0.0.0+local"


def get_version_info() -> dict[str, str]:
	return {
		"service": SERVICE_NAME,
		"version": package_version(),
		"git_commit": GIT_COMMIT,
		"python": platform.python_version(),
	}
