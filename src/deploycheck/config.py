from __future__ import annotations

from dataclasses import dataclass

ORIGIN = "https://galatadergisi.org/"

BUNDLE_PREFIX = "public/"
SERVICE_WORKER_PREFIX = "client/"

# First mismatch wins, so order matters.
BUNDLE_FILES: tuple[str, ...] = (
    "public/global.css",
    "public/legacy-player.js",
    "public/index.html",
    "public/bundle.css",
    "public/bundle.js",
    "public/katkida-bulunun/index.html",
    "public/katkida-bulunun/bundle.js",
    "public/katkida-bulunun/bundle.css",
)

SERVICE_WORKER_FILE = "client/service-worker.js"

LOCAL_ARTIFACT = "local.txt"
REMOTE_ARTIFACT = "remote.txt"


@dataclass(frozen=True)
class DeployTarget:
    origin: str = ORIGIN
    bundle_files: tuple[str, ...] = BUNDLE_FILES
    bundle_prefix: str = BUNDLE_PREFIX
    service_worker_file: str = SERVICE_WORKER_FILE
    service_worker_prefix: str = SERVICE_WORKER_PREFIX
    local_artifact: str = LOCAL_ARTIFACT
    remote_artifact: str = REMOTE_ARTIFACT

    def remote_url(self, rel_path: str, prefix: str) -> str:
        if rel_path.startswith(prefix):
            rel_path = rel_path[len(prefix):]
        return f"{self.origin}{rel_path}"

    def bundle_url(self, rel_path: str) -> str:
        return self.remote_url(rel_path, self.bundle_prefix)

    def service_worker_url(self) -> str:
        return self.remote_url(self.service_worker_file, self.service_worker_prefix)


DEFAULT_TARGET = DeployTarget()
