import io
import sys
from pathlib import Path
from typing import Callable, Dict, List, Union

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from deploycheck.config import BUNDLE_FILES, SERVICE_WORKER_FILE  # noqa: E402
from deploycheck.remote.fetcher import RemoteFetcher  # noqa: E402
from deploycheck.reporting import StatusReporter, make_console  # noqa: E402

ORIGIN = "https://galatadergisi.org/"
SERVICE_WORKER_URL = ORIGIN + "service-worker.js"


def service_worker(cache_name: str) -> str:
    return (
        f'const CACHE_NAME = "{cache_name}";\n'
        "self.addEventListener('install', (event) => event.waitUntil(caches.open(CACHE_NAME)));\n"
    )


def bundle_url(rel_path: str) -> str:
    return ORIGIN + rel_path[len("public/"):]


class FakeSite:
    """Serves a fixed set of URLs through ``httpx.MockTransport``."""

    def __init__(self, pages: Dict[str, Union[str, bytes]]) -> None:
        self.pages = dict(pages)
        self.requested: List[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        if url not in self.pages:
            return httpx.Response(404, text="not found")
        page = self.pages[url]
        return httpx.Response(200, content=page if isinstance(page, bytes) else page.encode("utf-8"))

    def fetcher(self) -> RemoteFetcher:
        return RemoteFetcher(httpx.Client(transport=httpx.MockTransport(self.handler)))


@pytest.fixture
def reporter(monkeypatch: pytest.MonkeyPatch) -> StatusReporter:
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    return StatusReporter(
        out=make_console(file=io.StringIO()),
        err=make_console(file=io.StringIO()),
    )


@pytest.fixture
def repo(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    def build(files: Dict[str, str]) -> Path:
        root = tmp_path / "repo"
        for rel_path, text in files.items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        root.mkdir(exist_ok=True)
        return root

    return build


@pytest.fixture
def bundle_contents() -> Dict[str, str]:
    return {rel_path: f"/* {rel_path} */\nbody{{}}\n" for rel_path in BUNDLE_FILES}


def matching_site(contents: Dict[str, str], cache_name: str = "a") -> Dict[str, str]:
    pages = {bundle_url(rel_path): text for rel_path, text in contents.items()}
    pages[SERVICE_WORKER_URL] = service_worker(cache_name)
    return pages


def local_tree(contents: Dict[str, str], cache_name: str = "a") -> Dict[str, str]:
    files = dict(contents)
    files[SERVICE_WORKER_FILE] = service_worker(cache_name)
    return files


def output(reporter: StatusReporter) -> str:
    return reporter.out.file.getvalue()


def errors(reporter: StatusReporter) -> str:
    return reporter.err.file.getvalue()
