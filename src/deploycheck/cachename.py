from __future__ import annotations

from pathlib import Path
import re

from deploycheck.common.normalize import read_source
from deploycheck.config import DEFAULT_TARGET, DeployTarget
from deploycheck.errors import CacheNameCollisionError, ParseError
from deploycheck.remote.fetcher import RemoteFetcher
from deploycheck.reporting import StatusReporter
from deploycheck.results import CheckResult

CACHE_NAME_PATTERN = re.compile(r"""const\s+CACHE_NAME\s*=\s*['"]([^'"]+)['"]""")

GENERIC_FAILURE = "Failed to compare service cache names."


def parse_cache_name(source: str) -> str:
    match = CACHE_NAME_PATTERN.search(source)
    if match is None:
        raise ParseError("Failed to parse cache name.")
    return match.group(1)


def _check_cache_names(repo_path: Path, fetcher: RemoteFetcher, target: DeployTarget) -> str:
    local_source = read_source(repo_path / target.service_worker_file)
    remote_source = fetcher.fetch_text(target.service_worker_url())

    local_name = parse_cache_name(local_source)
    remote_name = parse_cache_name(remote_source)
    if local_name == remote_name:
        raise CacheNameCollisionError(local_name)
    return "Cache names are different."


def compare_service_worker_cache_names(
    repo_path: Path,
    fetcher: RemoteFetcher,
    reporter: StatusReporter,
    target: DeployTarget = DEFAULT_TARGET,
) -> CheckResult:
    """Require the deployed service worker to carry a different cache name.

    Identical names mean a changed deployment went out without invalidating
    client caches. Every outcome is reported; nothing propagates.
    """
    try:
        message = _check_cache_names(Path(repo_path), fetcher, target)
    except CacheNameCollisionError as exc:
        reporter.set_failed(str(exc))
        return CheckResult.failed(str(exc))
    except Exception:
        reporter.trace()
        reporter.set_failed(GENERIC_FAILURE)
        return CheckResult.failed(GENERIC_FAILURE)

    reporter.info(message, style="success")
    return CheckResult.passed(message)
