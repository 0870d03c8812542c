from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from deploycheck.cachename import compare_service_worker_cache_names
from deploycheck.common.diffing import diff_chars
from deploycheck.common.normalize import normalize_text, read_source
from deploycheck.config import DEFAULT_TARGET, DeployTarget
from deploycheck.remote.fetcher import RemoteFetcher
from deploycheck.reporting import StatusReporter
from deploycheck.results import BundleComparison, CheckResult

GENERIC_FAILURE = "Failed to compare bundles."
NO_CHANGES = "There are no changes."


def _write_artifacts(artifact_dir: Path, target: DeployTarget, local: str, remote: str) -> None:
    (artifact_dir / target.local_artifact).write_text(local, encoding="utf-8", newline="")
    (artifact_dir / target.remote_artifact).write_text(remote, encoding="utf-8", newline="")


def _compare(
    repo_path: Path,
    fetcher: RemoteFetcher,
    reporter: StatusReporter,
    target: DeployTarget,
    artifact_dir: Path,
    checked: List[str],
) -> BundleComparison:
    for rel_path in target.bundle_files:
        local = normalize_text(read_source(repo_path / rel_path))
        url = target.bundle_url(rel_path)
        reporter.info(f"Downloading {url}", style="download")
        remote = normalize_text(fetcher.fetch_text(url))
        checked.append(rel_path)

        if local == remote:
            reporter.info(f"{rel_path} didn't change.", style="unchanged")
            continue

        segments = diff_chars(local, remote)
        reporter.write_diff(segments)
        reporter.info(f"{rel_path} has changed.", style="changed")
        _write_artifacts(artifact_dir, target, local, remote)
        # One cache-name check covers the whole deployment.
        cache_check = compare_service_worker_cache_names(repo_path, fetcher, reporter, target)
        return BundleComparison(
            result=cache_check,
            checked=tuple(checked),
            changed_file=rel_path,
            segments=tuple(segments),
            cache_check=cache_check,
        )

    reporter.info(NO_CHANGES, style="success")
    return BundleComparison(result=CheckResult.passed(NO_CHANGES), checked=tuple(checked))


def compare_bundles(
    repo_path: Union[str, Path],
    fetcher: RemoteFetcher,
    reporter: StatusReporter,
    target: DeployTarget = DEFAULT_TARGET,
    artifact_dir: Optional[Path] = None,
) -> BundleComparison:
    """Compare local build output against the deployed copies, in order.

    Stops at the first changed file: the diff goes to stderr, both normalized
    texts are saved for inspection and the service-worker cache names are
    checked. Any fault is reported as a failed step rather than raised.
    """
    checked: List[str] = []
    try:
        return _compare(
            Path(repo_path),
            fetcher,
            reporter,
            target,
            Path.cwd() if artifact_dir is None else Path(artifact_dir),
            checked,
        )
    except Exception:
        reporter.trace()
        reporter.set_failed(GENERIC_FAILURE)
        return BundleComparison(result=CheckResult.failed(GENERIC_FAILURE), checked=tuple(checked))
