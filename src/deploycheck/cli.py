from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Mapping, Optional, Sequence

from deploycheck.bundles import compare_bundles
from deploycheck.errors import AccessError
from deploycheck.remote.fetcher import RemoteFetcher
from deploycheck.reporting import StatusReporter, get_input


def resolve_repo_path(raw: str) -> Path:
    path = Path(raw)
    if not raw or not path.exists() or not os.access(path, os.R_OK):
        raise AccessError(raw)
    return path


def build_parser(environ: Optional[Mapping[str, str]] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deploycheck",
        description="Compare deployed galatadergisi.org bundles with a repository checkout.",
    )
    parser.add_argument(
        "--repo-path",
        default=get_input("REPO_PATH", environ),
        help="repository checkout to validate (default: the REPO_PATH action input)",
    )
    parser.add_argument(
        "--artifact-dir",
        default=None,
        help="where local.txt and remote.txt are written on mismatch (default: cwd)",
    )
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    reporter: Optional[StatusReporter] = None,
    fetcher: Optional[RemoteFetcher] = None,
) -> int:
    args = build_parser(environ).parse_args(argv)
    reporter = reporter or StatusReporter()

    try:
        repo_path = resolve_repo_path(args.repo_path)
    except AccessError as exc:
        reporter.set_failed(str(exc))
        return reporter.exit_code

    artifact_dir = Path(args.artifact_dir) if args.artifact_dir else None
    with fetcher or RemoteFetcher() as active:
        compare_bundles(repo_path, active, reporter, artifact_dir=artifact_dir)
    return reporter.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
