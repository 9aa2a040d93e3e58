"""
Pull orchestration.

Walks the tree, runs one task per repository on a bounded thread pool and
collects the outcome of every task in a ResultStore.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from .config import PullerConfig
from .git_ops import probe_remote, pull_repository
from .store import RepositoryRecord, ResultStore
from .walker import find_repositories


@dataclass
class PullContext:
    """Everything a pull run shares between its components."""

    config: PullerConfig
    logger: logging.Logger
    store: ResultStore = field(default_factory=ResultStore)


def sync_repository(ctx: PullContext, path: Path) -> None:
    """Probe, record and pull a single repository."""
    git_executable = ctx.config.git_executable

    remote, status = probe_remote(path, git_executable=git_executable, logger=ctx.logger)
    ctx.store.append(RepositoryRecord(path=path, remote=remote, status=status))

    ctx.logger.info(f"Performing git pull for repository: {path}")
    outcome = pull_repository(path, git_executable=git_executable, logger=ctx.logger)
    ctx.store.update_status(path, outcome.status, outcome.detail)


def run(ctx: PullContext, root: Path | str) -> list[RepositoryRecord]:
    """
    Pull every repository under root.

    Tasks are submitted as the walk discovers repositories and may finish in
    any order. Returns once all of them are done.
    """
    futures: list[Future] = []
    with ThreadPoolExecutor(max_workers=ctx.config.max_workers) as executor:
        for path in find_repositories(
            root, metadata_dir=ctx.config.metadata_dir, logger=ctx.logger
        ):
            futures.append(executor.submit(sync_repository, ctx, path))

    ctx.logger.debug(f"Processed {len(futures)} repositories")

    # Git failures are recorded per repository; anything raised here is a bug
    for future in futures:
        future.result()

    return ctx.store.records()
