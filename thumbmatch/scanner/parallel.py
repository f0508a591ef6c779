"""
Parallel processing module for the scanner package.

Provides the execution context for batch hashing and the batch hasher
itself, with caching and progress tracking.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, Optional

from PIL import UnidentifiedImageError

from ..config import DEFAULT_WORKERS
from ..models import HashedFile, Role
from .dependencies import HAS_TQDM, _tqdm_class, _logger
from .file_discovery import list_source_files
from .hashing import calculate_perceptual_hash

if TYPE_CHECKING:
    from ..cache import HashCache


class _UndecodableImage(Exception):
    """Raised from a compute step to mark an image as skippable."""


class ParallelContext:
    """
    A bounded worker pool configuration for batch work.

    Passed explicitly to whatever needs to run tasks in parallel. A context
    with a single worker runs tasks in submission order, which makes result
    order reproducible in tests.
    """

    def __init__(self, workers: int = DEFAULT_WORKERS):
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.workers = workers

    def __repr__(self) -> str:
        return f"ParallelContext(workers={self.workers})"

    def map_unordered(self, fn: Callable[[Any], Any], items: Iterable[Any]) -> Iterator[Any]:
        """
        Run fn over items on the pool, yielding results as they complete.

        The first task exception cancels every task that has not started yet
        and is re-raised unchanged. With a single worker, tasks run inline in
        submission order.
        """
        if self.workers == 1:
            for item in items:
                yield fn(item)
            return

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [executor.submit(fn, item) for item in items]
            try:
                for future in as_completed(futures):
                    yield future.result()
            except BaseException:
                for future in futures:
                    future.cancel()
                raise


def load_phashes(
    source_dir: str | Path,
    cache: HashCache,
    role: Role,
    trim: bool = False,
    context: Optional[ParallelContext] = None,
    skip_invalid: bool = False,
    show_progress: bool = False,
) -> list[HashedFile]:
    """
    Hash every file of a directory, using the cache where possible.

    Args:
        source_dir: Flat directory of images
        cache: Hash cache to read from and write to
        role: Cache role of this batch
        trim: Remove light borders before hashing (thumbnail batch)
        context: Worker pool to run on (default: DEFAULT_WORKERS workers)
        skip_invalid: Skip non-file entries and undecodable images with a
            warning instead of aborting the batch
        show_progress: Whether to show a tqdm progress bar

    Returns:
        List of HashedFile, in completion order

    Raises:
        Any error from listing, reading, decoding, hashing or writing the
        cache, unless skip_invalid covers it. The batch is all or nothing.
    """
    context = context or ParallelContext()
    _logger.info(f"Loading directory: {source_dir} (cache: {cache.role_dir(role)})")

    paths = list_source_files(source_dir, skip_invalid=skip_invalid)

    def load_one(path: Path) -> Optional[HashedFile]:
        def compute():
            try:
                return calculate_perceptual_hash(path, trim=trim, hash_size=cache.hash_size)
            except (UnidentifiedImageError, OSError) as e:
                if not skip_invalid:
                    raise
                raise _UndecodableImage(e) from e

        # Only decode failures are skippable; cache read/write errors stay fatal
        try:
            phash = cache.get_or_compute(path.name, role, compute)
        except _UndecodableImage as e:
            _logger.warning(f"Skipping undecodable image {path.name}: {e.__cause__}")
            return None
        return HashedFile(file_name=path.name, phash=phash)

    pbar: Optional[Any] = None
    if HAS_TQDM and show_progress and _tqdm_class is not None:
        pbar = _tqdm_class(
            total=len(paths),
            desc=f"Hashing {role.value}",
            unit="img",
            ncols=80,
        )

    results: list[HashedFile] = []
    try:
        for hashed in context.map_unordered(load_one, paths):
            if hashed is not None:
                results.append(hashed)
            if pbar is not None:
                pbar.update(1)
    finally:
        if pbar is not None:
            pbar.close()

    return results


__all__ = ['ParallelContext', 'load_phashes']
