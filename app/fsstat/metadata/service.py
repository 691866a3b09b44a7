"""Public stat entry points.

StatService resolves the call shape, the path and the options, invokes
the native metadata primitive and hands the adapted Stats back either by
direct return, by awaiting, or through a completion callback.

Callback-style calls follow the convention's two shapes::

    stat(path, callback)
    stat(path, options, callback)

The callback is invoked exactly once, from a worker thread, never before
the call returns: ``callback(None, stats)`` on success and
``callback(error)`` on failure.
"""

import logging
from collections.abc import Callable, Mapping
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from types import TracebackType
from typing import Any, Self

from fsstat.core.config import DEFAULT_MAX_WORKERS, load_config_or_default
from fsstat.core.errors import CallbackRequiredError, ConfigError, InvalidArgumentTypeError
from fsstat.metadata.native import MetadataSource, OsMetadataSource
from fsstat.metadata.options import StatOptions, check_options, coerce_options
from fsstat.metadata.stats import StatAdapter, Stats
from fsstat.metadata.urls import PathArg, resolve_to_plain_path

logger = logging.getLogger(__name__)

# Invoked as callback(None, stats) on success and callback(error) on failure
StatsCallback = Callable[..., None]
OptionsArg = StatOptions | Mapping[str, Any] | None


def _dispatch_call_shape(
    options_or_callback: OptionsArg | StatsCallback,
    callback: StatsCallback | None,
) -> tuple[StatOptions, StatsCallback]:
    """Tell ``(path, callback)`` apart from ``(path, options, callback)``.

    Raises:
        CallbackRequiredError: If options were given without a callable callback.
        InvalidArgumentTypeError: If the second argument is neither options nor callable.
    """
    if callable(options_or_callback):
        return StatOptions(), options_or_callback

    if options_or_callback is None or isinstance(options_or_callback, StatOptions | Mapping):
        if not callable(callback):
            raise CallbackRequiredError()
        return coerce_options(options_or_callback), callback

    raise InvalidArgumentTypeError("options", "an object or a function", options_or_callback)


def _log_callback_failure(future: Future[None]) -> None:
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.warning("stat callback raised %s: %s", type(exc).__name__, exc)


class StatService:
    """Filesystem metadata queries in the stat convention's shape.

    Args:
        source: Native metadata primitive. Defaults to OsMetadataSource.
        adapter: Adapter turning raw records into Stats.
        executor: Executor running callback-style queries. When omitted,
            the service owns a thread pool and shuts it down on close().
        max_workers: Size of the owned thread pool.
    """

    def __init__(
        self,
        source: MetadataSource | None = None,
        adapter: StatAdapter | None = None,
        executor: Executor | None = None,
        *,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self._source = source or OsMetadataSource()
        self._adapter = adapter or StatAdapter()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="fsstat",
        )

    # === Callback style ===

    def stat(
        self,
        path: PathArg,
        options_or_callback: OptionsArg | StatsCallback = None,
        callback: StatsCallback | None = None,
    ) -> Future[None]:
        """Query metadata, following symbolic links, and deliver it to a callback.

        Args:
            path: Path, os.PathLike, or file URL.
            options_or_callback: Either the callback or the options.
            callback: The callback, required when options are given.

        Returns:
            Future completing once the callback has run.

        Raises:
            CallbackRequiredError: If options are given without a callback.
            NotImplementedFeatureError: If ``bigint`` is requested.
        """
        options, cb = _dispatch_call_shape(options_or_callback, callback)
        return self._submit(path, options, cb, follow_symlinks=True)

    def lstat(
        self,
        path: PathArg,
        options_or_callback: OptionsArg | StatsCallback = None,
        callback: StatsCallback | None = None,
    ) -> Future[None]:
        """Like stat(), but reports on a symbolic link itself."""
        options, cb = _dispatch_call_shape(options_or_callback, callback)
        return self._submit(path, options, cb, follow_symlinks=False)

    def stat_with_options(
        self, path: PathArg, options: OptionsArg, callback: StatsCallback
    ) -> Future[None]:
        """Explicit-options form of stat()."""
        if not callable(callback):
            raise CallbackRequiredError()
        return self._submit(path, coerce_options(options), callback, follow_symlinks=True)

    def lstat_with_options(
        self, path: PathArg, options: OptionsArg, callback: StatsCallback
    ) -> Future[None]:
        """Explicit-options form of lstat()."""
        if not callable(callback):
            raise CallbackRequiredError()
        return self._submit(path, coerce_options(options), callback, follow_symlinks=False)

    # === Direct return ===

    def stat_sync(self, path: PathArg, options: OptionsArg = None) -> Stats:
        """Query metadata, following symbolic links.

        Raises:
            NotImplementedFeatureError: If ``bigint`` is requested.
            OSError: If the native query fails.
        """
        check_options(coerce_options(options))
        return self._query(resolve_to_plain_path(path), follow_symlinks=True)

    def lstat_sync(self, path: PathArg, options: OptionsArg = None) -> Stats:
        """Like stat_sync(), but reports on a symbolic link itself."""
        check_options(coerce_options(options))
        return self._query(resolve_to_plain_path(path), follow_symlinks=False)

    # === Coroutines ===

    async def stat_async(self, path: PathArg, options: OptionsArg = None) -> Stats:
        """Awaitable form of stat_sync()."""
        return await self._query_async(path, options, follow_symlinks=True)

    async def lstat_async(self, path: PathArg, options: OptionsArg = None) -> Stats:
        """Awaitable form of lstat_sync()."""
        return await self._query_async(path, options, follow_symlinks=False)

    # === Lifecycle ===

    def close(self) -> None:
        """Shut down the owned executor, waiting for in-flight queries."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # === Internals ===

    def _submit(
        self,
        path: PathArg,
        options: StatOptions,
        callback: StatsCallback,
        *,
        follow_symlinks: bool,
    ) -> Future[None]:
        plain_path = resolve_to_plain_path(path)
        check_options(options)
        logger.debug("Scheduling stat of %s (follow_symlinks=%s)", plain_path, follow_symlinks)
        future = self._executor.submit(self._run, plain_path, callback, follow_symlinks)
        future.add_done_callback(_log_callback_failure)
        return future

    def _run(self, plain_path: str, callback: StatsCallback, follow_symlinks: bool) -> None:
        try:
            stats = self._query(plain_path, follow_symlinks=follow_symlinks)
        except Exception as e:
            callback(e)
            return
        callback(None, stats)

    def _query(self, plain_path: str, *, follow_symlinks: bool) -> Stats:
        record = self._source.query(plain_path, follow_symlinks=follow_symlinks)
        return self._adapter.adapt(record)

    async def _query_async(
        self, path: PathArg, options: OptionsArg, *, follow_symlinks: bool
    ) -> Stats:
        check_options(coerce_options(options))
        plain_path = resolve_to_plain_path(path)
        record = await self._source.query_async(plain_path, follow_symlinks=follow_symlinks)
        return self._adapter.adapt(record)


_default_service: StatService | None = None


def get_default_service() -> StatService:
    """Return the shared StatService used by the module-level functions.

    Created on first use, sized from the user configuration.
    """
    global _default_service
    if _default_service is None:
        try:
            max_workers = load_config_or_default().max_workers
        except ConfigError as e:
            logger.warning("Ignoring unusable config, using defaults: %s", e)
            max_workers = DEFAULT_MAX_WORKERS
        _default_service = StatService(max_workers=max_workers)
    return _default_service


def stat(
    path: PathArg,
    options_or_callback: OptionsArg | StatsCallback = None,
    callback: StatsCallback | None = None,
) -> Future[None]:
    """Module-level StatService.stat() on the default service."""
    return get_default_service().stat(path, options_or_callback, callback)


def lstat(
    path: PathArg,
    options_or_callback: OptionsArg | StatsCallback = None,
    callback: StatsCallback | None = None,
) -> Future[None]:
    """Module-level StatService.lstat() on the default service."""
    return get_default_service().lstat(path, options_or_callback, callback)


def stat_sync(path: PathArg, options: OptionsArg = None) -> Stats:
    """Module-level StatService.stat_sync() on the default service."""
    return get_default_service().stat_sync(path, options)


def lstat_sync(path: PathArg, options: OptionsArg = None) -> Stats:
    """Module-level StatService.lstat_sync() on the default service."""
    return get_default_service().lstat_sync(path, options)


async def stat_async(path: PathArg, options: OptionsArg = None) -> Stats:
    """Module-level StatService.stat_async() on the default service."""
    return await get_default_service().stat_async(path, options)


async def lstat_async(path: PathArg, options: OptionsArg = None) -> Stats:
    """Module-level StatService.lstat_async() on the default service."""
    return await get_default_service().lstat_async(path, options)
