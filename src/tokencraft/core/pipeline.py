"""
Parallel export pipeline.

Plans one job per (format, mode) pair, or one job per format for
emitters that take every selected mode at once, and runs the jobs on a
thread pool. Jobs share only the immutable config snapshot. A failing job
never cancels its siblings; every failure is collected with its token
path, mode and format, and successful artifacts are still written.

Results are sorted by (format, mode) before anything is written, so the
output is the same regardless of completion order.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from tokencraft.emitters import get_emitter

from .errors import ErrorContext, ResolutionError, TokenCraftError, UnknownModeError
from .ir.tokenspec import TokenConfig
from .merge import merge_tokenspec
from .resolver import ResolutionPolicy, resolve_theme

logger = logging.getLogger(__name__)

ALL_MODES = "all"


# =============================================================================
# Jobs and results
# =============================================================================


@dataclass(frozen=True)
class ExportJob:
    """One artifact to produce.

    ``mode`` is set for per-mode artifacts; ``modes`` lists every mode the
    emitter receives.
    """

    format: str
    mode: str | None
    modes: tuple[str, ...]

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.format, self.mode or "")

    def describe(self) -> str:
        return f"{self.format}[{self.mode}]" if self.mode else self.format


@dataclass
class JobResult:
    """Outcome of one job: content on success, a reason on failure."""

    job: ExportJob
    content: str | None = None
    error: str | None = None
    token_path: str | None = None
    path: Path | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def context(self) -> ErrorContext:
        return ErrorContext(path=self.token_path, mode=self.job.mode, format_name=self.job.format)

    def describe_failure(self) -> str:
        location = self.context.format()
        return f"{location}: {self.error}" if location else str(self.error)


@dataclass
class ExportReport:
    """All job results of one export run, in (format, mode) order."""

    results: list[JobResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[JobResult]:
        return [r for r in self.results if r.ok]

    @property
    def failures(self) -> list[JobResult]:
        return [r for r in self.results if not r.ok]

    @property
    def written(self) -> list[Path]:
        return [r.path for r in self.results if r.ok and r.path is not None]

    @property
    def ok(self) -> bool:
        return not self.failures


# =============================================================================
# Planning
# =============================================================================


def select_modes(config: TokenConfig, mode_selector: str | None = ALL_MODES) -> tuple[str, ...]:
    """Expand a mode selector (``all``, one mode, or a comma list).

    Raises:
        UnknownModeError: If a named mode is not declared.
    """
    if not mode_selector or mode_selector == ALL_MODES:
        return tuple(config.mode_names)

    modes = tuple(name.strip() for name in mode_selector.split(",") if name.strip())
    for mode in modes:
        if mode not in config.theme.themes:
            raise UnknownModeError(mode, config.mode_names)
    return modes


def plan_jobs(
    config: TokenConfig,
    formats: Sequence[str],
    mode_selector: str | None = ALL_MODES,
) -> list[ExportJob]:
    """Build the sorted job list for the requested formats.

    Raises:
        UnsupportedFormatError: For any unknown format.
        UnknownModeError: For any unknown mode in the selector.
    """
    modes = select_modes(config, mode_selector)
    jobs: list[ExportJob] = []
    for format_name in dict.fromkeys(f.lower() for f in formats):
        emitter = get_emitter(format_name)
        if emitter.per_mode:
            jobs.extend(ExportJob(emitter.format, mode, (mode,)) for mode in modes)
        else:
            jobs.append(ExportJob(emitter.format, None, modes))
    return sorted(jobs, key=lambda job: job.sort_key)


# =============================================================================
# Execution
# =============================================================================


def run_job(
    job: ExportJob,
    config: TokenConfig,
    policy: ResolutionPolicy | str = ResolutionPolicy.STRICT,
) -> JobResult:
    """Run a single job, converting tokencraft errors into a failed result."""
    emitter = get_emitter(job.format)
    try:
        themes = (
            [resolve_theme(config, mode, policy) for mode in job.modes]
            if emitter.uses_themes
            else []
        )
        content = emitter.emit(themes, config, ResolutionPolicy(policy))
    except ResolutionError as e:
        return JobResult(job, error=e.message, token_path=e.path)
    except TokenCraftError as e:
        return JobResult(job, error=e.message)
    return JobResult(job, content=content)


def run_jobs(
    jobs: Sequence[ExportJob],
    config: TokenConfig,
    policy: ResolutionPolicy | str = ResolutionPolicy.STRICT,
    max_workers: int | None = None,
) -> list[JobResult]:
    """Run jobs concurrently and return every result sorted by (format, mode)."""
    results: list[JobResult] = []
    if not jobs:
        return results

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures: dict[Future[JobResult], ExportJob] = {
            pool.submit(run_job, job, config, policy): job for job in jobs
        }
        for future in as_completed(futures):
            job = futures[future]
            try:
                result = future.result()
            except Exception as e:
                logger.exception(f"Export job {job.describe()} crashed")
                result = JobResult(job, error=f"{type(e).__name__}: {e}")
            if not result.ok:
                logger.warning(f"Export job {job.describe()} failed: {result.describe_failure()}")
            results.append(result)

    return sorted(results, key=lambda r: r.job.sort_key)


# =============================================================================
# Export
# =============================================================================


def output_path_for(
    job: ExportJob,
    config: TokenConfig,
    output_path: Path | None = None,
    per_mode_count: int = 1,
    format_count: int = 1,
) -> Path:
    """Where a job's artifact goes.

    Without an explicit path the artifact lands in ``tokens.output`` under
    its default filename. An explicit directory gets the default filename.
    An explicit file shared by several formats gets a ``-<format>`` suffix,
    and one shared by several modes of a format gets a ``-<mode>`` suffix,
    so no two artifacts of a run land on the same path.

    Args:
        job: Job whose artifact is placed.
        config: Config snapshot (for ``tokens.output``).
        output_path: Explicit file or directory.
        per_mode_count: Number of per-mode jobs of this job's format.
        format_count: Number of formats in the run.
    """
    emitter = get_emitter(job.format)
    if output_path is None:
        return Path(config.tokens.output) / emitter.filename(job.mode)
    if output_path.is_dir():
        return output_path / emitter.filename(job.mode)

    stem = output_path.stem
    if format_count > 1:
        stem = f"{stem}-{job.format}"
    if job.mode and per_mode_count > 1:
        stem = f"{stem}-{job.mode}"
    return output_path.with_name(f"{stem}{output_path.suffix}")


def write_results(
    results: Sequence[JobResult],
    config: TokenConfig,
    output_path: Path | None = None,
) -> None:
    """Write successful results in order; write failures become job failures."""
    per_mode_counts = Counter(r.job.format for r in results if r.job.mode)
    format_count = len({r.job.format for r in results})
    for result in results:
        if not result.ok or result.content is None:
            continue
        path = output_path_for(
            result.job,
            config,
            output_path,
            per_mode_counts[result.job.format],
            format_count,
        )
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(result.content, encoding="utf-8")
        except OSError as e:
            result.error = f"Could not write {path}: {e}"
            continue
        result.path = path
        logger.info(f"Wrote {path}")


def export_tokens(
    config: TokenConfig,
    format: str | Sequence[str],
    output_path: str | Path | None = None,
    mode_selector: str | None = ALL_MODES,
    prefix: str | None = None,
    policy: ResolutionPolicy | str = ResolutionPolicy.STRICT,
    max_workers: int | None = None,
    write: bool = True,
) -> ExportReport:
    """Export one or more formats.

    Args:
        config: Validated config snapshot.
        format: Format name, comma-separated names, or a sequence of names.
        output_path: Explicit file or directory; defaults to ``tokens.output``.
        mode_selector: ``all``, one mode, or a comma-separated list.
        prefix: Overrides ``tokens.prefix`` for this run.
        policy: Resolution policy for every job.
        max_workers: Thread pool size (executor default when None).
        write: Set False to only collect contents.

    Returns:
        ExportReport with every job result, written or failed.

    Raises:
        UnsupportedFormatError: If a format has no emitter.
        UnknownModeError: If the selector names an undeclared mode.
    """
    if prefix:
        config = merge_tokenspec(config, {"tokens": {"prefix": prefix}})

    formats = [f.strip() for f in format.split(",")] if isinstance(format, str) else list(format)
    jobs = plan_jobs(config, [f for f in formats if f], mode_selector)
    logger.debug(f"Planned {len(jobs)} export job(s): {', '.join(j.describe() for j in jobs)}")

    results = run_jobs(jobs, config, policy, max_workers)
    if write:
        write_results(results, config, Path(output_path) if output_path else None)

    return ExportReport(results)
