"""Folding of per-image and per-service results into reports.

The same `fold` is used at both levels: once over the images of a
Dockerfile (or compose service) and once over the services of a compose
file, where each service contributes its whole image report.
"""
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from uptag.models.errors import CheckError, CurrentTagNotEncounteredError, UptagError
from uptag.models.image import Image
from uptag.models.report import Bucket, Report
from uptag.models.resolution import Found, NotEncountered, Resolution

K = TypeVar("K")
T = TypeVar("T")

ImageResult = Resolution | CheckError
ServiceResult = Iterable[tuple[Image, ImageResult]] | UptagError


def fold(entries: Iterable[tuple[K, T]], sort: Callable[[T], Iterable[tuple[Bucket, Any]]]) -> Report[K]:
    report: Report[K] = Report()
    for key, value in entries:
        for bucket, content in sort(value):
            report.entries(bucket).append((key, content))
    return report


def sort_image_result(result: ImageResult) -> Iterator[tuple[Bucket, Any]]:
    if isinstance(result, CheckError):
        yield Bucket.FAILURES, result
        return

    outcome = result.outcome
    if outcome.breaking is not None:
        yield Bucket.BREAKING_UPDATES, outcome.breaking
    if outcome.compatible is not None:
        yield Bucket.COMPATIBLE_UPDATES, outcome.compatible

    match result.status:
        case NotEncountered(searched_amount=searched_amount):
            # updates found within the bound are kept alongside the failure
            yield Bucket.FAILURES, CurrentTagNotEncounteredError(searched_amount)
        case Found() if outcome.is_empty:
            yield Bucket.NO_UPDATES, None


def sort_service_result(result: Report[Image] | UptagError) -> Iterator[tuple[Bucket, Any]]:
    if isinstance(result, UptagError):
        yield Bucket.FAILURES, result
        return
    buckets = [bucket for bucket in Bucket if result.entries(bucket)]
    if not buckets:
        # nothing to check, e.g. a Dockerfile built `FROM scratch`
        yield Bucket.NO_UPDATES, []
    for bucket in buckets:
        yield bucket, result.entries(bucket)


def build_image_report(results: Iterable[tuple[Image, ImageResult]]) -> Report[Image]:
    return fold(results, sort_image_result)


def build_service_report(results: Iterable[tuple[str, ServiceResult]]) -> Report[str]:
    service_reports = (
        (service, result if isinstance(result, UptagError) else build_image_report(result))
        for service, result in results
    )
    return fold(service_reports, sort_service_result)
