from uptag.models import Image, Report
from uptag.models.errors import UptagError

INDENT = "  "


def format_error(error: BaseException) -> str:
    """Render an error followed by its chain of causes."""
    messages = [str(error)]
    cause = error.__cause__
    while cause is not None:
        messages.append(str(cause))
        cause = cause.__cause__
    return ": ".join(message for message in messages if message)


def _section(title: str, lines: list[str]) -> str:
    if not lines:
        return ""
    return f"{len(lines)} with {title}:\n" + "\n".join(lines)


def _join(sections: list[str]) -> str:
    return "\n\n".join(section for section in sections if section)


def _breaking_line(image: Image, tag: str) -> str:
    return f"{image} -!> {image.with_tag(tag)}"


def _compatible_line(image: Image, tag: str) -> str:
    return f"{image} -> {image.with_tag(tag)}"


def format_image_successes(report: Report[Image]) -> str:
    return _join([
        _section("breaking update", [_breaking_line(image, tag) for image, tag in report.breaking_updates]),
        _section("compatible update", [_compatible_line(image, tag) for image, tag in report.compatible_updates]),
        _section("no updates", [str(image) for image, _ in report.no_updates]),
    ])


def format_image_failures(report: Report[Image]) -> str:
    return _section("failure", [f"{image}: {format_error(error)}" for image, error in report.failures])


def _service_block(service: str, lines: list[str]) -> str:
    return "\n".join([f"{service}:"] + [f"{INDENT}{line}" for line in lines])


def format_service_successes(report: Report[str]) -> str:
    return _join([
        _section("breaking update", [
            _service_block(service, [_breaking_line(image, tag) for image, tag in updates])
            for service, updates in report.breaking_updates
        ]),
        _section("compatible update", [
            _service_block(service, [_compatible_line(image, tag) for image, tag in updates])
            for service, updates in report.compatible_updates
        ]),
        _section("no updates", [
            _service_block(service, [str(image) for image, _ in images])
            for service, images in report.no_updates
        ]),
    ])


def format_service_failures(report: Report[str]) -> str:
    lines = []
    for service, failure in report.failures:
        if isinstance(failure, UptagError):
            lines.append(f"{service}: {format_error(failure)}")
        else:
            lines.append(_service_block(service, [f"{image}: {format_error(error)}" for image, error in failure]))
    return _section("failure", lines)
