import logging
from collections.abc import Iterable, Iterator

from uptag.models.errors import FetchError, InvalidCurrentTagError
from uptag.models.pattern import Pattern
from uptag.models.resolution import CurrentTagStatus, Found, NotEncountered, Resolution, UpdateOutcome
from uptag.models.version import UpdateType, Version, classify, extract_from

logger = logging.getLogger(__name__)

_END = object()


def find_update(
    image_name: str,
    current_tag: str,
    pattern: Pattern,
    tags: Iterable[str],
    search_limit: int,
) -> Resolution:
    """Search the newest `search_limit` tags for updates of `current_tag`.

    Tags are expected newest first, so the search stops at the current tag.
    Candidates are ranked by their version rather than by their position,
    since registries order by push date and an older line can be patched
    after a newer one.
    """
    if search_limit <= 0:
        raise ValueError(f"search limit must be positive, got {search_limit}")

    current_version = extract_from(pattern, current_tag)
    if current_version is None:
        raise InvalidCurrentTagError(current_tag, str(pattern))

    best: dict[UpdateType, tuple[Version, str]] = {}
    iterator = iter(tags)
    searched_amount = 0
    status: CurrentTagStatus | None = None

    while searched_amount < search_limit:
        tag = _pull(image_name, iterator)
        if tag is _END:
            break
        searched_amount += 1
        if tag == current_tag:
            status = Found()
            break

        candidate = extract_from(pattern, tag)
        if candidate is None:
            logger.debug(f"Skipping tag {tag} of {image_name}, it does not match `{pattern}`")
            continue
        if candidate <= current_version:
            continue

        update_type = classify(current_version, candidate, pattern.breaking_degree)
        if update_type not in best or candidate > best[update_type][0]:
            best[update_type] = (candidate, tag)

    if status is None:
        logger.warning(f"Current tag {current_tag} of {image_name} not found within {searched_amount} tags")
        status = NotEncountered(searched_amount)

    outcome = UpdateOutcome(
        compatible=best[UpdateType.COMPATIBLE][1] if UpdateType.COMPATIBLE in best else None,
        breaking=best[UpdateType.BREAKING][1] if UpdateType.BREAKING in best else None,
    )
    return Resolution(status=status, outcome=outcome)


def _pull(image_name: str, iterator: Iterator[str]):
    try:
        return next(iterator, _END)
    except FetchError:
        raise
    except Exception as e:
        raise FetchError(image_name) from e
