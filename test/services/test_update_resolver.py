import pytest

from uptag.models import Found, NotEncountered, Pattern, UpdateOutcome
from uptag.models.errors import FetchError, InvalidCurrentTagError
from uptag.services.update_resolver import find_update

PATTERN = Pattern.parse("<!>.<>")


def counting(tags, pulled):
    for tag in tags:
        pulled.append(tag)
        yield tag


def failing_after(tags, error):
    yield from tags
    raise error


@pytest.mark.parametrize("tags,compatible,breaking", [
    (["14.12", "14.05", "14.04", "14.03", "13.03"], "14.12", None),
    (["15.01", "14.04", "14.03", "13.03"], None, "15.01"),
    (["15.01", "14.12", "14.05", "14.04", "14.03"], "14.12", "15.01"),
    (["14.04", "14.03", "13.03"], None, None),
])
def test_finds_updates_before_current_tag(tags, compatible, breaking):
    resolution = find_update("ubuntu", "14.04", PATTERN, tags, 100)
    assert resolution.status == Found()
    assert resolution.outcome == UpdateOutcome(compatible=compatible, breaking=breaking)


def test_reports_current_tag_not_encountered_within_bound():
    resolution = find_update("ubuntu", "14.04", PATTERN, ["14.03", "14.02", "13.03"], 3)
    assert resolution.status == NotEncountered(searched_amount=3)
    assert resolution.outcome.is_empty


def test_reports_exhausted_source_as_not_encountered():
    resolution = find_update("ubuntu", "14.04", PATTERN, ["14.12"], 10)
    assert resolution.status == NotEncountered(searched_amount=1)
    assert resolution.outcome == UpdateOutcome(compatible="14.12")


def test_keeps_updates_found_when_current_tag_is_not_encountered():
    resolution = find_update("ubuntu", "14.04", PATTERN, ["15.01", "14.12", "14.05", "14.04"], 2)
    assert resolution.status == NotEncountered(searched_amount=2)
    assert resolution.outcome == UpdateOutcome(compatible="14.12", breaking="15.01")


def test_never_pulls_more_than_the_search_limit():
    pulled = []
    find_update("ubuntu", "14.04", PATTERN, counting(["15.01", "14.12", "14.05", "14.04"], pulled), 2)
    assert pulled == ["15.01", "14.12"]


def test_stops_pulling_at_current_tag():
    pulled = []
    find_update("ubuntu", "14.04", PATTERN, counting(["14.05", "14.04", "14.03", "13.03"], pulled), 100)
    assert pulled == ["14.05", "14.04"]


@pytest.mark.parametrize("search_limit,found", [(2, False), (3, True), (4, True)])
def test_finds_current_tag_exactly_when_within_bound(search_limit, found):
    resolution = find_update("ubuntu", "14.04", PATTERN, ["14.06", "14.05", "14.04"], search_limit)
    assert (resolution.status == Found()) is found


def test_selects_greatest_version_regardless_of_stream_order():
    resolution = find_update("ubuntu", "14.04", PATTERN, ["14.05", "15.01", "14.12", "16.00", "14.04"], 100)
    assert resolution.outcome == UpdateOutcome(compatible="14.12", breaking="16.00")


def test_ignores_tags_that_do_not_match_or_are_older():
    tags = ["latest", "14.12-rc1", "rolling", "13.10", "14.04"]
    resolution = find_update("ubuntu", "14.04", PATTERN, tags, 100)
    assert resolution.status == Found()
    assert resolution.outcome.is_empty


def test_rejects_current_tag_not_matching_pattern():
    with pytest.raises(InvalidCurrentTagError) as e:
        find_update("ubuntu", "latest", PATTERN, ["14.04"], 100)
    assert e.value.tag == "latest"
    assert e.value.pattern == "<!>.<>"


def test_propagates_fetch_errors():
    tags = failing_after(["15.01"], FetchError("ubuntu"))
    with pytest.raises(FetchError):
        find_update("ubuntu", "14.04", PATTERN, tags, 100)


def test_wraps_source_errors_into_fetch_errors():
    cause = ConnectionError("connection reset")
    with pytest.raises(FetchError) as e:
        find_update("ubuntu", "14.04", PATTERN, failing_after([], cause), 100)
    assert e.value.__cause__ is cause


def test_rejects_non_positive_search_limit():
    with pytest.raises(ValueError):
        find_update("ubuntu", "14.04", PATTERN, [], 0)
