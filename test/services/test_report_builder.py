from uptag.models import Bucket, Found, Image, ImageName, NotEncountered, Resolution, UpdateLevel, UpdateOutcome
from uptag.models.errors import (
    CurrentTagNotEncounteredError,
    FetchError,
    ServiceError,
    UnspecifiedPatternError,
)
from uptag.services.report_builder import build_image_report, build_service_report

UBUNTU = Image(name=ImageName("ubuntu"), tag="14.04")
ALPINE = Image(name=ImageName("alpine"), tag="3.8.4")
DOKUWIKI = Image(name=ImageName("dokuwiki", "bitnami"), tag="2.3.12")
REDIS = Image(name=ImageName("redis"), tag="5.0.7")


def resolution(compatible=None, breaking=None, status=Found()):
    return Resolution(status=status, outcome=UpdateOutcome(compatible=compatible, breaking=breaking))


def test_sorts_images_into_buckets():
    error = UnspecifiedPatternError()
    report = build_image_report([
        (UBUNTU, resolution(compatible="14.05")),
        (ALPINE, resolution(breaking="4.0.2")),
        (DOKUWIKI, resolution()),
        (REDIS, error),
    ])
    assert report.compatible_updates == [(UBUNTU, "14.05")]
    assert report.breaking_updates == [(ALPINE, "4.0.2")]
    assert report.no_updates == [(DOKUWIKI, None)]
    assert report.failures == [(REDIS, error)]
    assert report.update_level() is UpdateLevel.FAILURE


def test_puts_image_with_both_updates_into_both_buckets():
    report = build_image_report([(UBUNTU, resolution(compatible="14.12", breaking="15.01"))])
    assert report.compatible_updates == [(UBUNTU, "14.12")]
    assert report.breaking_updates == [(UBUNTU, "15.01")]
    assert report.no_updates == []
    assert report.update_level() is UpdateLevel.BREAKING_UPDATE


def test_reports_not_encountered_current_tag_alongside_updates():
    report = build_image_report([(UBUNTU, resolution(compatible="14.12", status=NotEncountered(3)))])
    assert report.compatible_updates == [(UBUNTU, "14.12")]
    [(image, error)] = report.failures
    assert image == UBUNTU
    assert isinstance(error, CurrentTagNotEncounteredError)
    assert error.searched_amount == 3


def test_reports_not_encountered_current_tag_without_updates_as_failure_only():
    report = build_image_report([(UBUNTU, resolution(status=NotEncountered(3)))])
    assert report.no_updates == []
    assert report.keys(Bucket.FAILURES) == [UBUNTU]


def test_every_image_lands_in_a_bucket():
    results = [
        (UBUNTU, resolution()),
        (ALPINE, resolution(status=NotEncountered(25))),
        (DOKUWIKI, FetchError("bitnami/dokuwiki")),
        (REDIS, resolution(compatible="5.0.8")),
    ]
    report = build_image_report(results)
    seen = {key for bucket in Bucket for key in report.keys(bucket)}
    assert seen == {UBUNTU, ALPINE, DOKUWIKI, REDIS}


def test_preserves_first_seen_order():
    report = build_image_report([
        (REDIS, resolution(compatible="5.0.8")),
        (UBUNTU, resolution(compatible="14.05")),
        (ALPINE, resolution(compatible="3.8.5")),
    ])
    assert report.keys(Bucket.COMPATIBLE_UPDATES) == [REDIS, UBUNTU, ALPINE]


def test_update_levels():
    assert build_image_report([]).update_level() is UpdateLevel.NO_UPDATES
    assert build_image_report([(UBUNTU, resolution())]).update_level() is UpdateLevel.NO_UPDATES
    assert build_image_report([(UBUNTU, resolution(compatible="14.05"))]).update_level() is UpdateLevel.COMPATIBLE_UPDATE
    assert int(UpdateLevel.FAILURE) == 10


def test_folds_services():
    fail_error = UnspecifiedPatternError()
    service_error = ServiceError("broken", "Could not read the Dockerfile of service `broken`")
    report = build_service_report([
        ("ubuntu", [(UBUNTU, resolution(compatible="14.05")), (DOKUWIKI, fail_error)]),
        ("alpine", [(ALPINE, resolution(breaking="4.0.2"))]),
        ("broken", service_error),
        ("redis", [(REDIS, resolution())]),
    ])
    assert report.compatible_updates == [("ubuntu", [(UBUNTU, "14.05")])]
    assert report.breaking_updates == [("alpine", [(ALPINE, "4.0.2")])]
    assert report.no_updates == [("redis", [(REDIS, None)])]
    assert report.failures == [("ubuntu", [(DOKUWIKI, fail_error)]), ("broken", service_error)]
    assert report.update_level() is UpdateLevel.FAILURE


def test_service_with_mixed_outcomes_appears_in_each_bucket():
    report = build_service_report([
        ("web", [(UBUNTU, resolution(compatible="14.12", breaking="15.01")), (REDIS, resolution())]),
    ])
    assert report.keys(Bucket.COMPATIBLE_UPDATES) == ["web"]
    assert report.keys(Bucket.BREAKING_UPDATES) == ["web"]
    assert report.keys(Bucket.NO_UPDATES) == ["web"]
    assert report.failures == []


def test_service_without_images_has_no_updates():
    report = build_service_report([("app", []), ("redis", [(REDIS, resolution(compatible="5.0.8"))])])
    assert report.no_updates == [("app", [])]
    assert report.keys(Bucket.COMPATIBLE_UPDATES) == ["redis"]
    assert report.update_level() is UpdateLevel.COMPATIBLE_UPDATE
