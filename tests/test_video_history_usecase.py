from datetime import timedelta

import pytest

from tests.fakes import NOW
from video.application.usecase.video_history_usecase import VideoHistoryUseCase
from video.domain.exceptions import NotFoundError, UpstreamError
from video.domain.period import one_year_before
from video.domain.video_record import ViewSample
from video.domain.video_stats import VideoStats


@pytest.fixture
def usecase(video_api, repository, clock):
    video_api.ids_by_title["Example Song"] = "abc123"
    video_api.stats_by_id["abc123"] = VideoStats(title="Example Song (Official)", view_count=1000)
    return VideoHistoryUseCase(video_api, repository, clock)


def test_first_lookup_creates_record_with_seed_sample(usecase, video_api):
    history = usecase.get_video_history("Example Song")

    assert history.video_id == "abc123"
    assert history.title == "Example Song (Official)"
    assert history.stats == [ViewSample(sampled_at=NOW, view_count=1000)]
    assert video_api.resolve_calls == ["Example Song"]
    assert video_api.fetch_calls == ["abc123"]


def test_repeated_lookup_resolves_title_each_time_but_fetches_stats_once(usecase, video_api, repository, clock):
    usecase.get_video_history("Example Song")
    clock.current = NOW + timedelta(minutes=5)
    video_api.stats_by_id["abc123"] = VideoStats(title="Renamed", view_count=5000)

    second = usecase.get_video_history("Example Song")

    assert video_api.resolve_calls == ["Example Song", "Example Song"]
    assert video_api.fetch_calls == ["abc123"]
    assert second.title == "Example Song (Official)"
    assert second.stats == [ViewSample(sampled_at=NOW, view_count=1000)]
    records = repository.find_all()
    assert len(records) == 1
    assert len(records[0].samples) == 1


def test_history_keeps_only_samples_within_one_year(usecase, repository):
    record = repository.create("abc123", "Example Song (Official)", ViewSample(NOW - timedelta(days=395), 100))
    repository.append_sample(record, ViewSample(NOW - timedelta(days=335), 200))
    repository.append_sample(record, ViewSample(NOW - timedelta(days=1), 300))

    history = usecase.get_video_history("Example Song")

    assert [s.view_count for s in history.stats] == [200, 300]


def test_sample_exactly_one_year_old_is_included(usecase, repository):
    boundary = one_year_before(NOW)
    record = repository.create("abc123", "Example Song (Official)", ViewSample(boundary - timedelta(seconds=1), 1))
    repository.append_sample(record, ViewSample(boundary, 2))

    history = usecase.get_video_history("Example Song")

    assert [s.view_count for s in history.stats] == [2]


def test_unknown_title_propagates_not_found(usecase, repository):
    with pytest.raises(NotFoundError):
        usecase.get_video_history("nothing like this")
    assert repository.find_all() == []


def test_upstream_failure_on_stats_fetch_creates_nothing(usecase, video_api, repository):
    video_api.failing_ids.add("abc123")

    with pytest.raises(UpstreamError):
        usecase.get_video_history("Example Song")
    assert repository.find_by_video_id("abc123") is None


def test_to_response_uses_wire_field_names(usecase):
    response = usecase.get_video_history("Example Song").to_response()

    assert response == {
        "videoId": "abc123",
        "title": "Example Song (Official)",
        "stats": [{"date": NOW, "viewCount": 1000}],
    }
