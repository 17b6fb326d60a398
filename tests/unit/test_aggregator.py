"""Unit tests for the result aggregator."""

from ytsearch.models import DisplayRecord, SearchKind, SearchResultSummary
from ytsearch.services.aggregator import aggregate
from ytsearch.services.kinds import get_profile


def _summary(
    result_id: str,
    title: str = "Title",
    owner: str = "Owner",
    kind: str = "video",
    elapsed: str = "5 days ago",
    description: str = "",
) -> SearchResultSummary:
    return SearchResultSummary(
        id=result_id,
        kind=kind,
        title=title,
        owner_name=owner,
        published_at="2026-10-13T12:00:00Z",
        elapsed=elapsed,
        description=description,
    )


class TestAggregate:
    """Tests for aggregate function."""

    def test_video_subtitle_and_url(self):
        records = aggregate(
            [_summary("abc", title="Lofi", owner="Chill")],
            {"abc": {"viewCount": 1500}},
            get_profile(SearchKind.VIDEO),
        )

        assert records == [
            DisplayRecord(
                id="abc",
                title="Lofi",
                subtitle="Chill • 1.5K views • 5 days ago",
                action_url="https://www.youtube.com/watch?v=abc",
            )
        ]

    def test_live_subtitle(self):
        records = aggregate(
            [_summary("live1", owner="News", elapsed="2 hours ago")],
            {"live1": {"concurrentViewers": 12_000}},
            get_profile(SearchKind.LIVE),
        )

        assert records[0].subtitle == "News • 12K watching now • Started streaming 2 hours ago"
        assert records[0].action_url == "https://www.youtube.com/watch?v=live1"

    def test_playlist_subtitle(self):
        records = aggregate(
            [_summary("PL1", kind="playlist", owner="YouTube Music", elapsed="1 year ago")],
            {},
            get_profile(SearchKind.PLAYLIST),
        )

        assert records[0].subtitle == "YouTube Music • 1 year ago"
        assert records[0].action_url == "https://www.youtube.com/playlist?list=PL1"
        assert records[0].secondary_text is None

    def test_channel_subtitle_and_description(self):
        records = aggregate(
            [
                _summary(
                    "UC1",
                    kind="channel",
                    elapsed="3 years ago",
                    description="Math &amp; animations",
                )
            ],
            {"UC1": {"subscriberCount": 6_400_000, "viewCount": 550_000_000, "videoCount": 140}},
            get_profile(SearchKind.CHANNEL),
        )

        assert records[0].subtitle == (
            "6.4M subscribers • 550M views • 140 videos • created 3 years ago"
        )
        assert records[0].action_url == "https://www.youtube.com/channel/UC1"
        assert records[0].secondary_text == "Math &amp; animations"

    def test_empty_metrics_show_zero(self):
        """Test every numeric field renders as 0 without metrics."""
        video = aggregate([_summary("v1", owner="O")], {}, get_profile(SearchKind.VIDEO))
        channel = aggregate(
            [_summary("UC1", kind="channel", elapsed="now")], {}, get_profile(SearchKind.CHANNEL)
        )

        assert video[0].subtitle == "O • 0 views • 5 days ago"
        assert channel[0].subtitle == "0 subscribers • 0 views • 0 videos • created now"

    def test_order_preserved_with_partial_metrics(self):
        """Test [A, B, C] with metrics only for B and C keeps order [A, B, C]."""
        summaries = [_summary("A"), _summary("B"), _summary("C")]
        metrics = {"C": {"viewCount": 3}, "B": {"viewCount": 2}}

        records = aggregate(summaries, metrics, get_profile(SearchKind.VIDEO))

        assert [r.id for r in records] == ["A", "B", "C"]
        assert [r.subtitle.split(" • ")[1] for r in records] == [
            "0 views",
            "2 views",
            "3 views",
        ]

    def test_metrics_for_unknown_ids_ignored(self):
        records = aggregate(
            [_summary("A")],
            {"Z": {"viewCount": 99}},
            get_profile(SearchKind.VIDEO),
        )

        assert [r.id for r in records] == ["A"]

    def test_blank_title_dropped(self):
        summaries = [_summary("A", title="   "), _summary("B", title="")]
        summaries.append(_summary("C"))

        records = aggregate(summaries, {}, get_profile(SearchKind.VIDEO))

        assert [r.id for r in records] == ["C"]

    def test_empty_summaries(self):
        assert aggregate([], {}, get_profile(SearchKind.VIDEO)) == []

    def test_braces_in_owner_are_literal(self):
        records = aggregate(
            [_summary("A", owner="{viewCount} fan club")], {}, get_profile(SearchKind.VIDEO)
        )

        assert records[0].subtitle.startswith("{viewCount} fan club • 0 views")


class TestDisplayRecordToDict:
    """Tests for DisplayRecord.to_dict method."""

    def test_plain_record(self):
        record = DisplayRecord(id="v", title="T", subtitle="S", action_url="https://x")

        assert record.to_dict() == {"title": "T", "subtitle": "S", "arg": "https://x"}

    def test_record_with_secondary_text(self):
        record = DisplayRecord(
            id="c", title="T", subtitle="S", action_url="https://x", secondary_text="About"
        )

        assert record.to_dict()["mods"] == {"cmd": {"subtitle": "About"}}

    def test_empty_secondary_text_still_emitted(self):
        record = DisplayRecord(
            id="c", title="T", subtitle="S", action_url="https://x", secondary_text=""
        )

        assert record.to_dict()["mods"] == {"cmd": {"subtitle": ""}}
