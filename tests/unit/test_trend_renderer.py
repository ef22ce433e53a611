"""Tests for TrendRenderer."""

from datetime import date, timedelta

import pytest

from tt_stats.exceptions import InsufficientDataError
from tt_stats.models import DailyBucket
from tt_stats.services.trend_renderer import (
    TrendRenderer,
    format_caption,
    format_legend,
    plan_axis_labels,
)


def _buckets(count, start=date(2024, 1, 1)):
    return [
        DailyBucket(
            day=start + timedelta(days=i),
            min_wpm=50.0 + i,
            mean_wpm=60.0 + i,
            max_wpm=70.0 + i,
            sample_count=2,
        )
        for i in range(count)
    ]


@pytest.fixture
def renderer(recording_acknowledge, recording_presenter):
    return TrendRenderer(acknowledge=recording_acknowledge, presenter=recording_presenter)


class TestPlanAxisLabels:
    """Tests for x-axis label selection."""

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_small_history_labels_every_bucket(self, count):
        positions, labels = plan_axis_labels(_buckets(count))

        assert positions == list(range(count))
        assert len(labels) == count

    @pytest.mark.parametrize("count", [6, 7, 30])
    def test_large_history_labels_first_middle_last(self, count):
        positions, labels = plan_axis_labels(_buckets(count))

        assert positions == [0, count // 2, count - 1]
        assert len(labels) == 3

    def test_label_format(self):
        _, labels = plan_axis_labels(_buckets(2))
        assert labels == ["Jan 01", "Jan 02"]

    def test_middle_label(self):
        _, labels = plan_axis_labels(_buckets(7))
        assert labels == ["Jan 01", "Jan 04", "Jan 07"]


class TestFormatting:
    """Tests for caption and legend text."""

    def test_caption_spans_first_to_last(self):
        assert format_caption(_buckets(10)) == "Typing Speed Progress (Jan 01 - Jan 10)"

    def test_legend_names_series_in_order(self):
        legend = format_legend(("blue", "green", "red"))

        assert legend.index("Min WPM") < legend.index("Mean WPM") < legend.index("Max WPM")
        assert "\033[34m" in legend
        assert "\033[32m" in legend
        assert "\033[31m" in legend


class TestRender:
    """Tests for rendering and acknowledgment."""

    def test_no_buckets_raises(self, renderer, recording_acknowledge):
        with pytest.raises(InsufficientDataError):
            renderer.render([])
        assert recording_acknowledge.calls == 0

    def test_three_equal_length_series(self, renderer):
        chart = renderer.render(_buckets(4))

        assert len(chart.min_series) == len(chart.mean_series) == len(chart.max_series) == 4
        assert chart.min_series == [50.0, 51.0, 52.0, 53.0]
        assert chart.mean_series == [60.0, 61.0, 62.0, 63.0]
        assert chart.max_series == [70.0, 71.0, 72.0, 73.0]

    def test_summary_counts(self, renderer, recording_presenter):
        chart = renderer.render(_buckets(3))

        assert chart.total_samples == 6
        assert chart.day_count == 3
        assert "6 tests completed over 3 days" in recording_presenter.infos
        assert recording_presenter.infos[-1] == "Press any key to exit"

    def test_legend_precedes_summary(self, renderer, recording_presenter):
        renderer.render(_buckets(2))

        infos = recording_presenter.infos
        legend_index = next(i for i, m in enumerate(infos) if "Mean WPM" in m)
        summary_index = infos.index("4 tests completed over 2 days")
        assert legend_index < summary_index

    def test_mean_accuracy_line(self, renderer, recording_presenter):
        renderer.render(_buckets(2), mean_accuracy=96.456)
        assert "Average accuracy: 96.46%" in recording_presenter.infos

    def test_waits_for_acknowledgment_once(self, renderer, recording_acknowledge):
        renderer.render(_buckets(2))
        assert recording_acknowledge.calls == 1

    def test_chart_text_is_printed(self, renderer, recording_presenter):
        chart = renderer.render(_buckets(8))

        assert chart.text
        assert chart.text in recording_presenter.infos
        assert chart.labels == ["Jan 01", "Jan 05", "Jan 08"]

    def test_single_flat_bucket(self, renderer):
        bucket = DailyBucket(date(2024, 1, 1), 80.0, 80.0, 80.0, 2)

        chart = renderer.render([bucket])

        assert chart.caption == "Typing Speed Progress (Jan 01 - Jan 01)"
        assert chart.text

    def test_color_count_validated(self, recording_acknowledge):
        with pytest.raises(ValueError):
            TrendRenderer(acknowledge=recording_acknowledge, colors=("red", "blue"))
