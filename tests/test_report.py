import math
import sys

import pytest

from streamstats.config import Settings
from streamstats.report import ObservationParseError, StatisticsReport, parse_observations
from streamstats.statistics import Max, Mean, Min, Std


class TestParseObservations:
    def test_whitespace_separated(self) -> None:
        assert parse_observations("3 1\n4\t1  5\n") == [3.0, 1.0, 4.0, 1.0, 5.0]

    def test_empty(self) -> None:
        assert parse_observations("") == []
        assert parse_observations("  \n ") == []

    def test_scientific_and_negative(self) -> None:
        assert parse_observations("-2.5 1e3 +4") == [-2.5, 1000.0, 4.0]

    def test_non_finite_tokens_accepted(self) -> None:
        values = parse_observations("nan inf -inf")
        assert math.isnan(values[0])
        assert values[1:] == [math.inf, -math.inf]

    def test_invalid_token(self) -> None:
        with pytest.raises(ObservationParseError) as exc_info:
            parse_observations("1 2 abc 4")
        assert exc_info.value.token == "abc"
        assert exc_info.value.position == 2
        assert "abc" in str(exc_info.value)


class TestStatisticsReport:
    def test_feed_reaches_every_statistic(self) -> None:
        report = StatisticsReport([Min(), Max(), Mean(), Std()])
        report.feed_all([3.0, 1.0, 4.0, 1.0, 5.0])

        assert report.count == 5
        names = [name for name, _ in report.results()]
        assert names == ["min value", "max value", "average value", "standard deviation"]
        values = [value for _, value in report.results()]
        assert values[:3] == [1.0, 5.0, 2.8]
        assert values[3] == pytest.approx(1.6)

    def test_render(self) -> None:
        report = StatisticsReport([Min(), Max(), Mean(), Std()])
        report.feed_all([3.0, 1.0, 4.0, 1.0, 5.0])

        assert report.render() == (
            "min value = 1\n"
            "max value = 5\n"
            "average value = 2.8\n"
            "standard deviation = 1.6"
        )

    def test_render_precision(self) -> None:
        report = StatisticsReport([Mean()], precision=3)
        report.feed_all([1.0, 2.0, 2.0])
        assert report.render() == "average value = 1.67"

    def test_render_empty(self) -> None:
        report = StatisticsReport([Min(), Mean()])
        assert report.count == 0
        assert report.render() == "min value = 1.79769e+308\naverage value = nan"

    def test_statistics_is_a_copy(self) -> None:
        report = StatisticsReport([Min()])
        report.statistics.append(Max())
        assert len(report.statistics) == 1

    def test_from_settings(self) -> None:
        settings = Settings(
            _env_file=None, statistics=["max", "std"], legacy_max_sentinel=True, precision=4
        )
        report = StatisticsReport.from_settings(settings)
        report.feed_all([-5.0, -2.0, -9.0])

        results = dict(report.results())
        assert results["max value"] == sys.float_info.min
        assert results["standard deviation"] == pytest.approx(math.sqrt(74.0 / 9.0))
