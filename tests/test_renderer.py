"""Tests for the HTML renderer."""
from __future__ import annotations

from hko_dashboard.dashboard.builder import (
    CurrentConditions,
    Dashboard,
    ForecastDay,
    build_dashboard,
)
from hko_dashboard.dashboard.renderer import render_dashboard, render_error


class TestRenderDashboard:
    def test_full_page(self, current_doc, forecast_doc) -> None:
        page = render_dashboard(build_dashboard(current_doc, forecast_doc))

        assert page.startswith("<!DOCTYPE html>")
        assert 'class="weather-app rainy"' in page
        assert "香港天氣" in page
        assert "最後更新：2025年8月3日 11:30" in page
        assert "30°" in page
        assert "12mm" in page
        assert "8月3日 星期日" in page
        assert "中高 (55-69%)" in page
        assert "$" not in page

    def test_english_labels(self, current_doc, forecast_doc) -> None:
        page = render_dashboard(build_dashboard(current_doc, forecast_doc, lang="en"))
        assert "Hong Kong Weather" in page
        assert "9-day forecast" in page

    def test_values_are_escaped(self) -> None:
        dashboard = Dashboard(
            lang="en",
            background="cloudy",
            current=CurrentConditions(temperature="<b>30</b>°", description="<script>x</script>"),
        )
        page = render_dashboard(dashboard)

        assert "<script>x</script>" not in page
        assert "&lt;script&gt;x&lt;/script&gt;" in page
        assert "&lt;b&gt;30&lt;/b&gt;°" in page

    def test_missing_temperature_not_rendered(self) -> None:
        current = CurrentConditions(humidity="80%")
        page = render_dashboard(Dashboard(lang="tc", background="cloudy", current=current))

        assert 'class="current-weather"' in page
        assert 'class="current-temp"' not in page
        assert "80%" in page

    def test_optional_sections_omitted(self) -> None:
        page = render_dashboard(Dashboard(lang="tc", background="cloudy"))

        assert 'class="current-weather"' not in page
        assert 'class="forecast-section"' not in page
        assert 'class="chart-section"' not in page
        assert 'class="weather-update-time"' not in page

    def test_chart_embedded(self) -> None:
        page = render_dashboard(Dashboard(lang="tc", background="sunny"), '<div id="chart"></div>')
        assert '<div id="chart"></div>' in page
        assert "溫度變化趨勢" in page

    def test_forecast_card_without_psr(self) -> None:
        day = ForecastDay(
            date_label="8/3 Sun", icon="bi-sun", max_temp="32°", min_temp="27°", humidity="70-95%"
        )
        page = render_dashboard(Dashboard(lang="en", background="sunny", forecast_days=[day]))

        assert "8/3 Sun" in page
        assert "Chance of rain" not in page


class TestRenderError:
    def test_reload_button_points_at_retry_url(self) -> None:
        page = render_error("http://testserver/?viewport_width=400&x=1")

        assert "載入失敗" in page
        assert "無法獲取天氣數據，請稍後重試" in page
        assert 'href="http://testserver/?viewport_width=400&amp;x=1"' in page
        assert "重新載入" in page

    def test_english(self) -> None:
        page = render_error("/", lang="en")
        assert "Failed to load" in page
        assert "Reload" in page

    def test_custom_message_escaped(self) -> None:
        page = render_error("/", lang="en", message="<oops>")
        assert "&lt;oops&gt;" in page
