"""Fixed display strings for the two languages the HKO API serves.

``tc`` (Traditional Chinese) is the default because it matches the
default ``HKO_LANG``.  Unknown language codes fall back to ``tc``.
"""
from __future__ import annotations

DEFAULT_LANG = "tc"

LABELS: dict[str, dict[str, str]] = {
    "tc": {
        "day_template": "{month}月{day}日 {week}",
        "day_fallback": "第{week}天",
        "timestamp_template": "{year}年{month}月{day}日 {hour:02d}:{minute:02d}",
        "unknown_time": "未知時間",
        "title": "香港天氣",
        "subtitle": "香港天文台提供",
        "last_updated": "最後更新",
        "today": "今天",
        "humidity": "濕度",
        "uv_index": "紫外線指數",
        "rainfall": "降雨量",
        "record_time": "記錄時間",
        "special_tips": "特別天氣提示",
        "forecast_title": "九天預報",
        "psr": "降雨概率",
        "chart_title": "溫度變化趨勢",
        "max_temp": "最高溫度",
        "min_temp": "最低溫度",
        "chart_date": "日期",
        "general_situation": "一般天氣情況",
        "error_title": "載入失敗",
        "error_message": "無法獲取天氣數據，請稍後重試",
        "reload": "重新載入",
    },
    "en": {
        "day_template": "{month}/{day} {week}",
        "day_fallback": "Day {week}",
        "timestamp_template": "{year}/{month}/{day} {hour:02d}:{minute:02d}",
        "unknown_time": "Unknown time",
        "title": "Hong Kong Weather",
        "subtitle": "Provided by the Hong Kong Observatory",
        "last_updated": "Last updated",
        "today": "Today",
        "humidity": "Humidity",
        "uv_index": "UV index",
        "rainfall": "Rainfall",
        "record_time": "Recorded at",
        "special_tips": "Special weather tips",
        "forecast_title": "9-day forecast",
        "psr": "Chance of rain",
        "chart_title": "Temperature trend",
        "max_temp": "Max temperature",
        "min_temp": "Min temperature",
        "chart_date": "Date",
        "general_situation": "General weather situation",
        "error_title": "Failed to load",
        "error_message": "Unable to fetch weather data, please try again later",
        "reload": "Reload",
    },
}


def get_labels(lang: str | None) -> dict[str, str]:
    """Return the label table for *lang*, falling back to ``tc``."""
    return LABELS.get(lang or DEFAULT_LANG, LABELS[DEFAULT_LANG])
