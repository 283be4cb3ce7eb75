"""Normalization package.

Turns loosely shaped HKO API fragments into display-safe values.

- ``value_normalizer.get_value`` - any fragment → scalar or ``"--"``
- ``date_formatter.format_day`` - forecast date + weekday → day label
- ``date_formatter.format_timestamp`` - ISO-8601 fragment → date-time label
- ``date_formatter.format_axis_tick`` - forecast date → ``M/D`` chart tick
- ``recorder`` - diagnostic sinks for the fallback branches

None of the public functions raise; every error path degrades to a
placeholder or a best-effort string.
"""
