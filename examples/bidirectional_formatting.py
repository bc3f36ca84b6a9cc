"""Bi-Directional Date Formatting Examples.

chronoform formats and parses through the same token patterns:
- Format: value -> display (format_datetime, create_formatter)
- Parse: display -> value (parse_datetime, try_parse_datetime, create_parser)

This enables locale-aware forms, log processing, and report generation.

API Notes:
- Parse functions never raise for malformed input; they return INVALID_DATE
- try_parse_datetime returns tuple[result, tuple[ChronoParseError, ...]]
- Fields missing from a pattern come from reference_date (default: now)

Implementation:
- Month, weekday, era and day period names come from Babel CLDR data
- Calendar math is proleptic Gregorian on a local wall-clock timeline
"""

from chronoform import (
    add_months,
    create_formatter,
    create_parser,
    diff_days,
    end_of,
    format_datetime,
    parse_datetime,
    try_parse_datetime,
)


def example_form_input() -> None:
    """Validate user-entered dates with a reusable parser."""
    print("[Example 1] Form Input (German Locale)")
    print("-" * 60)

    parse = create_parser("d. MMMM yyyy", locale="de_DE")
    display = create_formatter("EEEE, d. MMMM yyyy", locale="de_DE")

    for user_input in ["15. März 2024", "31. Februar 2024", "15 March 2024", ""]:
        print(f"\nUser input: '{user_input}'")
        value, errors = parse.try_parse(user_input)
        if errors:
            print(f"  Error: {errors[0].diagnostic}")
            continue
        print(f"  Parsed: {value}")
        print(f"  Display: {display(value)}")


def example_log_timestamps() -> None:
    """Parse log timestamps and report the reason for rejects."""
    print("\n[Example 2] Log Timestamps")
    print("-" * 60)

    pattern = "yyyy-MM-dd HH:mm:ss.SSS"
    lines = [
        "2024-01-15 14:30:45.123",
        "2024-13-01 00:00:00.000",
        "2024-01-15T14:30:45.123",
    ]
    for line in lines:
        value, errors = try_parse_datetime(line, pattern)
        if errors:
            error = errors[0]
            print(f"  {line!r}: rejected at position {error.position}")
            print(f"    {error.diagnostic.format_error() if error.diagnostic else error}")
        else:
            print(f"  {line!r}: {value}")


def example_partial_patterns() -> None:
    """Patterns without a date take it from the reference date."""
    print("\n[Example 3] Partial Patterns")
    print("-" * 60)

    reference = "2024-06-15"
    for text, pattern in [("09:15", "HH:mm"), ("January", "MMMM"), ("2023", "yyyy")]:
        value = parse_datetime(text, pattern, reference_date=reference)
        print(f"  {text!r} with {pattern!r}: {value}")


def example_eras() -> None:
    """Years before 1 AD."""
    print("\n[Example 4] Eras")
    print("-" * 60)

    value = parse_datetime("15 March 44 BC", "d MMMM y G")
    print(f"  Parsed: {value} (astronomical year {value.year})")
    print(f"  Display: {format_datetime(value, 'd MMMM y GGGG')}")


def example_report_period() -> None:
    """Month-end reporting with calendar arithmetic."""
    print("\n[Example 5] Report Period")
    print("-" * 60)

    start = parse_datetime("31.01.2024", "dd.MM.yyyy")
    for step in range(3):
        current = add_months(start, step)
        last = end_of(current, "month")
        print(
            f"  {format_datetime(current, 'MMM d')} -> "
            f"{format_datetime(last, 'MMM d HH:mm:ss.SSS')} "
            f"({diff_days(last, current)} days later)"
        )


def example_multi_locale() -> None:
    """One value, several locales."""
    print("\n[Example 6] Multiple Locales")
    print("-" * 60)

    value = parse_datetime("2024-01-15 14:30", "yyyy-MM-dd HH:mm")
    for locale in ["en-US", "de-DE", "fr-FR", "ja-JP", "pl-PL"]:
        print(f"  {locale}: {format_datetime(value, 'EEEE, d MMMM yyyy h:mm a', locale=locale)}")


if __name__ == "__main__":
    print("=" * 60)
    print("chronoform Bi-Directional Formatting Examples")
    print("=" * 60)
    print()

    example_form_input()
    example_log_timestamps()
    example_partial_patterns()
    example_eras()
    example_report_period()
    example_multi_locale()

    print("\n" + "=" * 60)
    print("All examples completed!")
    print("=" * 60)
