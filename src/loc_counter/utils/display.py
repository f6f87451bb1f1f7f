"""Display and formatting utilities"""

from __future__ import annotations

from loc_counter.models.archive import CountResult


def display_extensions(extensions: list[str]) -> None:
    """Print the extensions discovered in an archive."""
    if not extensions:
        print("\n⚠️  No text file extensions found.")
        return

    print(f"\n✅ Found {len(extensions)} extensions:")
    for ext in extensions:
        print(f"   • {ext}")


def display_count_result(result: CountResult, top: int = 20) -> None:
    """Display a line count report with formatted tables.

    Args:
        result: Aggregated report to render.
        top: Maximum number of top files to print.
    """
    print("\n✅ Line count complete:")
    print(f"   • Files counted: {result.total_files:,}")
    print(f"   • Total lines: {result.total_lines:,}")

    if result.line_counts_by_ext:
        print("\n📊 By Extension:")
        print("-" * 60)
        print(f"{'Extension':<20} {'Lines':>15} {'Files':>10}")
        print("-" * 60)
        for ext, lines in result.line_counts_by_ext.items():
            files = result.file_counts_by_ext.get(ext, 0)
            print(f"{ext:<20} {lines:>15,} {files:>10,}")

    shown = result.top_files[: max(top, 0)]
    if shown:
        print(f"\n📄 Top {len(shown)} Files:")
        print("-" * 60)
        for entry in shown:
            print(f"{entry.lines:>10,}  {entry.path}")

    print("\n" + "=" * 60)
