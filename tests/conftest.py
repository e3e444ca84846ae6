from collections import Counter, defaultdict

from rich.console import Console
from rich.table import Table

_OUTCOMES = ("passed", "failed", "skipped")


def _declared_markers(config) -> set[str]:
    """Marker names declared under [tool.pytest.ini_options] markers."""
    return {line.split(":", 1)[0].strip() for line in config.getini("markers")}


def _counted(report) -> bool:
    # The test call itself, or a skip raised while setting it up.
    return report.when == "call" or (report.when == "setup" and report.outcome == "skipped")


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """Print pass/fail counts and time spent per declared marker."""
    _ = exitstatus
    markers = _declared_markers(config)
    counts: dict[str, Counter] = defaultdict(Counter)
    durations: dict[str, float] = defaultdict(float)

    for outcome in _OUTCOMES:
        for report in terminalreporter.stats.get(outcome, []):
            if not _counted(report):
                continue
            for marker in markers.intersection(report.keywords):
                counts[marker][outcome] += 1
                durations[marker] += getattr(report, "duration", 0.0)

    if not counts:
        return

    table = Table(title="Test Statistics by Marker", header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Duration (s)", justify="right", style="blue")

    for marker in sorted(counts):
        stats = counts[marker]
        table.add_row(
            marker,
            str(sum(stats.values())),
            *(str(stats[outcome]) for outcome in _OUTCOMES),
            f"{durations[marker]:.2f}",
        )

    console = Console()
    console.print()
    console.print(table)
