import io

from rich.console import Console

from warden.supervisor import ConsoleReporter, Reporter


def _console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, width=100, highlight=False, color_system=None)


class TestConsoleReporter:
    def test_implements_reporter_protocol(self) -> None:
        assert isinstance(ConsoleReporter(), Reporter)

    def test_progress_and_message_share_a_line(self) -> None:
        out = io.StringIO()
        reporter = ConsoleReporter(_console(out), _console(io.StringIO()))

        reporter.progress("Stopping server.")
        reporter.progress(".")
        reporter.message(" stopped")

        assert out.getvalue() == "Stopping server.. stopped\n"

    def test_errors_go_to_error_console(self) -> None:
        out = io.StringIO()
        err = io.StringIO()
        reporter = ConsoleReporter(_console(out), _console(err))

        reporter.error("server (pid 42) took more than 120 seconds to stop.")

        assert out.getvalue() == ""
        assert "took more than 120 seconds" in err.getvalue()

    def test_markup_is_printed_literally(self) -> None:
        out = io.StringIO()
        reporter = ConsoleReporter(_console(out), _console(io.StringIO()))

        reporter.message("See [bold]/var/log[/bold]")

        assert out.getvalue() == "See [bold]/var/log[/bold]\n"
