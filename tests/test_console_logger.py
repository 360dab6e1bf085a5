# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for ConsoleLogger."""

import re

from contextlog import Colors, ConsoleLogger, FormattingOptions, Logger, LoggerOptions


class TestConsoleLogger:
    """Tests for ConsoleLogger output and routing."""

    def test_default_values(self):
        """Test default initialization values."""
        logger = ConsoleLogger()

        assert isinstance(logger, Logger)
        assert logger.level == "info"
        assert logger.context == "app"
        assert logger.options.formatting.colorize is True

    def test_info_goes_to_stdout(self, streams, plain_options):
        stdout, stderr = streams
        logger = ConsoleLogger(plain_options.without_colors())

        logger.info("Service started")

        assert stdout.getvalue() == "[INFO] [test] Service started\n"
        assert stderr.getvalue() == ""

    def test_debug_goes_to_stdout(self, streams, plain_options):
        stdout, _ = streams
        ConsoleLogger(plain_options.without_colors()).debug("details")
        assert stdout.getvalue() == "[DEBUG] [test] details\n"

    def test_warn_and_error_go_to_stderr(self, streams, plain_options):
        stdout, stderr = streams
        logger = ConsoleLogger(plain_options.without_colors())

        logger.warn("careful")
        logger.error("broken")

        assert stdout.getvalue() == ""
        assert stderr.getvalue().splitlines() == [
            "[WARN] [test] careful",
            "[ERROR] [test] broken",
        ]

    def test_end_to_end_level_gating(self, streams):
        """Test that only messages at or above the minimum are written."""
        stdout, stderr = streams
        logger = ConsoleLogger(LoggerOptions(level="warn", context="e2e-service"))

        logger.debug("x")
        logger.info("y")
        assert stdout.getvalue() == ""
        assert stderr.getvalue() == ""

        logger.warn("z")

        lines = stderr.getvalue().splitlines()
        assert len(lines) == 1
        assert "z" in lines[0]
        assert "e2e-service" in lines[0]
        assert stdout.getvalue() == ""

    def test_silent_minimum_suppresses_everything(self, streams):
        stdout, stderr = streams
        logger = ConsoleLogger(LoggerOptions(level="silent"))

        logger.error("nothing")

        assert stdout.getvalue() == stderr.getvalue() == ""

    def test_nothing_is_logged_at_silent(self, streams, plain_options):
        stdout, stderr = streams
        ConsoleLogger(plain_options).log("silent", "never")
        assert stdout.getvalue() == stderr.getvalue() == ""

    def test_invalid_level_is_dropped_without_raising(self, streams, plain_options, caplog):
        stdout, _ = streams
        ConsoleLogger(plain_options).log("loud", "message")
        assert stdout.getvalue() == ""
        assert "Dropping log call" in caplog.text

    def test_template_formatting_from_first_argument(self, streams, plain_options):
        stdout, _ = streams
        logger = ConsoleLogger(plain_options.without_colors())

        logger.info("User {name} from {ip}", {"name": "John", "ip": "1.2.3.4"})

        assert stdout.getvalue() == (
            '[INFO] [test] User John from 1.2.3.4 {"name": "John", "ip": "1.2.3.4"}\n'
        )

    def test_exception_first_argument_is_not_a_template_context(self, streams, plain_options):
        _, stderr = streams
        logger = ConsoleLogger(plain_options.without_colors())

        logger.error("Failed {x}", ValueError("bad input"))

        assert stderr.getvalue() == "[ERROR] [test] Failed {x} ValueError: bad input\n"

    def test_colorizes_prefix_only(self, streams, plain_options):
        stdout, _ = streams
        logger = ConsoleLogger(plain_options)

        logger.info("hello", "\x1b[31mred arg\x1b[0m")

        output = stdout.getvalue()
        assert output == f"{Colors.cyan}[INFO] [test]{Colors.reset} hello red arg\n"

    def test_strips_colors_from_message(self, streams, plain_options):
        """Test that the message body is printed without color codes."""
        stdout, _ = streams
        logger = ConsoleLogger(plain_options.without_colors())

        logger.info("\x1b[31mred\x1b[0m {name}", {"name": "\x1b[1mbold\x1b[0m"})

        assert stdout.getvalue() == '[INFO] [test] red bold {"name": "bold"}\n'

    def test_level_colors(self, streams, plain_options):
        stdout, stderr = streams
        logger = ConsoleLogger(plain_options)

        logger.debug("d")
        logger.warn("w")
        logger.error("e")

        assert stdout.getvalue().startswith(Colors.gray)
        warn_line, error_line = stderr.getvalue().splitlines()
        assert warn_line.startswith(Colors.yellow)
        assert error_line.startswith(Colors.red)

    def test_iso_timestamp(self, streams):
        stdout, _ = streams
        logger = ConsoleLogger(LoggerOptions(formatting=FormattingOptions(colorize=False)))

        logger.info("tick")

        assert re.match(
            r"^\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z\] \[INFO\] \[app\] tick$",
            stdout.getvalue().strip(),
        )

    def test_epoch_timestamp(self, streams):
        stdout, _ = streams
        options = LoggerOptions(formatting=FormattingOptions(colorize=False, date_format="epoch"))

        ConsoleLogger(options).info("tick")

        assert re.match(r"^\[\d+\] \[INFO\] \[app\] tick$", stdout.getvalue().strip())

    def test_exception_method_appends_current_exception(self, streams, plain_options):
        _, stderr = streams
        logger = ConsoleLogger(plain_options.without_colors())

        try:
            raise RuntimeError("kaput")
        except RuntimeError:
            logger.exception("Operation failed")

        assert stderr.getvalue() == "[ERROR] [test] Operation failed RuntimeError: kaput\n"

    def test_warning_alias(self, streams, plain_options):
        _, stderr = streams
        ConsoleLogger(plain_options.without_colors()).warning("alias")
        assert stderr.getvalue() == "[WARN] [test] alias\n"

    def test_closed_stream_does_not_raise(self, streams, plain_options, caplog):
        stdout, _ = streams
        stdout.close()

        ConsoleLogger(plain_options).info("lost")

        assert "could not write" in caplog.text


class TestConsoleLoggerChild:
    """Tests for child console loggers."""

    def test_child_extends_context(self):
        logger = ConsoleLogger(LoggerOptions(context="root"))

        child = logger.child("db")

        assert isinstance(child, ConsoleLogger)
        assert child is not logger
        assert child.context == "root:db"
        assert logger.context == "root"

    def test_context_chaining(self):
        logger = ConsoleLogger(LoggerOptions(context="svc"))
        assert logger.child("a").child("b").context == "svc:a:b"

    def test_child_keeps_other_options(self):
        options = LoggerOptions(level="error", timestamp=False, formatting=FormattingOptions(colorize=False))

        child = ConsoleLogger(options).child("worker")

        assert child.level == "error"
        assert child.options.timestamp is False
        assert child.options.formatting.colorize is False

    def test_child_output_uses_child_context(self, streams, plain_options):
        stdout, _ = streams

        ConsoleLogger(plain_options.without_colors()).child("api").info("request")

        assert stdout.getvalue() == "[INFO] [test:api] request\n"

    def test_capabilities_table(self, streams, plain_options):
        stdout, _ = streams
        logger = ConsoleLogger(plain_options.without_colors())

        capabilities = logger.capabilities()

        assert set(capabilities) == {"debug", "info", "warn", "error", "log", "child"}
        capabilities["info"]("via table")
        capabilities["log"]("debug", "via log")
        assert stdout.getvalue().splitlines() == [
            "[INFO] [test] via table",
            "[DEBUG] [test] via log",
        ]
        assert capabilities["child"]("x").context == "test:x"
