"""
Tests for the color log formatter
"""

import logging
import re
import sys

import pytest

from levelstyle.colorlog import LineRenderer, StyleFormatter, style_codes
from levelstyle.models import ConfigurationError, SeverityLevel, StyleRule, ValidationError
from levelstyle.palette import DEFAULT_STYLE_MAP


class TestStyleCodes:
    """Tests for style_codes"""

    def test_foreground_only(self):
        """Should emit foreground set and unset codes"""
        set_codes, unset_codes = style_codes(StyleRule(foreground="red"))
        assert ";".join(map(str, set_codes)) == "31"
        assert ";".join(map(str, unset_codes)) == "39"

    def test_full_rule_order(self):
        """Should order foreground, background, then options"""
        rule = StyleRule("white", "red", ("bold",))
        assert style_codes(rule) == ([37, 41, 1], [39, 49, 22])

    def test_background_uses_background_table(self):
        """Should use the 40-47 block for backgrounds"""
        assert style_codes(StyleRule(background="red")) == ([41], [49])

    def test_options_keep_order_and_duplicates(self):
        """Should emit options in the given order"""
        rule = StyleRule(options=("underscore", "bold", "bold"))
        assert style_codes(rule) == ([4, 1, 1], [24, 22, 22])

    def test_empty_rule(self):
        """Should return no codes for an empty rule"""
        assert style_codes(StyleRule()) == ([], [])

    def test_unknown_foreground(self):
        """Should list all colors for an unknown foreground"""
        with pytest.raises(ValidationError) as excinfo:
            style_codes(StyleRule(foreground="chartreuse"))
        message = str(excinfo.value)
        assert "chartreuse" in message
        for color in ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"):
            assert color in message

    def test_unknown_background(self):
        """Should reject an unknown background"""
        with pytest.raises(ValidationError, match="background"):
            style_codes(StyleRule(background="pink"))

    def test_unknown_option(self):
        """Should list all options for an unknown option"""
        with pytest.raises(ValidationError) as excinfo:
            style_codes(StyleRule("red", options=("bold", "italic")))
        message = str(excinfo.value)
        for option in ("bold", "underscore", "blink", "reverse", "conceal"):
            assert option in message


class TestStyleFormatter:
    """Tests for StyleFormatter"""

    @pytest.fixture
    def formatter(self):
        return StyleFormatter()

    @pytest.fixture
    def renderer(self):
        return LineRenderer()

    @pytest.mark.parametrize("level", list(SeverityLevel))
    def test_default_levels_are_styled(self, formatter, renderer, make_record, level):
        """Should prefix every default level with an escaped level tag"""
        record = make_record(level)
        output = formatter.format(record)
        assert output.startswith("\x1b[")
        tag = f"[{level.name}]"
        assert tag in output
        assert "\x1b[" in output[output.index(tag):]
        assert output.endswith(renderer.format(record))

    def test_exact_output(self, make_record):
        """Should wrap the level tag in set and unset codes followed by a space"""
        formatter = StyleFormatter({SeverityLevel.ERROR: StyleRule("white", "red", ("bold",))})
        record = make_record(logging.ERROR)
        plain = LineRenderer().format(record)
        assert formatter.format(record) == f"\x1b[37;41;1m[ERROR]\x1b[39;49;22m {plain}"

    def test_default_line_format(self, make_record):
        """Should render channel, message and time"""
        record = make_record(msg="info %s", args=("message",))
        plain = LineRenderer().format(record)
        assert plain.startswith("CLIENT: info message [")
        assert plain.endswith("]")

    def test_empty_rule_is_identity(self, renderer, make_record):
        """Should return the plain line for a rule without styling"""
        formatter = StyleFormatter({"INFO": StyleRule()})
        record = make_record(logging.INFO)
        assert formatter.format(record) == renderer.format(record)

    def test_override_is_per_level(self, formatter, make_record):
        """Should only replace the overridden level"""
        custom = StyleFormatter({SeverityLevel.ERROR: StyleRule("blue")})
        assert custom.styles[SeverityLevel.ERROR] == StyleRule("blue")
        for level, rule in DEFAULT_STYLE_MAP.items():
            if level != SeverityLevel.ERROR:
                assert custom.styles[level] == rule
        record = make_record(logging.WARNING)
        assert custom.format(record) == formatter.format(record)

    def test_override_replaces_whole_rule(self):
        """Should not merge the fields of a rule"""
        custom = StyleFormatter({"DEBUG": StyleRule(foreground="green")})
        assert custom.styles[SeverityLevel.DEBUG].background is None

    def test_override_keys(self):
        """Should accept names, ints and mappings"""
        custom = StyleFormatter(
            {
                "warn": {"foreground": "red", "options": ["blink"]},
                logging.INFO: StyleRule("blue"),
            }
        )
        assert custom.styles[SeverityLevel.WARNING] == StyleRule("red", None, ("blink",))
        assert custom.styles[SeverityLevel.INFO] == StyleRule("blue")

    def test_override_single_option_string(self, make_record):
        """Should take a plain string option as one option"""
        custom = StyleFormatter({"ERROR": {"foreground": "red", "options": "bold"}})
        assert custom.styles[SeverityLevel.ERROR] == StyleRule("red", None, ("bold",))
        assert custom.format(make_record(logging.ERROR)).startswith("\x1b[31;1m[ERROR]\x1b[39;22m ")

    def test_unknown_level_name(self):
        """Should refuse a level name that does not exist"""
        with pytest.raises(ConfigurationError):
            StyleFormatter({"VERBOSE": StyleRule("red")})

    def test_styles_read_only(self, formatter):
        """Should not allow changing the style map"""
        with pytest.raises(TypeError):
            formatter.styles[SeverityLevel.INFO] = StyleRule()

    def test_missing_level(self, formatter, make_record):
        """Should raise for a level without a rule"""
        with pytest.raises(ConfigurationError, match="no style rule"):
            formatter.format(make_record(35))

    def test_validation_is_deferred(self, make_record):
        """Should only fail when the broken level is formatted"""
        formatter = StyleFormatter({"ERROR": StyleRule(foreground="chartreuse")})
        assert "[INFO]" in formatter.format(make_record(logging.INFO))
        with pytest.raises(ValidationError, match="chartreuse"):
            formatter.format(make_record(logging.ERROR))

    def test_validate(self):
        """Should check every rule on request"""
        StyleFormatter().validate()
        with pytest.raises(ValidationError):
            StyleFormatter({"ALERT": StyleRule(options=("italic",))}).validate()

    def test_idempotent(self, formatter, make_record):
        """Should give the same output for the same record"""
        record = make_record(logging.CRITICAL)
        assert formatter.format(record) == formatter.format(record)

    def test_handler_integration(self, make_record):
        """Should work as a handler formatter"""
        records = []

        class ListHandler(logging.Handler):
            def emit(self, record):
                records.append(self.format(record))

        handler = ListHandler()
        handler.setFormatter(StyleFormatter(fmt="%(message)s"))
        logger = logging.getLogger("levelstyle.test.handler")
        logger.propagate = False
        logger.setLevel(logging.DEBUG)
        logger.addHandler(handler)
        try:
            logger.log(SeverityLevel.NOTICE, "notice message")
        finally:
            logger.removeHandler(handler)
        assert records == ["\x1b[33m[NOTICE]\x1b[39m notice message"]


class TestLineRenderer:
    """Tests for LineRenderer"""

    def test_flattens_message(self, make_record):
        """Should replace line breaks in the message by default"""
        renderer = LineRenderer("%(message)s")
        assert renderer.format(make_record(msg="one\ntwo\r\nthree\rfour")) == "one two three four"

    def test_keeps_line_breaks(self, make_record):
        """Should keep line breaks when allowed"""
        renderer = LineRenderer("%(message)s", allow_inline_line_breaks=True)
        assert renderer.format(make_record(msg="one\ntwo")) == "one\ntwo"

    def test_keeps_template_line_breaks(self, make_record):
        """Should only flatten the record values"""
        renderer = LineRenderer("%(name)s\n%(message)s")
        assert renderer.format(make_record(msg="a\nb")) == "CLIENT\na b"

    def test_flattens_exception(self, make_record):
        """Should put the traceback on the same line"""
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = make_record(logging.ERROR, msg="failed", exc_info=sys.exc_info())
        output = LineRenderer("%(message)s").format(record)
        assert "\n" not in output
        assert output.startswith("failed Traceback")
        assert output.endswith("RuntimeError: boom")

    def test_exception_with_line_breaks(self, make_record):
        """Should append the traceback on new lines when allowed"""
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = make_record(logging.ERROR, msg="failed", exc_info=sys.exc_info())
        output = LineRenderer("%(message)s", allow_inline_line_breaks=True).format(record)
        assert output.startswith("failed\nTraceback")

    def test_record_message_untouched(self, make_record):
        """Should not store the flattened message on the record"""
        record = make_record(msg="a\nb")
        LineRenderer().format(record)
        assert record.message == "a\nb"

    def test_default_date_format(self, make_record):
        """Should render timestamps without milliseconds"""
        record = make_record()
        renderer = LineRenderer("%(asctime)s")
        assert renderer.datefmt == "%Y-%m-%d %H:%M:%S"
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", renderer.format(record))

    def test_date_format(self, make_record):
        """Should use the given date format"""
        record = make_record()
        record.created = 0
        renderer = LineRenderer("%(asctime)s", datefmt="%Y")
        assert renderer.format(record) in ("1969", "1970")
