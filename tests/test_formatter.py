import logging
import re
import time

from logregistry.formatter import ConsoleFormatter, ShortNameCache

CYAN = "\033[1;36m"
RED = "\033[1;31m"
RESET = "\033[0m"


class CountingShortener:
    def __init__(self):
        self.calls = []

    def __call__(self, name):
        self.calls.append(name)
        return name.upper()


class CustomError(RuntimeError):
    pass


def make_record(exc_info=None, **attrs):
    record = logging.LogRecord(
        name="net",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="started",
        args=None,
        exc_info=exc_info,
        func="bar",
    )
    record.thread = 7
    record.source_class = "com.example.Foo"
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


def test_short_name_cache_computes_once_per_name():
    shortener = CountingShortener()
    cache = ShortNameCache(shortener)

    first = cache.abbreviate("com.example.Foo")
    second = cache.abbreviate("com.example.Foo")

    assert first == second == "COM.EXAMPLE.FOO"
    assert shortener.calls == ["com.example.Foo"]
    assert "com.example.Foo" in cache
    assert len(cache) == 1


def test_short_name_cache_keys_on_exact_string():
    shortener = CountingShortener()
    cache = ShortNameCache(shortener)

    cache.abbreviate("a.B")
    cache.abbreviate("a.b")

    assert shortener.calls == ["a.B", "a.b"]


def test_format_renders_fields_in_order():
    formatter = ConsoleFormatter()
    record = make_record()

    timestamp = formatter.formatTime(record)
    expected = f"[{timestamp}][{CYAN}net{RESET}/7][{CYAN}INFO{RESET}][c.e.Foo=>bar] started"

    assert formatter.format(record) == expected
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}", timestamp)


def test_console_handler_terminates_line_with_newline(console_stream):
    handler = logging.StreamHandler(console_stream)
    handler.setFormatter(ConsoleFormatter())
    record = make_record()

    handler.handle(record)

    output = console_stream.getvalue()
    assert output.endswith("[c.e.Foo=>bar] started\n")
    assert output.count("\n") == 1


def test_format_falls_back_to_module_name():
    formatter = ConsoleFormatter()
    record = make_record()
    del record.source_class

    assert f"[{record.module}=>bar] started" in formatter.format(record)


def test_format_appends_thrown_block():
    formatter = ConsoleFormatter()
    try:
        raise CustomError("boom")
    except CustomError as exc:
        record = make_record(exc_info=(type(exc), exc, exc.__traceback__), levelno=logging.ERROR, levelname="ERROR")

    lines = formatter.format(record).split("\n")

    assert lines[0].endswith(f"started [With thrown: {CustomError.__module__}.CustomError] ")
    assert lines[0].startswith("[")
    assert f"[{RED}ERROR{RESET}]" in lines[0]
    assert lines[1] == "Traceback (most recent call last):"
    assert lines[-1].endswith("CustomError: boom")


def test_format_names_builtin_exceptions_without_module():
    formatter = ConsoleFormatter()
    try:
        raise ValueError("bad")
    except ValueError as exc:
        record = make_record(exc_info=(type(exc), exc, exc.__traceback__))

    assert "[With thrown: ValueError] \n" in formatter.format(record)


def test_format_appends_stack_info():
    formatter = ConsoleFormatter()
    record = make_record(stack_info="Stack (most recent call last):\n  File x")

    rendered = formatter.format(record)

    assert rendered.endswith("started\nStack (most recent call last):\n  File x")


def test_formatter_uses_injected_cache():
    shortener = CountingShortener()
    formatter = ConsoleFormatter(ShortNameCache(shortener))

    formatter.format(make_record())
    formatter.format(make_record())

    assert shortener.calls == ["com.example.Foo"]


def test_timestamp_uses_local_time():
    formatter = ConsoleFormatter()
    record = make_record()

    expected = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(record.created))
    expected = "%s.%03d" % (expected, record.msecs)

    assert formatter.formatTime(record) == expected
