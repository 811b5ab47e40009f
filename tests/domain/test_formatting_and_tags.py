from __future__ import annotations

import asyncio
import contextvars
import gc
import os
import threading
from datetime import datetime

from lib_syslogger.domain.formatting import default_formatter
from lib_syslogger.domain.tags import TagStack


def test_default_formatter_layout() -> None:
    line = default_formatter("ERROR", datetime(2026, 1, 2, 3, 4, 5, 6), "billing", "card declined")

    assert line == f"E, [2026-01-02T03:04:05.000006 #{os.getpid()}] ERROR -- billing: card declined"


def test_default_formatter_pads_short_labels() -> None:
    line = default_formatter("INFO", datetime(2026, 1, 2), "app", "up")

    assert "]  INFO -- app: up" in line


def test_default_formatter_handles_empty_label() -> None:
    assert default_formatter("", datetime(2026, 1, 2), "app", "").startswith("?, [")


def test_tag_stack_push_and_prefix() -> None:
    stack = TagStack()
    stack.push("a", "b")

    assert stack.current() == ("a", "b")
    assert stack.prefix() == "[a] [b] "


def test_tag_stack_pop_more_than_available() -> None:
    stack = TagStack()
    stack.push("only")

    assert stack.pop(5) == ("only",)
    assert stack.current() == ()
    assert stack.pop() == ()
    assert stack.pop(0) == ()


def test_scoped_restores_previous_tags() -> None:
    stack = TagStack()
    stack.push("outer")

    with stack.scoped("inner") as active:
        assert active == ("outer", "inner")
    assert stack.current() == ("outer",)


def test_scoped_restores_after_exception() -> None:
    stack = TagStack()
    try:
        with stack.scoped("doomed"):
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert stack.current() == ()


def test_tags_do_not_leak_between_threads() -> None:
    stack = TagStack()
    stack.push("main")

    def worker() -> None:
        stack.push("thread")

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()

    assert stack.current() == ("main",)


def test_tags_are_isolated_per_task() -> None:
    stack = TagStack()

    async def tagged(tag: str) -> tuple[str, ...]:
        with stack.scoped(tag):
            await asyncio.sleep(0)
            return stack.current()

    async def run_both() -> list[tuple[str, ...]]:
        return list(await asyncio.gather(tagged("one"), tagged("two")))

    assert asyncio.run(run_both()) == [("one",), ("two",)]


def test_many_stacks_share_one_context_variable() -> None:
    baseline = len(contextvars.copy_context())

    for index in range(200):
        stack = TagStack()
        with stack.scoped(f"job-{index}"):
            stack.push("extra")
        stack.push("left")
        stack.clear()
    gc.collect()

    assert len(contextvars.copy_context()) <= baseline + 1


def test_emptied_stacks_leave_no_entry_behind() -> None:
    from lib_syslogger.domain.tags import _TAGS

    stack = TagStack()
    stack.push("a")
    stack.pop()
    with stack.scoped("b"):
        pass

    assert stack._key not in _TAGS.get()


def test_scoped_only_restores_its_own_stack() -> None:
    first, second = TagStack(), TagStack()

    with first.scoped("outer"):
        second.push("kept")

    assert first.current() == ()
    assert second.current() == ("kept",)
    second.clear()


def test_stacks_are_independent() -> None:
    first, second = TagStack(), TagStack()
    first.push("one")

    assert second.current() == ()
    assert second.prefix() == ""
    first.clear()
