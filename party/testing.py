"""Test doubles for GreetingWorkflow collaborators.

``StubVisitorLister`` and ``RecordingGreeter`` replace the real collaborators
without any mocking library. Both record what they were asked to do, and can
share a ``CallLog`` so a test can assert the interleaving of listing and
greeting calls.

Example::

    log = CallLog()
    lister = StubVisitorLister(
        {
            Category.NICE: [Visitor(name="Peter", surname="Parker")],
            Category.NOT_NICE: LookupFailure(Category.NOT_NICE, "dummyErr"),
        },
        log=log,
    )
    greeter = RecordingGreeter(log=log)

    with pytest.raises(LookupFailure):
        GreetingWorkflow(lister, greeter).greet_visitors(just_nice=False)

    assert log.calls == [
        ("list_visitors", Category.NICE),
        ("list_visitors", Category.NOT_NICE),
    ]
    assert_greeted(greeter, [])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from party.model import Category, Greeter, Visitor, VisitorLister


@dataclass
class CallLog:
    """Ordered record of ``(method, argument)`` pairs across several doubles."""

    calls: list[tuple[str, Any]] = field(default_factory=list)

    def record(self, method: str, arg: Any) -> None:
        self.calls.append((method, arg))

    def clear(self) -> None:
        self.calls.clear()


class StubVisitorLister(VisitorLister):
    """VisitorLister answering from a canned ``responses`` mapping.

    Each category maps to either a sequence of visitors or an exception
    instance, which is raised when that category is listed. Querying a
    category with no canned response raises ``AssertionError``, so an
    unexpected call fails the test.
    """

    def __init__(
        self,
        responses: Mapping[Category, Sequence[Visitor] | BaseException],
        log: CallLog | None = None,
    ) -> None:
        self._responses = dict(responses)
        self._log = log
        self.calls: list[Category] = []

    def list_visitors(self, category: Category) -> list[Visitor]:
        self.calls.append(category)
        if self._log is not None:
            self._log.record("list_visitors", category)

        if category not in self._responses:
            raise AssertionError(f"Unexpected list_visitors({category!r}) call")
        response = self._responses[category]
        if isinstance(response, BaseException):
            raise response
        return list(response)


class RecordingGreeter(Greeter):
    def __init__(self, log: CallLog | None = None) -> None:
        self._log = log
        self.greeted: list[str] = []

    def hello(self, full_name: str) -> None:
        self.greeted.append(full_name)
        if self._log is not None:
            self._log.record("hello", full_name)


def assert_greeted(greeter: RecordingGreeter, expected: Sequence[str]) -> None:
    """Assert that ``greeter`` greeted exactly ``expected``, in order.

    Raises ``AssertionError`` on mismatch.
    """
    actual = list(greeter.greeted)
    assert actual == list(expected), (
        f"Greeting mismatch:\n"
        f"  expected: {list(expected)}\n"
        f"  actual:   {actual}"
    )
