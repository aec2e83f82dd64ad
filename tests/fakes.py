"""
Test doubles for the browser capability and the cache clock.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from parcel_tracker.scraping.browser.base import BrowserSession, BrowserSessionFactory, ResultSignal


def results_page(rows: Sequence[Sequence[str]]) -> str:
    """Render a minimal results page with one <tr> per row."""
    body = "".join(
        "<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows
    )
    return (
        "<html><body><table>"
        "<thead><tr><th>Number</th><th>Date</th><th>Status</th></tr></thead>"
        f"<tbody>{body}</tbody>"
        "</table></body></html>"
    )


class FakeBrowserSession(BrowserSession):
    """
    BrowserSession double that records calls and replays scripted behaviour.

    Any `*_error` argument is raised from the matching method; `result` may
    be a ResultSignal or an exception to raise from wait_for_result.
    """

    def __init__(
        self,
        *,
        html: str = "",
        body: str = "",
        result: ResultSignal | Exception = "rows",
        goto_error: Exception | None = None,
        form_error: Exception | None = None,
        type_error: Exception | None = None,
        click_error: Exception | None = None,
        body_error: Exception | None = None,
        close_error: Exception | None = None,
    ) -> None:
        self.html = html
        self.body = body
        self.result = result
        self.goto_error = goto_error
        self.form_error = form_error
        self.type_error = type_error
        self.click_error = click_error
        self.body_error = body_error
        self.close_error = close_error
        self.calls: list[tuple[str, Any]] = []
        self.close_count = 0

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def goto(self, url: str, *, wait_until: str, timeout_ms: float) -> None:
        self.calls.append(("goto", (url, wait_until, timeout_ms)))
        if self.goto_error is not None:
            raise self.goto_error

    def wait_for_selector(self, selector: str, *, timeout_ms: float) -> None:
        self.calls.append(("wait_for_selector", (selector, timeout_ms)))
        if self.form_error is not None:
            raise self.form_error

    def type_text(self, selector: str, text: str) -> None:
        self.calls.append(("type_text", (selector, text)))
        if self.type_error is not None:
            raise self.type_error

    def click_via_script(self, selector: str) -> None:
        self.calls.append(("click_via_script", selector))
        if self.click_error is not None:
            raise self.click_error

    def dismiss_dialogs(self) -> None:
        self.calls.append(("dismiss_dialogs", None))

    def wait_for_result(
        self,
        *,
        row_selector: str,
        not_found_phrases: Sequence[str],
        timeout_ms: float,
    ) -> ResultSignal:
        self.calls.append(("wait_for_result", (row_selector, tuple(not_found_phrases), timeout_ms)))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result

    def body_text(self) -> str:
        self.calls.append(("body_text", None))
        if self.body_error is not None:
            raise self.body_error
        return self.body

    def content(self) -> str:
        self.calls.append(("content", None))
        return self.html

    def close(self) -> None:
        self.close_count += 1
        self.calls.append(("close", None))
        if self.close_error is not None:
            raise self.close_error


class FakeSessionFactory(BrowserSessionFactory):
    """
    Hands out pre-built sessions in order, or raises `create_error`.
    """

    def __init__(
        self,
        sessions: Sequence[FakeBrowserSession] = (),
        *,
        create_error: Exception | None = None,
    ) -> None:
        self._sessions = list(sessions)
        self.create_error = create_error
        self.created: list[FakeBrowserSession] = []

    def queue(self, session: FakeBrowserSession) -> None:
        self._sessions.append(session)

    def create(self) -> FakeBrowserSession:
        if self.create_error is not None:
            raise self.create_error
        session = self._sessions.pop(0) if self._sessions else FakeBrowserSession()
        self.created.append(session)
        return session


class ManualClock:
    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
