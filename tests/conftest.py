"""Fixtures and fake resolvers for subsweep tests."""

import asyncio
from types import SimpleNamespace

import dns.resolver
import pytest

from subsweep.config import UpstreamServer


class InFlightTracker:
    def __init__(self):
        self.current = 0
        self.peak = 0


class FakeResolver:
    """Answers queries from a ``{(name, rdtype): values-or-exception}`` table.

    Unknown names raise NXDOMAIN; known names queried for a missing type raise NoAnswer.
    """

    def __init__(self, records=None, delay=0.0, tracker=None):
        self.records = dict(records or {})
        self.delay = delay
        self.tracker = tracker
        self.queries = []

    async def resolve(self, qname, rdtype="A", **kwargs):
        self.queries.append((qname, rdtype))
        if self.tracker:
            self.tracker.current += 1
            self.tracker.peak = max(self.tracker.peak, self.tracker.current)
        try:
            await asyncio.sleep(self.delay)
        finally:
            if self.tracker:
                self.tracker.current -= 1

        entry = self.records.get((qname, rdtype))
        if entry is None:
            if any(name == qname for name, _ in self.records):
                raise dns.resolver.NoAnswer()
            raise dns.resolver.NXDOMAIN()
        if isinstance(entry, Exception):
            raise entry
        if rdtype == "CNAME":
            return [SimpleNamespace(target=value) for value in entry]
        return [SimpleNamespace(address=value) for value in entry]

    def queried(self, qname):
        return [rdtype for name, rdtype in self.queries if name == qname]


class RecordingReporter:
    def __init__(self):
        self.found_events = []
        self.progress_events = []
        self.summary = None

    def found(self, outcome):
        self.found_events.append(outcome)

    def progress(self, done, total):
        self.progress_events.append((done, total))

    def finish(self, summary):
        self.summary = summary


PROBE_OK = {("example.com", "A"): ["93.184.216.34"]}


@pytest.fixture
def stub_server():
    return UpstreamServer("stub", "192.0.2.53")


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def write_wordlist(tmp_path):
    def _write(*lines):
        path = tmp_path / "words.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return _write
