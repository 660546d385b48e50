import io

from subsweep.models import LookupOutcome, ScanSummary
from subsweep.utils.output_utils import ConsoleReporter


def test_found_line_format():
    stream = io.StringIO()
    reporter = ConsoleReporter(stream=stream, show_progress=False)

    reporter.found(LookupOutcome("www.example.com", ("192.0.2.1", "192.0.2.2"), is_cdn=True))
    reporter.found(LookupOutcome("mail.example.com", ("192.0.2.3",)))

    lines = stream.getvalue().splitlines()
    assert lines[0] == f"[+] {'www.example.com':<25} -> [CDN] [192.0.2.1 | 192.0.2.2]"
    assert lines[1] == f"[+] {'mail.example.com':<25} -> [192.0.2.3]"


def test_progress_is_throttled_and_cleared():
    stream = io.StringIO()
    reporter = ConsoleReporter(stream=stream, progress_every=5)

    for done in range(1, 8):
        reporter.progress(done, 7)
    assert stream.getvalue().count("Brute-force Progress") == 2
    assert "(7/7)" in stream.getvalue()

    summary = ScanSummary(domain="example.com", total=7, found=[LookupOutcome("a.example.com", ("192.0.2.9",))])
    reporter.finish(summary)
    assert "No subdomain found." not in stream.getvalue()


def test_finish_without_findings():
    stream = io.StringIO()
    ConsoleReporter(stream=stream).finish(ScanSummary(domain="example.com", total=3))
    assert stream.getvalue().endswith("No subdomain found.\n")


def test_outcome_flags():
    assert LookupOutcome("a", ("192.0.2.1",)).reportable
    assert not LookupOutcome("a", ("192.0.2.1",), is_wildcard=True, is_cdn=True).reportable
    assert not LookupOutcome("a", (), error="timeout").resolved
