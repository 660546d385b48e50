import sys

class ConsoleReporter:
    """Prints findings as they arrive and a running progress line."""

    def __init__(self, stream=None, show_progress=True, progress_every=10):
        self.stream = stream or sys.stdout
        self.show_progress = show_progress
        self.progress_every = max(1, progress_every)
        self._progress_len = 0

    def _clear_progress(self):
        if self._progress_len:
            self.stream.write('\r' + ' ' * self._progress_len + '\r')
            self._progress_len = 0

    def found(self, outcome):
        self._clear_progress()
        cdn = '[CDN] ' if outcome.is_cdn else ''
        self.stream.write(f"[+] {outcome.name:<25} -> {cdn}[{' | '.join(outcome.addresses)}]\n")
        self.stream.flush()

    def progress(self, done, total):
        if not self.show_progress or (done % self.progress_every and done != total):
            return
        line = f" [.] Brute-force Progress: {done / total * 100:.2f}% ({done}/{total})"
        self.stream.write('\r' + line)
        self.stream.flush()
        self._progress_len = len(line)

    def finish(self, summary):
        self._clear_progress()
        if not summary.found_any:
            self.stream.write("No subdomain found.\n")
        self.stream.flush()
