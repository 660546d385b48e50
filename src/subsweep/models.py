from dataclasses import dataclass, field


@dataclass(frozen=True)
class LookupOutcome:
    """Classification of one candidate name.

    ``addresses`` is empty and ``error`` names the failure kind when resolution
    failed. ``is_wildcard`` always wins over ``is_cdn``: a wildcard hit is never
    reportable.
    """
    name: str
    addresses: tuple = ()
    error: str = None
    is_wildcard: bool = False
    is_cdn: bool = False

    @property
    def resolved(self):
        return self.error is None and bool(self.addresses)

    @property
    def reportable(self):
        return self.resolved and not self.is_wildcard


@dataclass
class ScanSummary:
    domain: str
    total: int = 0
    found: list = field(default_factory=list)

    @property
    def found_any(self):
        return bool(self.found)
