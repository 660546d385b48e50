from .config import logger, UPSTREAM_SERVERS, CDN_CNAMES, DEFAULT_THREADS, load_settings
from .errors import ConfigurationError
from .models import ScanSummary
from .utils.dns_utils import make_resolver, ResolverPool, detect_wildcard, check_connectivity
from .utils.wordlist import load_wordlist, build_candidates
from .phases.probing import probe_resolvers
from .phases.active import active_brute_force

import asyncio
import logging

class SubdomainEnumerator:
    def __init__(self, domain, wordlist_path, threads=DEFAULT_THREADS, timeout=None, verbose=False,
                 servers=None, cdn_cnames=CDN_CNAMES, preflight=True, settings=None, resolver_factory=make_resolver):
        self.domain = (domain or '').strip().lower().rstrip('.')
        if not self.domain:
            raise ConfigurationError("Target domain must not be empty")
        if threads < 1:
            raise ConfigurationError(f"Concurrency must be at least 1, got {threads}")

        self.wordlist_path = wordlist_path
        self.threads = threads
        self.verbose = verbose
        self.preflight = preflight
        self.resolver_factory = resolver_factory

        self.settings = dict(settings) if settings else load_settings()
        if timeout:
            self.settings['query_timeout'] = timeout

        # Read-only once initialize() has run
        self.servers = list(servers) if servers is not None else list(UPSTREAM_SERVERS)
        self.cdn_cnames = tuple(cdn_cnames)
        self.candidates = []
        self.pool = None
        self.wildcard_ips = frozenset()

        if self.verbose:
            logger.setLevel(logging.DEBUG)

    async def initialize(self):
        """Loads the wordlist, probes resolvers and learns the wildcard baseline.

        Raises a SubsweepError subclass on any fatal problem; nothing is scanned then.
        """
        words = load_wordlist(self.wordlist_path)
        self.candidates = build_candidates(words, self.domain)

        retained = await probe_resolvers(
            self.servers,
            timeout=self.settings['probe_timeout'],
            threshold=self.settings['probe_threshold'],
            query_timeout=self.settings['query_timeout'],
            resolver_factory=self.resolver_factory,
        )
        self.pool = ResolverPool(retained)

        if self.preflight:
            await check_connectivity(self.pool[0])

        self.wildcard_ips = await detect_wildcard(self.pool[0], self.domain)

    async def run_async(self, reporter=None):
        if self.pool is None:
            await self.initialize()

        logger.info(f"\n--- Scanning {self.domain} ---")
        summary = ScanSummary(domain=self.domain)
        total = len(self.candidates)

        async for outcome in active_brute_force(self):
            summary.total += 1
            if outcome.reportable:
                summary.found.append(outcome)
                if reporter:
                    reporter.found(outcome)
            if reporter:
                reporter.progress(summary.total, total)

        if reporter:
            reporter.finish(summary)
        logger.info(f"Summary for {self.domain}: {len(summary.found)} found out of {summary.total} candidates.")
        return summary

    def run(self, reporter=None):
        return asyncio.run(self.run_async(reporter))
