from ..config import logger
from ..models import LookupOutcome
from ..utils.dns_utils import lookup_addresses, lookup_cnames
from itertools import islice
import asyncio

async def classify_candidate(name, resolver, wildcard_ips, cdn_cnames):
    addresses, error = await lookup_addresses(resolver, name)

    is_wildcard = False
    if error is None:
        is_wildcard = any(ip in wildcard_ips for ip in addresses)

    is_cdn = False
    # Wildcard hits get suppressed anyway, so their CDN status is never looked up
    if not is_wildcard:
        cnames, cname_error = await lookup_cnames(resolver, name)
        if cname_error is None:
            is_cdn = any(cdn in cname for cname in cnames for cdn in cdn_cnames)

    return LookupOutcome(name=name, addresses=addresses, error=error,
                         is_wildcard=is_wildcard, is_cdn=is_cdn)

async def scan_candidates(candidates, pool, wildcard_ips, cdn_cnames, threads):
    """Classifies every candidate with at most ``threads`` lookups in flight.

    Candidate ``i`` always uses ``pool.for_task(i)``. Outcomes are yielded in
    completion order, exactly one per candidate.
    """
    if threads < 1:
        raise ValueError(f"threads must be at least 1, got {threads}")

    queued = enumerate(candidates)
    pending = set()

    def submit(count):
        for index, name in islice(queued, count):
            coro = classify_candidate(name, pool.for_task(index), wildcard_ips, cdn_cnames)
            pending.add(asyncio.ensure_future(coro))

    submit(threads)
    try:
        while pending:
            done, _ = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
            pending.difference_update(done)
            submit(len(done))
            for task in done:
                yield task.result()
    finally:
        for task in pending:
            task.cancel()

async def active_brute_force(self):
    logger.info(f"[*] Running brute-force scan for {self.domain}: {len(self.candidates)} candidates, "
                f"{self.pool.size()} resolver(s), concurrency {self.threads}...")

    async for outcome in scan_candidates(self.candidates, self.pool, self.wildcard_ips, self.cdn_cnames, self.threads):
        if outcome.is_wildcard:
            logger.debug(f" [-] Skipping {outcome.name} due to wildcard match.")
        elif outcome.error:
            logger.debug(f" [.] {outcome.name}: {outcome.error}")
        yield outcome

    logger.info(f"[*] Brute-force completed for {self.domain}.")
