from ..config import (logger, PROBE_REFERENCE_NAME, PROBE_TIMEOUT, PROBE_LATENCY_THRESHOLD,
                      PROBE_CONCURRENCY, QUERY_TIMEOUT)
from ..errors import NoUsableResolverError
from ..utils.dns_utils import make_resolver, classify_failure
import asyncio
import time

async def probe_server(server, semaphore, reference_name, timeout, threshold, resolver_factory=make_resolver):
    """Times a single A lookup against one server. Returns (server, elapsed) or (server, None)."""
    async with semaphore:
        resolver = resolver_factory(server, timeout)
        started = time.perf_counter()
        try:
            await resolver.resolve(reference_name, 'A')
        except Exception as e:
            logger.debug(f" [.] Resolver {server.label} ({server.address}) failed probe: {classify_failure(e)}")
            return server, None
        elapsed = time.perf_counter() - started

    if elapsed >= threshold:
        logger.debug(f" [.] Resolver {server.label} ({server.address}) too slow: {elapsed * 1000:.0f} ms")
        return server, None
    return server, elapsed

async def probe_resolvers(servers, reference_name=PROBE_REFERENCE_NAME, timeout=PROBE_TIMEOUT,
                          threshold=PROBE_LATENCY_THRESHOLD, query_timeout=QUERY_TIMEOUT,
                          concurrency=PROBE_CONCURRENCY, resolver_factory=make_resolver):
    """Keeps the upstream servers that answer ``reference_name`` fast enough.

    Returns ``(label, resolver)`` pairs in completion order. The returned resolvers
    use ``query_timeout`` rather than the short probe timeout.
    """
    logger.info(f"[*] Probing {len(servers)} upstream DNS servers (threshold {threshold * 1000:.0f} ms)...")
    semaphore = asyncio.Semaphore(concurrency)
    probes = [probe_server(server, semaphore, reference_name, timeout, threshold, resolver_factory)
              for server in servers]

    retained = []
    for future in asyncio.as_completed(probes):
        server, elapsed = await future
        if elapsed is None:
            continue
        logger.debug(f" [+] Resolver {server.label} ({server.address}) answered in {elapsed * 1000:.0f} ms")
        retained.append((server.label, resolver_factory(server, query_timeout)))

    if not retained:
        raise NoUsableResolverError(f"No usable resolver: none of {len(servers)} upstream servers passed the health probe.")

    logger.info(f"[*] Using {len(retained)} resolver(s): {', '.join(label for label, _ in retained)}")
    return retained
