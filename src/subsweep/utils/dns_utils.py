from ..config import logger, QUERY_TIMEOUT, WILDCARD_TOKEN, CONNECTIVITY_CHECK_DOMAIN
from ..errors import NoUsableResolverError, ConnectivityError
import dns.asyncresolver
import dns.exception
import dns.resolver

def make_resolver(server, timeout=QUERY_TIMEOUT):
    """Builds an async resolver bound to a single upstream server.

    ``lifetime`` equals ``timeout`` so every query gets exactly one attempt.
    """
    resolver = dns.asyncresolver.Resolver(configure=False)
    resolver.port = server.port
    resolver.nameservers = [server.address]
    resolver.timeout = timeout
    resolver.lifetime = timeout
    resolver.retry_servfail = False
    return resolver

def classify_failure(exc):
    if isinstance(exc, dns.resolver.NXDOMAIN):
        return 'nxdomain'
    if isinstance(exc, dns.resolver.NoAnswer):
        return 'no_answer'
    if isinstance(exc, dns.exception.Timeout):
        return 'timeout'
    if isinstance(exc, dns.resolver.NoNameservers):
        return 'no_nameservers'
    if isinstance(exc, dns.exception.DNSException):
        return 'error'
    if isinstance(exc, OSError):
        return 'network'
    return 'error'


class ResolverPool:
    """Probed resolvers, handed out round-robin by task index."""

    def __init__(self, entries):
        self._entries = tuple(entries)
        if not self._entries:
            raise NoUsableResolverError("No usable resolver: every upstream server failed the health probe.")

    def __getitem__(self, index):
        return self._entries[index][1]

    def __len__(self):
        return len(self._entries)

    def size(self):
        return len(self._entries)

    def labels(self):
        return [label for label, _ in self._entries]

    def for_task(self, task_index):
        return self[task_index % len(self._entries)]


async def lookup_addresses(resolver, name):
    """Resolves A then AAAA records. Returns (addresses, failure_kind)."""
    addresses = []
    error = None
    for rtype in ['A', 'AAAA']:
        try:
            answers = await resolver.resolve(name, rtype)
            addresses.extend(str(rdata.address) for rdata in answers)
        except Exception as e:
            kind = classify_failure(e)
            logger.debug(f" [.] {rtype} lookup for {name} failed: {kind} ({e})")
            if rtype == 'A' and kind != 'no_answer':
                # Name is gone or the server is unreachable; AAAA would fail the same way
                return (), kind
            error = error or kind

    if addresses:
        return tuple(dict.fromkeys(addresses)), None
    return (), error or 'no_answer'

async def lookup_cnames(resolver, name):
    """Returns (canonical_names, failure_kind) for a CNAME query."""
    try:
        answers = await resolver.resolve(name, 'CNAME')
    except Exception as e:
        kind = classify_failure(e)
        logger.debug(f" [.] CNAME lookup for {name} failed: {kind} ({e})")
        return [], kind
    return [str(rdata.target) for rdata in answers], None

async def detect_wildcard(resolver, domain):
    fake_domain = f"{WILDCARD_TOKEN}.{domain}"
    addresses, error = await lookup_addresses(resolver, fake_domain)
    if error:
        logger.debug(f" [.] No address for {fake_domain} ({error}). No wildcard IP detected.")
        return frozenset()

    wildcard_ips = frozenset(addresses)
    logger.warning(f" [!] Wildcard DNS detected for {domain}. IP(s): {', '.join(sorted(wildcard_ips))}. Matching hits will be filtered.")
    return wildcard_ips

async def check_connectivity(resolver, domain=CONNECTIVITY_CHECK_DOMAIN):
    _, error = await lookup_addresses(resolver, domain)
    if error:
        raise ConnectivityError(f"DNS lookup of {domain} failed ({error}). Please check your network setting.")
    logger.debug(f" [.] Pre-flight lookup of {domain} succeeded.")
