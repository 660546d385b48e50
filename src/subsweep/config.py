import os
import sys
import logging
from collections import namedtuple

UpstreamServer = namedtuple('UpstreamServer', ['label', 'address', 'port'], defaults=[53])

# Candidate upstream resolvers, filtered by the liveness/latency probe at startup
UPSTREAM_SERVERS = [
    UpstreamServer('AliDNS', '223.5.5.5'), UpstreamServer('AliDNS-2', '223.6.6.6'),
    UpstreamServer('DNSPod', '119.29.29.29'), UpstreamServer('114DNS', '114.114.114.114'),
    UpstreamServer('Google', '8.8.8.8'), UpstreamServer('Google-2', '8.8.4.4'),
    UpstreamServer('Cloudflare', '1.1.1.1'), UpstreamServer('Cloudflare-2', '1.0.0.1'),
    UpstreamServer('Quad9', '9.9.9.9'), UpstreamServer('Quad9-2', '149.112.112.112'),
    UpstreamServer('OpenDNS', '208.67.222.222'), UpstreamServer('OpenDNS-2', '208.67.220.220'),
]

# CNAME fragments of known CDN providers (plain substring match)
CDN_CNAMES = (
    'cloudflare.net', 'cloudflare.com',
    'cloudfront.net',
    'kunlunpi.com', 'kunlunca.com', 'aliyuncs.com',
    'tencent-cloud.net', 'qcloud.com', 'cdntip.com',
    'akamai.net', 'akamaihd.net', 'edgesuite.net',
    'fastly.net',
    'cdn20.com', 'w.cdngslb.com',
    'bdydns.com', 'jiasule.com',
)

PROBE_REFERENCE_NAME = 'example.com'
PROBE_TIMEOUT = 0.2
PROBE_LATENCY_THRESHOLD = 0.2
PROBE_CONCURRENCY = 8

QUERY_TIMEOUT = 2.0
DEFAULT_THREADS = 50

CONNECTIVITY_CHECK_DOMAIN = 'www.baidu.com'
WILDCARD_TOKEN = 'this-is-fake-wildcard-test-999'

# Logger setup (can be customized)
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

def _env_float(name, default):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f" [!] Ignoring invalid value for {name}: {value!r}. Using {default}.")
        return default

# Timing knobs (overridable from env vars)
def load_settings():
    return {
        'query_timeout': _env_float('SUBSWEEP_QUERY_TIMEOUT', QUERY_TIMEOUT),
        'probe_timeout': _env_float('SUBSWEEP_PROBE_TIMEOUT', PROBE_TIMEOUT),
        'probe_threshold': _env_float('SUBSWEEP_PROBE_THRESHOLD', PROBE_LATENCY_THRESHOLD),
    }
