import argparse
import logging
import sys
from .config import logger, DEFAULT_THREADS
from .enumerator import SubdomainEnumerator
from .errors import SubsweepError
from .utils.output_utils import ConsoleReporter

def build_parser():
    parser = argparse.ArgumentParser(description="Subdomain brute-forcer with wildcard filtering and CDN detection",
                                     formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument("-d", "--domain", required=True, help="Target domain (e.g., example.com)")
    parser.add_argument("-w", "--wordlist", required=True, help="Path to wordlist, one prefix per line. "
                                                                "Blank lines and lines starting with '#' are skipped.")
    parser.add_argument("-t", "--threads", type=int, default=DEFAULT_THREADS,
                        help=f"Maximum number of lookups in flight (default: {DEFAULT_THREADS}).")
    parser.add_argument("--timeout", type=float, default=None, help="Per-query DNS timeout in seconds (default: 2.0).")
    parser.add_argument("--no-preflight", action="store_false", dest="preflight", default=True,
                        help="Skip the connectivity check against a known-good domain.")
    parser.add_argument("--no-progress", action="store_false", dest="show_progress", default=True,
                        help="Do not print the progress line.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging (display debug messages).")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    try:
        enumerator = SubdomainEnumerator(
            domain=args.domain,
            wordlist_path=args.wordlist,
            threads=args.threads,
            timeout=args.timeout,
            verbose=args.verbose,
            preflight=args.preflight,
        )
        enumerator.run(reporter=ConsoleReporter(show_progress=args.show_progress))
    except SubsweepError as e:
        logger.error(f" [!] Initialization failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.critical(f"An unhandled error occurred during enumeration: {e}", exc_info=True)
        sys.exit(1)
    return 0

if __name__ == "__main__":
    main()
