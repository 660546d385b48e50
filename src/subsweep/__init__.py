from .enumerator import SubdomainEnumerator
from .errors import SubsweepError, ConfigurationError, WordlistError, NoUsableResolverError, ConnectivityError
from .models import LookupOutcome, ScanSummary

__version__ = "0.1.0"
