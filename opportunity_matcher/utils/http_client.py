"""HTTP session setup for the REST-backed stores."""

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger("opportunity_matcher.http")

USER_AGENT = "opportunity-matcher/0.1"


def create_session(service_role_key: str) -> requests.Session:
    """Create a requests session authenticated against the Supabase REST API.

    Retries are disabled: a failed fetch surfaces to the caller immediately.
    """
    session = requests.Session()

    retry_strategy = Retry(total=0, raise_on_status=False)
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
        "Content-Type": "application/json",
        "apikey": service_role_key,
        "Authorization": f"Bearer {service_role_key}",
    })

    return session
