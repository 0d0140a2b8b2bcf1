# agency_listings/suppliers/agency.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Sequence

import requests

from agency_listings.suppliers.base import Supplier

log = logging.getLogger(__name__)

BASE_URL = "https://www.theagencyre.com/services/agoraGetFeaturedProperties.ashx"
SITE_ORIGIN = "https://www.theagencyre.com"
AGENT_REFERER = "https://www.theagencyre.com/agent/joshua-kashani"
OWNER_RT = "AGENT"
PAGE_SIZE = 500

HEADERS = {
    # The service only answers requests that look like they come from the agent page
    "X-Requested-With": "XMLHttpRequest",
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
                  "(KHTML, like Gecko) Chrome/115.0.0.0 Safari/537.36",
    "Accept": "application/json, text/javascript, */*; q=0.01",
}

# (name, RT code, optional)
FEEDS = [
    ("current", "CMNCMN", False),
    ("sold", "CMNSLD", False),
    ("past", "PASTTRANSACTIONS", False),
    ("pastLeased", "PASTLEASED", True),
    ("comingSoon", "COMINGSOON", True),
    ("pending", "PENDING", True),
]


class FeedError(Exception):
    def __init__(self, rt: str, status: int, reason: str = ""):
        self.rt = rt
        self.status = status
        super().__init__(f"Error fetching {rt}: {status} {reason}".rstrip())


class AgencyClient:
    def __init__(
        self,
        owner_key: str,
        session: requests.Session | None = None,
        *,
        base_url: str = BASE_URL,
        owner_rt: str = OWNER_RT,
        page_size: int = PAGE_SIZE,
        referer: str = AGENT_REFERER,
        origin: str = SITE_ORIGIN,
        timeout: float = 60,
    ):
        # Reuse a session for keep-alive + connection pooling
        self._session = session or requests.Session()
        self.owner_key = owner_key
        self.base_url = base_url
        self.owner_rt = owner_rt
        self.page_size = page_size
        self.timeout = timeout
        self.headers = {**HEADERS, "Referer": referer, "Origin": origin}

    def fetch_page(self, rt: str, page_num: int = 1) -> Dict[str, Any]:
        params = {
            "ownerPK": self.owner_key,
            "ownerRT": self.owner_rt,
            "RT": rt,
            "urlQuery": "",
            "Q": "",
            "PageSize": self.page_size,
            "pageNum": page_num,
        }
        resp = self._session.get(
            self.base_url,
            params=params,
            headers=self.headers,
            timeout=self.timeout,
        )
        if not resp.ok:
            raise FeedError(rt, resp.status_code, resp.reason or "")
        data = resp.json()
        return data if isinstance(data, dict) else {"Items": data or []}

    def fetch_all(self, rt: str) -> Dict[str, Any]:
        page = 1
        combined: Dict[str, Any] = {"Items": []}
        while True:
            res = self.fetch_page(rt, page)
            items = res.get("Items") or []
            combined = {**res, "Items": combined["Items"] + list(items)}
            log.debug("RT %s page %d: %d items", rt, page, len(items))

            # last page reached
            if len(items) < self.page_size:
                break
            page += 1
        return combined

    def fetch_optional(self, rt: str) -> Dict[str, Any]:
        try:
            return self.fetch_all(rt)
        except (FeedError, requests.RequestException, ValueError) as e:
            # Most agents simply don't have this RT and the server answers 400
            log.warning("RT %s not available: %s", rt, e)
            return {"Items": []}


class AgencyFeedSupplier(Supplier):
    def __init__(self, client: AgencyClient, name: str, rt: str, optional: bool = False):
        self._client = client
        self._name = name
        self.rt = rt
        self._optional = optional

    @property
    def name(self) -> str:
        return self._name

    @property
    def optional(self) -> bool:
        return self._optional

    def fetch(self) -> List[Dict[str, Any]]:
        if self.optional:
            feed = self._client.fetch_optional(self.rt)
        else:
            feed = self._client.fetch_all(self.rt)
        return list(feed.get("Items") or [])


def default_suppliers(client: AgencyClient) -> List[AgencyFeedSupplier]:
    return [AgencyFeedSupplier(client, name, rt, optional) for name, rt, optional in FEEDS]


def fetch_feeds(suppliers: Sequence[Supplier], max_workers: int = 6) -> Dict[str, List[Dict[str, Any]]]:
    """Fetch all feeds at once; a required feed's error is re-raised here."""
    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as pool:
        futures = {sp.name: pool.submit(sp.fetch) for sp in suppliers}
        return {name: fut.result() for name, fut in futures.items()}
