# pos/services/store_client.py
from typing import List

import requests
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception

from pos.domain.schemas import ProductOut, CustomerOut
from pos.utils.settings import STORE_API_URL, STORE_HTTP_TIMEOUT
from pos.utils.logging import get_logger

logger = get_logger(__name__)


def _is_transient(exc: BaseException) -> bool:
    # 4xx to odpowiedz serwera, ponowienie nic nie zmieni
    if isinstance(exc, requests.HTTPError):
        return exc.response is not None and exc.response.status_code >= 500
    return isinstance(exc, requests.RequestException)


def read_retry():
    """Retry tylko dla idempotentnych GET-ow."""
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception(_is_transient),
    )


class StoreClient:
    """
    Klient HTTP do magazynu danych:
    - GET /products, GET /customers (z retry)
    - POST /sales (dokladnie jedno wywolanie, bez retry)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or STORE_API_URL).rstrip("/")
        self.timeout = timeout or STORE_HTTP_TIMEOUT
        self.session = session or requests.Session()

    @read_retry()
    def fetch_products(self) -> List[ProductOut]:
        url = f"{self.base_url}/products"
        logger.info(f"StoreClient GET {url}")

        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return [ProductOut.model_validate(p) for p in resp.json()]

    @read_retry()
    def fetch_product(self, product_id: str) -> ProductOut:
        url = f"{self.base_url}/products/{product_id}"
        logger.info(f"StoreClient GET {url}")

        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return ProductOut.model_validate(resp.json())

    @read_retry()
    def fetch_customers(self) -> List[CustomerOut]:
        url = f"{self.base_url}/customers"
        logger.info(f"StoreClient GET {url}")

        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return [CustomerOut.model_validate(c) for c in resp.json()]

    def create_sale(self, payload: dict) -> dict:
        url = f"{self.base_url}/sales"
        logger.info(f"StoreClient POST {url} ({len(payload.get('items', []))} items)")

        resp = self.session.post(url, json=payload, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()
