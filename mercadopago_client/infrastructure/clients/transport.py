"""Form-encoded HTTP transport for the MercadoPago API."""

import time
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

import httpx
import structlog

from mercadopago_client.core.config import settings
from mercadopago_client.core.metrics import (
    record_api_failure,
    record_api_request,
    track_api_latency,
)
from mercadopago_client.domain.exceptions import MercadoPagoTransportException

logger = structlog.get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class RestTransport:
    """
    Sends one form-encoded request per call against a fixed base URL.

    Parameters are always encoded in the body, GET included. HTTP
    status codes are not inspected: non-2xx responses are returned
    to the caller like any other.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_url = (base_url or settings.base_url).rstrip("/")
        self._timeout = timeout or settings.timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def call(
        self,
        method: str,
        resource: str,
        form: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
        name: str | None = None,
    ) -> httpx.Response:
        """
        Execute a request and return the fully read response.

        Args:
            method: HTTP verb
            resource: Path below the base URL, starting with ``/``
            form: Parameters encoded in the request body
            query: Parameters appended to the URL
            name: Low-cardinality label for logs and metrics,
                defaults to ``resource``

        Raises:
            MercadoPagoTransportException: On network, TLS, timeout,
                URL or body read failures
        """
        label = name or resource
        url = f"{self._base_url}{resource}"
        body = urlencode(form or {}, doseq=True)
        headers = {
            "Content-Type": FORM_CONTENT_TYPE,
            "Content-Length": str(len(body)),
            "Accept": "application/json",
        }

        log = logger.bind(method=method, resource=label)
        start_time = time.perf_counter()

        try:
            with track_api_latency(label):
                with httpx.Client(
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = client.request(
                        method,
                        url,
                        params=query,
                        content=body.encode("ascii"),
                        headers=headers,
                    )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            record_api_failure(label, "transport")
            log.error(
                "mercadopago_request_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise MercadoPagoTransportException(
                message=f"MercadoPago request failed: {e}",
                resource=resource,
            ) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        record_api_request(label, response.status_code)
        log.info(
            "mercadopago_request_completed",
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )

        if response.is_error:
            log.warning(
                "mercadopago_api_error_status",
                status_code=response.status_code,
                response=response.text[:200],
            )

        return response
