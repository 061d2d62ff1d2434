"""Google Geocoding client used to turn a US postal code into an address."""

from typing import Any, Dict, List, Optional

import httpx

from apps.common import get_logger
from .dtos import GeocodeResult

logger = get_logger(__name__).bind(component="shipping", layer="geocoding")

OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"


class GeocodingUnavailable(Exception):
    """The geocoding provider could not be used (no key, rate limited or unreachable)."""


class GoogleGeocoder:
    def __init__(
        self,
        api_key: str,
        url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key
        self.url = url
        self.timeout = timeout
        self.transport = transport
        self.logger = logger.bind(client="GoogleGeocoder")

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, transport=self.transport)

    def lookup(self, postal_code: str) -> Optional[GeocodeResult]:
        """Return the first US match for ``postal_code`` or ``None`` when there is none.

        Raises:
            GeocodingUnavailable: no API key is configured, the quota is
                exhausted, or the request failed.
        """
        if not self.api_key:
            raise GeocodingUnavailable("No geocoding API key configured")
        params = {
            "address": postal_code,
            "key": self.api_key,
            "components": "country:US",
        }
        try:
            with self._client() as client:
                response = client.get(self.url, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as exc:
            self.logger.warning("Geocoding request failed", error=str(exc))
            raise GeocodingUnavailable(str(exc)) from exc
        except ValueError as exc:
            self.logger.warning("Geocoding response was not JSON", error=str(exc))
            raise GeocodingUnavailable("Malformed geocoding response") from exc

        if not isinstance(data, dict):
            self.logger.warning("Geocoding response had an unexpected shape", postal_code=postal_code)
            raise GeocodingUnavailable("Malformed geocoding response")
        status = data.get("status")
        if status == OVER_QUERY_LIMIT:
            self.logger.warning("Geocoding rate limit hit", postal_code=postal_code)
            raise GeocodingUnavailable("Geocoding rate limit exceeded")
        results = data.get("results") or []
        if status != "OK" or not results:
            self.logger.info("Geocoding returned no results", postal_code=postal_code, status=status)
            return None
        if not isinstance(results, list) or not isinstance(results[0], dict):
            self.logger.warning("Geocoding results had an unexpected shape", postal_code=postal_code)
            raise GeocodingUnavailable("Malformed geocoding response")
        return _parse_result(results[0])


def _parse_result(result: Dict[str, Any]) -> GeocodeResult:
    city = state = country = ""
    components: List[Dict[str, Any]] = result.get("address_components") or []
    if not isinstance(components, list):
        raise GeocodingUnavailable("Malformed geocoding response")
    for component in components:
        if not isinstance(component, dict):
            continue
        types = component.get("types")
        if not isinstance(types, list):
            continue
        if "locality" in types:
            city = _text(component, "long_name")
        if "administrative_area_level_1" in types:
            state = _text(component, "short_name")
        if "country" in types:
            country = _text(component, "short_name")
    return GeocodeResult(
        formatted_address=_text(result, "formatted_address"),
        city=city,
        state=state,
        country=country,
    )


def _text(payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return value if isinstance(value, str) else ""
