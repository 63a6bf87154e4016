"""Address search for the pickup address dialog (OpenStreetMap Nominatim)."""
import logging

import requests

from ..config import NOMINATIM_SEARCH_URL

logger = logging.getLogger(__name__)

USER_AGENT = "ewtrack Pickup Scheduler"


def search_addresses(query, url=NOMINATIM_SEARCH_URL, country_codes="IN", limit=5, timeout=3):
    """
    Returns ``[{"label", "latitude", "longitude"}]`` for ``query``.

    Any upstream failure yields an empty list; the dialog falls back to manual
    pin placement.
    """
    query = (query or "").strip()
    if not query:
        return []

    params = {"format": "json", "q": query, "addressdetails": 1, "limit": limit}
    if country_codes:
        params["countrycodes"] = country_codes

    try:
        response = requests.get(url, params=params, headers={"User-Agent": USER_AGENT}, timeout=timeout)
        if response.status_code != 200:
            logger.warning("Geocoder returned HTTP %s for %r", response.status_code, query)
            return []
        payload = response.json()
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Geocoder request failed for %r: %s", query, exc)
        return []

    results = []
    for entry in payload or []:
        try:
            results.append({
                "label": entry.get("display_name"),
                "latitude": float(entry.get("lat")),
                "longitude": float(entry.get("lon")),
            })
        except (TypeError, ValueError):
            continue
    return results
