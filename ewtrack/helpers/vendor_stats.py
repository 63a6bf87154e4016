"""
Vendor dashboard statistics
"""
from __future__ import annotations

from typing import Dict

from sqlalchemy import text
from sqlalchemy.orm import Session

from ..models.item import BIDDING_OPEN, BIDDING_CLOSED


# ==================== VENDOR KPI COUNTS ====================

VENDOR_STATS_SQL = """
SELECT
    (
        SELECT COUNT(*)
        FROM items AS i
        WHERE i.winning_bidder_id = :vendor_id
          AND i.bidding_status = :closed
    ) AS auctions_won,
    (
        SELECT COUNT(DISTINCT b.item_id)
        FROM bids AS b
        JOIN items AS i ON i.id = b.item_id
        WHERE b.bidder_id = :vendor_id
          AND i.bidding_status = :open
    ) AS active_bids,
    (
        SELECT COUNT(*)
        FROM pickups AS p
        WHERE p.vendor_id = :vendor_id
    ) AS pickups_scheduled
"""


def fetch_vendor_stats(session: Session, vendor_id: str) -> Dict[str, int]:
    """
    Counts shown on the vendor dashboard:

    - auctionsWon: closed auctions where the vendor holds the winning bid
    - activeBids: open auctions the vendor has bid on
    - pickupsScheduled: pickups assigned to the vendor
    """
    row = session.execute(
        text(VENDOR_STATS_SQL),
        {"vendor_id": vendor_id, "open": BIDDING_OPEN, "closed": BIDDING_CLOSED},
    ).mappings().first()

    return {
        "auctionsWon": int(row["auctions_won"] or 0),
        "activeBids": int(row["active_bids"] or 0),
        "pickupsScheduled": int(row["pickups_scheduled"] or 0),
    }
