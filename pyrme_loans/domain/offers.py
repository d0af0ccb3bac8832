"""Offer ranking - order partner bank offers by interest rate"""

from typing import List, Sequence

from pyrme_loans.domain.models import LoanOffer, RankedOffer


def rank_offers(offers: Sequence[LoanOffer]) -> List[RankedOffer]:
    """
    Sort offers by annual rate, cheapest first, and flag the best one.

    - sorted() is stable, so offers with equal rates keep their input order
    - only the first offer is recommended
    - empty input gives an empty list
    - offer fields pass through untouched
    """
    ordered = sorted(offers, key=lambda o: o.annual_rate_percent)
    return [RankedOffer(offer=offer, recommended=(i == 0)) for i, offer in enumerate(ordered)]
