from arksdk.actions.order.cancel_order import CancelOrderParameters, cancel_order
from arksdk.actions.order.create_auction import CreateAuctionParameters, create_auction
from arksdk.actions.order.create_listing import CreateListingParameters, create_listing
from arksdk.actions.order.create_offer import CreateOfferParameters, create_offer
from arksdk.actions.order.fulfill import (
    FulfillListingParameters,
    FulfillOfferParameters,
    fulfill_listing,
    fulfill_offer,
)

__all__ = [
    "cancel_order",
    "create_auction",
    "create_listing",
    "create_offer",
    "fulfill_listing",
    "fulfill_offer",
    "CancelOrderParameters",
    "CreateAuctionParameters",
    "CreateListingParameters",
    "CreateOfferParameters",
    "FulfillListingParameters",
    "FulfillOfferParameters",
]
