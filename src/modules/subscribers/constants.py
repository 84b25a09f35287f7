"""Subscriber domain constants and link outcome messages."""

from enum import Enum

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 15

SUBSCRIBER_NOT_FOUND = "Subscriber with id {id} not found."
TOTAL_SUBSCRIBERS = "{count} subscribers in the database."

PRODUCT_NOT_UNDER_SALE = "Product {product} is not under sale."
PRODUCT_ALREADY_ASSIGNED = (
    "Product {product} is already assigned to Subscriber {first_name} {last_name}."
)


class LinkStatus(str, Enum):
    LINKED = "LINKED"
    SUBSCRIBER_NOT_FOUND = "SUBSCRIBER_NOT_FOUND"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    PRODUCT_NOT_ON_SALE = "PRODUCT_NOT_ON_SALE"
    ALREADY_LINKED = "ALREADY_LINKED"
