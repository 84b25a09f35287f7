"""Product domain constants."""

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 15

PRODUCT_NOT_FOUND = "Product with id {id} not found."

TOTAL_PRODUCTS = "{count} products in the database."
TOTAL_SOLD_PRODUCTS = "{count} sold products."
TOTAL_ACTIVE_PRODUCTS = "{count} active products."
