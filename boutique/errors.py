"""
Common Error Constants

Centralized error messages shared by the cart store and the HTTP layer.
"""

# Session errors
ERROR_SESSION_REQUIRED = "X-Cart-Session header is required"

# Storage errors
ERROR_STORAGE_NOT_CONFIGURED = "UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set"
ERROR_UNKNOWN_BACKEND = "Unknown cart storage backend"

# Cart errors
ERROR_CART_READ = "Failed to retrieve cart"
ERROR_CART_ADD = "Failed to add item to cart"
ERROR_CART_REMOVE = "Failed to remove cart item"
ERROR_CART_CLEAR = "Failed to clear cart"
ERROR_NEGATIVE_PRICE = "Price must not be negative"

