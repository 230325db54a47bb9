REQUEST_EMPTY = "Request body is empty or is not valid JSON"
PARAM_NOT_VALID = "Invalid request parameters"
DATA_NOT_PRESENT = "Unknown request validation"
#
PRODUCT_NOT_FOUND = "Product not found"
CATEGORY_NOT_VALID = "Category not valid"
PRICE_NOT_VALID = "Price must be a non-negative integer"
#
BUILD_NOT_FOUND = "Build not found"
BUILD_NOT_VALID = "Invalid build data"
BUILD_NAME_NOT_VALID = "Build name must be a non-empty string"
COMPONENTS_NOT_VALID = "Components must map a category to a product id"
TOTAL_PRICE_NOT_VALID = "Total price must be a non-negative integer"
FIELD_REQUIRED = "Field required"
#
COMPATIBILITY_NOT_VALID = "Invalid compatibility request"
#
WOOCOMMERCE_NOT_CONFIGURED = (
    "WooCommerce API not configured. Please provide WOOCOMMERCE_URL, WOOCOMMERCE_CONSUMER_KEY, "
    "and WOOCOMMERCE_CONSUMER_SECRET environment variables."
)
ORDER_NOT_VALID = "Invalid request. Required: components (array) and customerInfo"
ORDER_COMPONENTS_NOT_VALID = "Components must be a list of product ids"
CUSTOMER_INFO_NOT_VALID = "Customer info must be an object"
NO_VALID_PRODUCTS = "No valid products found"
ORDER_FAILED = "Failed to create WooCommerce order"
#
NOT_FOUND = "Resource not found"
INTERNAL_ERROR = "Internal server error"
