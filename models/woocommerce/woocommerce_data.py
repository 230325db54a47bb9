COMPONENTS = "components"
CUSTOMER_INFO = "customerInfo"
#
FIRST_NAME = "first_name"
LAST_NAME = "last_name"
EMAIL = "email"
PHONE = "phone"
ADDRESS = "address_1"
CITY = "city"
POSTCODE = "postcode"
COUNTRY = "country"
#
CUSTOMER_REQUIRED = (FIRST_NAME, LAST_NAME, EMAIL, PHONE)
CUSTOMER_OPTIONAL = (ADDRESS, CITY, POSTCODE, COUNTRY)
#
API_PATH = "wp-json/wc/v3"
PRODUCTS_PER_PAGE = 50
CATEGORIES_PER_PAGE = 100
PAYMENT_METHOD = "bacs"
PAYMENT_METHOD_TITLE = "Direct bank transfer"
BUILDER_VERSION = "1.0"
ORDER_TYPE = "pc_build"
PLACEHOLDER_IMAGE = "/placeholder-product.jpg"
#
META_BUILD = "pc_build_configuration"
META_ORDER_TYPE = "order_type"
META_BRAND = "brand"
META_SPECS = "specs"
META_SOCKET = "socket"
META_WATTAGE = "wattage"

## Category mapping between the configurator and the WooCommerce store
WOOCOMMERCE_CATEGORY_MAPPING = {
    "cpu": "cpu",
    "vga": "vga",
    "mainboard": "mainboard",
    "ram": "ram",
    "psu": "psu",
    "ssd": "ssd",
    "hdd": "hdd",
    "case": "case",
    "fan": "fan",
    "cooler": "cpu-cooler",
    "monitor": "monitor",
    "mouse": "mouse",
    "keyboard": "keyboard",
    "headset": "headphones",
}
