BUILD_ID = "id"
BUILD_NAME = "name"
BUILD_COMPONENTS = "components"
BUILD_TOTAL_PRICE = "totalPrice"
BUILD_CREATED_AT = "createdAt"
#
# Wire key -> store field
BUILD_FIELDS = {
    BUILD_NAME: "name",
    BUILD_COMPONENTS: "components",
    BUILD_TOTAL_PRICE: "total_price",
}
