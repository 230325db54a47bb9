import logging

# enabling logger
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True


def petition_completed(method):
    return logger.info(f"Request completed successfully - {method}")


def build_saved(build_id, name):
    return logger.info(f"Build saved: {build_id} - {name}")


def build_updated(build_id, fields):
    return logger.info(f"Build updated: {build_id} - fields: {', '.join(fields) if fields else 'none'}")


def order_created(order_id, total):
    return logger.info(f"WooCommerce order created: {order_id} - total: {total}")


def catalog_seeded(count):
    return logger.info(f"Catalog seeded with {count} products")
