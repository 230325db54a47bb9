import logging
import re

import models.compatibility.compatibility_data as compat_data
import models.products.product_data as product_data

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True

SOCKET_MISMATCH = "CPU and mainboard sockets are not compatible"
MEMORY_MISMATCH = "RAM memory type is not supported by the mainboard"
PSU_INSUFFICIENT = "PSU wattage may not be sufficient"
PSU_MARGINAL = "Consider a PSU with higher wattage"


def psu_capacity(psu):
    """
    Returns the usable capacity of a PSU: specs.wattage when it is a usable
    number (650 or "650W"), the default capacity otherwise.
    """
    value = psu.spec(product_data.WATTAGE) if psu else None
    if isinstance(value, bool):
        value = None

    if isinstance(value, str):
        match = re.match(r"^\s*(\d+(?:\.\d+)?)\s*w?\s*$", value, re.IGNORECASE)
        value = float(match.group(1)) if match else None

    if not value or not isinstance(value, (int, float)):
        return compat_data.DEFAULT_PSU_WATTAGE
    return value


def wattage_status(total_wattage, capacity):
    if total_wattage > capacity * compat_data.INSUFFICIENT_RATIO:
        return compat_data.INSUFFICIENT, PSU_INSUFFICIENT
    if total_wattage > capacity * compat_data.MARGINAL_RATIO:
        return compat_data.MARGINAL, PSU_MARGINAL
    return compat_data.ADEQUATE, None


def evaluate_compatibility(components, catalog, count_psu_wattage=False):
    """
    Checks a selection of products against each other.

    Ids that do not resolve are treated as absent, the evaluation itself never fails.

    :param components: dict of category -> product id
    :param catalog: store answering get_product(id)
    :param count_psu_wattage: add the PSU's own wattage field to the power draw
    :return: (verdict dict, total wattage)
    """
    verdict = {
        compat_data.CPU_MAINBOARD: True,
        compat_data.RAM_MAINBOARD: True,
        compat_data.PSU_WATTAGE: compat_data.ADEQUATE,
        compat_data.WARNINGS: [],
    }
    selected = {category: catalog.get_product(product_id) for category, product_id in components.items()}
    mainboard = selected.get(product_data.MAINBOARD)

    if product_data.CPU in components and product_data.MAINBOARD in components:
        cpu = selected.get(product_data.CPU)
        cpu_socket = cpu.socket if cpu else None
        mainboard_socket = mainboard.socket if mainboard else None
        if cpu_socket != mainboard_socket:
            verdict[compat_data.CPU_MAINBOARD] = False
            verdict[compat_data.WARNINGS].append(SOCKET_MISMATCH)

    ram = selected.get(product_data.RAM)
    if ram and mainboard:
        ram_type = ram.spec(product_data.MEMORY_TYPE)
        mainboard_type = mainboard.spec(product_data.MEMORY_TYPE)
        if ram_type and mainboard_type and str(ram_type).upper() != str(mainboard_type).upper():
            verdict[compat_data.RAM_MAINBOARD] = False
            verdict[compat_data.WARNINGS].append(MEMORY_MISMATCH)

    total_wattage = 0
    for category, product in selected.items():
        if not product or not product.wattage:
            continue
        if category == product_data.PSU and not count_psu_wattage:
            continue
        total_wattage += product.wattage

    if product_data.PSU in components:
        capacity = psu_capacity(selected.get(product_data.PSU))
        status, warning = wattage_status(total_wattage, capacity)
        verdict[compat_data.PSU_WATTAGE] = status
        if warning:
            verdict[compat_data.WARNINGS].append(warning)
        logger.info(f"Power draw {total_wattage}W on a {capacity}W PSU - {status}")

    return verdict, total_wattage
