PRODUCT_ID = "id"
NAME = "name"
CATEGORY = "category"
BRAND = "brand"
PRICE = "price"
IMAGE = "image"
DESCRIPTION = "description"
SPECS = "specs"
SOCKET = "socket"
WATTAGE = "wattage"
IN_STOCK = "inStock"
#
# Query string filters
SEARCH = "search"
MIN_PRICE = "minPrice"
MAX_PRICE = "maxPrice"
LIST_SEPARATOR = ","
#
CPU = "cpu"
VGA = "vga"
MAINBOARD = "mainboard"
PSU = "psu"
COOLER = "cooler"
RAM = "ram"
CASE = "case"
SSD = "ssd"
HDD = "hdd"
MONITOR = "monitor"
FAN = "fan"
MOUSE = "mouse"
KEYBOARD = "keyboard"
HEADSET = "headset"

## Allowed categories, in display order
CATEGORIES = {
    CPU: "CPU",
    VGA: "VGA - Graphics card",
    MAINBOARD: "Mainboard",
    PSU: "PSU - Power supply",
    COOLER: "CPU cooler",
    RAM: "RAM",
    CASE: "Case",
    SSD: "SSD",
    HDD: "HDD",
    MONITOR: "LCD - Monitor",
    FAN: "Case fan",
    MOUSE: "Mouse",
    KEYBOARD: "Keyboard",
    HEADSET: "Headset",
}

## Documented optional specs keys per category, others are kept but logged
SPECS_KEYS = {
    CPU: ("cores", "threads", "baseFreq", "boostFreq", "cache", "tdp"),
    VGA: ("memory", "coreClock", "memoryBus", "ports"),
    MAINBOARD: ("chipset", "memoryType", "maxMemory", "slots", "expansion"),
    RAM: ("memoryType", "capacity", "speed"),
    PSU: ("wattage", "efficiency", "modular"),
}
MEMORY_TYPE = "memoryType"
